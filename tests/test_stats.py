import random
from datetime import date

from models import PaymentType, Transaction, TransactionType
from stats import aggregate, expense_bucket, expense_distribution, payment_distribution


def make_txn(
    type_: TransactionType,
    category: str,
    amount_cents: int,
    payment_type: PaymentType = PaymentType.cash,
) -> Transaction:
    return Transaction(
        date=date(2025, 1, 1),
        type=type_,
        category=category,
        payment_type=payment_type,
        description="test",
        amount_cents=amount_cents,
    )


def test_empty_input_yields_zero_summary() -> None:
    summary = aggregate([])
    payload = summary.as_payload()
    assert payload["transactionCount"] == 0
    assert all(value == 0 for value in payload.values())


def test_shop_scenario() -> None:
    summary = aggregate(
        [
            make_txn(TransactionType.income, "Shop Earnings", 50_000, PaymentType.bank),
            make_txn(
                TransactionType.expense, "Raw Material Purchase", 20_000, PaymentType.cash
            ),
            make_txn(
                TransactionType.expense, "Electricity Bill", 5_000, PaymentType.upi
            ),
        ]
    )
    payload = summary.as_payload()
    assert payload["totalIncome"] == 500
    assert payload["totalExpenses"] == 250
    assert payload["shopEarnings"] == 500
    assert payload["shopRawMaterial"] == 200
    assert payload["electricityBills"] == 50
    assert payload["netProfit"] == 250
    assert payload["upiTotal"] == 50
    assert payload["cashTotal"] == 200
    assert payload["bankTotal"] == 500
    assert payload["transactionCount"] == 3


def test_shop_earnings_match_is_case_insensitive() -> None:
    summary = aggregate(
        [
            make_txn(TransactionType.income, "SHOP EARNINGS Q1", 1_000),
            make_txn(TransactionType.income, "shop earning (weekend)", 500),
            make_txn(TransactionType.income, "Interest", 300),
        ]
    )
    assert summary.shop_earnings == 1_500
    assert summary.total_income == 1_800


def test_expense_bucket_priority() -> None:
    assert expense_bucket("Personal Electricity") == "electricity_bills"
    assert expense_bucket("Home raw material") == "shop_raw_material"
    assert expense_bucket("Personal Home stuff") == "personal_spending"
    assert expense_bucket("HOME Spending from Shop") == "home_spending"
    assert expense_bucket("Tea and snacks") == "other_expenses"


def test_income_never_lands_in_expense_buckets() -> None:
    summary = aggregate([make_txn(TransactionType.income, "Home rent received", 900)])
    assert summary.home_spending == 0
    assert summary.other_expenses == 0
    assert summary.total_expenses == 0


def test_totals_balance_for_random_sets() -> None:
    rng = random.Random(1234)
    categories = [
        "Shop Raw Material",
        "Electricity Bills",
        "Personal Spending",
        "Home Spending from Shop",
        "Misc",
        "Shop Earnings",
    ]
    for _ in range(50):
        txns = [
            make_txn(
                rng.choice(list(TransactionType)),
                rng.choice(categories),
                rng.randint(0, 1_000_000),
                rng.choice(list(PaymentType)),
            )
            for _ in range(rng.randint(0, 40))
        ]
        summary = aggregate(txns)
        assert summary.net_profit == summary.total_income - summary.total_expenses
        assert (
            summary.cash_total + summary.upi_total + summary.bank_total
            == summary.total_income + summary.total_expenses
        )
        assert (
            summary.shop_raw_material
            + summary.electricity_bills
            + summary.personal_spending
            + summary.home_spending
            + summary.other_expenses
            == summary.total_expenses
        )
        assert summary.transaction_count == len(txns)
        assert aggregate(list(reversed(txns))) == summary


def test_distributions_skip_empty_buckets() -> None:
    summary = aggregate(
        [
            make_txn(TransactionType.expense, "Raw material", 300, PaymentType.bank),
            make_txn(TransactionType.expense, "Stationery", 100, PaymentType.bank),
        ]
    )
    expenses = expense_distribution(summary)
    assert [row["name"] for row in expenses] == ["Raw Material", "Other"]
    assert expenses[0]["percent"] == 75
    assert expenses[1]["amount"] == 1

    payments = payment_distribution(summary)
    assert [row["name"] for row in payments] == ["Bank"]
    assert payments[0]["percent"] == 100


def test_distributions_are_empty_without_data() -> None:
    summary = aggregate([])
    assert expense_distribution(summary) == []
    assert payment_distribution(summary) == []
