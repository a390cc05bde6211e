from datetime import date, timedelta

import pytest
from pydantic import ValidationError

from models import PaymentType, TransactionType
from periods import Period, resolve_period
from schemas import TransactionIn
from services import (
    StatsService,
    TransactionFilters,
    TransactionNotFound,
    TransactionService,
)


def add(
    session,
    day: date,
    type_: TransactionType = TransactionType.expense,
    category: str = "Other Expenses",
    amount_cents: int = 1_000,
    payment_type: PaymentType = PaymentType.cash,
    description: str = "entry",
):
    return TransactionService(session).create(
        TransactionIn(
            date=day,
            type=type_,
            category=category,
            payment_type=payment_type,
            description=description,
            amount_cents=amount_cents,
        )
    )


def test_transaction_input_validation() -> None:
    base = dict(
        date=date(2025, 1, 1),
        type=TransactionType.expense,
        category="Tea",
        payment_type=PaymentType.upi,
        description="Chai",
        amount_cents=2_000,
    )
    assert TransactionIn(**base).description == "Chai"
    with pytest.raises(ValidationError):
        TransactionIn(**{**base, "description": "  "})
    with pytest.raises(ValidationError):
        TransactionIn(**{**base, "amount_cents": -1})
    with pytest.raises(ValidationError):
        TransactionIn(**{**base, "payment_type": "card"})


def test_list_orders_by_date_descending(session) -> None:
    older = add(session, date(2025, 1, 1), description="older")
    newest = add(session, date(2025, 1, 3), description="newest")
    middle = add(session, date(2025, 1, 2), description="middle")

    items = TransactionService(session).list()
    assert [t.id for t in items] == [newest.id, middle.id, older.id]

    recent = TransactionService(session).list(TransactionFilters(limit=2))
    assert [t.id for t in recent] == [newest.id, middle.id]


def test_list_filters_are_combined(session) -> None:
    add(session, date(2025, 1, 1), category="Shop Raw Material")
    match = add(session, date(2025, 1, 10), category="Shop Raw Material")
    add(session, date(2025, 1, 20), category="Shop Raw Material")
    add(session, date(2025, 1, 10), category="Electricity Bills")
    add(
        session,
        date(2025, 1, 10),
        type_=TransactionType.income,
        category="Shop Raw Material",
    )

    items = TransactionService(session).list(
        TransactionFilters(
            type=TransactionType.expense,
            category="Shop Raw Material",
            start_date=date(2025, 1, 10),
            end_date=date(2025, 1, 10),
        )
    )
    assert [t.id for t in items] == [match.id]


def test_delete_removes_transaction(session) -> None:
    txn = add(session, date(2025, 1, 1))
    service = TransactionService(session)
    service.delete(txn.id)
    with pytest.raises(TransactionNotFound):
        service.get(txn.id)
    with pytest.raises(TransactionNotFound):
        service.delete(txn.id)


def test_for_period_is_inclusive_on_both_ends(session) -> None:
    add(session, date(2025, 2, 28))
    first = add(session, date(2025, 3, 1))
    last = add(session, date(2025, 3, 31))
    add(session, date(2025, 4, 1))

    period = resolve_period("month", None, today=date(2025, 3, 15))
    ids = {t.id for t in TransactionService(session).for_period(period)}
    assert ids == {first.id, last.id}

    assert len(TransactionService(session).for_period(Period("all", None, None))) == 4


def test_today_stats_ignore_other_days(session) -> None:
    today = date(2025, 5, 20)
    add(session, today - timedelta(days=1), amount_cents=5_000)
    add(session, today + timedelta(days=1), type_=TransactionType.income)

    summary = StatsService(session).summary(resolve_period("today", None, today=today))
    assert summary.transaction_count == 0
    assert summary.total_income == summary.total_expenses == summary.net_profit == 0


def test_stats_summary_for_month(session) -> None:
    add(
        session,
        date(2025, 5, 2),
        type_=TransactionType.income,
        category="Shop Earnings",
        amount_cents=50_000,
        payment_type=PaymentType.bank,
    )
    add(session, date(2025, 5, 3), category="Personal Spending", amount_cents=7_500)
    add(session, date(2025, 4, 30), category="Personal Spending", amount_cents=999)

    period = resolve_period("month", None, today=date(2025, 5, 20))
    report = StatsService(session).report(period)
    assert report["summary"]["personalSpending"] == 75
    assert report["summary"]["netProfit"] == 425
    assert report["overview"] == {"income": 500, "expenses": 75, "profit": 425}
    assert [row["name"] for row in report["paymentDistribution"]] == ["Cash", "Bank"]
