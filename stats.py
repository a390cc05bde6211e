"""Dashboard statistics computed from a set of transactions.

Everything in this module is pure: callers fetch the transactions for a
period and hand them in, nothing here touches the database.
"""

from dataclasses import dataclass
from typing import Iterable, Protocol

from input_utils import cents_to_amount
from models import PaymentType, TransactionType

SHOP_EARNINGS_KEYWORDS = ("shop earnings", "shop earning")

# Checked in order; the first keyword found in the category name wins.
EXPENSE_BUCKET_RULES = (
    ("raw material", "shop_raw_material"),
    ("electricity", "electricity_bills"),
    ("personal", "personal_spending"),
    ("home", "home_spending"),
)
FALLBACK_EXPENSE_BUCKET = "other_expenses"

PAYMENT_BUCKETS = {
    PaymentType.cash: "cash_total",
    PaymentType.upi: "upi_total",
    PaymentType.bank: "bank_total",
}

EXPENSE_CHART = (
    ("Raw Material", "shop_raw_material", "#f59e0b"),
    ("Electricity", "electricity_bills", "#eab308"),
    ("Personal", "personal_spending", "#8b5cf6"),
    ("Home", "home_spending", "#ec4899"),
    ("Other", "other_expenses", "#6b7280"),
)

PAYMENT_CHART = (
    ("Cash", "cash_total", "#10b981"),
    ("UPI", "upi_total", "#3b82f6"),
    ("Bank", "bank_total", "#f59e0b"),
)


class TransactionLike(Protocol):
    type: TransactionType
    category: str
    payment_type: PaymentType
    amount_cents: int


@dataclass
class StatsSummary:
    total_income: int = 0
    total_expenses: int = 0
    shop_earnings: int = 0
    shop_raw_material: int = 0
    electricity_bills: int = 0
    personal_spending: int = 0
    home_spending: int = 0
    other_expenses: int = 0
    cash_total: int = 0
    upi_total: int = 0
    bank_total: int = 0
    net_profit: int = 0
    transaction_count: int = 0

    def as_payload(self) -> dict[str, object]:
        return {
            "totalIncome": cents_to_amount(self.total_income),
            "totalExpenses": cents_to_amount(self.total_expenses),
            "shopEarnings": cents_to_amount(self.shop_earnings),
            "shopRawMaterial": cents_to_amount(self.shop_raw_material),
            "electricityBills": cents_to_amount(self.electricity_bills),
            "personalSpending": cents_to_amount(self.personal_spending),
            "homeSpending": cents_to_amount(self.home_spending),
            "otherExpenses": cents_to_amount(self.other_expenses),
            "cashTotal": cents_to_amount(self.cash_total),
            "upiTotal": cents_to_amount(self.upi_total),
            "bankTotal": cents_to_amount(self.bank_total),
            "netProfit": cents_to_amount(self.net_profit),
            "transactionCount": self.transaction_count,
        }


def expense_bucket(category: str) -> str:
    name = category.lower()
    for keyword, bucket in EXPENSE_BUCKET_RULES:
        if keyword in name:
            return bucket
    return FALLBACK_EXPENSE_BUCKET


def is_shop_earning(category: str) -> bool:
    name = category.lower()
    return any(keyword in name for keyword in SHOP_EARNINGS_KEYWORDS)


def _add(summary: StatsSummary, field: str, cents: int) -> None:
    setattr(summary, field, getattr(summary, field) + cents)


def aggregate(transactions: Iterable[TransactionLike]) -> StatsSummary:
    """Reduce transactions into income/expense totals and their breakdowns.

    Income counts towards ``shop_earnings`` when its category mentions shop
    earnings. Each expense lands in exactly one bucket, picked by the first
    matching keyword of ``EXPENSE_BUCKET_RULES`` (raw material, electricity,
    personal, home) and ``other_expenses`` otherwise. Every transaction,
    whatever its type, also adds to the bucket of its payment method.
    """
    summary = StatsSummary()
    for txn in transactions:
        summary.transaction_count += 1
        amount = txn.amount_cents
        if txn.type == TransactionType.income:
            summary.total_income += amount
            if is_shop_earning(txn.category):
                summary.shop_earnings += amount
        else:
            summary.total_expenses += amount
            _add(summary, expense_bucket(txn.category), amount)

        bucket = PAYMENT_BUCKETS.get(txn.payment_type)
        if bucket is not None:
            _add(summary, bucket, amount)

    summary.net_profit = summary.total_income - summary.total_expenses
    return summary


def _distribution(
    summary: StatsSummary, chart: tuple[tuple[str, str, str], ...]
) -> list[dict[str, object]]:
    rows = [
        (label, getattr(summary, field), color)
        for label, field, color in chart
        if getattr(summary, field) > 0
    ]
    total = sum(cents for _, cents, _ in rows)
    return [
        {
            "name": label,
            "amount": cents_to_amount(cents),
            "percent": (cents / total * 100) if total else 0,
            "color": color,
        }
        for label, cents, color in rows
    ]


def expense_distribution(summary: StatsSummary) -> list[dict[str, object]]:
    return _distribution(summary, EXPENSE_CHART)


def payment_distribution(summary: StatsSummary) -> list[dict[str, object]]:
    return _distribution(summary, PAYMENT_CHART)


def overview(summary: StatsSummary) -> dict[str, float]:
    return {
        "income": cents_to_amount(summary.total_income),
        "expenses": cents_to_amount(summary.total_expenses),
        "profit": cents_to_amount(summary.net_profit),
    }
