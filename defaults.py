from dataclasses import dataclass

from models import TransactionType


@dataclass(frozen=True)
class DefaultCategory:
    name: str
    type: TransactionType
    icon: str
    color: str


# Seeded once, the first time the app finds no default-flagged category.
DEFAULT_CATEGORIES: tuple[DefaultCategory, ...] = (
    DefaultCategory("Shop Raw Material", TransactionType.expense, "Package", "#f59e0b"),
    DefaultCategory("Electricity Bills", TransactionType.expense, "Zap", "#eab308"),
    DefaultCategory("Personal Spending", TransactionType.expense, "User", "#8b5cf6"),
    DefaultCategory(
        "Home Spending from Shop", TransactionType.expense, "Home", "#ec4899"
    ),
    DefaultCategory(
        "Other Expenses", TransactionType.expense, "MoreHorizontal", "#6b7280"
    ),
    DefaultCategory("Shop Earnings", TransactionType.income, "TrendingUp", "#10b981"),
)
