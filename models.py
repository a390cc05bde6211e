from datetime import date, datetime
from enum import Enum

from sqlalchemy import (
    Boolean,
    CheckConstraint,
    Date,
    DateTime,
    Enum as SAEnum,
    Index,
    Integer,
    String,
    Text,
)
from sqlalchemy.orm import Mapped, mapped_column

from database import Base


class TransactionType(str, Enum):
    income = "income"
    expense = "expense"


class PaymentType(str, Enum):
    cash = "cash"
    upi = "upi"
    bank = "bank"


DEFAULT_CATEGORY_ICON = "Circle"
DEFAULT_CATEGORY_COLOR = "#3b82f6"


class TimestampMixin:
    created_at: Mapped[datetime] = mapped_column(
        DateTime, default=datetime.utcnow, nullable=False
    )
    updated_at: Mapped[datetime] = mapped_column(
        DateTime, default=datetime.utcnow, onupdate=datetime.utcnow, nullable=False
    )


class Category(Base, TimestampMixin):
    __tablename__ = "categories"

    id: Mapped[int] = mapped_column(Integer, primary_key=True)
    name: Mapped[str] = mapped_column(String(100), nullable=False)
    type: Mapped[TransactionType] = mapped_column(
        SAEnum(TransactionType), nullable=False
    )
    icon: Mapped[str] = mapped_column(
        String(40), default=DEFAULT_CATEGORY_ICON, nullable=False
    )
    color: Mapped[str] = mapped_column(
        String(9), default=DEFAULT_CATEGORY_COLOR, nullable=False
    )
    is_default: Mapped[bool] = mapped_column(Boolean, default=False, nullable=False)

    __table_args__ = (Index("ix_categories_is_default", "is_default"),)


class Transaction(Base, TimestampMixin):
    """A single income or expense entry.

    ``category`` holds the category name as typed when the entry was made. It
    is not a foreign key: deleting or renaming a category leaves existing
    transactions untouched.
    """

    __tablename__ = "transactions"

    id: Mapped[int] = mapped_column(Integer, primary_key=True)
    date: Mapped[date] = mapped_column(Date, nullable=False)
    type: Mapped[TransactionType] = mapped_column(
        SAEnum(TransactionType), nullable=False
    )
    category: Mapped[str] = mapped_column(String(100), nullable=False)
    payment_type: Mapped[PaymentType] = mapped_column(
        SAEnum(PaymentType), nullable=False
    )
    description: Mapped[str] = mapped_column(Text, nullable=False)
    amount_cents: Mapped[int] = mapped_column(Integer, nullable=False)

    __table_args__ = (
        Index("ix_transactions_date", "date"),
        Index("ix_transactions_category", "category"),
        Index("ix_transactions_type", "type"),
        CheckConstraint("amount_cents >= 0", name="ck_transactions_amount_positive"),
    )
