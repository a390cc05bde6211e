from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import date
from typing import Iterable, Optional

from sqlalchemy import func, select
from sqlalchemy.orm import Session

from defaults import DEFAULT_CATEGORIES, DefaultCategory
from models import (
    DEFAULT_CATEGORY_COLOR,
    DEFAULT_CATEGORY_ICON,
    Category,
    Transaction,
    TransactionType,
)
from periods import Period
from schemas import CategoryIn, TransactionIn
from stats import (
    StatsSummary,
    aggregate,
    expense_distribution,
    overview,
    payment_distribution,
)

logger = logging.getLogger(__name__)


class CategoryNotFound(ValueError):
    pass


class DefaultCategoryProtected(ValueError):
    pass


class TransactionNotFound(ValueError):
    pass


@dataclass
class TransactionFilters:
    type: Optional[TransactionType] = None
    category: Optional[str] = None
    start_date: Optional[date] = None
    end_date: Optional[date] = None
    limit: Optional[int] = None


class CategoryService:
    def __init__(self, session: Session) -> None:
        self.session = session

    def list_all(self) -> list[Category]:
        stmt = select(Category).order_by(Category.type, Category.name, Category.id)
        return self.session.scalars(stmt).all()

    def get(self, category_id: int) -> Category:
        category = self.session.get(Category, category_id)
        if not category:
            raise CategoryNotFound("Category not found")
        return category

    def create(self, data: CategoryIn) -> Category:
        category = Category(
            name=data.name.strip(),
            type=data.type,
            icon=data.icon or DEFAULT_CATEGORY_ICON,
            color=data.color or DEFAULT_CATEGORY_COLOR,
            is_default=False,
        )
        self.session.add(category)
        self.session.commit()
        self.session.refresh(category)
        logger.info(f"category_created: id={category.id} type={category.type.value}")
        return category

    def delete(self, category_id: int) -> None:
        category = self.get(category_id)
        if category.is_default:
            raise DefaultCategoryProtected("Cannot delete default categories")
        self.session.delete(category)
        self.session.commit()
        logger.info(f"category_deleted: id={category_id}")

    def has_defaults(self) -> bool:
        stmt = select(func.count(Category.id)).where(Category.is_default.is_(True))
        return (self.session.execute(stmt).scalar_one() or 0) > 0

    def seed_defaults(
        self, defaults: Iterable[DefaultCategory] = DEFAULT_CATEGORIES
    ) -> bool:
        """Insert the default categories unless some already exist.

        Returns True when rows were inserted. Two callers racing past the
        existence check can both insert; the extra rows are harmless.
        """
        if self.has_defaults():
            return False
        rows = [
            Category(
                name=item.name,
                type=item.type,
                icon=item.icon,
                color=item.color,
                is_default=True,
            )
            for item in defaults
        ]
        self.session.add_all(rows)
        self.session.commit()
        logger.info(f"default_categories_seeded: count={len(rows)}")
        return True


class TransactionService:
    def __init__(self, session: Session) -> None:
        self.session = session

    def create(self, data: TransactionIn) -> Transaction:
        txn = Transaction(
            date=data.date,
            type=data.type,
            category=data.category,
            payment_type=data.payment_type,
            description=data.description,
            amount_cents=data.amount_cents,
        )
        self.session.add(txn)
        self.session.commit()
        self.session.refresh(txn)
        logger.info(
            f"transaction_created: id={txn.id} type={txn.type.value} "
            f"date={txn.date.isoformat()} amount_cents={txn.amount_cents}"
        )
        return txn

    def get(self, transaction_id: int) -> Transaction:
        txn = self.session.get(Transaction, transaction_id)
        if not txn:
            raise TransactionNotFound("Transaction not found")
        return txn

    def delete(self, transaction_id: int) -> None:
        txn = self.get(transaction_id)
        self.session.delete(txn)
        self.session.commit()
        logger.info(f"transaction_deleted: id={transaction_id}")

    def list(self, filters: Optional[TransactionFilters] = None) -> list[Transaction]:
        filters = filters or TransactionFilters()
        stmt = select(Transaction).order_by(
            Transaction.date.desc(), Transaction.id.desc()
        )
        if filters.type:
            stmt = stmt.where(Transaction.type == filters.type)
        if filters.category:
            stmt = stmt.where(Transaction.category == filters.category)
        if filters.start_date:
            stmt = stmt.where(Transaction.date >= filters.start_date)
        if filters.end_date:
            stmt = stmt.where(Transaction.date <= filters.end_date)
        if filters.limit:
            stmt = stmt.limit(filters.limit)
        return self.session.scalars(stmt).all()

    def for_period(self, period: Period) -> list[Transaction]:
        stmt = select(Transaction)
        if period.is_bounded:
            stmt = stmt.where(Transaction.date.between(period.start, period.end))
        return self.session.scalars(stmt).all()


class StatsService:
    def __init__(self, session: Session) -> None:
        self.session = session

    def summary(self, period: Period) -> StatsSummary:
        transactions = TransactionService(self.session).for_period(period)
        return aggregate(transactions)

    def report(self, period: Period) -> dict[str, object]:
        summary = self.summary(period)
        return {
            "period": period.slug,
            "summary": summary.as_payload(),
            "overview": overview(summary),
            "expenseDistribution": expense_distribution(summary),
            "paymentDistribution": payment_distribution(summary),
        }
