from datetime import date
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field

from models import PaymentType, TransactionType

# Largest value a signed 64-bit INTEGER column can hold
MAX_AMOUNT_CENTS = 2**63 - 1


class CategoryIn(BaseModel):
    model_config = ConfigDict(str_strip_whitespace=True)

    name: str = Field(..., min_length=1, max_length=100)
    type: TransactionType
    color: Optional[str] = Field(
        default=None, max_length=9, pattern=r"^#[0-9A-Fa-f]{3,8}$"
    )
    icon: Optional[str] = Field(default=None, min_length=1, max_length=40)


class TransactionIn(BaseModel):
    model_config = ConfigDict(str_strip_whitespace=True)

    date: date
    type: TransactionType
    category: str = Field(..., min_length=1, max_length=100)
    payment_type: PaymentType
    description: str = Field(..., min_length=1, max_length=500)
    amount_cents: int = Field(..., ge=0, le=MAX_AMOUNT_CENTS)
