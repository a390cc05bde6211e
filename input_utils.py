from datetime import date, datetime
from decimal import Decimal, InvalidOperation
from typing import Union


def parse_date(value: str) -> date:
    value = value.strip()
    try:
        return date.fromisoformat(value[:10])
    except ValueError:
        return datetime.strptime(value, "%d.%m.%Y").date()


def parse_amount(value: Union[str, int, float, Decimal]) -> int:
    """Convert a client-supplied amount into non-negative integer cents.

    Accepts JSON numbers as well as strings such as ``"1 250,50"`` or
    ``"₹499"``.
    """
    if isinstance(value, bool) or value is None:
        raise ValueError("Invalid amount")
    clean = str(value).strip().replace("₹", "").replace("$", "").replace(" ", "")
    clean = clean.replace(",", ".")
    if clean.count(".") > 1:
        parts = clean.split(".")
        clean = "".join(parts[:-1]) + "." + parts[-1]
    try:
        amount = Decimal(clean)
        cents = int((amount * 100).quantize(Decimal("1")))
    except (InvalidOperation, ValueError) as exc:
        raise ValueError("Invalid amount") from exc
    if cents < 0:
        raise ValueError("Amount must be positive")
    return cents


def cents_to_amount(cents: int) -> float:
    return cents / 100
