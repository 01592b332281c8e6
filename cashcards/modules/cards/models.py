"""Domain models and money helpers for cash cards."""

from __future__ import annotations

from dataclasses import dataclass, replace
from decimal import Decimal, InvalidOperation
from typing import Any, Optional

from .exceptions import InvalidAmountError

MONEY_QUANTUM = Decimal("0.01")
# amounts are persisted as signed 64-bit minor units
MAX_AMOUNT = Decimal("999999999999999.99")


@dataclass(slots=True)
class CashCard:
    id: Optional[int]
    amount: Decimal
    owner: str

    def with_amount(self, amount: Decimal) -> "CashCard":
        return replace(self, amount=amount)


def parse_amount(value: Any) -> Decimal:
    """Coerce ``value`` into a two-decimal ``Decimal``.

    Floats go through ``str`` so ``19.99`` stays ``19.99`` instead of the
    nearest binary fraction. Raises :class:`InvalidAmountError` for missing,
    non-numeric, non-finite, negative, oversized or sub-cent values.
    """
    if value is None:
        raise InvalidAmountError("amount is required")
    if isinstance(value, bool):
        raise InvalidAmountError("amount must be a number")
    if isinstance(value, float):
        value = str(value)
    try:
        amount = value if isinstance(value, Decimal) else Decimal(value)
    except (InvalidOperation, TypeError, ValueError) as exc:
        raise InvalidAmountError("amount must be a number") from exc

    if not amount.is_finite():
        raise InvalidAmountError("amount must be finite")
    if amount < 0:
        raise InvalidAmountError("amount must not be negative")
    if amount > MAX_AMOUNT:
        raise InvalidAmountError("amount is too large")
    quantized = amount.quantize(MONEY_QUANTUM)
    if quantized != amount:
        raise InvalidAmountError("amount must have at most two decimal places")
    return quantized


def to_cents(amount: Decimal) -> int:
    return int(amount.scaleb(2).to_integral_value())


def from_cents(cents: int) -> Decimal:
    return Decimal(cents).scaleb(-2).quantize(MONEY_QUANTUM)
