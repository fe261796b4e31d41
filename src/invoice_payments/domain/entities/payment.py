from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal, InvalidOperation

from invoice_payments.domain.exceptions import InvalidAmountError, InvalidReferenceError


def to_amount(value: Decimal | int | str) -> Decimal:
    """Normalize a monetary amount to a non-negative Decimal.

    Raises:
        InvalidAmountError: If the value is not numeric, not finite, or negative.
    """
    if isinstance(value, bool):
        raise InvalidAmountError(f"Amount must be numeric, got {value!r}")

    try:
        amount = value if isinstance(value, Decimal) else Decimal(str(value))
    except InvalidOperation as e:
        raise InvalidAmountError(f"Amount must be numeric, got {value!r}") from e

    if not amount.is_finite():
        raise InvalidAmountError(f"Amount must be finite, got {value!r}")

    if amount < 0:
        raise InvalidAmountError(f"Amount cannot be negative, got {amount}")

    return amount


def to_reference(value: str) -> str:
    """Normalize an invoice reference (whitespace is trimmed)."""
    if not isinstance(value, str):
        raise InvalidReferenceError(f"Reference must be a string, got {type(value).__name__}")

    normalized = value.strip()
    if not normalized:
        raise InvalidReferenceError("Reference cannot be empty")
    return normalized


@dataclass(frozen=True, slots=True)
class Payment:
    """An amount of money tagged with the reference of the invoice it pays.

    Immutable once created. Zero is a valid amount.
    """

    amount: Decimal
    reference: str

    def __post_init__(self) -> None:
        object.__setattr__(self, "amount", to_amount(self.amount))
        object.__setattr__(self, "reference", to_reference(self.reference))
