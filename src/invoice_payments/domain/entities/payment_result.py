from __future__ import annotations

from enum import Enum


class PaymentResult(str, Enum):
    """Outcome of processing a payment against an invoice.

    Values are the human-readable status messages, and members compare
    equal to them (str mixin), so callers may treat a result as plain text.
    """

    NO_PAYMENT_NEEDED = "no payment needed"
    ALREADY_FULLY_PAID = "invoice was already fully paid"
    EXCEEDS_REMAINING = "the payment is greater than the partial amount remaining"
    EXCEEDS_INVOICE_AMOUNT = "the payment is greater than the invoice amount"
    FINAL_PARTIAL_PAYMENT = "final partial payment received, invoice is now fully paid"
    ANOTHER_PARTIAL_PAYMENT = "another partial payment received, still not fully paid"
    FULLY_PAID = "invoice is now fully paid"
    PARTIALLY_PAID = "invoice is now partially paid"

    @property
    def is_accepted(self) -> bool:
        """True if the payment was appended to the invoice."""
        return self in _ACCEPTED

    def __str__(self) -> str:
        return self.value


_ACCEPTED = frozenset(
    {
        PaymentResult.FINAL_PARTIAL_PAYMENT,
        PaymentResult.ANOTHER_PARTIAL_PAYMENT,
        PaymentResult.FULLY_PAID,
        PaymentResult.PARTIALLY_PAID,
    }
)
