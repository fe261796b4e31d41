"""Domain entities - Objects with identity and lifecycle."""

from invoice_payments.domain.entities.invoice import Invoice
from invoice_payments.domain.entities.payment import Payment
from invoice_payments.domain.entities.payment_result import PaymentResult

__all__ = [
    "Invoice",
    "Payment",
    "PaymentResult",
]
