"""Validate and apply payments against invoices."""

from invoice_payments.application.use_cases import ProcessPaymentUseCase
from invoice_payments.domain.entities import Invoice, Payment, PaymentResult
from invoice_payments.domain.exceptions import InvoiceNotFoundError

__all__ = [
    "Invoice",
    "InvoiceNotFoundError",
    "Payment",
    "PaymentResult",
    "ProcessPaymentUseCase",
]
