"""Domain exceptions for invoice-payments.

Exception hierarchy:
    DomainException (base)
    ├── Not Found Errors
    │   └── InvoiceNotFoundError
    ├── Validation Errors
    │   ├── InvalidAmountError
    │   ├── InvalidReferenceError
    │   └── PaymentReferenceMismatchError
    └── Invariant Errors
        └── DuplicateInvoiceError

Rejected payments are NOT exceptions: they are reported as PaymentResult
values by ProcessPaymentUseCase. Only a missing invoice aborts the flow.
"""

from __future__ import annotations

NO_MATCHING_INVOICE_MESSAGE = "There is no invoice matching this payment"


class DomainException(Exception):
    """Base exception for all domain-level errors.

    All domain exceptions inherit from this class to enable
    catching domain errors distinctly from infrastructure errors.
    """


# =============================================================================
# Not Found Errors
# =============================================================================


class InvoiceNotFoundError(DomainException):
    """Raised when no invoice matches a payment's reference.

    Carries the fixed message NO_MATCHING_INVOICE_MESSAGE by default; the
    unmatched reference is kept on the instance for callers and logs.
    """

    def __init__(self, reference: str, message: str = NO_MATCHING_INVOICE_MESSAGE) -> None:
        super().__init__(message)
        self.reference = reference


# =============================================================================
# Validation Errors
# =============================================================================


class InvalidAmountError(DomainException):
    """Raised when an invoice or payment amount is not a non-negative decimal."""


class InvalidReferenceError(DomainException):
    """Raised when an invoice or payment reference is empty."""


class PaymentReferenceMismatchError(DomainException):
    """Raised when a payment is attached to an invoice with another reference."""


# =============================================================================
# Invariant Errors
# =============================================================================


class DuplicateInvoiceError(DomainException):
    """Raised when an invoice is added under a reference that already exists.

    References are the store's unique key; adding twice would silently drop
    the first invoice's payment history.
    """
