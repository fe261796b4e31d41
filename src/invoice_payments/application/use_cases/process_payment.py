from __future__ import annotations

from typing import TYPE_CHECKING

from invoice_payments.domain.entities import PaymentResult
from invoice_payments.domain.exceptions import InvoiceNotFoundError
from invoice_payments.logging_config import get_logger

if TYPE_CHECKING:
    from invoice_payments.application.ports import InvoiceRepository, LockProvider
    from invoice_payments.domain.entities import Invoice, Payment

logger = get_logger("use_cases.process_payment")


class ProcessPaymentUseCase:
    """Validates a payment against its invoice and applies it.

    Responsibilities:
    - Acquire the per-invoice lock for the payment's reference
    - Look up the invoice (missing invoice is a hard error)
    - Decide the outcome from the invoice's current payment history
    - On acceptance, append the payment and save the invoice

    Rejections are returned as PaymentResult values, not raised: only
    InvoiceNotFoundError aborts the caller's flow.
    """

    def __init__(
        self,
        invoice_repository: InvoiceRepository,
        lock_provider: LockProvider,
    ) -> None:
        self._invoice_repo = invoice_repository
        self._lock_provider = lock_provider

    def execute(self, payment: Payment) -> PaymentResult:
        """Process a payment against the invoice it references.

        Args:
            payment: The incoming payment.

        Returns:
            PaymentResult describing what happened. Members compare equal
            to their status message.

        Raises:
            InvoiceNotFoundError: No invoice matches payment.reference.
        """
        with self._lock_provider.acquire(payment.reference):
            return self._execute_within_lock(payment)

    def _execute_within_lock(self, payment: Payment) -> PaymentResult:
        invoice = self._invoice_repo.get_by_reference(payment.reference)
        if invoice is None:
            logger.warning("No invoice for payment reference=%s", payment.reference)
            raise InvoiceNotFoundError(payment.reference)

        result = self._decide(invoice, payment)

        if result.is_accepted:
            self._invoice_repo.save(invoice.apply_payment(payment))

        logger.info(
            "Processed payment reference=%s amount=%s result=%r",
            payment.reference,
            payment.amount,
            result.value,
        )
        return result

    @staticmethod
    def _decide(invoice: Invoice, payment: Payment) -> PaymentResult:
        """Pick the outcome; pure, no side effects."""
        amount_paid = invoice.amount_paid

        if invoice.amount == 0:
            # A zero-amount invoice carrying payments is an invalid state.
            if invoice.has_payments:
                return PaymentResult.ALREADY_FULLY_PAID
            return PaymentResult.NO_PAYMENT_NEEDED

        if amount_paid > 0:
            remaining = invoice.amount - amount_paid
            if amount_paid == invoice.amount:
                return PaymentResult.ALREADY_FULLY_PAID
            if payment.amount > remaining:
                return PaymentResult.EXCEEDS_REMAINING
            if payment.amount == remaining:
                return PaymentResult.FINAL_PARTIAL_PAYMENT
            return PaymentResult.ANOTHER_PARTIAL_PAYMENT

        if payment.amount > invoice.amount:
            return PaymentResult.EXCEEDS_INVOICE_AMOUNT
        if payment.amount == invoice.amount:
            return PaymentResult.FULLY_PAID
        return PaymentResult.PARTIALLY_PAID
