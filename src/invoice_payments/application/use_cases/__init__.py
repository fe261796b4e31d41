"""Use cases - Application entry points orchestrating domain and ports."""

from invoice_payments.application.use_cases.process_payment import ProcessPaymentUseCase

__all__ = ["ProcessPaymentUseCase"]
