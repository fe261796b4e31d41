"""Composition root: builds a ready-to-use ProcessPaymentUseCase."""

from __future__ import annotations

from typing import TYPE_CHECKING

from invoice_payments.application.use_cases import ProcessPaymentUseCase
from invoice_payments.config import Settings, get_settings
from invoice_payments.infrastructure import (
    InMemoryInvoiceRepository,
    InMemoryLockProvider,
    NoOpLockProvider,
)
from invoice_payments.logging_config import configure_logging

if TYPE_CHECKING:
    from invoice_payments.application.ports import InvoiceRepository, LockProvider


def build_lock_provider(settings: Settings) -> LockProvider:
    if settings.serialize_invoice_access:
        return InMemoryLockProvider()
    return NoOpLockProvider()


def build_process_payment_use_case(
    settings: Settings | None = None,
    repository: InvoiceRepository | None = None,
) -> ProcessPaymentUseCase:
    """Wire settings, store and lock provider into the use case.

    Args:
        settings: Defaults to get_settings().
        repository: Invoice store to process against. A fresh
            InMemoryInvoiceRepository is created when omitted.
    """
    settings = settings or get_settings()
    configure_logging(level=settings.log_level)

    return ProcessPaymentUseCase(
        invoice_repository=repository if repository is not None else InMemoryInvoiceRepository(),
        lock_provider=build_lock_provider(settings),
    )
