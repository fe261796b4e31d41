"""Shared pytest fixtures for the test suite."""

import uuid

import pytest

from invoice_payments.infrastructure.invoice_repository import InMemoryInvoiceRepository
from invoice_payments.infrastructure.lock_provider import NoOpLockProvider
from invoice_payments.logging_config import reset_logging


@pytest.fixture
def reference() -> str:
    """A unique invoice reference per test."""
    return f"INV-{uuid.uuid4().hex[:12]}"


@pytest.fixture
def invoice_repository() -> InMemoryInvoiceRepository:
    """An empty in-memory invoice store."""
    return InMemoryInvoiceRepository()


@pytest.fixture
def lock_provider() -> NoOpLockProvider:
    """Use NoOpLockProvider for unit tests (single-threaded)."""
    return NoOpLockProvider()


@pytest.fixture(autouse=True)
def _reset_logging():
    yield
    reset_logging()
