"""Infrastructure layer - Concrete implementations of ports.

This layer contains:
- Persistence: the in-memory invoice store
- Locking: per-invoice lock providers

Infrastructure adapters implement the ports defined in the application layer.
"""

from invoice_payments.infrastructure.invoice_repository import InMemoryInvoiceRepository
from invoice_payments.infrastructure.lock_provider import InMemoryLockProvider, NoOpLockProvider

__all__ = [
    "InMemoryInvoiceRepository",
    "InMemoryLockProvider",
    "NoOpLockProvider",
]
