"""Ports - Abstract interfaces for external dependencies.

Ports define the contracts that infrastructure adapters must implement.
This allows the application layer to remain decoupled from concrete implementations.
"""

from invoice_payments.application.ports.invoice_repository import InvoiceRepository
from invoice_payments.application.ports.lock_provider import LockProvider

__all__ = [
    "InvoiceRepository",
    "LockProvider",
]
