from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from invoice_payments.domain.entities import Invoice


class InvoiceRepository(ABC):
    """Port for invoice persistence, keyed by invoice reference.

    Contract:
    - get_by_reference() returns None if no invoice matches (no exception)
    - get_by_reference() never mutates stored state
    - add() inserts a new invoice; the reference must not already exist
    - save() performs upsert: creates if new, updates if exists
    - Implementations are NOT thread-safe; callers must ensure serialization

    Thread safety note:
    Repositories assume the caller has acquired appropriate locks via
    LockProvider before invoking methods. This matches database behavior
    where transaction isolation is external to the repository.
    """

    @abstractmethod
    def get_by_reference(self, reference: str) -> Invoice | None:
        """Retrieve an invoice by its reference.

        Args:
            reference: The invoice reference.

        Returns:
            The Invoice entity if found, None otherwise.
            Returned entity is a copy; mutations do not affect stored state.
        """

    @abstractmethod
    def add(self, invoice: Invoice) -> None:
        """Insert a new invoice.

        Raises:
            DuplicateInvoiceError: If an invoice with the same reference exists.
        """

    @abstractmethod
    def save(self, invoice: Invoice) -> None:
        """Persist an invoice (upsert semantics).

        Args:
            invoice: The invoice entity to save, typically the result of
                Invoice.apply_payment().
        """
