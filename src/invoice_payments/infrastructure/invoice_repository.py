from __future__ import annotations

import copy
from typing import TYPE_CHECKING

from invoice_payments.application.ports import InvoiceRepository
from invoice_payments.domain.exceptions import DuplicateInvoiceError

if TYPE_CHECKING:
    from collections.abc import Iterable

    from invoice_payments.domain.entities import Invoice


class InMemoryInvoiceRepository(InvoiceRepository):
    """In-memory invoice store keyed by reference.

    Implementation notes:
    - Returns deep copies from get_by_reference() to mimic database detachment
    - Stores deep copies in add()/save() to prevent external mutation
    - NOT thread-safe; relies on external LockProvider for serialization

    Each instance is its own store; there is no process-wide registry.
    """

    def __init__(self, invoices: Iterable[Invoice] = ()) -> None:
        self._invoices: dict[str, Invoice] = {}
        for invoice in invoices:
            self.add(invoice)

    def get_by_reference(self, reference: str) -> Invoice | None:
        invoice = self._invoices.get(reference)
        if invoice is None:
            return None
        return copy.deepcopy(invoice)

    def add(self, invoice: Invoice) -> None:
        if invoice.reference in self._invoices:
            raise DuplicateInvoiceError(f"Invoice already exists for reference={invoice.reference}")
        self._invoices[invoice.reference] = copy.deepcopy(invoice)

    def save(self, invoice: Invoice) -> None:
        self._invoices[invoice.reference] = copy.deepcopy(invoice)

    def __len__(self) -> int:
        return len(self._invoices)

    def __contains__(self, reference: object) -> bool:
        return reference in self._invoices
