from __future__ import annotations

from abc import ABC, abstractmethod
from contextlib import contextmanager
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Iterator


class LockProvider(ABC):
    """Port for per-invoice locking.

    Without a lock, two payments against the same invoice can both read the
    same history and the later save() drops the earlier payment.

    Contract:
    - acquire() MUST serialize callers holding the same invoice reference
    - acquire() MUST release on context exit, including on exception
    - Different references MAY be held concurrently
    """

    @abstractmethod
    @contextmanager
    def acquire(self, resource_id: str) -> Iterator[None]:
        """Hold the lock for one invoice reference.

        Usage:
            with lock_provider.acquire(payment.reference):
                invoice = repository.get_by_reference(payment.reference)
                ...
                repository.save(invoice)
        """
        ...
