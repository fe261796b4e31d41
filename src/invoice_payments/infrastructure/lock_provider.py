from __future__ import annotations

from contextlib import contextmanager
from threading import Lock
from typing import TYPE_CHECKING

from invoice_payments.application.ports import LockProvider

if TYPE_CHECKING:
    from collections.abc import Iterator


class InMemoryLockProvider(LockProvider):
    """One threading.Lock per invoice reference, created on first use.

    The registry lock is held only while looking up or creating the
    per-reference lock, so payments against different invoices never
    wait on each other.

    Limitations:
    - Single-process only
    - Locks are never evicted (one per reference ever seen)
    """

    def __init__(self) -> None:
        self._locks: dict[str, Lock] = {}
        self._registry_lock = Lock()

    @contextmanager
    def acquire(self, resource_id: str) -> Iterator[None]:
        with self._registry_lock:
            lock = self._locks.setdefault(resource_id, Lock())

        with lock:
            yield

    def __len__(self) -> int:
        return len(self._locks)


class NoOpLockProvider(LockProvider):
    """Lock provider that performs no locking.

    For single-threaded callers and unit tests that do not exercise
    concurrent payments.
    """

    @contextmanager
    def acquire(self, resource_id: str) -> Iterator[None]:  # noqa: ARG002
        yield
