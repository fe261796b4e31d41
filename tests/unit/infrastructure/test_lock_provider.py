"""Tests for LockProvider implementations.

Tests cover:
- InMemoryLockProvider per-reference locks
- Lock release on exception
- NoOpLockProvider for single-threaded callers
"""

import threading
import time
from concurrent.futures import ThreadPoolExecutor, wait

import pytest

from invoice_payments.application.ports import LockProvider
from invoice_payments.infrastructure.lock_provider import (
    InMemoryLockProvider,
    NoOpLockProvider,
)

# =============================================================================
# InMemoryLockProvider Tests
# =============================================================================


class TestInMemoryLockProvider:
    def test_implements_lock_provider_interface(self) -> None:
        assert isinstance(InMemoryLockProvider(), LockProvider)

    def test_same_reference_can_be_acquired_sequentially(self) -> None:
        provider = InMemoryLockProvider()
        acquisitions = 0

        with provider.acquire("INV-1"):
            acquisitions += 1
        with provider.acquire("INV-1"):
            acquisitions += 1

        assert acquisitions == 2

    def test_different_references_can_be_held_together(self) -> None:
        provider = InMemoryLockProvider()

        with provider.acquire("INV-1"), provider.acquire("INV-2"):
            pass

        assert len(provider) == 2

    def test_lock_reused_for_same_reference(self) -> None:
        provider = InMemoryLockProvider()

        with provider.acquire("INV-1"):
            first_lock = provider._locks["INV-1"]
        with provider.acquire("INV-1"):
            second_lock = provider._locks["INV-1"]

        assert first_lock is second_lock
        assert len(provider) == 1

    def test_lock_released_on_exception(self) -> None:
        provider = InMemoryLockProvider()

        with pytest.raises(RuntimeError), provider.acquire("INV-1"):
            raise RuntimeError("Simulated failure")

        assert not provider._locks["INV-1"].locked()
        with provider.acquire("INV-1"):
            pass


class TestInMemoryLockProviderConcurrency:
    def test_same_reference_is_never_held_twice(self) -> None:
        provider = InMemoryLockProvider()
        holders = 0
        max_holders = 0
        count_lock = threading.Lock()

        def worker() -> None:
            nonlocal holders, max_holders
            with provider.acquire("INV-shared"):
                with count_lock:
                    holders += 1
                    max_holders = max(max_holders, holders)
                time.sleep(0.01)
                with count_lock:
                    holders -= 1

        with ThreadPoolExecutor(max_workers=4) as executor:
            futures = [executor.submit(worker) for _ in range(8)]
            wait(futures, timeout=10)

        assert all(f.done() for f in futures)
        assert max_holders == 1

    def test_different_references_allow_parallel_access(self) -> None:
        provider = InMemoryLockProvider()
        holders = 0
        max_holders = 0
        count_lock = threading.Lock()
        barrier = threading.Barrier(3, timeout=5)

        def worker(reference: str) -> None:
            nonlocal holders, max_holders
            with provider.acquire(reference):
                with count_lock:
                    holders += 1
                    max_holders = max(max_holders, holders)
                barrier.wait()
                with count_lock:
                    holders -= 1

        with ThreadPoolExecutor(max_workers=3) as executor:
            futures = [executor.submit(worker, f"INV-{i}") for i in range(3)]
            wait(futures, timeout=10)

        for future in futures:
            future.result()
        assert max_holders == 3


# =============================================================================
# NoOpLockProvider Tests
# =============================================================================


class TestNoOpLockProvider:
    def test_implements_lock_provider_interface(self) -> None:
        assert isinstance(NoOpLockProvider(), LockProvider)

    def test_same_reference_can_be_nested(self) -> None:
        provider = NoOpLockProvider()
        acquisitions = 0

        with provider.acquire("INV-1"):
            acquisitions += 1
            with provider.acquire("INV-1"):
                acquisitions += 1

        assert acquisitions == 2

    def test_exception_propagates(self) -> None:
        provider = NoOpLockProvider()

        with pytest.raises(RuntimeError, match="test error"), provider.acquire("INV-1"):
            raise RuntimeError("test error")
