"""A mutual-exclusion lock with guard support, and thread identification."""

from __future__ import annotations

import threading
from contextlib import contextmanager
from typing import Iterator


class SpinLock:
    """A non-reentrant lock usable directly or as a context manager."""

    def __init__(self) -> None:
        self._lock = threading.Lock()

    def lock(self) -> None:
        self._lock.acquire()

    def unlock(self) -> None:
        self._lock.release()

    def try_lock(self) -> bool:
        """Take the lock if it is free; returns whether it was taken."""
        return self._lock.acquire(blocking=False)

    @contextmanager
    def guard(self) -> Iterator["SpinLock"]:
        """Hold the lock for the duration of a ``with`` block."""
        self.lock()
        try:
            yield self
        finally:
            self.unlock()

    def __enter__(self) -> "SpinLock":
        self.lock()
        return self

    def __exit__(self, *args) -> None:
        self.unlock()


def current_thread_id() -> int:
    """An identifier of the calling thread."""
    return threading.get_ident()