"""Counting semaphore, one-shot barrier and two-party rendezvous."""

from __future__ import annotations

import threading


class Semaphore:
    """A counting semaphore of fixed capacity."""

    def __init__(self, n: int) -> None:
        if n < 0:
            raise ValueError("capacity must not be negative")
        self._sema = threading.BoundedSemaphore(n) if n > 0 else None

    def acquire(self) -> None:
        """Take a slot, blocking until one is free."""
        if self._sema is None:
            threading.Event().wait()
        else:
            self._sema.acquire()

    def try_acquire(self) -> bool:
        """Take a slot if one is free; return whether it was taken."""
        if self._sema is None:
            return False
        return self._sema.acquire(blocking=False)

    def release(self) -> None:
        """Free a slot; raise ValueError if none is held."""
        if self._sema is None:
            raise ValueError("semaphore released too many times")
        self._sema.release()

    def __enter__(self) -> Semaphore:
        self.acquire()
        return self

    def __exit__(self, *args) -> None:
        self.release()


class Barrier:
    """A one-shot barrier that releases everyone once ``n`` threads arrive."""

    def __init__(self, n: int) -> None:
        if n < 0:
            raise ValueError("barrier size must not be negative")
        self._remaining = n
        self._cond = threading.Condition()

    def touch(self) -> None:
        """Register arrival and block until all ``n`` threads have arrived.

        Raises RuntimeError when more than ``n`` threads touch the barrier.
        """
        with self._cond:
            if self._remaining <= 0:
                raise RuntimeError("barrier touched more times than its size")
            self._remaining -= 1
            if self._remaining == 0:
                self._cond.notify_all()
            else:
                self._cond.wait_for(lambda: self._remaining == 0)


class Rendezvous:
    """A meeting point for exactly two threads."""

    def __init__(self) -> None:
        self._barrier = Barrier(2)

    def ready(self) -> None:
        """Block until the other party is ready too."""
        self._barrier.touch()