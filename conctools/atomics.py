"""Thread-safe counters, a concurrent stack and call statistics."""

from __future__ import annotations

import random
import threading
import time
from dataclasses import dataclass
from datetime import datetime


class AtomicInt:
    """An integer whose operations are atomic across threads."""

    def __init__(self, value: int = 0) -> None:
        self._value = value
        self._lock = threading.Lock()

    def add(self, delta: int) -> int:
        """Add ``delta`` and return the new value."""
        with self._lock:
            self._value += delta
            return self._value

    def load(self) -> int:
        with self._lock:
            return self._value

    def store(self, value: int) -> None:
        with self._lock:
            self._value = value

    def compare_and_swap(self, old: int, new: int) -> bool:
        """Set the value to ``new`` if it currently equals ``old``."""
        with self._lock:
            if self._value != old:
                return False
            self._value = new
            return True

    def __repr__(self) -> str:
        return f"AtomicInt({self.load()})"


@dataclass(frozen=True)
class _Node:
    val: int
    next: _Node | None


class Stack:
    """A LIFO stack that is safe to share between threads."""

    def __init__(self) -> None:
        self._top: _Node | None = None
        self._lock = threading.Lock()

    def push(self, val: int) -> None:
        with self._lock:
            self._top = _Node(val, self._top)

    def pop(self) -> int:
        """Remove and return the top value; raise IndexError if empty."""
        with self._lock:
            node = self._top
            if node is None:
                raise IndexError("pop from empty stack")
            self._top = node.next
            return node.val

    def __bool__(self) -> bool:
        with self._lock:
            return self._top is not None


class Total:
    """A counter that many threads may increment at once."""

    def __init__(self) -> None:
        self._count = AtomicInt()

    def increment(self) -> None:
        self._count.add(1)

    def value(self) -> int:
        return self._count.load()


class External:
    """Records how often and when an external service was called."""

    def __init__(self) -> None:
        self._lock = threading.Lock()
        self._last_call: datetime | None = None
        self._num_calls = 0

    def call(self) -> None:
        now = datetime.now()
        with self._lock:
            self._last_call = now
            self._num_calls += 1

    def last_call(self) -> datetime:
        """Return the time of the last call; raise LookupError if never called."""
        with self._lock:
            if self._last_call is None:
                raise LookupError("service has not been called yet")
            return self._last_call

    def num_calls(self) -> int:
        with self._lock:
            return self._num_calls


def run_increments(n: int = 100, max_sleep_ms: int = 10) -> tuple[int, int]:
    """Run ``n`` threads that bump a shared delta and add it to a counter.

    Each thread increments ``delta``, sleeps a random time below
    ``max_sleep_ms`` milliseconds, then adds the current ``delta`` to
    ``counter``. Returns the final ``(delta, counter)``.
    """
    if max_sleep_ms <= 0:
        raise ValueError("max_sleep_ms must be positive")

    delta = AtomicInt()
    counter = AtomicInt()

    def increment() -> None:
        delta.add(1)
        time.sleep(random.randrange(max_sleep_ms) / 1000)
        counter.add(delta.load())

    threads = [threading.Thread(target=increment) for _ in range(n)]
    for thread in threads:
        thread.start()
    for thread in threads:
        thread.join()
    return delta.load(), counter.load()