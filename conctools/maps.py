"""Thread-safe mappings: a general map and a word-frequency counter."""

from __future__ import annotations

import threading
from collections.abc import Callable, Hashable
from typing import Any


class ConcMap:
    """A dictionary whose operations are atomic across threads."""

    def __init__(self) -> None:
        self._items: dict[Hashable, Any] = {}
        self._lock = threading.Lock()

    def get(self, key: Hashable, default: Any = None) -> Any:
        with self._lock:
            return self._items.get(key, default)

    def set(self, key: Hashable, value: Any) -> None:
        with self._lock:
            self._items[key] = value

    def set_if_absent(self, key: Hashable, value: Any) -> Any:
        """Store ``value`` unless ``key`` exists; return the value now held."""
        with self._lock:
            return self._items.setdefault(key, value)

    def compute(
        self, key: Hashable, fn: Callable[[Any], Any], default: Any = None
    ) -> Any:
        """Atomically replace the value with ``fn(old)`` and return it.

        ``old`` is ``default`` when the key is absent.
        """
        with self._lock:
            new = fn(self._items.get(key, default))
            self._items[key] = new
            return new


class Counter:
    """A thread-safe counter of string occurrences."""

    def __init__(self) -> None:
        self._counts: dict[str, int] = {}
        self._lock = threading.Lock()

    def increment(self, key: str) -> None:
        with self._lock:
            self._counts[key] = self._counts.get(key, 0) + 1

    def value(self, key: str) -> int:
        with self._lock:
            return self._counts.get(key, 0)

    def items(self) -> list[tuple[str, int]]:
        """Return a snapshot of all ``(key, count)`` pairs."""
        with self._lock:
            return list(self._counts.items())