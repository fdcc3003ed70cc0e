"""Limiting how often a function may be called."""

from __future__ import annotations

import threading
import time
from collections.abc import Callable


class ThrottleBusy(Exception):
    """The call limit for the current window has been reached."""

    def __init__(self) -> None:
        super().__init__("busy")


class ThrottleCanceled(Exception):
    """The throttle has been cancelled."""

    def __init__(self) -> None:
        super().__init__("canceled")


class WindowThrottle:
    """Allows at most ``limit`` calls of ``fn`` per one-second window.

    Calls over the limit fail at once with :class:`ThrottleBusy`.
    """

    def __init__(
        self,
        limit: int,
        fn: Callable[[], object],
        clock: Callable[[], float] = time.monotonic,
    ) -> None:
        self._limit = limit
        self._fn = fn
        self._clock = clock
        self._lock = threading.Lock()
        self._start = clock()
        self._count = 0
        self._stopped = False

    def __call__(self) -> None:
        with self._lock:
            if self._stopped:
                raise ThrottleCanceled()
            now = self._clock()
            if now - self._start >= 1.0:
                self._start = now
                self._count = 0
            if self._count >= self._limit:
                raise ThrottleBusy()
            self._count += 1
        self._fn()

    def cancel(self) -> None:
        """Stop accepting calls; repeated calls are harmless."""
        with self._lock:
            self._stopped = True


class RateThrottle:
    """Spaces calls of ``fn`` evenly, at most ``limit`` per second.

    A call waits for the next free slot, then starts ``fn`` on its own
    thread and returns without waiting for it.
    """

    def __init__(self, limit: int, fn: Callable[[], object]) -> None:
        if limit <= 0:
            raise ValueError("limit must be positive")
        self._fn = fn
        self._interval = 1.0 / limit
        self._cond = threading.Condition()
        self._token = False
        self._stop = threading.Event()
        threading.Thread(target=self._tick, daemon=True).start()

    def _tick(self) -> None:
        while not self._stop.wait(self._interval):
            with self._cond:
                self._token = True
                self._cond.notify()

    def __call__(self) -> None:
        with self._cond:
            self._cond.wait_for(lambda: self._token or self._stop.is_set())
            if self._stop.is_set():
                raise ThrottleCanceled()
            self._token = False
        threading.Thread(target=self._fn, daemon=True).start()

    def cancel(self) -> None:
        """Stop the throttle and wake blocked callers; repeated calls are harmless."""
        with self._cond:
            self._stop.set()
            self._cond.notify_all()