"""Workers that call a function in a loop on a background thread."""

from __future__ import annotations

import enum
import threading
from collections.abc import Callable


class StopReason(enum.Enum):
    """Why a worker's loop ended."""

    MANUAL = "manual"
    FAILED = "failed"


class Worker:
    """Calls ``fn`` repeatedly until stopped or until ``fn`` raises."""

    def __init__(self, fn: Callable[[], object]) -> None:
        self._fn = fn
        self._stop = threading.Event()
        self._thread: threading.Thread | None = None

    def _loop(self) -> None:
        while not self._stop.is_set():
            try:
                self._fn()
            except Exception:
                self._stop.set()
                return

    def start(self) -> None:
        """Start the loop; repeated calls are ignored."""
        if self._thread is not None:
            return
        self._thread = threading.Thread(target=self._loop, daemon=True)
        self._thread.start()

    def stop(self) -> None:
        """Ask the loop to end; calls before ``start`` are ignored."""
        if self._thread is None:
            return
        self._stop.set()

    def wait(self) -> None:
        """Block until the loop has ended; returns at once if never started."""
        thread = self._thread
        if thread is None or thread is threading.current_thread():
            return
        thread.join()


class CancellableWorker:
    """Like :class:`Worker`, but ``stop`` waits for the loop, callbacks run
    after it ends and the reason for stopping is recorded."""

    def __init__(self, fn: Callable[[], object]) -> None:
        self._fn = fn
        self._stop = threading.Event()
        self._thread: threading.Thread | None = None
        self._after: list[Callable[[], object]] = []
        self._reason: StopReason | None = None

    def _loop(self, after: list[Callable[[], object]]) -> None:
        while True:
            if self._stop.is_set():
                self._reason = StopReason.MANUAL
                break
            try:
                self._fn()
            except Exception:
                self._reason = StopReason.FAILED
                break
        for callback in after:
            callback()

    def start(self) -> None:
        """Start the loop; repeated calls are ignored."""
        if self._thread is not None:
            return
        self._thread = threading.Thread(
            target=self._loop, args=(list(self._after),), daemon=True
        )
        self._thread.start()

    def stop(self) -> None:
        """End the loop and wait for it; ignored before ``start``."""
        thread = self._thread
        if thread is None:
            return
        self._stop.set()
        if thread is not threading.current_thread():
            thread.join()

    def after_stop(self, fn: Callable[[], object]) -> None:
        """Register a callback to run once the loop ends; ignored after ``start``."""
        if self._thread is not None:
            return
        self._after.append(fn)

    def reason(self) -> StopReason | None:
        """Return why the loop ended, or None while it has not."""
        return self._reason