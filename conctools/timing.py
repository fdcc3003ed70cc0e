"""Timeouts, delayed and periodic calls, and a bounded queue."""

from __future__ import annotations

import queue
import threading
from collections.abc import Callable
from concurrent.futures import FIRST_COMPLETED, Future
from concurrent.futures import wait as wait_futures
from datetime import datetime
from typing import Any


def after(dur: float) -> Future:
    """Return a future that resolves to the current time after ``dur`` seconds."""
    future: Future = Future()
    timer = threading.Timer(dur, lambda: future.set_result(datetime.now()))
    timer.daemon = True
    timer.start()
    return future


def with_timeout(fn: Callable[[], Any], timeout: float) -> Any:
    """Run ``fn`` and return its result; raise TimeoutError if it takes too long."""
    done: Future = Future()

    def runner() -> None:
        try:
            result = fn()
        except BaseException as exc:
            done.set_exception(exc)
        else:
            done.set_result(result)

    threading.Thread(target=runner, daemon=True).start()
    wait_futures([done, after(timeout)], return_when=FIRST_COMPLETED)
    if done.done():
        return done.result()
    raise TimeoutError("timeout")


class QueueFull(Exception):
    """A non-blocking put found the queue full."""

    def __init__(self) -> None:
        super().__init__("Queue is full")


class QueueEmpty(Exception):
    """A non-blocking get found the queue empty."""

    def __init__(self) -> None:
        super().__init__("Queue is empty")


class BoundedQueue:
    """A FIFO queue holding at most ``n`` items."""

    def __init__(self, n: int) -> None:
        if n < 1:
            raise ValueError("queue size must be at least 1")
        self._queue: queue.Queue = queue.Queue(maxsize=n)

    def get(self, block: bool = True) -> Any:
        """Take the next item; without ``block`` raise QueueEmpty if there is none."""
        try:
            return self._queue.get(block)
        except queue.Empty:
            raise QueueEmpty() from None

    def put(self, val: Any, block: bool = True) -> None:
        """Add an item; without ``block`` raise QueueFull if there is no room."""
        try:
            self._queue.put(val, block)
        except queue.Full:
            raise QueueFull() from None


def schedule(interval: float, fn: Callable[[], object]) -> Callable[[], None]:
    """Call ``fn`` every ``interval`` seconds on a background thread.

    A tick is skipped while the previous call is still running. Returns a
    function that stops the schedule; calling it again is harmless.
    """
    stop = threading.Event()
    busy = threading.Lock()

    def run_once() -> None:
        try:
            fn()
        finally:
            busy.release()

    def loop() -> None:
        while not stop.wait(interval):
            if busy.acquire(blocking=False):
                threading.Thread(target=run_once, daemon=True).start()

    threading.Thread(target=loop, daemon=True).start()
    return stop.set


def delay(dur: float, fn: Callable[[], object]) -> Callable[[], None]:
    """Call ``fn`` once after ``dur`` seconds; return a function that cancels it."""
    timer = threading.Timer(dur, fn)
    timer.daemon = True
    timer.start()
    return timer.cancel