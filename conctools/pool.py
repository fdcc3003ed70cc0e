"""Running handlers on a fixed pool of worker ids, or one thread each."""

from __future__ import annotations

import queue
import random
import threading
import time
from collections.abc import Callable, Iterable

Handler = Callable[[int, str], object]


def say(worker_id: int, phrase: str, max_delay_ms: int = 100) -> None:
    """Print the phrase word by word on behalf of a worker, pausing randomly."""
    for word in phrase.split():
        print(f"Worker #{worker_id} says: {word}...")
        if max_delay_ms > 0:
            time.sleep(random.randrange(max_delay_ms) / 1000)


def make_pool(
    n: int, handler: Handler
) -> tuple[Callable[[str], None], Callable[[], None]]:
    """Create a pool of ``n`` workers.

    Returns ``(handle, wait)``: ``handle(item)`` waits for a free worker and
    runs ``handler(worker_id, item)`` on a new thread; ``wait()`` blocks
    until every worker is idle.
    """
    if n < 1:
        raise ValueError("pool size must be at least 1")
    free: queue.Queue[int] = queue.Queue()
    for worker_id in range(n):
        free.put(worker_id)

    def run(worker_id: int, item: str) -> None:
        try:
            handler(worker_id, item)
        finally:
            free.put(worker_id)

    def handle(item: str) -> None:
        worker_id = free.get()
        threading.Thread(target=run, args=(worker_id, item), daemon=True).start()

    def wait() -> None:
        ids = [free.get() for _ in range(n)]
        for worker_id in ids:
            free.put(worker_id)

    return handle, wait


def run_each(phrases: Iterable[str], handler: Handler) -> None:
    """Run ``handler(index, phrase)`` for every phrase on its own thread and wait."""
    threads = [
        threading.Thread(target=handler, args=(index, phrase))
        for index, phrase in enumerate(phrases)
    ]
    for thread in threads:
        thread.start()
    for thread in threads:
        thread.join()