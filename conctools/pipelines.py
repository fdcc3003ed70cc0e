"""Stream pipelines: counting, taking, filtering, reversing and merging."""

from __future__ import annotations

import queue
import random
import threading
import time
from collections.abc import Iterable, Iterator

_LETTERS = "aeiourtnsl"
_POLL = 0.05


def _cancelled(cancel: threading.Event | None) -> bool:
    return cancel is not None and cancel.is_set()


def count_digits(word: str) -> int:
    """Return how many decimal digits ``word`` contains."""
    return sum(1 for ch in word if ch.isdecimal())


def word_generator(phrase: str) -> Iterator[str]:
    """Yield the whitespace-separated words of ``phrase`` one by one."""
    yield from phrase.split()


def count_digits_in_words(
    words: Iterable[str], cancel: threading.Event | None = None
) -> dict[str, int]:
    """Map every word to its number of digits, stopping early on ``cancel``."""
    stats: dict[str, int] = {}
    for word in words:
        if _cancelled(cancel):
            break
        stats[word] = count_digits(word)
    return stats


def count(start: int = 0, cancel: threading.Event | None = None) -> Iterator[int]:
    """Yield ``start``, ``start + 1``, ... until ``cancel`` is set."""
    value = start
    while not _cancelled(cancel):
        yield value
        value += 1


def take(
    stream: Iterable, n: int, cancel: threading.Event | None = None
) -> Iterator:
    """Yield at most the first ``n`` items of ``stream``."""
    if n <= 0:
        return
    taken = 0
    for item in stream:
        if _cancelled(cancel):
            return
        yield item
        taken += 1
        if taken >= n:
            return


def random_word(n: int, rng: random.Random | None = None) -> str:
    """Return a random word of ``n`` letters from a small alphabet."""
    chooser = rng if rng is not None else random
    return "".join(chooser.choice(_LETTERS) for _ in range(n))


def generate_words(
    cancel: threading.Event | None = None, rng: random.Random | None = None
) -> Iterator[str]:
    """Yield random five-letter words until ``cancel`` is set."""
    while not _cancelled(cancel):
        yield random_word(5, rng)


def take_unique(
    stream: Iterable[str], cancel: threading.Event | None = None
) -> Iterator[str]:
    """Yield only the words in which no letter repeats."""
    for word in stream:
        if _cancelled(cancel):
            return
        if len(set(word)) == len(word):
            yield word


def reverse(
    stream: Iterable[str], cancel: threading.Event | None = None
) -> Iterator[str]:
    """Yield every word of ``stream`` spelled backwards."""
    for word in stream:
        if _cancelled(cancel):
            return
        yield word[::-1]


class _Done:
    pass


class _Failed:
    def __init__(self, error: BaseException) -> None:
        self.error = error


def merge(*args: Iterable) -> Iterator:
    """Yield items from all given iterables as each produces them.

    Every source is read on its own thread, so a slow source does not hold
    up the others. An exception raised by a source is raised again here.
    Closing the returned generator stops reading the sources.
    """
    if not args:
        return
    channel: queue.Queue = queue.Queue(maxsize=1)
    stop = threading.Event()

    def send(item: object) -> bool:
        while not stop.is_set():
            try:
                channel.put(item, timeout=_POLL)
                return True
            except queue.Full:
                continue
        return False

    def pump(source: Iterable) -> None:
        try:
            for item in source:
                if not send(item):
                    return
        except BaseException as exc:  # handed to the consumer
            send(_Failed(exc))
            return
        send(_Done())

    for source in args:
        threading.Thread(target=pump, args=(source,), daemon=True).start()

    remaining = len(args)
    try:
        while remaining:
            item = channel.get()
            if isinstance(item, _Done):
                remaining -= 1
            elif isinstance(item, _Failed):
                raise item.error
            else:
                yield item
    finally:
        stop.set()


def range_gen(start: int, stop: int, delay: float = 0.05) -> Iterator[int]:
    """Yield ``start`` up to ``stop - 1``, pausing ``delay`` seconds before each."""
    for value in range(start, stop):
        if delay > 0:
            time.sleep(delay)
        yield value


def show_reversed(
    stream: Iterable[str], n: int, cancel: threading.Event | None = None
) -> list[str]:
    """Print the first ``n`` words as ``word -> reversed`` and return the lines."""
    lines = []
    for word in take(stream, n, cancel):
        line = f"{word} -> {word[::-1]}"
        print(line)
        lines.append(line)
    return lines