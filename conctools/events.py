"""Synchronisation built on condition variables: a reusable barrier,
a guess-the-average game and an unbounded blocking queue."""

from __future__ import annotations

import threading
from collections import deque
from dataclasses import dataclass
from math import fsum
from typing import Any


class CyclicBarrier:
    """A barrier that releases waiting threads in batches of ``n``.

    Once ``n`` threads have touched it, all of them are released and the
    barrier starts counting the next batch.
    """

    def __init__(self, n: int) -> None:
        if n < 1:
            raise ValueError("barrier size must be at least 1")
        self._n = n
        self._count = 0
        self._generation = 0
        self._cond = threading.Condition()

    def touch(self) -> None:
        """Register arrival and block until the current batch is complete."""
        with self._cond:
            generation = self._generation
            self._count += 1
            if self._count == self._n:
                self._count = 0
                self._generation += 1
                self._cond.notify_all()
                return
            self._cond.wait_for(lambda: self._generation != generation)


@dataclass(frozen=True)
class Stake:
    """A player's guess."""

    player: str
    num: float


def _decide_winner(stakes: list[Stake]) -> Stake | None:
    if not stakes:
        return None
    avg = fsum(stake.num for stake in stakes) / len(stakes)
    # min() keeps the earliest stake among equally close ones.
    return min(stakes, key=lambda stake: abs(stake.num - avg))


class Game:
    """A game in which the guess closest to the average of all guesses wins."""

    def __init__(self, n_players: int) -> None:
        if n_players < 0:
            raise ValueError("number of players must not be negative")
        self._capacity = n_players
        self._stakes: list[Stake] = []
        self._lock = threading.Lock()
        self._finished = False
        self._winner: Stake | None = None

    def play(self, player: str, num: float) -> None:
        """Accept a stake; it is silently dropped when the game is full."""
        with self._lock:
            if len(self._stakes) < self._capacity:
                self._stakes.append(Stake(player, num))

    def finish(self) -> Stake | None:
        """Decide the winner once and return it on every call.

        Returns None when nobody has played.
        """
        with self._lock:
            if not self._finished:
                self._finished = True
                stakes, self._stakes = self._stakes, []
                self._winner = _decide_winner(stakes)
            return self._winner


class BlockingQueue:
    """An unbounded FIFO queue whose ``get`` waits for an item."""

    def __init__(self) -> None:
        self._items: deque[Any] = deque()
        self._cond = threading.Condition()

    def put(self, item: Any) -> None:
        """Append an item; never blocks."""
        with self._cond:
            self._items.append(item)
            self._cond.notify()

    def get(self) -> Any:
        """Remove and return the oldest item, waiting until one exists."""
        with self._cond:
            self._cond.wait_for(lambda: bool(self._items))
            return self._items.popleft()

    def __len__(self) -> int:
        with self._cond:
            return len(self._items)