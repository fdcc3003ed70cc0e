"""A toy model of a goroutine scheduler running on a fixed set of threads."""

from __future__ import annotations

import enum
from dataclasses import dataclass, field

MAX_RUN_DUR = 100


class Status(enum.Enum):
    RUNNABLE = "runnable"
    RUNNING = "running"
    WAITING = "waiting"
    DEAD = "dead"


class InvalidStatusError(RuntimeError):
    """A goroutine was asked to change state from the wrong status."""


@dataclass(eq=False)
class Goroutine:
    """A lightweight task tracked by the runtime."""

    id: int
    run_dur: int = 0
    status: Status = Status.RUNNABLE

    def _transition(self, expected: Status, new: Status, action: str) -> None:
        if self.status is not expected:
            raise InvalidStatusError(f"invalid status for {action}")
        self.status = new

    def block(self) -> None:
        self._transition(Status.RUNNING, Status.WAITING, "block")

    def unblock(self) -> None:
        self._transition(Status.WAITING, Status.RUNNABLE, "unblock")

    def done(self) -> None:
        self._transition(Status.RUNNING, Status.DEAD, "done")


@dataclass(eq=False)
class _Thread:
    id: int
    goro: Goroutine | None = None


@dataclass(frozen=True)
class RuntimeState:
    """A snapshot of the runtime, with goroutines given by id.

    ``threads`` maps each thread id to its goroutine id, or 0 when idle.
    """

    dur: int
    threads: dict[int, int] = field(default_factory=dict)
    runnable: list[int] = field(default_factory=list)
    running: list[int] = field(default_factory=list)
    waiting: list[int] = field(default_factory=list)
    dead: list[int] = field(default_factory=list)


class Runtime:
    """Schedules goroutines onto ``gomaxprocs`` threads."""

    def __init__(self, gomaxprocs: int) -> None:
        if gomaxprocs < 0:
            raise ValueError("gomaxprocs must not be negative")
        self._dur = 0
        self._n_goro = 0
        self._threads = [_Thread(i) for i in range(1, gomaxprocs + 1)]
        self._runnable: list[Goroutine] = []
        self._running: list[Goroutine] = []
        self._waiting: list[Goroutine] = []
        self._dead: list[Goroutine] = []

    def go(self) -> Goroutine:
        """Create a runnable goroutine and queue it."""
        self._n_goro += 1
        goro = Goroutine(self._n_goro)
        self._runnable.append(goro)
        return goro

    def forward(self, dur: int) -> None:
        """Advance time, charging it to every running goroutine."""
        self._dur += dur
        for thread in self._threads:
            goro = thread.goro
            if goro is not None and goro.status is Status.RUNNING:
                goro.run_dur += dur

    def schedule(self) -> None:
        """Preempt, park and retire goroutines, then fill idle threads."""
        for thread in self._threads:
            goro = thread.goro
            if goro is None:
                continue
            if goro.status is Status.RUNNING:
                if goro.run_dur >= MAX_RUN_DUR:
                    goro.run_dur = 0
                    goro.status = Status.RUNNABLE
                    self._runnable.append(goro)
                    thread.goro = None
            elif goro.status is Status.WAITING:
                self._waiting.append(goro)
                thread.goro = None
            elif goro.status is Status.DEAD:
                self._dead.append(goro)
                thread.goro = None

        still_waiting = []
        for goro in self._waiting:
            if goro.status is Status.RUNNABLE:
                self._runnable.append(goro)
            else:
                still_waiting.append(goro)
        self._waiting = still_waiting

        for thread in self._threads:
            if thread.goro is None and self._runnable:
                goro = self._runnable.pop(0)
                goro.status = Status.RUNNING
                goro.run_dur = 0
                thread.goro = goro

        self._running = [t.goro for t in self._threads if t.goro is not None]

    def state(self) -> RuntimeState:
        return RuntimeState(
            dur=self._dur,
            threads={t.id: t.goro.id if t.goro else 0 for t in self._threads},
            runnable=[g.id for g in self._runnable],
            running=[g.id for g in self._running],
            waiting=[g.id for g in self._waiting],
            dead=[g.id for g in self._dead],
        )