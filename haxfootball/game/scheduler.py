"""Clock sources and deferred tasks.

All timed behaviour in a room (currently only the snap cooldown) reads
time from one ``Clock`` and defers work through one ``Scheduler``, so
tests can drive time with ``ManualClock.advance`` instead of sleeping.
"""

import heapq
import itertools
import logging
import time
from dataclasses import dataclass, field
from typing import Callable, Protocol

logger = logging.getLogger(__name__)


class Clock(Protocol):
    """Source of the current time in seconds."""

    def now(self) -> float: ...


class SystemClock:
    """Monotonic wall clock."""

    def now(self) -> float:
        return time.monotonic()


class ManualClock:
    """Clock that only moves when told to."""

    def __init__(self, start: float = 0.0) -> None:
        self._now = start

    def now(self) -> float:
        return self._now

    def advance(self, seconds: float) -> None:
        if seconds < 0:
            raise ValueError("Cannot move a clock backwards")
        self._now += seconds


@dataclass(order=True)
class ScheduledTask:
    """A callback due at a point in time."""

    due_at: float
    sequence: int
    callback: Callable[[], None] = field(compare=False)
    name: str = field(default="", compare=False)
    cancelled: bool = field(default=False, compare=False)

    def cancel(self) -> None:
        self.cancelled = True


class Scheduler:
    """
    Fire-and-forget task queue driven by a clock.

    Tasks never run on their own: the owner calls ``run_pending`` from
    its event loop (every chat message and engine tick), which keeps
    all state changes on the single room thread.
    """

    def __init__(self, clock: Clock) -> None:
        self.clock = clock
        self._queue: list[ScheduledTask] = []
        self._counter = itertools.count()

    def call_later(self, delay: float, callback: Callable[[], None], name: str = "") -> ScheduledTask:
        """Schedule a callback ``delay`` seconds from now."""
        task = ScheduledTask(
            due_at=self.clock.now() + max(0.0, delay),
            sequence=next(self._counter),
            callback=callback,
            name=name,
        )
        heapq.heappush(self._queue, task)
        return task

    def run_pending(self) -> int:
        """Run every task that is due, in due-time order. Returns how many ran."""
        ran = 0
        now = self.clock.now()
        while self._queue and self._queue[0].due_at <= now:
            task = heapq.heappop(self._queue)
            if task.cancelled:
                continue
            logger.debug(f"Running scheduled task {task.name or task.sequence}")
            task.callback()
            ran += 1
        return ran

    @property
    def pending_count(self) -> int:
        return sum(1 for task in self._queue if not task.cancelled)
