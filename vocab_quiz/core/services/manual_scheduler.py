"""Virtual-clock scheduler backend for tests and headless drivers."""

from __future__ import annotations

from dataclasses import dataclass, field
from itertools import count
from typing import Callable


@dataclass(slots=True)
class ManualTask:
    """Callback registered on a :class:`ManualScheduler`."""

    due_ms: int
    callback: Callable[[], None]
    interval_ms: int | None = None
    sequence: int = 0
    cancelled: bool = field(default=False)

    def cancel(self) -> None:
        self.cancelled = True


class ManualScheduler:
    """Scheduler whose time only moves when :meth:`advance` is called.

    Tasks fire in due-time order (ties in registration order). A periodic
    task is re-armed after each run unless it was cancelled during it.
    """

    def __init__(self) -> None:
        self._now_ms: int = 0
        self._tasks: list[ManualTask] = []
        self._sequence = count()

    @property
    def now_ms(self) -> int:
        return self._now_ms

    def call_later(self, delay_ms: int, callback: Callable[[], None]) -> ManualTask:
        return self._register(delay_ms, callback, interval_ms=None)

    def call_every(self, interval_ms: int, callback: Callable[[], None]) -> ManualTask:
        if interval_ms <= 0:
            raise ValueError("Interval must be a positive number of milliseconds.")
        return self._register(interval_ms, callback, interval_ms=interval_ms)

    def pending_count(self) -> int:
        return sum(1 for task in self._tasks if not task.cancelled)

    def advance(self, duration_ms: int) -> None:
        """Move the clock forward, running every callback that becomes due."""
        if duration_ms < 0:
            raise ValueError("Cannot move the clock backwards.")
        target = self._now_ms + duration_ms
        while True:
            task = self._next_due(target)
            if task is None:
                break
            self._now_ms = task.due_ms
            if task.interval_ms is None:
                task.cancelled = True
            else:
                task.due_ms += task.interval_ms
            task.callback()
        self._now_ms = target
        self._tasks = [task for task in self._tasks if not task.cancelled]

    def _register(
        self, delay_ms: int, callback: Callable[[], None], interval_ms: int | None
    ) -> ManualTask:
        task = ManualTask(
            due_ms=self._now_ms + max(0, delay_ms),
            callback=callback,
            interval_ms=interval_ms,
            sequence=next(self._sequence),
        )
        self._tasks.append(task)
        return task

    def _next_due(self, target_ms: int) -> ManualTask | None:
        due = [task for task in self._tasks if not task.cancelled and task.due_ms <= target_ms]
        if not due:
            return None
        return min(due, key=lambda task: (task.due_ms, task.sequence))
