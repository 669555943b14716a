"""Generation-guarded timers for the answering and reveal phases."""

from __future__ import annotations

import logging
from typing import Callable, Protocol

from vocab_quiz.constants.quiz_constants import REVEAL_DURATION_MS, TICK_INTERVAL_MS

logger = logging.getLogger(__name__)


class ScheduledTask(Protocol):
    """Handle returned by a scheduler backend."""

    def cancel(self) -> None: ...


class Scheduler(Protocol):
    """Backend able to run callbacks later or periodically (QTimer, virtual clock, ...)."""

    @property
    def now_ms(self) -> int: ...

    def call_later(self, delay_ms: int, callback: Callable[[], None]) -> ScheduledTask: ...

    def call_every(self, interval_ms: int, callback: Callable[[], None]) -> ScheduledTask: ...


class CountdownScheduler:
    """Owns the tick source and the reveal timer of the current question.

    At most one phase is scheduled at a time. Every call to ``start_*`` or
    ``cancel_all`` bumps the generation, and callbacks created for an older
    generation return without doing anything, so a timer that was already
    queued by the backend cannot act on a superseded question or phase.
    """

    def __init__(
        self,
        backend: Scheduler,
        tick_interval_ms: int = TICK_INTERVAL_MS,
        reveal_duration_ms: int = REVEAL_DURATION_MS,
    ) -> None:
        self._backend = backend
        self._tick_interval_ms = tick_interval_ms
        self._reveal_duration_ms = reveal_duration_ms
        self._generation: int = 0
        self._tasks: list[ScheduledTask] = []
        self._last_tick_ms: int | None = None

    @property
    def tick_interval_ms(self) -> int:
        return self._tick_interval_ms

    def has_pending(self) -> bool:
        return bool(self._tasks)

    def elapsed_in_tick(self) -> int:
        """Milliseconds since the last tick (or phase start), below one interval."""
        if self._last_tick_ms is None:
            return 0
        elapsed = self._backend.now_ms - self._last_tick_ms
        return max(0, min(self._tick_interval_ms - 1, elapsed))

    def start_answering(self, on_tick: Callable[[], None], elapsed_ms: int = 0) -> int:
        """Cancel whatever runs and start a periodic tick source.

        ``elapsed_ms`` is the part of the current tick interval that already
        ran before a pause; the first tick then comes that much sooner.
        """
        generation = self.cancel_all()
        elapsed_ms = max(0, min(self._tick_interval_ms - 1, elapsed_ms))
        self._last_tick_ms = self._backend.now_ms - elapsed_ms

        def tick() -> None:
            self._last_tick_ms = self._backend.now_ms
            on_tick()

        guarded_tick = self._guard(generation, tick)
        if elapsed_ms == 0:
            self._tasks.append(self._backend.call_every(self._tick_interval_ms, guarded_tick))
        else:
            def first_tick() -> None:
                guarded_tick()
                if generation == self._generation:
                    self._tasks.append(
                        self._backend.call_every(self._tick_interval_ms, guarded_tick)
                    )

            self._tasks.append(
                self._backend.call_later(
                    self._tick_interval_ms - elapsed_ms, self._guard(generation, first_tick)
                )
            )
        logger.debug("Answering ticks scheduled (generation %d)", generation)
        return generation

    def start_reveal(self, on_expire: Callable[[], None]) -> int:
        """Cancel whatever runs and start a full-length reveal timer."""
        generation = self.cancel_all()
        task = self._backend.call_later(self._reveal_duration_ms, self._guard(generation, on_expire))
        self._tasks.append(task)
        logger.debug("Reveal timer scheduled (generation %d)", generation)
        return generation

    def cancel_all(self) -> int:
        """Cancel every scheduled callback and return the new generation id."""
        for task in self._tasks:
            task.cancel()
        self._tasks = []
        self._last_tick_ms = None
        self._generation += 1
        return self._generation

    def _guard(self, generation: int, callback: Callable[[], None]) -> Callable[[], None]:
        def run() -> None:
            if generation != self._generation:
                logger.debug(
                    "Dropping stale timer callback (generation %d, current %d)",
                    generation,
                    self._generation,
                )
                return
            callback()

        return run
