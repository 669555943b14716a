"""State machine driving a timed vocabulary quiz session."""

from __future__ import annotations

from collections import deque
from dataclasses import dataclass, field
from fractions import Fraction
import logging
import random
from threading import RLock
from typing import Callable, Sequence

from vocab_quiz.constants.quiz_constants import (
    COUNTDOWN_UNITS,
    DEFAULT_SPEED_LEVEL,
    SPEED_LEVELS,
)
from vocab_quiz.core.models import (
    AnswerRecord,
    Question,
    SessionPhase,
    SessionSnapshot,
)
from vocab_quiz.core.option_synthesis import build_display_options
from vocab_quiz.core.services.countdown_scheduler import CountdownScheduler, Scheduler

logger = logging.getLogger(__name__)

SnapshotListener = Callable[[SessionSnapshot], None]


@dataclass(slots=True)
class _SessionState:
    """Mutable session aggregate, only ever touched under the engine lock."""

    questions: tuple[Question, ...] = ()
    loaded: bool = False
    current_index: int = 0
    answer_records: list[AnswerRecord] = field(default_factory=list)
    score: int = 0
    selected_answer: str | None = None
    is_correct: bool | None = None
    display_options: tuple[str, ...] = ()
    is_paused: bool = False
    speed_level: int = DEFAULT_SPEED_LEVEL
    completed: bool = False
    remaining: Fraction = field(default_factory=lambda: Fraction(COUNTDOWN_UNITS))
    tick_progress_ms: int = 0

    @property
    def phase(self) -> SessionPhase:
        if not self.loaded:
            return SessionPhase.NO_QUESTION
        if self.completed:
            return SessionPhase.COMPLETED
        if self.selected_answer is None:
            return SessionPhase.ANSWERING
        return SessionPhase.REVEALING

    @property
    def current_question(self) -> Question | None:
        if 0 <= self.current_index < len(self.questions):
            return self.questions[self.current_index]
        return None


class SessionEngine:
    """Owns quiz progression, countdown timing and answer evaluation.

    Every public operation is one atomic transition. Time-driven transitions
    (answering timeout, reveal expiry) arrive through the scheduler backend
    and take the same lock as user intents, so they never interleave.
    Subscribers receive an immutable :class:`SessionSnapshot` after each
    transition and must not reach into the engine to mutate it.

    Operations called in a phase where they make no sense (answering twice,
    advancing a finished quiz, anything before ``load``) are ignored and
    logged; they never raise.
    """

    def __init__(self, scheduler: Scheduler, rng: random.Random | None = None) -> None:
        self._lock = RLock()
        self._rng = rng or random.Random()
        self._shuffle_seed: int | None = None
        self._countdown = CountdownScheduler(scheduler)
        self._listeners: list[SnapshotListener] = []
        self._state = _SessionState()
        self._pending_snapshots: deque[SessionSnapshot] = deque()
        self._delivering = False

    # --- Subscribers ---

    def subscribe(self, listener: SnapshotListener) -> None:
        with self._lock:
            if listener not in self._listeners:
                self._listeners.append(listener)

    def unsubscribe(self, listener: SnapshotListener) -> None:
        with self._lock:
            if listener in self._listeners:
                self._listeners.remove(listener)

    def snapshot(self) -> SessionSnapshot:
        with self._lock:
            return self._build_snapshot()

    # --- User intents ---

    def load(self, questions: Sequence[Question]) -> None:
        """Replace the session with a fresh one over ``questions``."""
        with self._lock:
            self._countdown.cancel_all()
            self._reseed()
            self._state = _SessionState(questions=tuple(questions), loaded=True)
            logger.info("Loaded quiz with %d questions", len(self._state.questions))
            self._begin_quiz()
            self._publish()

    def reset(self) -> None:
        """Restart the loaded quiz from the first question."""
        with self._lock:
            if not self._state.loaded:
                logger.debug("Ignoring reset: no quiz loaded")
                return
            self._countdown.cancel_all()
            self._reseed()
            self._state = _SessionState(questions=self._state.questions, loaded=True)
            logger.info("Quiz reset")
            self._begin_quiz()
            self._publish()

    def select_answer(self, value: str) -> bool:
        """Submit ``value`` for the current question. Returns False when ignored."""
        with self._lock:
            if not self._accepts_answer():
                logger.debug("Ignoring answer %r in phase %s", value, self._state.phase.name)
                return False
            self._apply_answer(value, timed_out=False)
            self._publish()
            return True

    def advance(self) -> bool:
        """Move past the current question, or finish the quiz on the last one."""
        with self._lock:
            if not self._advance():
                return False
            self._publish()
            return True

    def toggle_pause(self) -> bool:
        """Flip the pause flag and return the new value."""
        with self._lock:
            state = self._state
            if not state.is_paused and state.phase is SessionPhase.ANSWERING:
                state.tick_progress_ms = self._countdown.elapsed_in_tick()
            state.is_paused = not state.is_paused
            logger.debug("Pause %s", "on" if state.is_paused else "off")
            self._schedule_current_phase()
            self._publish()
            return state.is_paused

    def set_speed_level(self, level: int) -> bool:
        with self._lock:
            if level not in SPEED_LEVELS:
                logger.warning("Ignoring unsupported speed level %r", level)
                return False
            self._state.speed_level = level
            self._publish()
            return True

    def cycle_speed_level(self) -> int:
        """Advance the speed level 1 -> 2 -> 3 -> 1 and return the new level."""
        with self._lock:
            level = self._state.speed_level % len(SPEED_LEVELS) + 1
            self.set_speed_level(level)
            return level

    def set_shuffle_seed(self, seed: int | None) -> None:
        """Fix the option shuffle for every later load and reset; None unfixes it."""
        with self._lock:
            self._shuffle_seed = seed
            self._rng.seed(seed)

    def shutdown(self) -> None:
        """Cancel all scheduled work; the engine stays readable."""
        with self._lock:
            self._countdown.cancel_all()

    # --- Timer callbacks ---

    def _on_tick(self) -> None:
        with self._lock:
            state = self._state
            question = state.current_question
            if state.phase is not SessionPhase.ANSWERING or state.is_paused or question is None:
                return
            decrement = Fraction(self._countdown.tick_interval_ms, state.speed_level)
            state.remaining = max(Fraction(0), state.remaining - decrement)
            if state.remaining == 0:
                logger.debug("Question %d timed out", state.current_index)
                self._apply_answer(question.word, timed_out=True)
            self._publish()

    def _on_reveal_expired(self) -> None:
        with self._lock:
            if self._state.phase is not SessionPhase.REVEALING or self._state.is_paused:
                return
            if self._advance():
                self._publish()

    # --- Internals ---

    def _begin_quiz(self) -> None:
        state = self._state
        if not state.questions:
            state.completed = True
            logger.info("Quiz has no questions; marking it completed")
            return
        self._activate_question(0)

    def _activate_question(self, index: int) -> None:
        state = self._state
        state.current_index = index
        state.selected_answer = None
        state.is_correct = None
        state.remaining = Fraction(COUNTDOWN_UNITS)
        state.tick_progress_ms = 0
        question = state.questions[index]
        state.display_options = build_display_options(question, state.questions, self._rng)
        self._schedule_current_phase()

    def _accepts_answer(self) -> bool:
        state = self._state
        return (
            state.phase is SessionPhase.ANSWERING
            and state.selected_answer is None
            and state.current_question is not None
        )

    def _apply_answer(self, value: str, timed_out: bool) -> None:
        state = self._state
        question = state.current_question
        if question is None:
            logger.debug("Ignoring answer %r: no current question", value)
            return
        is_correct = value == question.word
        state.selected_answer = value
        state.is_correct = is_correct
        state.answer_records.append(
            AnswerRecord(
                question_index=state.current_index,
                word=question.word,
                answer=value,
                is_correct=is_correct,
                timed_out=timed_out,
            )
        )
        if is_correct:
            state.score += 1
        self._schedule_current_phase()

    def _advance(self) -> bool:
        state = self._state
        if not state.loaded or state.completed:
            logger.debug("Ignoring advance in phase %s", state.phase.name)
            return False
        if state.current_index >= len(state.questions) - 1:
            state.completed = True
            self._countdown.cancel_all()
            logger.info(
                "Quiz completed: %d of %d correct", state.score, len(state.questions)
            )
        else:
            self._activate_question(state.current_index + 1)
        return True

    def _schedule_current_phase(self) -> None:
        state = self._state
        phase = state.phase
        if state.is_paused or phase in (SessionPhase.NO_QUESTION, SessionPhase.COMPLETED):
            self._countdown.cancel_all()
        elif phase is SessionPhase.ANSWERING:
            self._countdown.start_answering(self._on_tick, elapsed_ms=state.tick_progress_ms)
            state.tick_progress_ms = 0
        else:
            self._countdown.start_reveal(self._on_reveal_expired)

    def _reseed(self) -> None:
        if self._shuffle_seed is not None:
            self._rng.seed(self._shuffle_seed)

    def _build_snapshot(self) -> SessionSnapshot:
        state = self._state
        return SessionSnapshot(
            phase=state.phase,
            questions=state.questions,
            current_index=state.current_index,
            answer_records=tuple(state.answer_records),
            score=state.score,
            selected_answer=state.selected_answer,
            is_correct=state.is_correct,
            display_options=state.display_options,
            is_paused=state.is_paused,
            speed_level=state.speed_level,
            completed=state.completed,
            revealing=state.phase is SessionPhase.REVEALING,
            remaining_time=float(state.remaining),
            countdown_units=COUNTDOWN_UNITS,
        )

    def _publish(self) -> None:
        # Snapshots published from inside a listener are queued, so every
        # listener sees the transitions in the order they happened.
        self._pending_snapshots.append(self._build_snapshot())
        if self._delivering:
            return
        self._delivering = True
        try:
            while self._pending_snapshots:
                snapshot = self._pending_snapshots.popleft()
                for listener in list(self._listeners):
                    listener(snapshot)
        finally:
            self._pending_snapshots.clear()
            self._delivering = False
