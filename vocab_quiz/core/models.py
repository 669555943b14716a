"""Domain models for the vocabulary quiz."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, auto


@dataclass(frozen=True, slots=True)
class Question:
    """Vocabulary question whose correct answer is ``word``.

    ``options`` may be empty, in which case distractors are synthesized from
    the other loaded words when the question becomes active.
    """

    word: str
    meaning: str
    example: str
    question: str
    options: tuple[str, ...] = ()


class SessionPhase(Enum):
    """Which part of the quiz flow the session is in."""

    NO_QUESTION = auto()
    ANSWERING = auto()
    REVEALING = auto()
    COMPLETED = auto()


@dataclass(frozen=True, slots=True)
class AnswerRecord:
    """One submitted (or auto-submitted) answer."""

    question_index: int
    word: str
    answer: str
    is_correct: bool
    timed_out: bool = False


@dataclass(frozen=True, slots=True)
class SessionSnapshot:
    """Immutable view of the session handed to renderers after each transition."""

    phase: SessionPhase
    questions: tuple[Question, ...]
    current_index: int
    answer_records: tuple[AnswerRecord, ...]
    score: int
    selected_answer: str | None
    is_correct: bool | None
    display_options: tuple[str, ...]
    is_paused: bool
    speed_level: int
    completed: bool
    revealing: bool
    remaining_time: float
    countdown_units: int

    @property
    def total_questions(self) -> int:
        return len(self.questions)

    @property
    def current_question(self) -> Question | None:
        if 0 <= self.current_index < len(self.questions):
            return self.questions[self.current_index]
        return None

    @property
    def answers(self) -> tuple[str, ...]:
        return tuple(record.answer for record in self.answer_records)

    @property
    def answer_duration_ms(self) -> int:
        """Wall-clock length of a full answering phase at the current speed."""
        return self.speed_level * self.countdown_units

    @property
    def countdown_fraction(self) -> float:
        if self.countdown_units <= 0:
            return 0.0
        return max(0.0, min(1.0, self.remaining_time / self.countdown_units))
