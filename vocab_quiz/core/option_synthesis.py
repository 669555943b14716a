"""Display-option generation for vocabulary questions."""

from __future__ import annotations

import random
from typing import Sequence

from vocab_quiz.constants.quiz_constants import DISTRACTOR_COUNT
from vocab_quiz.core.models import Question


def pick_distractors(
    question: Question,
    questions: Sequence[Question],
    rng: random.Random,
    count: int = DISTRACTOR_COUNT,
) -> list[str]:
    """Sample up to ``count`` words of other questions, without replacement.

    Only words that actually exist in ``questions`` are returned, so a short
    dataset yields fewer distractors rather than placeholder text.
    """
    candidates: list[str] = []
    seen = {question.word}
    for other in questions:
        if other.word in seen:
            continue
        seen.add(other.word)
        candidates.append(other.word)

    if len(candidates) <= count:
        return candidates
    return rng.sample(candidates, count)


def build_display_options(
    question: Question,
    questions: Sequence[Question],
    rng: random.Random,
) -> tuple[str, ...]:
    """Return the shuffled option order for ``question``.

    Native options are shuffled as-is. An empty option list is replaced by
    the correct word plus distractors drawn from the rest of the quiz.
    """
    if question.options:
        options = list(question.options)
    else:
        options = [question.word, *pick_distractors(question, questions, rng)]
    rng.shuffle(options)
    return tuple(options)
