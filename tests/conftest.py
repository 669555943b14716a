import random

import pytest

from vocab_quiz.core.models import Question
from vocab_quiz.core.services.manual_scheduler import ManualScheduler
from vocab_quiz.core.session_engine import SessionEngine


def make_question(word: str, options: tuple[str, ...] = ()) -> Question:
    return Question(
        word=word,
        meaning=f"meaning of {word}",
        example=f"An example with {word} in it.",
        question=f"Which word means '{word}'?",
        options=options,
    )


@pytest.fixture
def scheduler() -> ManualScheduler:
    return ManualScheduler()


@pytest.fixture
def engine(scheduler: ManualScheduler) -> SessionEngine:
    return SessionEngine(scheduler, rng=random.Random(1234))


@pytest.fixture
def snapshots(engine: SessionEngine) -> list:
    received = []
    engine.subscribe(received.append)
    return received


@pytest.fixture
def cat_dog() -> list[Question]:
    return [
        make_question("cat", ("cat", "dog", "cow", "fish")),
        make_question("dog", ("dog", "cat", "cow", "fish")),
    ]
