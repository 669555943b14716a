"""Utilities for importing vocabulary datasets from JSON files.

File format:

    {
      "vocabulary": [
        {
          "word": "cat",
          "meaning": "a small domesticated feline",
          "example": "The cat slept on the sofa.",
          "question": "Which animal purrs?",
          "options": ["cat", "dog", "cow", "fish"]
        }
      ]
    }

``options`` may be omitted or left empty; the session engine then draws
distractors from the other words of the dataset. When present, the list
must contain ``word`` exactly once.
"""

from __future__ import annotations

from dataclasses import dataclass
import logging
from pathlib import Path

from pydantic import BaseModel, ValidationError, model_validator

from vocab_quiz.core.models import Question

logger = logging.getLogger(__name__)


class DatasetImportError(Exception):
    """Raised when a vocabulary dataset cannot be parsed."""


class VocabularyEntry(BaseModel):
    word: str
    meaning: str
    example: str
    question: str
    options: list[str] = []

    @model_validator(mode="after")
    def _check_options(self) -> "VocabularyEntry":
        if not self.word.strip():
            raise ValueError("word must not be empty")
        if self.options and self.options.count(self.word) != 1:
            raise ValueError(f"options must contain the word '{self.word}' exactly once")
        return self

    def to_question(self) -> Question:
        return Question(
            word=self.word,
            meaning=self.meaning,
            example=self.example,
            question=self.question,
            options=tuple(self.options),
        )


class VocabularyDataset(BaseModel):
    vocabulary: list[VocabularyEntry]


@dataclass(slots=True)
class ImportedDataset:
    """Container for an imported dataset and where it came from."""

    source_path: Path
    questions: list[Question]


def load_dataset_from_file(file_path: Path) -> ImportedDataset:
    text = file_path.read_text(encoding="utf-8")
    questions = parse_dataset_text(text)
    logger.info("Imported %d questions from %s", len(questions), file_path)
    return ImportedDataset(source_path=file_path, questions=questions)


def parse_dataset_text(text: str) -> list[Question]:
    try:
        dataset = VocabularyDataset.model_validate_json(text)
    except ValidationError as exc:
        logger.warning("Rejected vocabulary dataset: %s", exc)
        raise DatasetImportError(_describe_validation_error(exc)) from exc
    return [entry.to_question() for entry in dataset.vocabulary]


def _describe_validation_error(exc: ValidationError) -> str:
    errors = exc.errors()
    if any(error["type"] == "json_invalid" for error in errors):
        return "Dataset file is not valid JSON."
    lines = []
    for error in errors[:5]:
        location = ".".join(str(part) for part in error["loc"]) or "document"
        lines.append(f"{location}: {error['msg']}")
    if len(errors) > 5:
        lines.append(f"... and {len(errors) - 5} more problem(s)")
    return "Dataset is malformed:\n" + "\n".join(lines)
