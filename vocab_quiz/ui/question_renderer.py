"""Rendering utilities for quiz prompts and the post-answer reveal box."""

from __future__ import annotations

import re

from vocab_quiz.constants.ui_constants import VERDICT_CORRECT, VERDICT_INCORRECT
from vocab_quiz.core.markdown_renderer import renderer
from vocab_quiz.core.models import Question

_MARKDOWN_SPECIALS = re.compile(r"([\\`*_{}\[\]()#+\-.!|<>~])")


def escape_markdown(text: str) -> str:
    """Backslash-escape characters markdown would otherwise interpret."""
    return _MARKDOWN_SPECIALS.sub(r"\\\1", text)


def highlight_word(text: str, word: str) -> str:
    """Return ``text`` as markdown with every case-insensitive match of ``word`` in bold.

    The match keeps the casing found in ``text``; ``word`` is matched
    literally even if it contains regex metacharacters.
    """
    if not word:
        return escape_markdown(text)
    parts = re.split(f"({re.escape(word)})", text, flags=re.IGNORECASE)
    pieces = []
    for part in parts:
        if not part:
            continue
        if part.lower() == word.lower():
            pieces.append(f"**{escape_markdown(part)}**")
        else:
            pieces.append(escape_markdown(part))
    return "".join(pieces)


def render_prompt_html(question_text: str, font_size: int = 14) -> str:
    """Render the question prompt as an HTML document."""
    return renderer.render_document(question_text or "(No question text)", font_size=font_size)


def render_reveal_html(question: Question, is_correct: bool, font_size: int = 14) -> str:
    """Render verdict, correct word, meaning and highlighted example.

    Args:
        question: The question that was just answered
        is_correct: Verdict for the submitted answer
        font_size: Base font size in points

    Returns:
        HTML string ready for a QTextBrowser
    """
    verdict = VERDICT_CORRECT if is_correct else VERDICT_INCORRECT
    markdown_lines = [
        f"### {escape_markdown(verdict)}",
        f"**Answer:** {escape_markdown(question.word)}",
        f"**Meaning:** {escape_markdown(question.meaning)}",
        f"**Example:** {highlight_word(question.example, question.word)}",
    ]
    return renderer.render_document("\n\n".join(markdown_lines), font_size=font_size)


def progress_percentage(fraction: float) -> int:
    """Map a countdown fraction onto a 0-100 progress bar value."""
    return int(round(max(0.0, min(1.0, fraction)) * 100))
