"""Markdown rendering helpers for prompts and reveal text.

Architecture note:
    Dataset text is treated as Markdown so word lists can carry light
    emphasis (italic glosses, bold collocations) without a custom markup.
    Raw HTML in the source is disabled; the Qt side displays the result as
    rich text in a QTextBrowser, which understands the subset markdown-it
    emits for commonmark.
"""

from __future__ import annotations

from dataclasses import dataclass, field

from markdown_it import MarkdownIt


@dataclass(slots=True)
class MarkdownRenderer:
    """Converts markdown into HTML fragments or small standalone documents."""

    enable_html: bool = False
    _markdown: MarkdownIt = field(init=False, repr=False)

    def __post_init__(self) -> None:
        self._markdown = (
            MarkdownIt("commonmark", {"html": self.enable_html})
            .enable("strikethrough")
        )

    def render_fragment(self, markdown_text: str) -> str:
        """Render a markdown string into an HTML fragment."""

        sanitized = markdown_text.strip()
        if not sanitized:
            return "<p><em>No content provided.</em></p>"
        return self._markdown.render(sanitized)

    def render_document(self, markdown_text: str, font_size: int = 14) -> str:
        """Wrap a rendered fragment in a minimal document with a base font size."""

        fragment = self.render_fragment(markdown_text)
        return (
            "<html><body>"
            f"<div style=\"font-size: {font_size}pt;\">{fragment}</div>"
            "</body></html>"
        )


renderer = MarkdownRenderer()
