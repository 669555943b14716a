"""Component for the end-of-quiz summary."""

from __future__ import annotations

from PySide6.QtWidgets import QLabel, QPushButton, QVBoxLayout, QWidget

from vocab_quiz.constants.ui_constants import (
    QUIZ_COMPLETE_TITLE,
    RESTART_BUTTON_TEXT,
    SCORE_TEMPLATE,
)
from vocab_quiz.core.models import SessionSnapshot
from vocab_quiz.styling.styles import Styles


class ResultPanel(QWidget):
    """Shows the final score and offers a restart."""

    def __init__(self, on_restart: callable, parent: QWidget | None = None) -> None:
        super().__init__(parent)
        self.on_restart = on_restart
        self._build_ui()

    def _build_ui(self) -> None:
        layout = QVBoxLayout()
        self.setLayout(layout)

        self.title_label = QLabel(QUIZ_COMPLETE_TITLE, self)
        self.title_label.setStyleSheet(Styles.get_large_label_style())
        layout.addWidget(self.title_label)

        self.score_label = QLabel("", self)
        layout.addWidget(self.score_label)

        layout.addStretch()

        self.restart_button = QPushButton(RESTART_BUTTON_TEXT, self)
        self.restart_button.clicked.connect(self.on_restart)
        layout.addWidget(self.restart_button)

    def render(self, snapshot: SessionSnapshot) -> None:
        self.score_label.setText(
            SCORE_TEMPLATE.format(score=snapshot.score, total=snapshot.total_questions)
        )

    def apply_font_size(self, font_size: int) -> None:
        self.score_label.setStyleSheet(f"font-size: {font_size}pt;")
        self.restart_button.setStyleSheet(f"font-size: {font_size}pt;")
