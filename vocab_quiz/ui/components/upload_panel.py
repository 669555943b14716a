"""Component shown until a vocabulary dataset has been loaded."""

from __future__ import annotations

from PySide6.QtCore import Qt
from PySide6.QtWidgets import QLabel, QPushButton, QVBoxLayout, QWidget

from vocab_quiz.constants.ui_constants import UPLOAD_BUTTON_TEXT, UPLOAD_PROMPT
from vocab_quiz.styling.styles import Styles


class UploadPanel(QWidget):
    """Landing page asking for a JSON dataset."""

    def __init__(self, on_select_file: callable, parent: QWidget | None = None) -> None:
        super().__init__(parent)
        self.on_select_file = on_select_file
        self._build_ui()

    def _build_ui(self) -> None:
        layout = QVBoxLayout()
        self.setLayout(layout)
        layout.addStretch()

        self.prompt_label = QLabel(UPLOAD_PROMPT, self)
        self.prompt_label.setAlignment(Qt.AlignCenter)
        self.prompt_label.setStyleSheet(Styles.get_large_label_style())
        layout.addWidget(self.prompt_label)

        self.select_button = QPushButton(UPLOAD_BUTTON_TEXT, self)
        self.select_button.clicked.connect(self.on_select_file)
        layout.addWidget(self.select_button, alignment=Qt.AlignCenter)

        layout.addStretch()
