"""Component for answering questions against the countdown."""

from __future__ import annotations

from PySide6.QtWidgets import (
    QFrame,
    QProgressBar,
    QPushButton,
    QTextBrowser,
    QVBoxLayout,
    QWidget,
)

from vocab_quiz.core.models import SessionSnapshot
from vocab_quiz.styling.styles import Styles, option_state_for
from vocab_quiz.ui.question_renderer import (
    progress_percentage,
    render_prompt_html,
    render_reveal_html,
)


class QuizPanel(QWidget):
    """Renders the active question from engine snapshots.

    The panel never changes quiz state itself; option clicks are forwarded
    to ``on_select`` and the next snapshot decides what is shown.
    """

    def __init__(self, on_select: callable, parent: QWidget | None = None) -> None:
        super().__init__(parent)
        self.on_select = on_select
        self._game_font_size: int = 14
        self._option_buttons: list[QPushButton] = []
        self._option_key: tuple | None = None
        self._style_key: tuple | None = None
        self._last_snapshot: SessionSnapshot | None = None
        self._build_ui()

    def _build_ui(self) -> None:
        layout = QVBoxLayout()
        self.setLayout(layout)

        self.countdown_bar = QProgressBar(self)
        self.countdown_bar.setRange(0, 100)
        self.countdown_bar.setValue(100)
        self.countdown_bar.setTextVisible(False)
        layout.addWidget(self.countdown_bar)

        self.prompt_view = QTextBrowser(self)
        self.prompt_view.setFrameShape(QFrame.NoFrame)
        self.prompt_view.setMaximumHeight(120)
        layout.addWidget(self.prompt_view)

        self.options_layout = QVBoxLayout()
        layout.addLayout(self.options_layout)

        self.reveal_view = QTextBrowser(self)
        self.reveal_view.setVisible(False)
        layout.addWidget(self.reveal_view, stretch=1)

        layout.addStretch()

    def render(self, snapshot: SessionSnapshot) -> None:
        self._last_snapshot = snapshot
        question = snapshot.current_question
        if question is None:
            return

        self.countdown_bar.setValue(progress_percentage(snapshot.countdown_fraction))

        key = (id(snapshot.questions), snapshot.current_index, snapshot.display_options)
        if key != self._option_key:
            self._option_key = key
            self.prompt_view.setHtml(render_prompt_html(question.question, self._game_font_size))
            self._rebuild_option_buttons(snapshot.display_options)

        style_key = (key, snapshot.selected_answer, snapshot.is_correct, self._game_font_size)
        if style_key == self._style_key:
            return
        self._style_key = style_key

        answered = snapshot.selected_answer is not None
        for button in self._option_buttons:
            state = option_state_for(
                button.text(), snapshot.selected_answer, snapshot.is_correct, question.word
            )
            button.setStyleSheet(Styles.get_option_button_style(state, self._game_font_size))
            button.setEnabled(not answered)

        if answered and snapshot.is_correct is not None:
            self.reveal_view.setHtml(
                render_reveal_html(question, snapshot.is_correct, self._game_font_size)
            )
            self.reveal_view.setStyleSheet(Styles.get_reveal_box_style(snapshot.is_correct))
            self.reveal_view.setVisible(True)
        else:
            self.reveal_view.setVisible(False)

    def _rebuild_option_buttons(self, options: tuple[str, ...]) -> None:
        for button in self._option_buttons:
            self.options_layout.removeWidget(button)
            button.deleteLater()
        self._option_buttons = []
        for option in options:
            button = QPushButton(option, self)
            button.clicked.connect(lambda _checked=False, value=option: self.on_select(value))
            self.options_layout.addWidget(button)
            self._option_buttons.append(button)

    def apply_font_size(self, font_size: int) -> None:
        self._game_font_size = font_size
        self._option_key = None
        self._style_key = None
        if self._last_snapshot is not None:
            self.render(self._last_snapshot)
