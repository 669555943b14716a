"""Qt main window hosting the upload, quiz and result pages."""

from __future__ import annotations

from enum import Enum, auto
import logging
from pathlib import Path

from PySide6.QtWidgets import (
    QFileDialog,
    QHBoxLayout,
    QLabel,
    QMainWindow,
    QPushButton,
    QStackedWidget,
    QVBoxLayout,
    QWidget,
)

from vocab_quiz.constants.about import APP_ABOUT_TEXT, APP_LICENSE, APP_NAME, APP_VERSION, HELP_TEXT
from vocab_quiz.constants.quiz_constants import SECONDS_PER_SPEED_LEVEL
from vocab_quiz.constants.ui_constants import (
    ABOUT_BUTTON_TEXT,
    DEFAULT_GAME_FONT_SIZE,
    HELP_BUTTON_TEXT,
    IMPORT_DIALOG_TITLE,
    IMPORT_FILE_FILTER,
    LOAD_BUTTON_TEXT,
    PAUSE_BUTTON_TEXT,
    PROGRESS_TEMPLATE,
    RESUME_BUTTON_TEXT,
    SETTINGS_BUTTON_TEXT,
    SKIP_BUTTON_TEXT,
    SPEED_BUTTON_TEMPLATE,
    WINDOW_TITLE,
)
from vocab_quiz.core.dataset_importer import DatasetImportError, load_dataset_from_file
from vocab_quiz.core.models import SessionPhase, SessionSnapshot
from vocab_quiz.core.session_engine import SessionEngine
from vocab_quiz.styling.styles import Styles
from vocab_quiz.ui.components.quiz_panel import QuizPanel
from vocab_quiz.ui.components.result_panel import ResultPanel
from vocab_quiz.ui.components.upload_panel import UploadPanel
from vocab_quiz.ui.dialog_helpers import confirm_replace_dataset, show_error, show_info
from vocab_quiz.ui.settings_dialog import SettingsDialog

logger = logging.getLogger(__name__)


class QuizPage(Enum):
    """Pages of the stacked main view."""

    UPLOAD = auto()
    QUIZ = auto()
    RESULT = auto()


class QuizMainWindow(QMainWindow):
    """Main Qt window: sends user intents to the engine and renders its snapshots."""

    def __init__(self, engine: SessionEngine) -> None:
        super().__init__()
        self.setWindowTitle(WINDOW_TITLE)
        self.resize(900, 700)

        self.engine = engine
        self._game_font_size: int = DEFAULT_GAME_FONT_SIZE
        self._shuffle_seed: int | None = None
        self._styled_speed_level: int | None = None
        self._last_import_dir: Path = Path.home()

        self._build_ui()
        self._apply_styles()
        self.engine.subscribe(self._handle_snapshot)
        self._handle_snapshot(self.engine.snapshot())

    def _build_ui(self) -> None:
        central_widget = QWidget(self)
        self.setCentralWidget(central_widget)

        root_layout = QVBoxLayout()
        central_widget.setLayout(root_layout)

        self._build_header(root_layout)

        self.page_stack = QStackedWidget(self)
        self.upload_panel = UploadPanel(on_select_file=self._handle_load_dataset, parent=self)
        self.quiz_panel = QuizPanel(on_select=self.engine.select_answer, parent=self)
        self.result_panel = ResultPanel(on_restart=self.engine.reset, parent=self)
        self.page_stack.addWidget(self.upload_panel)
        self.page_stack.addWidget(self.quiz_panel)
        self.page_stack.addWidget(self.result_panel)
        root_layout.addWidget(self.page_stack, stretch=1)

    def _build_header(self, layout: QVBoxLayout) -> None:
        header = QHBoxLayout()

        self.title_label = QLabel(WINDOW_TITLE, self)
        self.title_label.setStyleSheet(Styles.get_large_label_style())
        header.addWidget(self.title_label)
        header.addStretch()

        self.progress_label = QLabel("", self)
        header.addWidget(self.progress_label)

        self.speed_button = QPushButton("", self)
        self.speed_button.clicked.connect(self.engine.cycle_speed_level)
        header.addWidget(self.speed_button)

        self.pause_button = QPushButton(PAUSE_BUTTON_TEXT, self)
        self.pause_button.clicked.connect(self.engine.toggle_pause)
        header.addWidget(self.pause_button)

        self.skip_button = QPushButton(SKIP_BUTTON_TEXT, self)
        self.skip_button.clicked.connect(self.engine.advance)
        header.addWidget(self.skip_button)

        self.load_button = QPushButton(LOAD_BUTTON_TEXT, self)
        self.load_button.clicked.connect(self._handle_load_dataset)
        header.addWidget(self.load_button)

        self.settings_button = QPushButton(SETTINGS_BUTTON_TEXT, self)
        self.settings_button.clicked.connect(self._handle_settings)
        header.addWidget(self.settings_button)

        self.about_button = QPushButton(ABOUT_BUTTON_TEXT, self)
        self.about_button.clicked.connect(self._handle_about)
        header.addWidget(self.about_button)

        self.help_button = QPushButton(HELP_BUTTON_TEXT, self)
        self.help_button.clicked.connect(self._handle_help)
        header.addWidget(self.help_button)

        layout.addLayout(header)

    def _handle_snapshot(self, snapshot: SessionSnapshot) -> None:
        if snapshot.phase is SessionPhase.NO_QUESTION:
            self._set_page(QuizPage.UPLOAD)
        elif snapshot.phase is SessionPhase.COMPLETED:
            self.result_panel.render(snapshot)
            self._set_page(QuizPage.RESULT)
        else:
            self.quiz_panel.render(snapshot)
            self._set_page(QuizPage.QUIZ)
        self._update_header(snapshot)

    def _update_header(self, snapshot: SessionSnapshot) -> None:
        loaded = snapshot.phase is not SessionPhase.NO_QUESTION
        position = min(snapshot.current_index + 1, snapshot.total_questions)
        self.progress_label.setText(
            PROGRESS_TEMPLATE.format(current=position, total=snapshot.total_questions)
        )
        self.progress_label.setVisible(loaded)

        self.speed_button.setText(
            SPEED_BUTTON_TEMPLATE.format(seconds=snapshot.speed_level * SECONDS_PER_SPEED_LEVEL)
        )
        if snapshot.speed_level != self._styled_speed_level:
            self._styled_speed_level = snapshot.speed_level
            self.speed_button.setStyleSheet(Styles.get_speed_button_style(snapshot.speed_level))
        self.pause_button.setText(RESUME_BUTTON_TEXT if snapshot.is_paused else PAUSE_BUTTON_TEXT)

        for button in (self.speed_button, self.pause_button):
            button.setVisible(loaded)
        self.skip_button.setVisible(loaded)
        self.skip_button.setEnabled(loaded and not snapshot.completed)

    def _set_page(self, page: QuizPage) -> None:
        index_map = {
            QuizPage.UPLOAD: 0,
            QuizPage.QUIZ: 1,
            QuizPage.RESULT: 2,
        }
        self.page_stack.setCurrentIndex(index_map[page])

    def _handle_load_dataset(self) -> None:
        snapshot = self.engine.snapshot()
        in_progress = snapshot.phase in (SessionPhase.ANSWERING, SessionPhase.REVEALING)
        if in_progress and not confirm_replace_dataset(self):
            return

        file_path, _ = QFileDialog.getOpenFileName(
            self,
            IMPORT_DIALOG_TITLE,
            str(self._last_import_dir),
            IMPORT_FILE_FILTER,
        )
        if not file_path:
            return
        self.load_dataset(Path(file_path))

    def load_dataset(self, file_path: Path) -> bool:
        """Import ``file_path`` and start a quiz over it. Errors are shown, not raised."""
        try:
            imported = load_dataset_from_file(file_path)
        except (OSError, DatasetImportError) as exc:
            logger.warning("Could not import %s: %s", file_path, exc)
            show_error(self, "Import failed", str(exc))
            return False

        self._last_import_dir = file_path.parent
        self.engine.load(imported.questions)
        return True

    def _handle_settings(self) -> None:
        dialog = SettingsDialog(self, self._game_font_size, self._shuffle_seed)
        if dialog.exec():
            self._game_font_size = dialog.get_game_font_size()
            self._shuffle_seed = dialog.get_shuffle_seed()
            self.engine.set_shuffle_seed(self._shuffle_seed)
            self._apply_styles()

    def _handle_about(self) -> None:
        details = (
            f"{APP_NAME} v{APP_VERSION}\n"
            f"License: {APP_LICENSE}\n\n"
            f"{APP_ABOUT_TEXT}"
        )
        show_info(self, f"About {APP_NAME}", details)

    def _handle_help(self) -> None:
        show_info(self, f"{APP_NAME} Help", HELP_TEXT)

    def _apply_styles(self) -> None:
        self.setStyleSheet(Styles.get_main_window_style())
        self.quiz_panel.apply_font_size(self._game_font_size)
        self.result_panel.apply_font_size(self._game_font_size)

    def closeEvent(self, event) -> None:  # noqa: N802 - Qt override
        self.engine.unsubscribe(self._handle_snapshot)
        self.engine.shutdown()
        super().closeEvent(event)
