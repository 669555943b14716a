"""Application entry point for the vocabulary quiz."""

from __future__ import annotations

from pathlib import Path
import sys

from PySide6.QtWidgets import QApplication

from vocab_quiz.core.session_engine import SessionEngine
from vocab_quiz.ui.qt_scheduler import QtScheduler
from vocab_quiz.ui.quiz_main_window import QuizMainWindow
from vocab_quiz.utils.logging_config import configure_logging


def main() -> None:
    """Initialize logging, build the session engine and launch the Qt UI.

    An optional dataset path on the command line is loaded right away.
    """
    logger = configure_logging()
    logger.info("Starting vocabulary quiz…")

    app = QApplication(sys.argv)
    engine = SessionEngine(QtScheduler(app))
    window = QuizMainWindow(engine=engine)

    arguments = app.arguments()[1:]
    if arguments:
        dataset_path = Path(arguments[0])
        if window.load_dataset(dataset_path):
            logger.info("Loaded dataset %s", dataset_path)

    window.show()
    sys.exit(app.exec())


if __name__ == "__main__":
    main()
