"""Qt UI components for the vocabulary quiz.

Widgets live in submodules and are imported explicitly, so the pure
rendering helpers in ``question_renderer`` stay importable without Qt.
"""
