"""Qt UI constants used across widgets."""

WINDOW_TITLE: str = "Vocabulary Quiz"
DEFAULT_GAME_FONT_SIZE: int = 14

UPLOAD_PROMPT: str = "Upload JSON Dataset"
UPLOAD_BUTTON_TEXT: str = "Select dataset file"
IMPORT_DIALOG_TITLE: str = "Select vocabulary dataset"
IMPORT_FILE_FILTER: str = "Vocabulary datasets (*.json);;All files (*.*)"

LOAD_BUTTON_TEXT: str = "Load Dataset"
SETTINGS_BUTTON_TEXT: str = "Settings"
ABOUT_BUTTON_TEXT: str = "About"
HELP_BUTTON_TEXT: str = "Help"
PAUSE_BUTTON_TEXT: str = "Pause"
RESUME_BUTTON_TEXT: str = "Play"
SKIP_BUTTON_TEXT: str = "Skip"
SPEED_BUTTON_TEMPLATE: str = "{seconds}sec"
PROGRESS_TEMPLATE: str = "{current}/{total}"

VERDICT_CORRECT: str = "Correct!"
VERDICT_INCORRECT: str = "Incorrect!"

QUIZ_COMPLETE_TITLE: str = "Quiz Completed!"
SCORE_TEMPLATE: str = "Your score: {score} out of {total}"
RESTART_BUTTON_TEXT: str = "Restart Quiz"
