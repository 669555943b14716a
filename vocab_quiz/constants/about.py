"""Static metadata describing VocabQt."""

APP_NAME = "VocabQt"
APP_VERSION = "0.1"
APP_LICENSE = "MIT License"
APP_ABOUT_TEXT = (
    "VocabQt is a timed multiple-choice vocabulary quiz built with Qt. "
    "Load a JSON word list, answer against the clock and review each word's meaning and example."
)

HELP_TEXT = (
    "Load a .json file with a top-level \"vocabulary\" list. Each entry needs a word, its meaning, "
    "an example sentence and the question prompt. Options are optional: leave the list empty and "
    "distractors are drawn from the other words in the file.\n\n"
    "{\n"
    "  \"vocabulary\": [\n"
    "    {\n"
    "      \"word\": \"cat\",\n"
    "      \"meaning\": \"a small domesticated feline\",\n"
    "      \"example\": \"The cat slept on the sofa.\",\n"
    "      \"question\": \"Which animal purrs?\",\n"
    "      \"options\": [\"cat\", \"dog\", \"cow\", \"fish\"]\n"
    "    }\n"
    "  ]\n"
    "}\n\n"
    "Running out of time reveals the correct word and counts it as answered. "
    "Use the speed button to switch between 5, 10 and 15 seconds per question."
)
