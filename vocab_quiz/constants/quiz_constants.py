"""Quiz-related constants shared across UI and core layers."""

TICK_INTERVAL_MS: int = 100
COUNTDOWN_UNITS: int = 5000
SECONDS_PER_SPEED_LEVEL: int = 5
SPEED_LEVELS: tuple[int, ...] = (1, 2, 3)
DEFAULT_SPEED_LEVEL: int = 1
REVEAL_DURATION_MS: int = 5000
DISTRACTOR_COUNT: int = 3
