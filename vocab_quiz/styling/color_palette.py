"""Color palette for the vocabulary quiz supporting light and dark themes."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, auto


class Theme(Enum):
    """Application theme options."""
    LIGHT = auto()
    DARK = auto()


@dataclass(frozen=True)
class ThemeColors:
    """Color definitions for a specific theme."""
    light: str
    dark: str

    def get(self, theme: Theme) -> str:
        """Get color value for the specified theme."""
        return self.light if theme == Theme.LIGHT else self.dark


class ColorPalette:
    """Centralized color definitions for the application."""

    TEXT_PRIMARY = ThemeColors(light="#1F2937", dark="#F5F5F5")
    TEXT_ON_ACCENT = ThemeColors(light="#FFFFFF", dark="#FFFFFF")

    BACKGROUND_PRIMARY = ThemeColors(light="#FFFFFF", dark="#1E1E1E")
    BACKGROUND_SECONDARY = ThemeColors(light="#F3F4F6", dark="#2D2D2D")
    BORDER_PRIMARY = ThemeColors(light="#D1D5DB", dark="#555555")

    # Countdown bar
    PROGRESS_TRACK = ThemeColors(light="#E5E7EB", dark="#3A3A3A")
    PROGRESS_FILL = ThemeColors(light="#2563EB", dark="#4A9EFF")

    # Speed button, one color per level
    SPEED_LEVEL_1 = ThemeColors(light="#EF4444", dark="#FF6B6B")
    SPEED_LEVEL_2 = ThemeColors(light="#EAB308", dark="#FFC83D")
    SPEED_LEVEL_3 = ThemeColors(light="#3B82F6", dark="#4A9EFF")

    # Option buttons
    OPTION_IDLE_BG = ThemeColors(light="#DBEAFE", dark="#1E3A5F")
    OPTION_IDLE_HOVER_BG = ThemeColors(light="#BFDBFE", dark="#27496F")
    OPTION_IDLE_TEXT = ThemeColors(light="#1E40AF", dark="#BFDBFE")
    OPTION_CORRECT_BG = ThemeColors(light="#BBF7D0", dark="#14532D")
    OPTION_CORRECT_TEXT = ThemeColors(light="#166534", dark="#BBF7D0")
    OPTION_WRONG_BG = ThemeColors(light="#FECACA", dark="#7F1D1D")
    OPTION_WRONG_TEXT = ThemeColors(light="#991B1B", dark="#FECACA")
    OPTION_NEUTRAL_BG = ThemeColors(light="#F3F4F6", dark="#2D2D2D")
    OPTION_NEUTRAL_TEXT = ThemeColors(light="#1F2937", dark="#D1D5DB")

    # Reveal box
    REVEAL_CORRECT_BG = ThemeColors(light="#DCFCE7", dark="#14532D")
    REVEAL_WRONG_BG = ThemeColors(light="#FEE2E2", dark="#7F1D1D")
