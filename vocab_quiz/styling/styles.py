"""Centralized styles and font definitions for the application."""

from __future__ import annotations

from enum import Enum, auto

from .color_palette import ColorPalette, Theme


class OptionState(Enum):
    """How an option button should look for the current snapshot."""

    IDLE = auto()
    CHOSEN_CORRECT = auto()
    CHOSEN_WRONG = auto()
    MISSED_CORRECT = auto()
    NEUTRAL = auto()


_SPEED_COLORS = {
    1: ColorPalette.SPEED_LEVEL_1,
    2: ColorPalette.SPEED_LEVEL_2,
    3: ColorPalette.SPEED_LEVEL_3,
}


class Styles:
    """Helper class to generate Qt stylesheets based on the current theme."""

    @staticmethod
    def get_main_window_style(theme: Theme = Theme.LIGHT) -> str:
        return f"""
            QMainWindow {{
                background-color: {ColorPalette.BACKGROUND_PRIMARY.get(theme)};
                color: {ColorPalette.TEXT_PRIMARY.get(theme)};
            }}
            QWidget {{
                background-color: {ColorPalette.BACKGROUND_PRIMARY.get(theme)};
                color: {ColorPalette.TEXT_PRIMARY.get(theme)};
                font-family: 'Segoe UI', 'Roboto', sans-serif;
                font-size: 14px;
            }}
            QPushButton {{
                background-color: {ColorPalette.BACKGROUND_SECONDARY.get(theme)};
                border: 1px solid {ColorPalette.BORDER_PRIMARY.get(theme)};
                border-radius: 4px;
                padding: 6px 12px;
            }}
            QPushButton:disabled {{
                color: {ColorPalette.BORDER_PRIMARY.get(theme)};
            }}
            QProgressBar {{
                background-color: {ColorPalette.PROGRESS_TRACK.get(theme)};
                border: none;
                border-radius: 4px;
                max-height: 8px;
            }}
            QProgressBar::chunk {{
                background-color: {ColorPalette.PROGRESS_FILL.get(theme)};
                border-radius: 4px;
            }}
        """

    @staticmethod
    def get_large_label_style() -> str:
        return "font-size: 16pt; font-weight: bold;"

    @staticmethod
    def get_speed_button_style(speed_level: int, theme: Theme = Theme.LIGHT) -> str:
        color = _SPEED_COLORS.get(speed_level, ColorPalette.SPEED_LEVEL_1)
        return (
            f"background-color: {color.get(theme)};"
            f" color: {ColorPalette.TEXT_ON_ACCENT.get(theme)};"
            " border-radius: 24px; min-width: 48px; min-height: 48px; font-weight: bold;"
        )

    @staticmethod
    def get_option_button_style(
        state: OptionState, font_size: int, theme: Theme = Theme.LIGHT
    ) -> str:
        colors = {
            OptionState.IDLE: (ColorPalette.OPTION_IDLE_BG, ColorPalette.OPTION_IDLE_TEXT),
            OptionState.CHOSEN_CORRECT: (ColorPalette.OPTION_CORRECT_BG, ColorPalette.OPTION_CORRECT_TEXT),
            OptionState.MISSED_CORRECT: (ColorPalette.OPTION_CORRECT_BG, ColorPalette.OPTION_CORRECT_TEXT),
            OptionState.CHOSEN_WRONG: (ColorPalette.OPTION_WRONG_BG, ColorPalette.OPTION_WRONG_TEXT),
            OptionState.NEUTRAL: (ColorPalette.OPTION_NEUTRAL_BG, ColorPalette.OPTION_NEUTRAL_TEXT),
        }
        background, text = colors[state]
        style = (
            f"QPushButton {{ background-color: {background.get(theme)}; color: {text.get(theme)};"
            f" font-size: {font_size}pt; font-weight: 600; padding: 12px; border-radius: 8px; }}"
        )
        if state is OptionState.IDLE:
            style += (
                f" QPushButton:hover {{ background-color: {ColorPalette.OPTION_IDLE_HOVER_BG.get(theme)}; }}"
            )
        return style

    @staticmethod
    def get_reveal_box_style(is_correct: bool, theme: Theme = Theme.LIGHT) -> str:
        background = ColorPalette.REVEAL_CORRECT_BG if is_correct else ColorPalette.REVEAL_WRONG_BG
        return (
            f"background-color: {background.get(theme)};"
            " border: none; border-radius: 6px; padding: 8px;"
        )


def option_state_for(option: str, selected: str | None, is_correct: bool | None, word: str) -> OptionState:
    """Decide the look of ``option`` given the current selection."""
    if selected is None:
        return OptionState.IDLE
    if option == selected:
        return OptionState.CHOSEN_CORRECT if is_correct else OptionState.CHOSEN_WRONG
    if option == word and not is_correct:
        return OptionState.MISSED_CORRECT
    return OptionState.NEUTRAL
