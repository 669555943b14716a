"""Styling module for the vocabulary quiz."""

from .color_palette import ColorPalette, Theme
from .styles import OptionState, Styles

__all__ = ["ColorPalette", "OptionState", "Styles", "Theme"]
