"""UI package."""

from .timer_widget import TimerWidget, MODE_LABELS
from .styles import build_stylesheet, get_palette, next_theme, PALETTES

__all__ = [
    "TimerWidget",
    "MODE_LABELS",
    "build_stylesheet",
    "get_palette",
    "next_theme",
    "PALETTES",
]
