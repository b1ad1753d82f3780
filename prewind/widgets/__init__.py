"""TUI widgets for prewind."""

from prewind.widgets.screens import NumberInputScreen, RatioSelectScreen

__all__ = [
    "NumberInputScreen",
    "RatioSelectScreen",
]
