"""Widgets for the terminal UI."""

from .color_pad import ColorPad
from .status_bar import StatusBar

__all__ = ["ColorPad", "StatusBar"]
