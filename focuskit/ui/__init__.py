"""
UI framework module.

Contains the focusable widgets and their focus highlight palette.
"""

from .colors import COLORS
from .widgets.base import Widget, Rect
from .widgets.controls import Button, HotbarSlot, WheelMenuButton, Window, WindowStack
from .widgets.hotbar import Hotbar

__all__ = [
    "COLORS",
    "Widget",
    "Rect",
    "Button",
    "HotbarSlot",
    "WheelMenuButton",
    "Window",
    "WindowStack",
    "Hotbar"
]
