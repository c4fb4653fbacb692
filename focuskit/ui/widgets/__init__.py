"""
Widget submodule.

Contains the base widget and the focusable widget classes.
"""

from .base import Widget, Rect
from .controls import Button, HotbarSlot, WheelMenuButton, Window, WindowStack
from .hotbar import Hotbar

__all__ = [
    "Widget", "Rect",
    "Button", "HotbarSlot", "WheelMenuButton", "Window", "WindowStack",
    "Hotbar"
]
