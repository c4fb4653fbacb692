"""
Input handling module.

Maps keyboard input to focus navigation events.
"""

from .manager import InputManager, InputEvent

__all__ = [
    "InputManager",
    "InputEvent",
]
