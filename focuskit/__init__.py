"""
focuskit - focus coordination for retained-mode widget trees.

Keeps at most one element focused per focus group and binds enumerated
keys to focusable elements for cyclic selection.
"""

from .focus import (
    DEFAULT_GROUP,
    FocusableElement,
    FocusError,
    FocusRegistry,
    FocusState,
    StaleReferenceError,
)

__version__ = "0.1.0"

__all__ = [
    "DEFAULT_GROUP",
    "FocusableElement",
    "FocusError",
    "FocusRegistry",
    "FocusState",
    "StaleReferenceError",
]
