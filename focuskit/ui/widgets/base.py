"""
Base widget class.

All focusable UI components inherit from Widget.
"""

import pygame
from dataclasses import dataclass
from typing import Optional, Tuple

from ...focus import FocusableElement, FocusRegistry


@dataclass
class Rect:
    """Simple rectangle for widget positioning."""
    x: int
    y: int
    width: int
    height: int

    @property
    def right(self) -> int:
        """Get right edge x coordinate."""
        return self.x + self.width

    @property
    def bottom(self) -> int:
        """Get bottom edge y coordinate."""
        return self.y + self.height

    @property
    def center(self) -> Tuple[int, int]:
        """Get center point."""
        return (self.x + self.width // 2, self.y + self.height // 2)

    def to_pygame(self) -> pygame.Rect:
        """Convert to pygame Rect."""
        return pygame.Rect(self.x, self.y, self.width, self.height)

    def contains(self, x: int, y: int) -> bool:
        """Check if point is inside rectangle."""
        return (self.x <= x < self.right and
                self.y <= y < self.bottom)


class Widget(FocusableElement):
    """
    Base class for focusable UI components.

    Focus is owned by the registry; the widget only mirrors it in its
    visual state and animates the transition.
    """

    def __init__(
        self,
        registry: FocusRegistry,
        rect: Rect,
        name: str = "",
        focus_group: Optional[str] = None,
        visible: bool = True
    ):
        """
        Initialize the widget.

        Args:
            registry: Focus registry the widget is focused in
            rect: Widget position and size
            name: Name used in logs and the debug overlay
            focus_group: Explicit focus group (default group if None)
            visible: Whether widget is rendered
        """
        self.registry = registry
        self.rect = rect
        self.name = name or type(self).__name__
        self.focus_group = focus_group
        self.visible = visible

        # Visual state
        self._focused = False
        self._dirty = True

        # Animation state
        self._focus_anim = 0.0  # 0 = unfocused, 1 = focused

    @property
    def focused(self) -> bool:
        """Check if widget shows focus."""
        return self._focused

    @property
    def focus_amount(self) -> float:
        """Focus animation progress (0.0 - 1.0)."""
        return self._focus_anim

    @property
    def dirty(self) -> bool:
        """Check if widget needs a redraw."""
        return self._dirty

    def handle_focus(self) -> None:
        self._set_focused(True)

    def handle_unfocus(self) -> None:
        self._set_focused(False)

    def _set_focused(self, value: bool) -> None:
        if self._focused != value:
            self._focused = value
            self._dirty = True
        self.on_focus_changed(value)

    def on_focus_changed(self, focused: bool) -> None:
        """
        Called on every focus reaction.

        Override in subclass for custom behavior.

        Args:
            focused: New focus state
        """
        pass

    # ─────────────────────────────────────────────────────────────────────────
    # Registry shortcuts
    # ─────────────────────────────────────────────────────────────────────────

    def focus(self) -> bool:
        """Focus this widget in its group."""
        return self.registry.focus(self)

    def unfocus(self) -> bool:
        """Unfocus this widget."""
        return self.registry.unfocus(self)

    def toggle_focus(self) -> bool:
        """Toggle focus of this widget."""
        return self.registry.toggle_focus(self)

    def is_focused(self) -> bool:
        """Check if this widget holds focus in its group."""
        return self.registry.is_focused(self)

    def destroy(self) -> None:
        """Unfocus and tear down the widget."""
        if self.alive:
            self.unfocus()
        self.teardown()

    # ─────────────────────────────────────────────────────────────────────────
    # Frame
    # ─────────────────────────────────────────────────────────────────────────

    def update(self, dt: float) -> None:
        """
        Update widget state.

        Called every frame. Override for animations, etc.

        Args:
            dt: Delta time in seconds
        """
        # Animate focus transition
        target = 1.0 if self._focused else 0.0
        if self._focus_anim != target:
            speed = 8.0  # Animation speed
            if self._focus_anim < target:
                self._focus_anim = min(target, self._focus_anim + dt * speed)
            else:
                self._focus_anim = max(target, self._focus_anim - dt * speed)
            self._dirty = True

    def render(self, surface: pygame.Surface) -> None:
        """
        Render the widget.

        Override in subclass for custom rendering.

        Args:
            surface: Surface to render on
        """
        self._dirty = False

    def mark_dirty(self) -> None:
        """Mark widget as needing redraw."""
        self._dirty = True

    def __repr__(self) -> str:
        return f"<{type(self).__name__} {self.name!r}>"
