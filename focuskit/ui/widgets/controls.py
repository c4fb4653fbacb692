"""
Focusable control widgets.

Contains buttons, hotbar slots, wheel menu buttons and windows.
"""

import pygame
from typing import Callable, List, Optional

from .base import Widget, Rect
from ..colors import COLORS, focus_background, focus_border
from ...focus import FocusRegistry


class Button(Widget):
    """
    A pressable button.

    Pressing focuses the button and runs its callback.
    """

    def __init__(
        self,
        registry: FocusRegistry,
        rect: Rect,
        label: str = "",
        on_press: Optional[Callable[[], None]] = None,
        focus_group: Optional[str] = None
    ):
        """
        Initialize button.

        Args:
            registry: Focus registry
            rect: Position and size
            label: Button text
            on_press: Callback run when pressed
            focus_group: Explicit focus group
        """
        super().__init__(registry, rect, name=label, focus_group=focus_group)
        self.label = label
        self.on_press = on_press

    def press(self) -> None:
        """Focus the button and run its callback."""
        if not self.focus():
            return
        if self.on_press:
            self.on_press()

    def render(self, surface: pygame.Surface) -> None:
        """Render the button frame."""
        if not self.visible:
            return

        pygame.draw.rect(surface, focus_background(self.focus_amount), self.rect.to_pygame())
        pygame.draw.rect(surface, focus_border(self.focus_amount), self.rect.to_pygame(), 1)
        super().render(surface)


class HotbarSlot(Button):
    """
    A slot of a Hotbar.

    Swaps between the selected and unselected sprite on focus.
    """

    SPRITE = "inventory_slot"
    SPRITE_SELECTED = "inventory_slot_selected"

    def __init__(self, registry: FocusRegistry, rect: Rect, label: str = "", item: Optional[str] = None):
        super().__init__(registry, rect, label=label)
        self.item = item
        self.sprite = self.SPRITE

    def on_focus_changed(self, focused: bool) -> None:
        self.sprite = self.SPRITE_SELECTED if focused else self.SPRITE

    def copy(self) -> "HotbarSlot":
        """Create an unbound slot with the same geometry and item."""
        rect = Rect(self.rect.x, self.rect.y, self.rect.width, self.rect.height)
        return HotbarSlot(self.registry, rect, label=self.label, item=self.item)


class WheelMenuButton(Button):
    """
    Button of a wheel menu.

    Focuses when the pointer enters it and unfocuses when the pointer
    leaves.
    """

    def __init__(self, registry: FocusRegistry, rect: Rect, label: str = "", **kwargs):
        super().__init__(registry, rect, label=label, **kwargs)
        self._hovered = False

    @property
    def hovered(self) -> bool:
        return self._hovered

    def handle_pointer_enter(self) -> None:
        self._hovered = True
        self.focus()

    def handle_pointer_exit(self) -> None:
        self._hovered = False
        self.unfocus()

    def handle_pointer_motion(self, x: int, y: int) -> None:
        """Translate pointer motion into enter/exit."""
        inside = self.rect.contains(x, y)
        if inside and not self._hovered:
            self.handle_pointer_enter()
        elif not inside and self._hovered:
            self.handle_pointer_exit()


class WindowStack:
    """Z-order of windows, back to front."""

    def __init__(self):
        self._windows: List["Window"] = []

    @property
    def windows(self) -> List["Window"]:
        return list(self._windows)

    @property
    def front(self) -> Optional["Window"]:
        return self._windows[-1] if self._windows else None

    def add(self, window: "Window") -> None:
        if window not in self._windows:
            self._windows.append(window)

    def remove(self, window: "Window") -> None:
        if window in self._windows:
            self._windows.remove(window)

    def bring_to_front(self, window: "Window") -> None:
        self.remove(window)
        self._windows.append(window)


class Window(Widget):
    """
    A draggable window.

    The focused window is drawn with an opaque header and raised to the
    front of its stack.
    """

    HEADER_ALPHA_FOCUSED = 1.0
    HEADER_ALPHA_UNFOCUSED = 0.4

    def __init__(
        self,
        registry: FocusRegistry,
        rect: Rect,
        title: str = "",
        stack: Optional[WindowStack] = None,
        focus_group: Optional[str] = None
    ):
        """
        Initialize window.

        Args:
            registry: Focus registry
            rect: Position and size
            title: Window title
            stack: Z-order the window is raised in when focused
            focus_group: Explicit focus group
        """
        super().__init__(registry, rect, name=title, focus_group=focus_group)
        self.title = title
        self.stack = stack
        self.header_alpha = self.HEADER_ALPHA_UNFOCUSED
        self.collapsed = False

        if stack is not None:
            stack.add(self)

    def handle_focus(self) -> None:
        super().handle_focus()
        if self.stack is not None:
            self.stack.bring_to_front(self)
        self.header_alpha = self.HEADER_ALPHA_FOCUSED

    def handle_unfocus(self) -> None:
        super().handle_unfocus()
        self.header_alpha = self.HEADER_ALPHA_UNFOCUSED

    def handle_pointer_down(self, x: int, y: int) -> bool:
        """
        Focus the window when clicked inside it.

        Returns:
            True if the click hit the window
        """
        if not self.rect.contains(x, y):
            return False
        self.focus()
        return True

    def toggle_collapse(self) -> None:
        self.focus()
        self.collapsed = not self.collapsed

    def destroy(self) -> None:
        super().destroy()
        if self.stack is not None:
            self.stack.remove(self)

    def render(self, surface: pygame.Surface) -> None:
        """Render the window frame and header bar."""
        if not self.visible:
            return

        pygame.draw.rect(surface, COLORS["bg_panel"], self.rect.to_pygame())
        header = pygame.Rect(self.rect.x, self.rect.y, self.rect.width, 12)
        color = COLORS["border_focus"] if self.focused else COLORS["border_inactive"]
        pygame.draw.rect(surface, color, header)
        pygame.draw.rect(surface, focus_border(self.focus_amount), self.rect.to_pygame(), 1)
        super().render(surface)
