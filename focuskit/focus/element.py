"""
Focusable element capability.

Anything that can hold focus implements FocusableElement. The registry
and FocusState only keep ElementHandle references, which detect an
element that was torn down while still referenced.
"""

import weakref
from abc import ABC, abstractmethod
from typing import Optional

from .errors import StaleReferenceError
from .hooks import EventHook


class FocusableElement(ABC):
    """
    Capability of holding focus within a focus group.

    Subclasses implement handle_focus/handle_unfocus for their visual
    reaction. Observers subscribe to on_focus/on_unfocus, which are
    created on first access.
    """

    focus_group: Optional[str] = None

    _generation: int = 0
    _torn_down: bool = False
    _on_focus: Optional[EventHook] = None
    _on_unfocus: Optional[EventHook] = None

    @property
    def on_focus(self) -> EventHook:
        """Observers called after the element gains focus."""
        if self._on_focus is None:
            self._on_focus = EventHook(f"{type(self).__name__}.on_focus")
        return self._on_focus

    @property
    def on_unfocus(self) -> EventHook:
        """Observers called after the element loses focus."""
        if self._on_unfocus is None:
            self._on_unfocus = EventHook(f"{type(self).__name__}.on_unfocus")
        return self._on_unfocus

    @abstractmethod
    def handle_focus(self) -> None:
        """React to gaining focus."""

    @abstractmethod
    def handle_unfocus(self) -> None:
        """React to losing focus."""

    @property
    def alive(self) -> bool:
        """False once the element has been torn down."""
        return not self._torn_down

    @property
    def generation(self) -> int:
        """Teardown counter; handles taken before a teardown go stale."""
        return self._generation

    def teardown(self) -> None:
        """
        Mark the element as destroyed.

        The element should be unfocused first. Any registry entry or
        binding still pointing here becomes a stale reference.
        """
        self._torn_down = True
        self._generation += 1

    def notify_focus(self) -> None:
        """Run the focus reaction and observers."""
        self.handle_focus()
        if self._on_focus is not None:
            self._on_focus.notify()

    def notify_unfocus(self) -> None:
        """Run the unfocus reaction and observers."""
        self.handle_unfocus()
        if self._on_unfocus is not None:
            self._on_unfocus.notify()


class ElementHandle:
    """
    Non-owning, liveness-checked reference to a FocusableElement.

    The handle goes stale when the element is torn down or garbage
    collected.
    """

    __slots__ = ("_ref", "_generation", "_label")

    def __init__(self, element: FocusableElement):
        self._ref = weakref.ref(element)
        self._generation = element.generation
        self._label = repr(element)

    @property
    def alive(self) -> bool:
        """Check whether the referenced element still exists."""
        element = self._ref()
        return (
            element is not None
            and element.alive
            and element.generation == self._generation
        )

    def resolve(self) -> FocusableElement:
        """
        Get the referenced element.

        Raises:
            StaleReferenceError: If the element no longer exists
        """
        element = self._ref()
        if element is None or not element.alive or element.generation != self._generation:
            raise StaleReferenceError(f"{self._label} was destroyed while still referenced")
        return element

    def points_to(self, element: FocusableElement) -> bool:
        """Check identity with a live element, never raising."""
        return self.alive and self._ref() is element

    def __repr__(self) -> str:
        state = "alive" if self.alive else "stale"
        return f"ElementHandle({self._label}, {state})"
