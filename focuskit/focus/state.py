"""
Cyclic selection state.

FocusState binds a finite set of keys (usually Enum members) to
focusable elements and keeps its selected value in sync with the focus
registry. External code selects by key instead of by element, and can
step through the keys with next/previous.
"""

import logging
from typing import Dict, Generic, Hashable, List, Optional, TypeVar

from .element import ElementHandle, FocusableElement
from .errors import (
    DuplicateBindingError, DuplicateKeyError, EmptyStateError,
    NullArgumentError, StaleReferenceError
)
from .groups import private_group_id
from .hooks import EventHook
from .registry import FocusRegistry

logger = logging.getLogger(__name__)

K = TypeVar("K", bound=Hashable)


class FocusState(Generic[K]):
    """
    Selection machine over keys bound to focusable elements.

    The value is a bound key exactly when the element bound to it holds
    focus in the state's private group, and None when that group has no
    holder.

    Usage:
        tabs = FocusState[Tab](registry)
        tabs.add(Tab.HOME, home_button).add(Tab.SETTINGS, settings_button)

        tabs.on_state_changed.subscribe(show_page)

        tabs.next()              # Tab.HOME
        tabs.value = Tab.SETTINGS
        tabs.value = None        # nothing selected
    """

    def __init__(self, registry: FocusRegistry, value: Optional[K] = None, name: str = "FocusState"):
        """
        Initialize the state.

        Args:
            registry: Registry the bound elements are focused in
            value: Initial value, realized once its key is bound
            name: Name used in log messages
        """
        self.name = name
        self._registry = registry
        self._value: Optional[K] = value
        self._bindings: Dict[K, ElementHandle] = {}

        self.focus_hash = private_group_id()
        registry.claim_group(self.focus_hash, self)

        self.on_state_changed = EventHook(f"{name}.on_state_changed")
        self.on_state_changed_with_element = EventHook(f"{name}.on_state_changed_with_element")

    @property
    def registry(self) -> FocusRegistry:
        return self._registry

    @property
    def keys(self) -> List[K]:
        """Bound keys in insertion order."""
        return list(self._bindings)

    # ─────────────────────────────────────────────────────────────────────────
    # Bindings
    # ─────────────────────────────────────────────────────────────────────────

    def add(self, key: K, element: FocusableElement) -> "FocusState[K]":
        """
        Bind an element to a key.

        The element moves into this state's private group. Focusing it
        selects the key; unfocusing it clears the selection unless
        another bound element took over.

        Args:
            key: Key to bind
            element: Element selected by the key

        Returns:
            self, for chaining
        """
        try:
            if element is None:
                raise NullArgumentError(f"{self.name}.add({key!r}) called without an element")
            if key in self._bindings:
                raise DuplicateKeyError(f"{self.name} already binds {key!r}")
            self._check_unbound(element)
        except (NullArgumentError, DuplicateKeyError, DuplicateBindingError) as e:
            self._registry.report(e)
            return self

        if self._registry.is_focused(element):
            self._registry.unfocus(element)

        element.focus_group = self.focus_hash
        self._bindings[key] = ElementHandle(element)

        def on_focus():
            if element.focus_group == self.focus_hash:
                self.value = key

        def on_unfocus():
            if element.focus_group == self.focus_hash and not self._registry.has_holder(self.focus_hash):
                self.value = None

        element.on_focus.subscribe(on_focus)
        element.on_unfocus.subscribe(on_unfocus)

        logger.debug(f"{self.name}: bound {key!r} to {element!r}")

        if self._value == key:
            self._update_state(None)
        return self

    def binds(self, element: FocusableElement) -> bool:
        """Check whether an element is bound to any key."""
        return any(handle.points_to(element) for handle in self._bindings.values())

    def element_for(self, key: K) -> Optional[FocusableElement]:
        """Get the live element bound to a key."""
        handle = self._bindings.get(key)
        if handle is None or not handle.alive:
            return None
        return handle.resolve()

    def key_for(self, element: FocusableElement) -> Optional[K]:
        """Get the key an element is bound to."""
        for key, handle in self._bindings.items():
            if handle.points_to(element):
                return key
        return None

    # ─────────────────────────────────────────────────────────────────────────
    # Value
    # ─────────────────────────────────────────────────────────────────────────

    @property
    def value(self) -> Optional[K]:
        """Selected key, or None when nothing is selected."""
        return self._value

    @value.setter
    def value(self, value: Optional[K]) -> None:
        if value == self._value:
            return
        previous = self._value
        self._value = value
        self._update_state(previous)

    def clear_selection(self) -> None:
        """Unfocus the selected element."""
        self.value = None

    @property
    def focused_element(self) -> Optional[FocusableElement]:
        """Element bound to the selected key."""
        if self._value is None:
            return None
        return self.element_for(self._value)

    # ─────────────────────────────────────────────────────────────────────────
    # Navigation
    # ─────────────────────────────────────────────────────────────────────────

    def next(self, null_cycle: bool = True) -> Optional[K]:
        """
        Select the key after the current one.

        From None the first key is selected. After the last key the
        selection becomes None when null_cycle is set, otherwise it
        wraps to the first key.

        Returns:
            The new value
        """
        keys = self.keys
        if not keys:
            self._registry.report(EmptyStateError(f"{self.name}.next() called without bindings"))
            return self._value

        current = self._selected_index(keys)
        if current is None:
            target: Optional[K] = keys[0]
        elif current == len(keys) - 1:
            target = None if null_cycle else keys[0]
        else:
            target = keys[current + 1]

        self.value = target
        return self._value

    def previous(self, null_cycle: bool = True) -> Optional[K]:
        """
        Select the key before the current one.

        From None the last key is selected. Before the first key the
        selection becomes None when null_cycle is set, otherwise it
        wraps to the last key.

        Returns:
            The new value
        """
        keys = self.keys
        if not keys:
            self._registry.report(EmptyStateError(f"{self.name}.previous() called without bindings"))
            return self._value

        current = self._selected_index(keys)
        if current is None:
            target: Optional[K] = keys[-1]
        elif current == 0:
            target = None if null_cycle else keys[-1]
        else:
            target = keys[current - 1]

        self.value = target
        return self._value

    # ─────────────────────────────────────────────────────────────────────────
    # Internals
    # ─────────────────────────────────────────────────────────────────────────

    def _selected_index(self, keys: List[K]) -> Optional[int]:
        # An unbound value counts as no selection
        if self._value is None or self._value not in self._bindings:
            return None
        return keys.index(self._value)

    def _check_unbound(self, element: FocusableElement) -> None:
        key = self.key_for(element)
        if key is not None:
            raise DuplicateBindingError(f"{element!r} is already bound to {key!r} in {self.name}")

        group = element.focus_group
        owner = self._registry.owner_of(group) if group is not None else None
        if owner is not None and owner is not self and owner.binds(element):
            raise DuplicateBindingError(f"{element!r} is already bound to {owner!r}")

    def _update_state(self, previous: Optional[K]) -> None:
        """
        Bring the registry in line with the value and notify observers.

        On a stale binding the previous value is restored.
        """
        value = self._value

        if value is None:
            try:
                holder = self._registry.holder_of(self.focus_hash)
            except StaleReferenceError as e:
                self._value = previous
                self._registry.report(e)
                return
            if holder is not None:
                self._registry.unfocus(holder)
                if self._value is not None:
                    # An unfocus callback selected another key
                    return
            self.on_state_changed.notify(None)
            self.on_state_changed_with_element.notify(None, None)
            return

        handle = self._bindings.get(value)
        if handle is None:
            logger.warning(f"{self.name}: cannot select unbound key {value!r}")
            self._value = previous
            return

        try:
            element = handle.resolve()
        except StaleReferenceError as e:
            self._value = previous
            self._registry.report(e)
            return

        if not self._registry.is_focused(element):
            if not self._registry.focus(element):
                if self._value == value:
                    self._value = previous
                return
            if self._value != value:
                # A focus callback already moved the selection on
                return

        self.on_state_changed.notify(value)
        self.on_state_changed_with_element.notify(value, element)

    def __len__(self) -> int:
        return len(self._bindings)

    def __contains__(self, key: object) -> bool:
        return key in self._bindings

    def __repr__(self) -> str:
        return f"{self.name}(value={self._value!r}, keys={self.keys!r})"
