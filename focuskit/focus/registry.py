"""
Focus registry.

Tracks the focused element of every focus group and implements the
focus protocol: focus, unfocus, toggle and group lookups. At most one
element is focused per group at any observable instant.
"""

import logging
from typing import Dict, List, Optional, Protocol, TYPE_CHECKING

from .element import ElementHandle, FocusableElement
from .errors import (
    FocusError, GroupOwnershipError, NullArgumentError, StaleReferenceError
)
from .groups import DEFAULT_GROUP, is_private_group, resolve_group

if TYPE_CHECKING:
    from ..config import Config

logger = logging.getLogger(__name__)


class GroupOwner(Protocol):
    """Owner of a private focus group (a FocusState)."""

    def binds(self, element: FocusableElement) -> bool:
        ...


class FocusRegistry:
    """
    Mapping from group name to the currently focused element.

    Entries are created on first focus and cleared, never deleted, on
    unfocus. The registry also remembers the last unfocused element.

    Usage:
        registry = FocusRegistry()

        registry.focus(button_a)
        registry.focus(button_b)   # button_a is unfocused first
        registry.is_focused(button_a)  # False

        registry.unfocus(button_b)
        registry.focus_last_focused()  # button_b again
    """

    def __init__(self, default_group: str = DEFAULT_GROUP, strict: bool = False):
        """
        Initialize an empty registry.

        Args:
            default_group: Group of elements without an explicit group
            strict: Re-raise focus errors after logging them
        """
        self._default_group = default_group
        self._strict = strict
        self._holders: Dict[str, Optional[ElementHandle]] = {}
        self._owners: Dict[str, GroupOwner] = {}
        self._last_focused: Optional[ElementHandle] = None

    @classmethod
    def from_config(cls, config: "Config") -> "FocusRegistry":
        """Create a registry using the focus settings of a Config."""
        return cls(default_group=config.default_group, strict=config.strict)

    @property
    def default_group(self) -> str:
        """Group shared by elements without an explicit group."""
        return self._default_group

    @property
    def strict(self) -> bool:
        """Whether focus errors are re-raised after logging."""
        return self._strict

    def group_of(self, element: FocusableElement) -> str:
        """Get the group an element belongs to."""
        return resolve_group(element, self._default_group)

    # ─────────────────────────────────────────────────────────────────────────
    # Focus Protocol
    # ─────────────────────────────────────────────────────────────────────────

    def focus(self, element: Optional[FocusableElement]) -> bool:
        """
        Focus an element, unfocusing the previous holder of its group.

        The previous holder's unfocus reaction and observers run before
        the element's focus reaction and observers. Focusing the current
        holder again re-runs its focus reaction. If an unfocus callback
        focuses another element of the group, that element keeps focus
        and this call gives up without a focus reaction.

        Args:
            element: Element to focus

        Returns:
            True if the element was focused
        """
        try:
            if element is None:
                raise NullArgumentError("focus() called without an element")
            if not element.alive:
                raise StaleReferenceError(f"Cannot focus destroyed element {element!r}")
            group = self.group_of(element)
            self._check_ownership(group, element)
            previous = self.holder_of(group)
        except FocusError as e:
            self.report(e)
            return False

        self._holders[group] = ElementHandle(element)
        logger.debug(f"Focus {element!r} in group '{group}'")

        if previous is not None and previous is not element:
            previous.notify_unfocus()
            if not self.is_focused(element):
                # An unfocus callback moved focus elsewhere in the group
                logger.debug(f"Focus of {element!r} superseded in group '{group}'")
                return False
        element.notify_focus()
        return True

    def unfocus(self, element: Optional[FocusableElement]) -> bool:
        """
        Unfocus an element.

        The element is remembered as last focused and its unfocus
        reaction always runs, even if it did not hold focus.

        Args:
            element: Element to unfocus

        Returns:
            True unless the element was None
        """
        if element is None:
            self.report(NullArgumentError("unfocus() called without an element"))
            return False

        self._last_focused = ElementHandle(element)

        group = self.group_of(element)
        handle = self._holders.get(group)
        if handle is not None and handle.points_to(element):
            self._holders[group] = None
            logger.debug(f"Unfocus {element!r} in group '{group}'")

        element.notify_unfocus()
        return True

    def is_focused(self, element: Optional[FocusableElement]) -> bool:
        """Check whether an element is the live focus holder of its group."""
        if element is None:
            return False
        handle = self._holders.get(self.group_of(element))
        return handle is not None and handle.points_to(element)

    def toggle_focus(self, element: Optional[FocusableElement]) -> bool:
        """
        Unfocus a focused element, focus an unfocused one.

        Returns:
            True if the element holds focus afterwards
        """
        if self.is_focused(element):
            self.unfocus(element)
            return False
        return self.focus(element)

    # ─────────────────────────────────────────────────────────────────────────
    # Group Lookups
    # ─────────────────────────────────────────────────────────────────────────

    def focus_group_id(self, group: str) -> bool:
        """
        Focus the holder of a group again.

        Unused or empty groups are ignored.

        Returns:
            True if an element was focused
        """
        holder = self._lookup(group)
        if holder is None:
            return False
        return self.focus(holder)

    def unfocus_group_id(self, group: str) -> bool:
        """
        Unfocus the holder of a group.

        Unused or empty groups are ignored.

        Returns:
            True if an element was unfocused
        """
        holder = self._lookup(group)
        if holder is None:
            return False
        return self.unfocus(holder)

    def get_focused_element(self, group: Optional[str] = None) -> Optional[FocusableElement]:
        """
        Get the focused element of a group.

        Args:
            group: Group name (default group if None)

        Returns:
            Focused element, or None if the group is empty
        """
        return self._lookup(self._default_group if group is None else group)

    def has_holder(self, group: str) -> bool:
        """Check whether a group currently has a live focused element."""
        handle = self._holders.get(group)
        return handle is not None and handle.alive

    def focus_last_focused(self) -> bool:
        """
        Focus the element that was unfocused most recently.

        Returns:
            True if an element was focused
        """
        if self._last_focused is None:
            logger.info("No last focused element to refocus")
            return False
        try:
            element = self._last_focused.resolve()
        except StaleReferenceError as e:
            self.report(e)
            return False
        return self.focus(element)

    @property
    def last_focused(self) -> Optional[FocusableElement]:
        """Last unfocused element, if it still exists."""
        if self._last_focused is None or not self._last_focused.alive:
            return None
        return self._last_focused.resolve()

    def groups(self, include_private: bool = True) -> List[str]:
        """
        Get the names of all groups that ever had a focused element.

        Args:
            include_private: Include groups owned by FocusState instances
        """
        return [
            name for name in self._holders
            if include_private or not is_private_group(name)
        ]

    # ─────────────────────────────────────────────────────────────────────────
    # Private Groups
    # ─────────────────────────────────────────────────────────────────────────

    def claim_group(self, group: str, owner: GroupOwner) -> None:
        """
        Reserve a group for a single owner.

        Only elements the owner binds may be focused in a claimed group.

        Raises:
            GroupOwnershipError: If another owner already claimed it
        """
        current = self._owners.get(group)
        if current is not None and current is not owner:
            raise GroupOwnershipError(f"Group '{group}' is already owned by {current!r}")
        self._owners[group] = owner

    def owner_of(self, group: str) -> Optional[GroupOwner]:
        """Get the owner of a claimed group."""
        return self._owners.get(group)

    # ─────────────────────────────────────────────────────────────────────────
    # Maintenance
    # ─────────────────────────────────────────────────────────────────────────

    def prune_stale(self) -> List[str]:
        """
        Clear entries whose holder was destroyed without unfocusing.

        Returns:
            Names of the cleared groups
        """
        pruned = []
        for group, handle in self._holders.items():
            if handle is not None and not handle.alive:
                self._holders[group] = None
                pruned.append(group)
        for group in pruned:
            logger.warning(f"Pruned stale focus holder of group '{group}'")
        return pruned

    def reset(self) -> None:
        """Forget every focus holder and the last focused element."""
        for group in self._holders:
            self._holders[group] = None
        self._last_focused = None

    def report(self, error: FocusError) -> None:
        """
        Log a focus error; re-raise it in strict mode.

        Null arguments and stale references are logged as errors,
        everything else as warnings. Errors re-raised in strict mode
        also pass through observer callbacks.
        """
        if isinstance(error, (NullArgumentError, StaleReferenceError, GroupOwnershipError)):
            logger.error(f"{type(error).__name__}: {error}")
        else:
            logger.warning(f"{type(error).__name__}: {error}")
        if self._strict:
            error.strict = True
            raise error

    # ─────────────────────────────────────────────────────────────────────────
    # Holder Access
    # ─────────────────────────────────────────────────────────────────────────

    def holder_of(self, group: str) -> Optional[FocusableElement]:
        """
        Read the live holder of a group.

        Raises:
            StaleReferenceError: If the holder was destroyed
        """
        handle = self._holders.get(group)
        if handle is None:
            return None
        return handle.resolve()

    def _lookup(self, group: str) -> Optional[FocusableElement]:
        """Read the holder of a group, reporting a stale one as None."""
        try:
            return self.holder_of(group)
        except StaleReferenceError as e:
            self.report(e)
            return None

    def _check_ownership(self, group: str, element: FocusableElement) -> None:
        owner = self._owners.get(group)
        if owner is not None and not owner.binds(element):
            raise GroupOwnershipError(
                f"{element!r} is not bound to the owner of group '{group}'"
            )

    def __repr__(self) -> str:
        focused = sum(1 for handle in self._holders.values() if handle is not None)
        return f"FocusRegistry(groups={len(self._holders)}, focused={focused})"
