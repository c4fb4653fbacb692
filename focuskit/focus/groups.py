"""
Focus group names.

Elements without an explicit group share the default group; each
FocusState gets a private, never-shared group id.
"""

import uuid
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from .element import FocusableElement


# Every element joins this group unless it sets focus_group
DEFAULT_GROUP = "focuskit-focus-group-default"

PRIVATE_GROUP_PREFIX = "focuskit-focus-state"


def resolve_group(element: "FocusableElement", default: str = DEFAULT_GROUP) -> str:
    """
    Get the group an element currently belongs to.

    Args:
        element: Element to resolve
        default: Group used when the element has no explicit group

    Returns:
        Group name
    """
    group = element.focus_group
    return group if group is not None else default


def private_group_id(prefix: str = PRIVATE_GROUP_PREFIX) -> str:
    """Create a unique group id for a FocusState."""
    return f"{prefix}-{uuid.uuid4().hex}"


def is_private_group(name: str) -> bool:
    """Check whether a group name was generated by private_group_id."""
    return name.startswith(PRIVATE_GROUP_PREFIX + "-")
