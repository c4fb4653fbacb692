"""
Focus coordination module.

Provides:
- FocusableElement capability and liveness-checked handles
- FocusRegistry enforcing one focused element per group
- FocusState cyclic selection over keys bound to elements

Architecture:
    Input / application -> FocusRegistry.focus/unfocus -> element reactions
    FocusState.value / next / previous -> FocusRegistry -> element observers
        -> FocusState.value (kept in sync)
"""

from .element import ElementHandle, FocusableElement
from .errors import (
    DuplicateBindingError,
    DuplicateKeyError,
    EmptyStateError,
    FocusError,
    GroupOwnershipError,
    NullArgumentError,
    StaleReferenceError,
)
from .groups import DEFAULT_GROUP, private_group_id, resolve_group
from .hooks import EventHook
from .registry import FocusRegistry
from .state import FocusState

__all__ = [
    "ElementHandle",
    "FocusableElement",
    "FocusRegistry",
    "FocusState",
    "EventHook",
    "DEFAULT_GROUP",
    "private_group_id",
    "resolve_group",
    # Errors
    "FocusError",
    "NullArgumentError",
    "StaleReferenceError",
    "DuplicateKeyError",
    "DuplicateBindingError",
    "EmptyStateError",
    "GroupOwnershipError",
]
