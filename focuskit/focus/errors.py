"""
Focus error types.

The focus core never lets these escape into the UI loop by default:
operations raise them internally, log them at the boundary and degrade
to a no-op. In strict mode they are re-raised after logging.
"""


class FocusError(Exception):
    """Base class for all focus coordination errors."""

    # Set when a strict registry re-raises the error
    strict = False


class NullArgumentError(FocusError):
    """An operation was called with None instead of an element."""


class StaleReferenceError(FocusError):
    """A registry entry or binding points to a torn-down element."""


class DuplicateKeyError(FocusError):
    """A FocusState key is already bound to an element."""


class DuplicateBindingError(FocusError):
    """An element is already bound to a key or to another FocusState."""


class EmptyStateError(FocusError):
    """Cyclic navigation was requested on a FocusState with no bindings."""


class GroupOwnershipError(FocusError):
    """An element tried to join a group privately owned by a FocusState."""
