"""
Observer lists.

EventHook is the subscriber list behind focus, unfocus and
state-changed notifications.
"""

import logging
from typing import Any, Callable, List

from .errors import FocusError

logger = logging.getLogger(__name__)

Callback = Callable[..., None]


class EventHook:
    """
    Ordered list of callbacks notified with the same arguments.

    Usage:
        hook = EventHook("on_focus")
        unsubscribe = hook.subscribe(lambda: print("focused"))
        hook.notify()
        unsubscribe()
    """

    def __init__(self, name: str = "event"):
        self.name = name
        self._callbacks: List[Callback] = []

    def subscribe(self, callback: Callback) -> Callable[[], None]:
        """
        Add a callback to the end of the list.

        Args:
            callback: Function called on every notify

        Returns:
            Unsubscribe function
        """
        self._callbacks.append(callback)

        def unsubscribe():
            self.unsubscribe(callback)

        return unsubscribe

    def unsubscribe(self, callback: Callback) -> None:
        """Remove a callback if present."""
        if callback in self._callbacks:
            self._callbacks.remove(callback)

    def notify(self, *args: Any) -> None:
        """
        Call every current subscriber in subscription order.

        Callbacks added while notifying are only called on the next
        notify. A failing callback is logged and the rest still run,
        except for focus errors re-raised by a strict registry.
        """
        for callback in list(self._callbacks):
            try:
                callback(*args)
            except FocusError as e:
                if e.strict:
                    raise
                logger.error(f"{self.name} callback error: {e}")
            except Exception as e:
                logger.error(f"{self.name} callback error: {e}")

    def clear(self) -> None:
        """Remove all subscribers."""
        self._callbacks.clear()

    def __len__(self) -> int:
        return len(self._callbacks)

    def __repr__(self) -> str:
        return f"EventHook({self.name!r}, subscribers={len(self._callbacks)})"
