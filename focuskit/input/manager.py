"""
Input manager.

Maps keyboard input to focus navigation events and drives a
FocusState with them.
"""

import logging
import pygame
from enum import Enum, auto
from typing import Any, Optional

from ..config import Config
from ..focus import FocusState

logger = logging.getLogger(__name__)


class InputEvent(Enum):
    """
    Abstract navigation events.

    These are the logical input events focus navigation responds to,
    independent of the physical input source.
    """

    NEXT = auto()       # Tab / right / down
    PREVIOUS = auto()   # Shift+Tab / left / up
    ACTIVATE = auto()   # Enter
    BACK = auto()       # Escape - clear selection


class InputManager:
    """
    Translates pygame keyboard events into navigation events.

    Usage:
        manager = InputManager(config)
        for event in pygame.event.get():
            manager.dispatch(manager.process_event(event), tabs)
    """

    # Keyboard mapping
    KEY_MAP = {
        pygame.K_TAB: InputEvent.NEXT,
        pygame.K_RIGHT: InputEvent.NEXT,
        pygame.K_DOWN: InputEvent.NEXT,
        pygame.K_LEFT: InputEvent.PREVIOUS,
        pygame.K_UP: InputEvent.PREVIOUS,
        pygame.K_RETURN: InputEvent.ACTIVATE,
        pygame.K_KP_ENTER: InputEvent.ACTIVATE,
        pygame.K_ESCAPE: InputEvent.BACK,
    }

    def __init__(self, config: Config):
        """
        Initialize the input manager.

        Args:
            config: Application configuration
        """
        self.config = config
        self.null_cycle = config.null_cycle

    def enable_key_repeat(self) -> None:
        """Repeat held keys (needs an initialized display)."""
        pygame.key.set_repeat(
            self.config.key_repeat_delay,
            self.config.key_repeat_interval
        )

    def process_event(self, event: pygame.event.Event) -> Optional[InputEvent]:
        """
        Process a pygame event and return an input event.

        Args:
            event: Pygame event to process

        Returns:
            InputEvent if event was recognized, None otherwise
        """
        if event.type == pygame.KEYDOWN:
            return self._handle_keydown(event)
        return None

    def _handle_keydown(self, event: pygame.event.Event) -> Optional[InputEvent]:
        mapped = self.KEY_MAP.get(event.key)
        # Shift+Tab walks backwards
        if mapped is InputEvent.NEXT and event.key == pygame.K_TAB and getattr(event, "mod", 0) & pygame.KMOD_SHIFT:
            return InputEvent.PREVIOUS
        return mapped

    def dispatch(self, event: Optional[InputEvent], state: FocusState[Any]) -> bool:
        """
        Apply a navigation event to a FocusState.

        ACTIVATE is left to the caller, which knows what the selected
        element does when activated.

        Args:
            event: Navigation event (ignored if None)
            state: State to navigate

        Returns:
            True if the event was handled
        """
        if event is InputEvent.NEXT:
            state.next(null_cycle=self.null_cycle)
        elif event is InputEvent.PREVIOUS:
            state.previous(null_cycle=self.null_cycle)
        elif event is InputEvent.BACK:
            state.clear_selection()
        else:
            return False

        logger.debug(f"{event.name} -> {state.name} = {state.value!r}")
        return True
