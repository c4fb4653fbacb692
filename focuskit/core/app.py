"""
Demo application.

Runs a small pygame scene exercising the focus core: a tab bar driven
by a FocusState, a scrollable hotbar and two overlapping windows that
share a focus group.
"""

import logging
import os
from enum import Enum
from typing import List, Optional

import pygame

from ..config import Config
from ..focus import FocusRegistry, FocusState
from ..input.manager import InputManager, InputEvent
from ..ui.colors import COLORS
from ..ui.widgets import Button, Hotbar, HotbarSlot, Rect, Widget, Window, WindowStack

logger = logging.getLogger(__name__)

WINDOW_GROUP = "windows"


class DemoTab(Enum):
    """Tabs of the demo tab bar."""
    HOME = "home"
    SETTINGS = "settings"
    ABOUT = "about"


class Application:
    """
    Demo application controller.

    Owns the focus registry, builds the scene and runs the frame loop.
    """

    def __init__(self, config: Config):
        """
        Initialize the application.

        Args:
            config: Application configuration
        """
        self.config = config
        self.running = False
        self.frame_count = 0
        self.delta_time = 0.0

        self.registry = FocusRegistry.from_config(config)
        self.input_manager = InputManager(config)

        self.tabs: FocusState[DemoTab] = FocusState(self.registry, name="Tabs")
        self.tab_buttons: List[Button] = []
        for index, tab in enumerate(DemoTab):
            button = Button(
                self.registry,
                Rect(10 + index * 100, 10, 90, 24),
                label=tab.value,
                on_press=lambda tab=tab: logger.info(f"Opened {tab.value}")
            )
            self.tabs.add(tab, button)
            self.tab_buttons.append(button)
        self.tabs.on_state_changed.subscribe(self._on_tab_changed)

        self.hotbar = Hotbar(self.registry, [
            HotbarSlot(self.registry, Rect(10 + i * 34, 200, 30, 30), label=f"slot{i}")
            for i in range(5)
        ])

        self.window_stack = WindowStack()
        for i, title in enumerate(("Inventory", "Map")):
            Window(
                self.registry,
                Rect(60 + i * 120, 50, 160, 120),
                title=title,
                stack=self.window_stack,
                focus_group=WINDOW_GROUP
            )

        self.clock: Optional[pygame.time.Clock] = None
        self.surface: Optional[pygame.Surface] = None

    @property
    def widgets(self) -> List[Widget]:
        """All widgets in draw order."""
        return [*self.window_stack.windows, *self.tab_buttons, *self.hotbar.slots]

    def _on_tab_changed(self, tab: Optional[DemoTab]) -> None:
        logger.info(f"Selected tab: {tab.value if tab else 'none'}")

    # ─────────────────────────────────────────────────────────────────────────
    # Frame Loop
    # ─────────────────────────────────────────────────────────────────────────

    def run(self, max_frames: Optional[int] = None) -> None:
        """
        Main application loop.

        Args:
            max_frames: Stop after this many frames (None = until quit)
        """
        if self.config.headless:
            os.environ.setdefault("SDL_VIDEODRIVER", "dummy")

        pygame.init()
        pygame.display.set_caption("focuskit demo")
        self.surface = pygame.display.set_mode(self.config.window_size)
        self.input_manager.enable_key_repeat()
        self.clock = pygame.time.Clock()

        self.running = True
        try:
            while self.running:
                self.delta_time = self.clock.tick(self.config.target_fps) / 1000.0
                self.frame_count += 1

                self._process_events()
                for widget in self.widgets:
                    widget.update(self.delta_time)
                self._render()

                if max_frames is not None and self.frame_count >= max_frames:
                    self.running = False
        finally:
            self.cleanup()

    def _process_events(self) -> None:
        """Process pending pygame events."""
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                self.running = False
            elif event.type == pygame.MOUSEWHEEL:
                self.hotbar.scroll(event.y)
            elif event.type == pygame.MOUSEBUTTONDOWN and event.button == 1:
                self.handle_click(*self._to_native(event.pos))
            else:
                input_event = self.input_manager.process_event(event)
                if input_event is not None:
                    self.handle_input(input_event)

    def handle_input(self, event: InputEvent) -> None:
        """
        Handle a navigation event.

        Args:
            event: Input event to handle
        """
        # Escape with nothing selected quits
        if event is InputEvent.BACK and self.tabs.value is None:
            self.running = False
            return

        if event is InputEvent.ACTIVATE:
            button = self.tabs.focused_element
            if isinstance(button, Button):
                button.press()
            return

        self.input_manager.dispatch(event, self.tabs)

    def handle_click(self, x: int, y: int) -> None:
        """Focus the front-most window under the pointer."""
        for window in reversed(self.window_stack.windows):
            if window.handle_pointer_down(x, y):
                return

    def _to_native(self, pos) -> tuple:
        scale = self.config.scale_factor
        return (pos[0] // scale, pos[1] // scale)

    # ─────────────────────────────────────────────────────────────────────────
    # Rendering
    # ─────────────────────────────────────────────────────────────────────────

    def _render(self) -> None:
        """Render the current frame."""
        native = pygame.Surface((self.config.native_width, self.config.native_height))
        native.fill(COLORS["bg_dark"])

        for widget in self.widgets:
            widget.render(native)

        if self.config.show_focus_overlay:
            self._render_focus_overlay(native)

        pygame.transform.scale(native, self.config.window_size, self.surface)
        pygame.display.flip()

    def _render_focus_overlay(self, surface: pygame.Surface) -> None:
        """Render the focus holder of every public group."""
        font = pygame.font.Font(None, 16)
        lines = [f"tabs: {self.tabs.value.value if self.tabs.value else '-'}"]
        for group in self.registry.groups(include_private=False):
            holder = self.registry.get_focused_element(group)
            lines.append(f"{group}: {holder.name if isinstance(holder, Widget) else '-'}")

        for i, line in enumerate(lines):
            text = font.render(line, True, COLORS["text_primary"])
            surface.blit(text, (surface.get_width() - text.get_width() - 5, 40 + i * 12))

    def cleanup(self) -> None:
        """Clean up resources."""
        for widget in self.widgets:
            widget.destroy()
        pygame.quit()
