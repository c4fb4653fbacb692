"""
Application configuration.

All configuration values are centralized here for easy management
and environment-specific overrides.
"""

from dataclasses import dataclass

from .focus.groups import DEFAULT_GROUP


@dataclass
class Config:
    """Main application configuration."""

    # ─────────────────────────────────────────────────────────────────────────
    # Focus Settings
    # ─────────────────────────────────────────────────────────────────────────

    # Group shared by every element without an explicit focus group
    default_group: str = DEFAULT_GROUP

    # Re-raise focus errors after logging them instead of degrading to no-op
    strict: bool = False

    # Default traversal mode for FocusState.next/previous in the demo
    null_cycle: bool = True

    # ─────────────────────────────────────────────────────────────────────────
    # Display Settings
    # ─────────────────────────────────────────────────────────────────────────

    # Native resolution (always render at this size)
    native_width: int = 480
    native_height: int = 240

    # Display scaling (1 = native, 2 = 960x480, 4 = 1920x960)
    scale_factor: int = 1

    # Target frame rate
    target_fps: int = 30

    # Run without opening a window (dummy SDL video driver)
    headless: bool = False

    # ─────────────────────────────────────────────────────────────────────────
    # Development Settings
    # ─────────────────────────────────────────────────────────────────────────

    # Development mode (debug logging, focus overlay)
    dev_mode: bool = False

    # Show the name of the focused element in every group
    show_focus_overlay: bool = False

    # ─────────────────────────────────────────────────────────────────────────
    # Input Settings
    # ─────────────────────────────────────────────────────────────────────────

    # Key repeat delay (ms) for held keys
    key_repeat_delay: int = 400
    key_repeat_interval: int = 100

    # ─────────────────────────────────────────────────────────────────────────
    # Computed Properties
    # ─────────────────────────────────────────────────────────────────────────

    @property
    def window_width(self) -> int:
        """Get actual window width (native * scale)."""
        return self.native_width * self.scale_factor

    @property
    def window_height(self) -> int:
        """Get actual window height (native * scale)."""
        return self.native_height * self.scale_factor

    @property
    def window_size(self) -> tuple[int, int]:
        """Get window size as tuple."""
        return (self.window_width, self.window_height)

    def __post_init__(self):
        """Apply dev mode defaults."""
        if self.dev_mode:
            self.show_focus_overlay = True


# Default configuration instances
DEFAULT_CONFIG = Config()
DEV_CONFIG = Config(dev_mode=True, scale_factor=2)
