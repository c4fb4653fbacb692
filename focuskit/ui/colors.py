"""
Focus highlight palette.

Colors used to draw widget frames in their unfocused and focused
states, blended by the focus animation.
"""

from typing import Dict, Tuple

# Type aliases
RGB = Tuple[int, int, int]


COLORS: Dict[str, RGB] = {
    # Backgrounds
    "bg_dark": (0, 0, 0),
    "bg_panel": (32, 17, 39),
    "bg_focus": (27, 30, 52),

    # Borders
    "border_normal": (0, 51, 51),
    "border_focus": (0, 255, 204),
    "border_inactive": (53, 93, 104),

    # Text
    "text_primary": (148, 197, 172),
    "text_highlight": (255, 255, 255),
    "warning": (255, 235, 153),
}


def lerp_color(color_a: RGB, color_b: RGB, t: float) -> RGB:
    """
    Linear interpolation between two colors.

    Args:
        color_a: Start color
        color_b: End color
        t: Interpolation factor (0.0 = color_a, 1.0 = color_b)

    Returns:
        Interpolated RGB color
    """
    t = max(0.0, min(1.0, t))
    return tuple(
        int(a + (b - a) * t)
        for a, b in zip(color_a, color_b)
    )


def focus_border(amount: float) -> RGB:
    """Border color for a focus animation progress (0.0 - 1.0)."""
    return lerp_color(COLORS["border_normal"], COLORS["border_focus"], amount)


def focus_background(amount: float) -> RGB:
    """Background color for a focus animation progress (0.0 - 1.0)."""
    return lerp_color(COLORS["bg_panel"], COLORS["bg_focus"], amount)
