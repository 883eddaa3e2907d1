"""Ambient background themes and display preferences."""

import random
from typing import Optional

# Background pattern overlays. One is picked at random on launch and again
# whenever the reader navigates between days.
THEMES = [
    "bokeh-circles-1",
    "bokeh-circles-2",
]

FONT_OPTIONS = ["Lato-Regular", "Arial", "Times New Roman", "Menlo"]

FONT_SIZES = [14, 16, 18, 20, 22, 24]

DEFAULT_FONT = "Lato-Regular"
DEFAULT_FONT_SIZE = 18

_FONT_DISPLAY_NAMES = {
    "Lato-Regular": "Lato",
    "Times New Roman": "Serif",
    ".AppleSystemUIFont": "System",
}


def random_theme(rng: Optional[random.Random] = None) -> str:
    """Pick an ambient theme uniformly at random."""
    return (rng or random).choice(THEMES)


def next_theme(current: str, rng: Optional[random.Random] = None) -> tuple[str, bool]:
    """Pick a new random theme.

    Returns:
        The picked theme and whether it differs from ``current``. The
        background only transitions when it does.
    """
    picked = random_theme(rng)
    return picked, picked != current


def font_display_name(font: str) -> str:
    """Short label shown for a font option."""
    return _FONT_DISPLAY_NAMES.get(font, font)


def next_font_size(current: int) -> int:
    """Cycle to the next font size, wrapping around.

    An unknown size is treated as the first one.
    """
    try:
        index = FONT_SIZES.index(current)
    except ValueError:
        index = 0
    return FONT_SIZES[(index + 1) % len(FONT_SIZES)]
