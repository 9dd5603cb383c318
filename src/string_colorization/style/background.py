# topmark:header:start
#
#   project      : string-colorization
#   file         : background.py
#   file_relpath : src/string_colorization/style/background.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Ready-made background styles.

Every constant is a `Style` that sets only the background color, so they compose
freely with `+`.
"""

from __future__ import annotations

from typing import Final

from string_colorization.style.model import Layer, NamedColor, Style, TrueColor

BLACK: Final[Style] = Style.from_color(Layer.BACKGROUND, NamedColor.BLACK)
RED: Final[Style] = Style.from_color(Layer.BACKGROUND, NamedColor.RED)
GREEN: Final[Style] = Style.from_color(Layer.BACKGROUND, NamedColor.GREEN)
YELLOW: Final[Style] = Style.from_color(Layer.BACKGROUND, NamedColor.YELLOW)
BLUE: Final[Style] = Style.from_color(Layer.BACKGROUND, NamedColor.BLUE)
MAGENTA: Final[Style] = Style.from_color(Layer.BACKGROUND, NamedColor.MAGENTA)
CYAN: Final[Style] = Style.from_color(Layer.BACKGROUND, NamedColor.CYAN)
WHITE: Final[Style] = Style.from_color(Layer.BACKGROUND, NamedColor.WHITE)
BRIGHT_BLACK: Final[Style] = Style.from_color(Layer.BACKGROUND, NamedColor.BRIGHT_BLACK)
BRIGHT_RED: Final[Style] = Style.from_color(Layer.BACKGROUND, NamedColor.BRIGHT_RED)
BRIGHT_GREEN: Final[Style] = Style.from_color(Layer.BACKGROUND, NamedColor.BRIGHT_GREEN)
BRIGHT_YELLOW: Final[Style] = Style.from_color(Layer.BACKGROUND, NamedColor.BRIGHT_YELLOW)
BRIGHT_BLUE: Final[Style] = Style.from_color(Layer.BACKGROUND, NamedColor.BRIGHT_BLUE)
BRIGHT_MAGENTA: Final[Style] = Style.from_color(Layer.BACKGROUND, NamedColor.BRIGHT_MAGENTA)
BRIGHT_CYAN: Final[Style] = Style.from_color(Layer.BACKGROUND, NamedColor.BRIGHT_CYAN)
BRIGHT_WHITE: Final[Style] = Style.from_color(Layer.BACKGROUND, NamedColor.BRIGHT_WHITE)


def true_color(red: int, green: int, blue: int) -> Style:
    """Return a style with an RGB background.

    Raises:
        InvalidColorError: If a channel is outside 0..255.
    """
    return Style.from_color(Layer.BACKGROUND, TrueColor(red, green, blue))


def hex_color(value: str) -> Style:
    """Return a style with a ``#rrggbb`` background."""
    return Style.from_color(Layer.BACKGROUND, TrueColor.from_hex(value))
