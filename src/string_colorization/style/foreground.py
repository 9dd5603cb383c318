# topmark:header:start
#
#   project      : string-colorization
#   file         : foreground.py
#   file_relpath : src/string_colorization/style/foreground.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Ready-made foreground styles.

Every constant is a `Style` that sets only the foreground color, so they compose
freely with `+`.
"""

from __future__ import annotations

from typing import Final

from string_colorization.style.model import Layer, NamedColor, Style, TrueColor

BLACK: Final[Style] = Style.from_color(Layer.FOREGROUND, NamedColor.BLACK)
RED: Final[Style] = Style.from_color(Layer.FOREGROUND, NamedColor.RED)
GREEN: Final[Style] = Style.from_color(Layer.FOREGROUND, NamedColor.GREEN)
YELLOW: Final[Style] = Style.from_color(Layer.FOREGROUND, NamedColor.YELLOW)
BLUE: Final[Style] = Style.from_color(Layer.FOREGROUND, NamedColor.BLUE)
MAGENTA: Final[Style] = Style.from_color(Layer.FOREGROUND, NamedColor.MAGENTA)
CYAN: Final[Style] = Style.from_color(Layer.FOREGROUND, NamedColor.CYAN)
WHITE: Final[Style] = Style.from_color(Layer.FOREGROUND, NamedColor.WHITE)
BRIGHT_BLACK: Final[Style] = Style.from_color(Layer.FOREGROUND, NamedColor.BRIGHT_BLACK)
BRIGHT_RED: Final[Style] = Style.from_color(Layer.FOREGROUND, NamedColor.BRIGHT_RED)
BRIGHT_GREEN: Final[Style] = Style.from_color(Layer.FOREGROUND, NamedColor.BRIGHT_GREEN)
BRIGHT_YELLOW: Final[Style] = Style.from_color(Layer.FOREGROUND, NamedColor.BRIGHT_YELLOW)
BRIGHT_BLUE: Final[Style] = Style.from_color(Layer.FOREGROUND, NamedColor.BRIGHT_BLUE)
BRIGHT_MAGENTA: Final[Style] = Style.from_color(Layer.FOREGROUND, NamedColor.BRIGHT_MAGENTA)
BRIGHT_CYAN: Final[Style] = Style.from_color(Layer.FOREGROUND, NamedColor.BRIGHT_CYAN)
BRIGHT_WHITE: Final[Style] = Style.from_color(Layer.FOREGROUND, NamedColor.BRIGHT_WHITE)


def true_color(red: int, green: int, blue: int) -> Style:
    """Return a style with an RGB foreground.

    Raises:
        InvalidColorError: If a channel is outside 0..255.
    """
    return Style.from_color(Layer.FOREGROUND, TrueColor(red, green, blue))


def hex_color(value: str) -> Style:
    """Return a style with a ``#rrggbb`` foreground."""
    return Style.from_color(Layer.FOREGROUND, TrueColor.from_hex(value))
