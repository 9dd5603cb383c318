# topmark:header:start
#
#   project      : string-colorization
#   file         : __init__.py
#   file_relpath : src/string_colorization/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""string-colorization package.

Colorize a string with layered foreground, background and attribute styles
given as ``(span, style)`` rules that point into the string itself. Styling
codes are produced by yachalk.

Example:
    ```python
    from string_colorization import Text, background, colorize, foreground

    rainbow = Text("Rainbow")
    print(
        colorize(
            rainbow,
            foreground.WHITE + background.true_color(200, 200, 200),
            [
                (rainbow[0:6], foreground.RED),
                (rainbow[1:6], foreground.true_color(255, 160, 0)),
                (rainbow[2:6], foreground.YELLOW),
                (rainbow[3:6], foreground.GREEN),
                (rainbow[4:6], foreground.BLUE),
                (rainbow[5:6], foreground.MAGENTA),
            ],
        )
    )
    ```
"""

from __future__ import annotations

from string_colorization.config.color import ColorMode
from string_colorization.core.errors import (
    InvalidColorError,
    InvalidSpanError,
    StringColorizationError,
)
from string_colorization.rendering.backend import (
    ChalkBackend,
    StylingBackend,
    get_backend,
    set_backend,
    set_override,
    should_colorize,
    unset_override,
)
from string_colorization.resolver import Rule, colorize, resolve_rules, resolve_styles
from string_colorization.style import (
    Attribute,
    Color,
    Layer,
    NamedColor,
    Style,
    TrueColor,
    attributes,
    background,
    combine,
    foreground,
)
from string_colorization.text import Span, Text

__all__ = [
    "Attribute",
    "ChalkBackend",
    "Color",
    "ColorMode",
    "InvalidColorError",
    "InvalidSpanError",
    "Layer",
    "NamedColor",
    "Rule",
    "Span",
    "StringColorizationError",
    "Style",
    "StylingBackend",
    "Text",
    "TrueColor",
    "attributes",
    "background",
    "colorize",
    "combine",
    "foreground",
    "get_backend",
    "resolve_rules",
    "resolve_styles",
    "set_backend",
    "set_override",
    "should_colorize",
    "unset_override",
]
