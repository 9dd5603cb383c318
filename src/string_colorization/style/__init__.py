# topmark:header:start
#
#   project      : string-colorization
#   file         : __init__.py
#   file_relpath : src/string_colorization/style/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Style value type and its constructor namespaces.

- `foreground`, `background`: named ANSI colors plus `true_color()` / `hex_color()`.
- `attributes`: single-attribute styles (bold, underline, ...).
"""

from __future__ import annotations

from string_colorization.style import attributes, background, foreground
from string_colorization.style.model import (
    Attribute,
    Color,
    Layer,
    NamedColor,
    Style,
    TrueColor,
    combine,
)

__all__ = [
    "Attribute",
    "Color",
    "Layer",
    "NamedColor",
    "Style",
    "TrueColor",
    "attributes",
    "background",
    "combine",
    "foreground",
]
