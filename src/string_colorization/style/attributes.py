# topmark:header:start
#
#   project      : string-colorization
#   file         : attributes.py
#   file_relpath : src/string_colorization/style/attributes.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Ready-made single-attribute styles."""

from __future__ import annotations

from typing import Final

from string_colorization.style.model import Attribute, Style

BOLD: Final[Style] = Style.from_attribute(Attribute.BOLD)
DIMMED: Final[Style] = Style.from_attribute(Attribute.DIMMED)
ITALIC: Final[Style] = Style.from_attribute(Attribute.ITALIC)
UNDERLINE: Final[Style] = Style.from_attribute(Attribute.UNDERLINE)
OVERLINE: Final[Style] = Style.from_attribute(Attribute.OVERLINE)
REVERSED: Final[Style] = Style.from_attribute(Attribute.REVERSED)
HIDDEN: Final[Style] = Style.from_attribute(Attribute.HIDDEN)
STRIKETHROUGH: Final[Style] = Style.from_attribute(Attribute.STRIKETHROUGH)
