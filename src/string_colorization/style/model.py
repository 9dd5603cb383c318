# topmark:header:start
#
#   project      : string-colorization
#   file         : model.py
#   file_relpath : src/string_colorization/style/model.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Style value types: colors, attributes and the composable `Style`.

Sections:
    * Layer: which scalar slot of a style a color goes into.
    * NamedColor: the 16 standard ANSI colors.
    * TrueColor: an explicit 24-bit RGB triple.
    * Attribute: text attributes supported by the yachalk backend.
    * Style: immutable (foreground, background, attributes) value with `+` composition.

Design:
    Enum *values* are the names of the matching `yachalk.ChalkBuilder` properties
    (e.g. ``NamedColor.BRIGHT_RED.value == "red_bright"``), so the backend can build
    a chalk chain with plain attribute lookups. Nothing in this module emits ANSI
    codes itself.

Example:
    ```python
    from string_colorization.style import attributes, background, foreground

    warning = foreground.YELLOW + background.true_color(40, 40, 40) + attributes.BOLD
    print(warning.apply("careful"))
    ```
"""

from __future__ import annotations

import re
from dataclasses import dataclass, field, replace
from enum import Enum
from typing import TYPE_CHECKING, Final

from string_colorization.constants import RGB_CHANNEL_MAX, RGB_CHANNEL_MIN
from string_colorization.core.errors import InvalidColorError

if TYPE_CHECKING:
    from collections.abc import Iterable

    from string_colorization.rendering.backend import StylingBackend

_HEX_COLOR_RE: Final[re.Pattern[str]] = re.compile(r"^#?(?P<digits>[0-9a-fA-F]{3}|[0-9a-fA-F]{6})$")


class Layer(str, Enum):
    """Scalar slot of a `Style` that a color is assigned to."""

    FOREGROUND = "foreground"
    BACKGROUND = "background"


class NamedColor(str, Enum):
    """The 16 standard ANSI colors.

    Each value is the name of the corresponding foreground property on
    `yachalk.ChalkBuilder`; the background property is the same name with a
    ``bg_`` prefix.
    """

    BLACK = "black"
    RED = "red"
    GREEN = "green"
    YELLOW = "yellow"
    BLUE = "blue"
    MAGENTA = "magenta"
    CYAN = "cyan"
    WHITE = "white"
    BRIGHT_BLACK = "black_bright"
    BRIGHT_RED = "red_bright"
    BRIGHT_GREEN = "green_bright"
    BRIGHT_YELLOW = "yellow_bright"
    BRIGHT_BLUE = "blue_bright"
    BRIGHT_MAGENTA = "magenta_bright"
    BRIGHT_CYAN = "cyan_bright"
    BRIGHT_WHITE = "white_bright"


@dataclass(frozen=True)
class TrueColor:
    """A 24-bit RGB color ("true color").

    Channels are validated on construction; the backend is responsible for
    down-sampling when the terminal cannot display true color.

    Raises:
        InvalidColorError: If a channel is not an ``int`` within 0..255.
    """

    red: int
    green: int
    blue: int

    def __post_init__(self) -> None:
        for name in ("red", "green", "blue"):
            value: object = getattr(self, name)
            # bool is an int subclass but never a meaningful channel value
            if isinstance(value, bool) or not isinstance(value, int):
                raise InvalidColorError(f"{name} channel must be an int, got {value!r}")
            if not RGB_CHANNEL_MIN <= value <= RGB_CHANNEL_MAX:
                raise InvalidColorError(
                    f"{name} channel must be within {RGB_CHANNEL_MIN}..{RGB_CHANNEL_MAX}, got {value}"
                )

    @classmethod
    def from_hex(cls, value: str) -> TrueColor:
        """Parse ``#rrggbb`` (or the short ``#rgb`` form; the ``#`` is optional).

        Args:
            value (str): Hex color string.

        Returns:
            TrueColor: The parsed color.

        Raises:
            InvalidColorError: If ``value`` is not a 3 or 6 digit hex color.
        """
        match = _HEX_COLOR_RE.match(value.strip())
        if match is None:
            raise InvalidColorError(f"Not a hex color: {value!r}")
        digits: str = match.group("digits")
        if len(digits) == 3:
            digits = "".join(ch * 2 for ch in digits)
        return cls(int(digits[0:2], 16), int(digits[2:4], 16), int(digits[4:6], 16))

    @property
    def rgb(self) -> tuple[int, int, int]:
        """Return the color as a ``(red, green, blue)`` tuple."""
        return (self.red, self.green, self.blue)


Color = NamedColor | TrueColor


class Attribute(str, Enum):
    """Text attributes supported by the yachalk backend.

    Each value is the name of the matching modifier property on
    `yachalk.ChalkBuilder`.
    """

    BOLD = "bold"
    DIMMED = "dim"
    ITALIC = "italic"
    UNDERLINE = "underline"
    OVERLINE = "overline"
    REVERSED = "inverse"
    HIDDEN = "hidden"
    STRIKETHROUGH = "strikethrough"


@dataclass(frozen=True)
class Style:
    """Immutable display style: optional colors plus a set of attributes.

    Styles are built by combining primitive styles with ``+`` (see
    [`combine`][string_colorization.style.model.combine]). A style with no
    field set renders as plain text.

    Attributes:
        foreground (Color | None): Text color, or None to leave it unset.
        background (Color | None): Background color, or None to leave it unset.
        attributes (frozenset[Attribute]): Text attributes; any iterable is accepted
            on construction and stored as a frozenset.
    """

    foreground: Color | None = None
    background: Color | None = None
    attributes: frozenset[Attribute] = field(default_factory=frozenset)

    def __post_init__(self) -> None:
        if not isinstance(self.attributes, frozenset):
            object.__setattr__(self, "attributes", frozenset(self.attributes))

    @classmethod
    def from_color(cls, layer: Layer | str, color: Color) -> Style:
        """Return a style that sets exactly one color slot.

        Args:
            layer (Layer | str): `Layer.FOREGROUND` or `Layer.BACKGROUND`, or their
                string values.
            color (Color): A `NamedColor` or a `TrueColor`.

        Returns:
            Style: The single-color style.

        Raises:
            ValueError: If ``layer`` names no `Layer`.
        """
        layer = Layer(layer)
        if layer is Layer.FOREGROUND:
            return cls(foreground=color)
        if layer is Layer.BACKGROUND:
            return cls(background=color)
        raise ValueError(f"Unknown layer: {layer!r}")

    @classmethod
    def from_attribute(cls, attribute: Attribute) -> Style:
        """Return a style that sets exactly one attribute."""
        return cls(attributes=frozenset((attribute,)))

    @property
    def is_plain(self) -> bool:
        """Return True when no color and no attribute is set."""
        return self.foreground is None and self.background is None and not self.attributes

    def with_attributes(self, attributes: Iterable[Attribute]) -> Style:
        """Return a copy of this style with ``attributes`` added."""
        return replace(self, attributes=self.attributes | frozenset(attributes))

    def apply(self, text: str, backend: StylingBackend | None = None) -> str:
        """Render ``text`` with this style.

        Args:
            text (str): The text unit to style.
            backend (StylingBackend | None): Backend to render with; defaults to the
                process-wide backend.

        Returns:
            str: ``text`` wrapped in the escape codes for this style.
        """
        from string_colorization.rendering.backend import get_backend

        return (backend or get_backend()).render(text, self)

    def __add__(self, other: object) -> Style:
        if not isinstance(other, Style):
            return NotImplemented
        return combine(self, other)


def combine(base: Style, overlay: Style) -> Style:
    """Compose ``overlay`` on top of ``base``.

    Colors set on ``overlay`` replace those of ``base``; colors left unset fall
    back to ``base``. Attributes are the union of both. The operation is
    associative, never fails, and cannot unset a field.

    Args:
        base (Style): The style being extended.
        overlay (Style): The style whose set fields win.

    Returns:
        Style: The combined style.
    """
    return Style(
        foreground=overlay.foreground if overlay.foreground is not None else base.foreground,
        background=overlay.background if overlay.background is not None else base.background,
        attributes=base.attributes | overlay.attributes,
    )
