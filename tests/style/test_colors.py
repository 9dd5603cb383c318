# topmark:header:start
#
#   project      : string-colorization
#   file         : test_colors.py
#   file_relpath : tests/style/test_colors.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Color constructors: named namespaces, true color validation and hex parsing."""

from __future__ import annotations

from types import ModuleType

import pytest

from string_colorization.core.errors import InvalidColorError, StringColorizationError
from string_colorization.style import NamedColor, Style, TrueColor, background, foreground


@pytest.mark.parametrize("color", list(NamedColor))
def test_every_named_color_has_foreground_and_background_constant(color: NamedColor) -> None:
    """Both namespaces expose one constant per ANSI color, named after the enum member."""
    assert getattr(foreground, color.name) == Style(foreground=color)
    assert getattr(background, color.name) == Style(background=color)


def test_named_color_set_is_the_sixteen_ansi_colors() -> None:
    """Eight base colors plus their bright variants."""
    assert len(NamedColor) == 16
    assert {c.name for c in NamedColor if c.name.startswith("BRIGHT_")} == {
        f"BRIGHT_{c.name}" for c in NamedColor if not c.name.startswith("BRIGHT_")
    }


@pytest.mark.parametrize("namespace", [foreground, background])
def test_true_color_constructors(namespace: ModuleType) -> None:
    """`true_color` and `hex_color` build the same RGB style."""
    assert namespace.true_color(255, 165, 0) == namespace.hex_color("#ffa500")


def test_true_color_sets_only_its_layer() -> None:
    """Foreground RGB leaves the background unset and vice versa."""
    assert foreground.true_color(1, 2, 3) == Style(foreground=TrueColor(1, 2, 3))
    assert background.true_color(1, 2, 3) == Style(background=TrueColor(1, 2, 3))


@pytest.mark.parametrize(
    ("red", "green", "blue"),
    [(-1, 0, 0), (0, 256, 0), (0, 0, 1000)],
)
def test_true_color_rejects_out_of_range_channels(red: int, green: int, blue: int) -> None:
    """Channels outside 0..255 raise `InvalidColorError` (also a ValueError)."""
    with pytest.raises(InvalidColorError):
        TrueColor(red, green, blue)
    with pytest.raises(ValueError):
        foreground.true_color(red, green, blue)


def test_true_color_rejects_non_int_channels() -> None:
    """Floats and booleans are not channel values."""
    with pytest.raises(StringColorizationError):
        TrueColor(1.5, 0, 0)  # type: ignore[arg-type]
    with pytest.raises(StringColorizationError):
        TrueColor(True, 0, 0)


@pytest.mark.parametrize(
    ("value", "expected"),
    [
        ("#000000", (0, 0, 0)),
        ("ffffff", (255, 255, 255)),
        ("#C8c8C8", (200, 200, 200)),
        ("#f80", (255, 136, 0)),
        ("  #102030 ", (16, 32, 48)),
    ],
)
def test_from_hex_parses_long_and_short_forms(value: str, expected: tuple[int, int, int]) -> None:
    """Six and three digit forms, with or without ``#``, case-insensitive."""
    assert TrueColor.from_hex(value).rgb == expected


@pytest.mark.parametrize("value", ["", "#", "#12345", "#1234567", "#gg0000", "red"])
def test_from_hex_rejects_malformed_strings(value: str) -> None:
    """Anything that is not 3 or 6 hex digits raises `InvalidColorError`."""
    with pytest.raises(InvalidColorError):
        TrueColor.from_hex(value)
