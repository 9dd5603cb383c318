# topmark:header:start
#
#   project      : string-colorization
#   file         : text.py
#   file_relpath : src/string_colorization/text.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Owning text buffers and the spans that reference them.

Rules passed to `colorize()` must point *into* the base string, not merely
contain the same characters. Python strings carry no stable storage identity
(equal literals are frequently the very same object), so the package wraps the
base text in a `Text` whose *object identity* stands in for the storage
address. Slicing a `Text` yields a `Span`: the origin `Text` plus ``[start, end)``
code-point offsets.

Example:
    ```python
    from string_colorization import Text

    sentence = Text("Red, no red")
    red = sentence[0:3]          # Span(origin=sentence, start=0, end=3)
    other = Text("Red, no red")
    red.belongs_to(sentence)     # True
    other[0:3].belongs_to(sentence)  # False, same text but another origin
    ```
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from string_colorization.core.errors import InvalidSpanError

if TYPE_CHECKING:
    from collections.abc import Iterator


def _slice_bounds(key: slice, length: int) -> tuple[int, int]:
    """Normalize a slice against ``length`` into ``(start, end)`` with ``start <= end``.

    Raises:
        InvalidSpanError: If the slice has a step other than 1.
    """
    if key.step not in (None, 1):
        raise InvalidSpanError(f"Spans must be contiguous; got step {key.step!r}")
    start, stop, _ = key.indices(length)
    return start, max(start, stop)


def _index_bounds(index: int, length: int) -> tuple[int, int]:
    position: int = index + length if index < 0 else index
    if not 0 <= position < length:
        raise InvalidSpanError(f"Index {index} out of range for length {length}")
    return position, position + 1


class Text:
    """An owning text buffer with its own identity.

    Two `Text` objects built from equal strings are *different* origins: a span
    of one never applies to the other. `Text` deliberately does not define
    content equality.

    Args:
        value (str): The text to own.
    """

    __slots__ = ("_value",)

    def __init__(self, value: str) -> None:
        if not isinstance(value, str):
            raise TypeError(f"Text requires a str, got {type(value).__name__}")
        self._value: str = value

    @property
    def value(self) -> str:
        """Return the underlying string."""
        return self._value

    def __str__(self) -> str:
        return self._value

    def __repr__(self) -> str:
        return f"Text({self._value!r})"

    def __len__(self) -> int:
        return len(self._value)

    def __iter__(self) -> Iterator[str]:
        return iter(self._value)

    def __getitem__(self, key: int | slice) -> Span:
        """Return a `Span` of this text.

        Integer indices yield a one-character span; slices follow Python slice
        semantics (negative and omitted bounds allowed, empty slices allowed).

        Raises:
            InvalidSpanError: For a step other than 1 or an out-of-range index.
        """
        return self.full()[key]

    def full(self) -> Span:
        """Return the span covering the whole text."""
        return Span(self, 0, len(self._value))

    def span(self, start: int, end: int) -> Span:
        """Return the span ``[start, end)``, validated strictly (no clamping).

        Raises:
            InvalidSpanError: If the bounds fall outside the text or ``end < start``.
        """
        return Span(self, start, end)

    def find(self, sub: str, start: int = 0) -> Span | None:
        """Return the span of the first occurrence of ``sub`` at or after ``start``.

        Returns:
            Span | None: The matching span, or None when ``sub`` does not occur.
        """
        position: int = self._value.find(sub, start)
        if position < 0:
            return None
        return Span(self, position, position + len(sub))

    def find_all(self, sub: str) -> list[Span]:
        """Return the spans of all non-overlapping occurrences of ``sub``."""
        if not sub:
            return []
        spans: list[Span] = []
        position: int = self._value.find(sub)
        while position >= 0:
            spans.append(Span(self, position, position + len(sub)))
            position = self._value.find(sub, position + len(sub))
        return spans


@dataclass(frozen=True)
class Span:
    """A contiguous ``[start, end)`` range of a specific `Text`.

    Equality compares the origin by identity (``Text`` has no content equality)
    plus the offsets.

    Attributes:
        origin (Text): The text the span points into.
        start (int): First code point offset (inclusive).
        end (int): Last code point offset (exclusive).

    Raises:
        InvalidSpanError: If ``0 <= start <= end <= len(origin)`` does not hold.
    """

    origin: Text
    start: int
    end: int

    def __post_init__(self) -> None:
        if not isinstance(self.origin, Text):
            raise InvalidSpanError(f"Span origin must be a Text, got {type(self.origin).__name__}")
        for name in ("start", "end"):
            value: object = getattr(self, name)
            if isinstance(value, bool) or not isinstance(value, int):
                raise InvalidSpanError(f"Span {name} must be an int, got {value!r}")
        if not 0 <= self.start <= self.end <= len(self.origin):
            raise InvalidSpanError(
                f"Span [{self.start}, {self.end}) is outside its origin of length "
                f"{len(self.origin)}",
                start=self.start,
                end=self.end,
            )

    @property
    def text(self) -> str:
        """Return the referenced characters."""
        return self.origin.value[self.start : self.end]

    def __str__(self) -> str:
        return self.text

    def __len__(self) -> int:
        return self.end - self.start

    def __getitem__(self, key: int | slice) -> Span:
        """Return a sub-span; offsets are relative to this span, like slicing a slice.

        Raises:
            InvalidSpanError: For a step other than 1 or an out-of-range index.
        """
        if isinstance(key, slice):
            start, end = _slice_bounds(key, len(self))
        else:
            start, end = _index_bounds(key, len(self))
        return Span(self.origin, self.start + start, self.start + end)

    def belongs_to(self, text: Text) -> bool:
        """Return True when this span points into ``text`` itself."""
        return self.origin is text

    def overlaps(self, other: Span) -> bool:
        """Return True when both spans share an origin and at least one position.

        Empty spans overlap nothing.
        """
        return (
            self.origin is other.origin
            and max(self.start, other.start) < min(self.end, other.end)
        )

    def intersection(self, other: Span) -> Span | None:
        """Return the overlapping part of two spans of the same origin, if any."""
        if not self.overlaps(other):
            return None
        return Span(self.origin, max(self.start, other.start), min(self.end, other.end))
