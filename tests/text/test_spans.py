# topmark:header:start
#
#   project      : string-colorization
#   file         : test_spans.py
#   file_relpath : tests/text/test_spans.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""`Text` identity and `Span` slicing semantics."""

from __future__ import annotations

import pytest

from string_colorization.core.errors import InvalidSpanError
from string_colorization.text import Span, Text


def test_slicing_text_returns_span_of_that_text() -> None:
    """`text[a:b]` points into `text` with the normalized offsets."""
    text = Text("Rainbow")
    span = text[1:4]
    assert isinstance(span, Span)
    assert span.origin is text
    assert (span.start, span.end) == (1, 4)
    assert span.text == "ain"
    assert str(span) == "ain"
    assert len(span) == 3


@pytest.mark.parametrize(
    ("key", "expected"),
    [
        (slice(None, None), (0, 7)),
        (slice(3, None), (3, 7)),
        (slice(-3, None), (4, 7)),
        (slice(None, -1), (0, 6)),
        (slice(2, 100), (2, 7)),
        (slice(5, 2), (5, 5)),
    ],
)
def test_slices_follow_python_semantics(key: slice, expected: tuple[int, int]) -> None:
    """Omitted, negative, oversized and reversed bounds normalize like `str` slicing."""
    span = Text("Rainbow")[key]
    assert (span.start, span.end) == expected


def test_integer_index_yields_single_character_span() -> None:
    """`text[i]` and `text[-1]` give one-character spans."""
    text = Text("abc")
    assert text[0].text == "a"
    assert (text[-1].start, text[-1].end) == (2, 3)
    with pytest.raises(InvalidSpanError):
        text[3]


def test_stepped_slices_are_rejected() -> None:
    """Spans must be contiguous."""
    with pytest.raises(InvalidSpanError):
        Text("abcdef")[::2]


def test_sub_span_offsets_are_relative_to_the_span() -> None:
    """Slicing a span narrows it within the same origin."""
    text = Text("Red, no red")
    tail = text[5:]
    narrowed = tail[3:]
    assert narrowed.origin is text
    assert (narrowed.start, narrowed.end) == (8, 11)
    assert narrowed.text == "red"


def test_equal_texts_are_distinct_origins() -> None:
    """Two `Text` objects with equal content do not share spans."""
    first = Text("same")
    second = Text("same")
    assert first[0:2].belongs_to(first)
    assert not second[0:2].belongs_to(first)
    assert first[0:2] != second[0:2]
    assert first[0:2] == first[0:2]


def test_explicit_span_validates_bounds() -> None:
    """`Text.span` and `Span()` reject ranges outside the origin."""
    text = Text("abc")
    assert text.span(1, 3).text == "bc"
    with pytest.raises(InvalidSpanError) as excinfo:
        text.span(2, 4)
    assert (excinfo.value.start, excinfo.value.end) == (2, 4)
    with pytest.raises(InvalidSpanError):
        Span(text, 2, 1)
    with pytest.raises(InvalidSpanError):
        Span(text, -1, 1)


def test_span_requires_text_origin() -> None:
    """A bare `str` cannot be a span origin."""
    with pytest.raises(InvalidSpanError):
        Span("abc", 0, 1)  # type: ignore[arg-type]


def test_text_requires_str() -> None:
    """`Text` wraps strings only."""
    with pytest.raises(TypeError):
        Text(b"abc")  # type: ignore[arg-type]


def test_find_and_find_all() -> None:
    """Substring lookup returns spans into the searched text."""
    text = Text("red, no red, nored")
    first = text.find("red")
    assert first is not None and (first.start, first.end) == (0, 3)
    assert text.find("blue") is None
    assert [(s.start, s.end) for s in text.find_all("red")] == [(0, 3), (8, 11), (15, 18)]
    assert text.find_all("") == []


def test_overlaps_and_intersection() -> None:
    """Spans overlap only within the same origin and when sharing a position."""
    text = Text("0123456789")
    assert text[2:5].overlaps(text[4:8])
    assert not text[2:5].overlaps(text[5:8])
    assert not text[2:5].overlaps(Text("0123456789")[2:5])
    inter = text[2:6].intersection(text[4:9])
    assert inter is not None and (inter.start, inter.end) == (4, 6)
    assert text[0:1].intersection(text[1:2]) is None


def test_text_is_sized_and_iterable() -> None:
    """`Text` behaves like its string for len/iter/str."""
    text = Text("héllo")
    assert len(text) == 5
    assert "".join(text) == "héllo"
    assert str(text) == "héllo"
    assert repr(text) == "Text('héllo')"


def test_empty_span_overlaps_nothing() -> None:
    """An empty span has no position to share, even inside a wider span."""
    text = Text("abc")
    assert not text[1:1].overlaps(text[:])
    assert text[:].intersection(text[2:2]) is None


@pytest.mark.parametrize(("start", "end"), [(0.5, 2), (0, 2.0), (True, 2), ("0", 2)])
def test_span_offsets_must_be_ints(start: object, end: object) -> None:
    """Non-int (and bool) offsets are rejected when the span is built."""
    with pytest.raises(InvalidSpanError):
        Span(Text("abc"), start, end)  # type: ignore[arg-type]
