# topmark:header:start
#
#   project      : string-colorization
#   file         : errors.py
#   file_relpath : src/string_colorization/core/errors.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Exceptions for string-colorization.

Usage:
    These exceptions are raised eagerly while *building* styles and spans.
    `colorize()` itself never raises for rules that do not apply; those are
    dropped silently.

Hierarchy:
    - `StringColorizationError`: base class for every package error.
    - `InvalidColorError`: a true-color channel or hex string is malformed.
    - `InvalidSpanError`: a span falls outside its origin or uses a step.

Both concrete errors also derive from `ValueError` so callers that already
guard against bad values keep working.
"""

from __future__ import annotations


class StringColorizationError(Exception):
    """Base class for all string-colorization errors."""


class InvalidColorError(StringColorizationError, ValueError):
    """Error for color values the styling backend cannot represent."""


class InvalidSpanError(StringColorizationError, ValueError):
    """Error for spans that do not describe a contiguous range of their origin."""

    def __init__(self, message: str, *, start: int | None = None, end: int | None = None) -> None:
        super().__init__(message)
        self.start = start
        self.end = end
