# topmark:header:start
#
#   project      : string-colorization
#   file         : __init__.py
#   file_relpath : src/string_colorization/rendering/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Rendering layer: the yachalk styling backend and the global color override."""

from __future__ import annotations

from string_colorization.rendering.backend import (
    ChalkBackend,
    Colorizer,
    StylingBackend,
    get_backend,
    set_backend,
    set_override,
    should_colorize,
    unset_override,
)

__all__ = [
    "ChalkBackend",
    "Colorizer",
    "StylingBackend",
    "get_backend",
    "set_backend",
    "set_override",
    "should_colorize",
    "unset_override",
]
