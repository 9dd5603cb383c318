# topmark:header:start
#
#   project      : string-colorization
#   file         : __init__.py
#   file_relpath : src/string_colorization/config/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Ambient configuration: logging setup and color-mode resolution."""

from __future__ import annotations

from string_colorization.config import logging
from string_colorization.config.color import ColorMode, resolve_color_mode

__all__ = [
    "ColorMode",
    "logging",
    "resolve_color_mode",
]
