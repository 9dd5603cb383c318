# topmark:header:start
#
#   project      : string-colorization
#   file         : color.py
#   file_relpath : src/string_colorization/config/color.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Color-mode resolution for string-colorization.

This module decides *whether* styling codes should be emitted at all. It is
kept free of any backend so that the decision can be tested on its own; the
styling backend (see `string_colorization.rendering.backend`) consults it when
an override is installed.

- `ColorMode` enum.
- `resolve_color_mode()` based on an explicit override, the environment and TTY status.
"""

from __future__ import annotations

import os
import sys
from enum import Enum
from typing import TYPE_CHECKING

from string_colorization.config.logging import get_logger
from string_colorization.constants import FORCE_COLOR_ENV_VAR, NO_COLOR_ENV_VAR

if TYPE_CHECKING:
    from string_colorization.config.logging import ColorizationLogger


logger: ColorizationLogger = get_logger(__name__)


class ColorMode(str, Enum):
    """User intent for colorized terminal output.

    Attributes:
        AUTO: Enable color only when appropriate (typically when stdout is a TTY).
        ALWAYS: Force-enable color regardless of TTY status.
        NEVER: Disable color entirely.

    Example:
        >>> resolve_color_mode(color_mode_override=ColorMode.NEVER)
        False
    """

    AUTO = "auto"
    ALWAYS = "always"
    NEVER = "never"


def resolve_color_mode(
    color_mode_override: ColorMode | None = None,
    *,
    stdout_isatty: bool | None = None,
) -> bool:
    """Determine whether color output should be enabled.

    Decision precedence:
        1. **Override**: `ALWAYS` → True; `NEVER` → False.
        2. **Environment**:
            - `FORCE_COLOR` (set and not equal to `"0"`) → True
            - `NO_COLOR` (set to any value) → False
        3. **Auto**: If none of the above decide, return `stdout.isatty()`.

    Args:
        color_mode_override: Explicit `ColorMode`; `None` and `AUTO` both defer
            to the environment.
        stdout_isatty: Optional override for TTY detection. When `None`, the function
            calls `sys.stdout.isatty()` and falls back to `False` on error.

    Returns:
        True if ANSI color should be enabled; False otherwise.
    """
    if color_mode_override == ColorMode.ALWAYS:
        return True
    if color_mode_override == ColorMode.NEVER:
        return False

    force_color: str | None = os.getenv(FORCE_COLOR_ENV_VAR)
    if force_color and force_color != "0":
        logger.debug("%s=%s forces color output", FORCE_COLOR_ENV_VAR, force_color)
        return True
    if os.getenv(NO_COLOR_ENV_VAR) is not None:
        logger.debug("%s is set; disabling color output", NO_COLOR_ENV_VAR)
        return False

    if stdout_isatty is None:
        try:
            stdout_isatty = sys.stdout.isatty()
        except (AttributeError, OSError, ValueError):
            # Replaced, detached or closed stdout
            stdout_isatty = False
    return bool(stdout_isatty)
