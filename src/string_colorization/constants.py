# topmark:header:start
#
#   project      : string-colorization
#   file         : constants.py
#   file_relpath : src/string_colorization/constants.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""string-colorization constants."""

from __future__ import annotations

from typing import Final

PACKAGE_NAME: Final[str] = "string-colorization"

# Environment variables consulted by the logging and color-mode layers:
LOG_LEVEL_ENV_VAR: Final[str] = "STRING_COLORIZATION_LOG_LEVEL"
FORCE_COLOR_ENV_VAR: Final[str] = "FORCE_COLOR"
NO_COLOR_ENV_VAR: Final[str] = "NO_COLOR"

# Inclusive bounds of a true-color channel
RGB_CHANNEL_MIN: Final[int] = 0
RGB_CHANNEL_MAX: Final[int] = 255
