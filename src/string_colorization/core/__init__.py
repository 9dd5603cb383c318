# topmark:header:start
#
#   project      : string-colorization
#   file         : __init__.py
#   file_relpath : src/string_colorization/core/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Core, UI-agnostic building blocks (errors) shared across the package."""
