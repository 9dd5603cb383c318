# topmark:header:start
#
#   project      : string-colorization
#   file         : backend.py
#   file_relpath : src/string_colorization/rendering/backend.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Styling backend: turns a resolved `Style` into ANSI-escaped text.

The resolver never emits escape codes itself; it hands every (text, style)
pair to a `StylingBackend`. This keeps the resolution algorithm a pure function
and lets tests substitute a recording backend.

Key types:
    - `Colorizer`: Protocol describing any callable compatible with
      `yachalk.ChalkBuilder.__call__`.
    - `StylingBackend`: Protocol consumed by `colorize()` and `Style.apply()`.
    - `ChalkBackend`: the yachalk implementation.

Process-wide switch:
    `set_override()` / `unset_override()` force yachalk's global color mode on
    or off (useful for non-terminal output); `should_colorize()` reports the
    current state. This is the only mutable global state in the package.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Protocol

from yachalk import chalk
from yachalk.types import ColorMode as ChalkColorMode

from string_colorization.config.color import ColorMode, resolve_color_mode
from string_colorization.config.logging import get_logger
from string_colorization.style.model import Attribute, TrueColor

if TYPE_CHECKING:
    from string_colorization.config.logging import ColorizationLogger
    from string_colorization.style.model import Color, Style


logger: ColorizationLogger = get_logger(__name__)


class Colorizer(Protocol):
    """A chalk chain ready to wrap one text unit (satisfied by `ChalkBuilder`)."""

    def __call__(self, *args: object, sep: str = " ") -> str: ...


class StylingBackend(Protocol):
    """Converts one unit of text plus a resolved style into a styled string.

    Implementations must return a self-contained fragment: the escape codes
    that open the style are closed again before the fragment ends.
    """

    @property
    def enabled(self) -> bool:
        """Return True when styling codes are currently emitted."""
        ...

    def render(self, text: str, style: Style) -> str:
        """Return ``text`` styled with ``style``."""
        ...


class ChalkBackend:
    """`StylingBackend` built on `yachalk`.

    Styles are translated into a `ChalkBuilder` chain: attributes first (in
    `Attribute` declaration order), then the background, then the foreground.
    Named colors map to chalk properties, true colors to ``rgb()`` /
    ``bg_rgb()``.
    """

    @property
    def enabled(self) -> bool:
        """Return True unless yachalk's color mode is ``AllOff``."""
        return should_colorize()

    def colorizer_for(self, style: Style) -> Colorizer:
        """Return the chalk chain that applies ``style``.

        Args:
            style (Style): A non-plain style.

        Returns:
            Colorizer: The `ChalkBuilder` for ``style``.
        """
        builder: Any = chalk
        for attribute in Attribute:
            if attribute in style.attributes:
                builder = getattr(builder, attribute.value)
        if style.background is not None:
            builder = _apply_color(builder, style.background, background=True)
        if style.foreground is not None:
            builder = _apply_color(builder, style.foreground, background=False)
        return builder

    def render(self, text: str, style: Style) -> str:
        """Return ``text`` wrapped in the escape codes of ``style``.

        Plain styles, empty text and a disabled color mode return ``text`` verbatim.
        """
        if not text or style.is_plain or not self.enabled:
            return text
        return self.colorizer_for(style)(text)


def _apply_color(builder: Any, color: Color, *, background: bool) -> Any:
    if isinstance(color, TrueColor):
        method = builder.bg_rgb if background else builder.rgb
        return method(*color.rgb)
    name: str = f"bg_{color.value}" if background else color.value
    return getattr(builder, name)


# --- Process-wide state ----------------------------------------------------------

_default_backend: StylingBackend = ChalkBackend()
# Mode yachalk detected before the first override; restored by `unset_override()`
_detected_mode: ChalkColorMode | None = None


def get_backend() -> StylingBackend:
    """Return the process-wide default backend."""
    return _default_backend


def set_backend(backend: StylingBackend | None) -> StylingBackend:
    """Install ``backend`` as the process-wide default.

    Args:
        backend (StylingBackend | None): The new default; ``None`` reinstalls a
            fresh `ChalkBackend`.

    Returns:
        StylingBackend: The previously installed backend.
    """
    global _default_backend
    previous: StylingBackend = _default_backend
    _default_backend = backend if backend is not None else ChalkBackend()
    logger.debug("Default styling backend set to %s", type(_default_backend).__name__)
    return previous


def should_colorize() -> bool:
    """Return True when yachalk currently emits styling codes."""
    return chalk.get_color_mode() != ChalkColorMode.AllOff


def set_override(mode: ColorMode | bool) -> bool:
    """Force styling output on or off for the whole process.

    Args:
        mode (ColorMode | bool): ``True``/`ColorMode.ALWAYS` forces styling,
            ``False``/`ColorMode.NEVER` disables it, `ColorMode.AUTO` re-evaluates
            ``FORCE_COLOR``/``NO_COLOR`` and TTY status.

    Returns:
        bool: Whether styling is enabled after the call.
    """
    global _detected_mode
    if _detected_mode is None:
        _detected_mode = chalk.get_color_mode()

    if isinstance(mode, bool):
        mode = ColorMode.ALWAYS if mode else ColorMode.NEVER
    enabled: bool = resolve_color_mode(mode)

    if not enabled:
        chalk.set_color_mode(ChalkColorMode.AllOff)
    elif _detected_mode == ChalkColorMode.AllOff:
        chalk.set_color_mode(ChalkColorMode.FullTrueColor)
    else:
        chalk.set_color_mode(_detected_mode)
    logger.debug("Color override %s -> %s", mode.value, chalk.get_color_mode())
    return enabled


def unset_override() -> None:
    """Restore the color mode yachalk detected before the first override."""
    global _detected_mode
    if _detected_mode is None:
        return
    chalk.set_color_mode(_detected_mode)
    logger.debug("Color override cleared; restored %s", _detected_mode)
    _detected_mode = None
