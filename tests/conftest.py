# topmark:header:start
#
#   project      : string-colorization
#   file         : conftest.py
#   file_relpath : tests/conftest.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Pytest configuration for the string-colorization test suite.

Provides:
    - typed wrappers for pytest decorators (so static checkers keep signatures),
    - an autouse fixture that keeps the environment and the process-wide color
      state from leaking between tests,
    - `RecordingBackend`, a styling backend that renders styles as readable tags
      so resolution can be asserted without ANSI codes or global state,
    - `true_color`, which forces yachalk into full true-color mode.

Notes:
    Tests that exercise yachalk output must request `true_color`; otherwise the
    detected color mode (usually ``AllOff`` under pytest capture) applies.
"""

from __future__ import annotations

from collections.abc import Callable, Iterator
from typing import Any, TypeVar, cast

import pytest
from yachalk import chalk
from yachalk.types import ColorMode as ChalkColorMode

from string_colorization.constants import LOG_LEVEL_ENV_VAR
from string_colorization.rendering.backend import set_backend, unset_override
from string_colorization.style.model import Style, TrueColor

F = TypeVar("F", bound=Callable[..., object])

DecoratorType = Callable[[F], F]


def as_typed_mark(mark: Any) -> DecoratorType[Any]:
    """Wrap a pytest mark so static type checkers preserve the function type.

    Args:
        mark (Any): A pytest mark decorator such as `pytest.mark.hypothesis_slow`.

    Returns:
        DecoratorType[Any]: A decorator that preserves the wrapped function's type.
    """

    def _decorator(func: F) -> F:
        return cast("F", mark(func))

    return _decorator


def parametrize(*args: Any, **kwargs: Any) -> Callable[[F], F]:
    """Typed wrapper for `pytest.mark.parametrize`.

    Args:
        *args (Any): Positional arguments forwarded to `pytest.mark.parametrize`.
        **kwargs (Any): Keyword arguments forwarded to `pytest.mark.parametrize`.

    Returns:
        Callable[[F], F]: A decorator that preserves the wrapped function's type.
    """
    mark: pytest.MarkDecorator = pytest.mark.parametrize(*args, **kwargs)
    return as_typed_mark(mark)


def _describe_color(color: object) -> str:
    if isinstance(color, TrueColor):
        return "#{:02x}{:02x}{:02x}".format(*color.rgb)
    return str(getattr(color, "value", color))


def describe(style: Style) -> str:
    """Return a compact, order-stable description such as ``fg=red,bg=blue,bold``."""
    parts: list[str] = []
    if style.foreground is not None:
        parts.append(f"fg={_describe_color(style.foreground)}")
    if style.background is not None:
        parts.append(f"bg={_describe_color(style.background)}")
    parts.extend(sorted(attribute.value for attribute in style.attributes))
    return ",".join(parts)


class RecordingBackend:
    """Styling backend that records calls and renders ``<style>text</>`` tags.

    Plain styles render the text verbatim, mirroring the yachalk backend.
    """

    def __init__(self, *, enabled: bool = True) -> None:
        self.enabled: bool = enabled
        self.calls: list[tuple[str, Style]] = []

    def render(self, text: str, style: Style) -> str:
        self.calls.append((text, style))
        if style.is_plain:
            return text
        return f"<{describe(style)}>{text}</>"


@pytest.fixture(autouse=True)
def isolate_colorization_state(monkeypatch: pytest.MonkeyPatch) -> Iterator[None]:
    """Keep env-driven configuration and process-wide color state test-local.

    Args:
        monkeypatch (pytest.MonkeyPatch): Used to clear environment variables that
            would otherwise change log levels or color decisions.

    Yields:
        None: Control returns to the test; state is restored afterwards.
    """
    monkeypatch.delenv(LOG_LEVEL_ENV_VAR, raising=False)
    monkeypatch.delenv("FORCE_COLOR", raising=False)
    monkeypatch.delenv("NO_COLOR", raising=False)
    previous_mode: ChalkColorMode = chalk.get_color_mode()
    yield
    unset_override()
    set_backend(None)
    chalk.set_color_mode(previous_mode)


@pytest.fixture
def recorder() -> RecordingBackend:
    """Return a fresh enabled `RecordingBackend`."""
    return RecordingBackend()


@pytest.fixture
def true_color() -> Iterator[None]:
    """Force yachalk into full true-color mode for the duration of a test.

    Yields:
        None: Control returns to the test; the previous mode is restored afterwards.
    """
    previous: ChalkColorMode = chalk.get_color_mode()
    chalk.set_color_mode(ChalkColorMode.FullTrueColor)
    yield
    chalk.set_color_mode(previous)


@pytest.fixture
def disabled_recorder() -> RecordingBackend:
    """Return a `RecordingBackend` that reports styling as disabled."""
    return RecordingBackend(enabled=False)
