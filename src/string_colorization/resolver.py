# topmark:header:start
#
#   project      : string-colorization
#   file         : resolver.py
#   file_relpath : src/string_colorization/resolver.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Rule resolution and rendering: the `colorize()` entry point.

Given a base text, an optional default style and an ordered sequence of
``(span, style)`` rules, `colorize()` decides which rule governs every
character and renders each character through the styling backend.

Resolution:
    1. Each rule whose span points into the base's own `Text` (identity check)
       and overlaps the base range is clamped to the base; all other rules are
       dropped without error.
    2. Valid rules are written into a per-character table in input order, so
       the *last* rule covering a character wins. A later, narrower rule only
       overrides the characters it covers.
    3. The winning rule's style is combined onto the default style (rule wins
       on conflicting colors, attributes are merged). Uncovered characters use
       the default style, or stay plain.

Rendering:
    Every character becomes one self-terminating fragment. With
    ``coalesce=True``, runs of characters sharing the same resolved style are
    rendered as a single fragment instead; the visible result is the same.
"""

from __future__ import annotations

from itertools import groupby
from typing import TYPE_CHECKING

from string_colorization.config.logging import get_logger
from string_colorization.rendering.backend import get_backend
from string_colorization.style.model import Style
from string_colorization.text import Span, Text

if TYPE_CHECKING:
    from collections.abc import Iterable, Sequence

    from string_colorization.config.logging import ColorizationLogger
    from string_colorization.rendering.backend import StylingBackend


logger: ColorizationLogger = get_logger(__name__)

Rule = tuple[Span, Style]
"""A ``(span, style)`` pair overriding the style of the characters under ``span``."""

_PLAIN: Style = Style()


def _as_span(base: Text | Span | str) -> Span:
    if isinstance(base, Span):
        return base
    if isinstance(base, Text):
        return base.full()
    # A fresh origin: no caller-held span can point into it
    logger.debug("colorize() received a plain str; rules cannot reference it")
    return Text(base).full()


def _rule_range(index: int, rule: object, base: Span) -> tuple[int, int] | None:
    """Return the base-relative ``[start, end)`` a rule covers, or None to drop it."""
    try:
        span, style = rule  # type: ignore[misc]
    except (TypeError, ValueError):
        logger.debug("Dropping rule #%d: not a (span, style) pair: %r", index, rule)
        return None
    if not isinstance(span, Span) or not isinstance(style, Style):
        logger.debug("Dropping rule #%d: expected (Span, Style), got %r", index, rule)
        return None
    if span.origin is not base.origin:
        logger.debug("Dropping rule #%d: span %r points into another text", index, span.text)
        return None
    covered: Span | None = span.intersection(base)
    if covered is None:
        logger.debug("Dropping rule #%d: span [%d, %d) misses the base", index, span.start, span.end)
        return None
    return covered.start - base.start, covered.end - base.start


def resolve_rules(base: Text | Span | str, rules: Sequence[Rule]) -> list[int | None]:
    """Build the resolution table for ``base``.

    Args:
        base (Text | Span | str): The text being styled.
        rules (Sequence[Rule]): Rules in priority order (later wins).

    Returns:
        list[int | None]: One slot per character of ``base`` holding the index
            of the winning rule in ``rules``, or None when no valid rule covers it.
    """
    base_span: Span = _as_span(base)
    table: list[int | None] = [None] * len(base_span)
    for index, rule in enumerate(rules):
        covered: tuple[int, int] | None = _rule_range(index, rule, base_span)
        if covered is None:
            continue
        start, end = covered
        table[start:end] = [index] * (end - start)
        logger.trace("Rule #%d claims [%d, %d)", index, start, end)
    return table


def resolve_styles(
    base: Text | Span | str,
    default_style: Style | None,
    rules: Iterable[Rule],
) -> list[Style]:
    """Return the resolved style of every character of ``base``.

    Args:
        base (Text | Span | str): The text being styled.
        default_style (Style | None): Style for characters no rule covers, and the
            style every winning rule is combined onto.
        rules (Iterable[Rule]): Rules in priority order (later wins); consumed once.

    Returns:
        list[Style]: One style per character; plain `Style()` where nothing applies.
    """
    rule_list: list[Rule] = list(rules)
    fallback: Style = default_style if default_style is not None else _PLAIN
    merged: dict[int, Style] = {}
    styles: list[Style] = []
    for slot in resolve_rules(base, rule_list):
        if slot is None:
            styles.append(fallback)
            continue
        if slot not in merged:
            rule_style: Style = rule_list[slot][1]
            merged[slot] = default_style + rule_style if default_style is not None else rule_style
        styles.append(merged[slot])
    return styles


def colorize(
    base: Text | Span | str,
    default_style: Style | None = None,
    rules: Iterable[Rule] = (),
    *,
    backend: StylingBackend | None = None,
    coalesce: bool = False,
) -> str:
    """Render ``base`` with per-character styles resolved from ``rules``.

    Never raises because of a rule: rules whose span does not point into
    ``base`` are ignored.

    Args:
        base (Text | Span | str): The text to style. A `Span` base restricts the
            output to that range; rules spanning beyond it are clamped.
        default_style (Style | None): Style for uncovered characters and the
            base every rule style is combined onto. None leaves them plain.
        rules (Iterable[Rule]): ``(span, style)`` pairs in priority order.
        backend (StylingBackend | None): Backend to render with; defaults to the
            process-wide backend.
        coalesce (bool): Render runs of equal style as one fragment instead of
            one fragment per character.

    Returns:
        str: The styled string, or the plain text when the backend is disabled.

    Example:
        ```python
        from string_colorization import Text, colorize, foreground

        line = Text("Red, no red")
        print(colorize(line, None, [(line[0:3], foreground.RED)]))
        ```
    """
    renderer: StylingBackend = backend if backend is not None else get_backend()
    base_span: Span = _as_span(base)
    text: str = base_span.text
    if not renderer.enabled:
        return text

    rule_list: list[Rule] = list(rules)
    styles: list[Style] = resolve_styles(base_span, default_style, rule_list)

    if coalesce:
        fragments: list[str] = []
        position: int = 0
        for style, run in groupby(styles):
            length: int = sum(1 for _ in run)
            fragments.append(renderer.render(text[position : position + length], style))
            position += length
        return "".join(fragments)

    return "".join(renderer.render(char, style) for char, style in zip(text, styles))
