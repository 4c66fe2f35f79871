"""One-call typesetting applying the passes in their documented order.

The order is fixed: whitespace cleanup, then dashes, ellipsis and quotes, then
French spacing, then escaping for the target format. Quotes must be resolved
before spacing so that the spacing pass only sees final glyphs, and escaping
comes last so that no pass has to reason about escape sequences.
"""

from __future__ import annotations

from enum import Enum

from . import clean, escape
from .french import FrenchFormatter


class OutputFormat(str, Enum):
    """Target format of :func:`typeset`."""

    TEXT = "text"
    HTML = "html"
    LATEX = "latex"


def typeset(
    text: str,
    target: OutputFormat | str = OutputFormat.TEXT,
    *,
    formatter: FrenchFormatter | None = None,
    smart_quotes: bool = True,
    smart_ellipsis: bool = True,
    smart_dashes: bool = False,
) -> str:
    """Clean *text* and render it safely for *target*."""
    target = OutputFormat(target)

    text = clean.whitespaces(text)
    if smart_dashes:
        text = clean.dashes(text)
    if smart_ellipsis:
        text = clean.ellipsis(text)
    if smart_quotes:
        text = clean.quotes(text)

    if target is OutputFormat.LATEX:
        if formatter is not None:
            return formatter.format_tex(text)
        return escape.tex(text)

    if formatter is not None:
        text = formatter.format(text)
    if target is OutputFormat.HTML:
        return escape.html(text)
    return text


__all__ = ["OutputFormat", "typeset"]
