"""Cleanup passes turning loosely typed text into typographic text.

`whitespaces`
: Collapse runs of ordinary whitespace into a single space while keeping
  non-breaking spaces exactly as typed. Leading and trailing whitespace is kept
  since it may be meaningful next to surrounding inline content.

`ellipsis`
: Replace exactly three consecutive periods with ``…``.

`quotes`
: Turn straight quotes into curly ones, telling apostrophes apart from single
  quotation marks.

`dashes`
: Replace ``--``/``---`` with en and em dashes.

`guillemets`
: Replace ``<<``/``>>`` with French guillemets.

All passes are total: any string is accepted and an unchanged string is
returned when nothing matches.
"""

from __future__ import annotations

from enum import Enum, auto
import logging
import re

from .classify import (
    ELLIPSIS,
    EM_DASH,
    EN_DASH,
    is_clause_end,
    is_hard_non_breaking,
    is_opening_bracket,
    is_whitespace_like,
    is_word_char,
)


_log = logging.getLogger(__name__)

_WHITESPACE_RUN = re.compile(r"\s+")
_ELLIPSIS_PATTERN = re.compile(r"(?<!\.)\.{3}(?!\.)")
_DASH_PATTERN = re.compile(r"---|--")
_GUILLEMET_PATTERN = re.compile(r"<<|>>")

APOSTROPHE = "’"


class QuoteKind(Enum):
    """Kind of quotation mark recorded on the nesting stack."""

    DOUBLE = auto()
    SINGLE = auto()


_STRAIGHT_QUOTES = {'"': QuoteKind.DOUBLE, "'": QuoteKind.SINGLE}
_GLYPHS = {
    QuoteKind.DOUBLE: ("“", "”"),
    QuoteKind.SINGLE: ("‘", "’"),
}


def whitespaces(text: str) -> str:
    """Collapse ordinary whitespace runs, preserving non-breaking spaces."""

    def _collapse(match: re.Match[str]) -> str:
        run = match.group(0)
        if any(is_hard_non_breaking(char) for char in run):
            return run
        return " "

    return _WHITESPACE_RUN.sub(_collapse, text)


def ellipsis(text: str) -> str:
    """Replace runs of exactly three periods with the ellipsis character."""
    return _ELLIPSIS_PATTERN.sub(ELLIPSIS, text)


def dashes(text: str) -> str:
    """Replace ASCII dash sequences with typographic counterparts."""

    def _swap(match: re.Match[str]) -> str:
        return EM_DASH if match.group(0) == "---" else EN_DASH

    return _DASH_PATTERN.sub(_swap, text)


def guillemets(text: str) -> str:
    """Replace doubled angle brackets with guillemets."""
    return _GUILLEMET_PATTERN.sub(lambda match: "«" if match.group(0) == "<<" else "»", text)


def _neighbours(text: str, index: int) -> tuple[str | None, str | None]:
    previous = text[index - 1] if index > 0 else None
    following = text[index + 1] if index + 1 < len(text) else None
    return previous, following


def _looks_closing(text: str, index: int) -> bool:
    """Return ``True`` when the quote at *index* sits at the end of a word."""
    previous, following = _neighbours(text, index)
    if previous is None or is_whitespace_like(previous) or is_opening_bracket(previous):
        return False
    return is_clause_end(following)


def _resolve(kind: QuoteKind, stack: list[QuoteKind], text: str, index: int) -> str:
    opening, closing = _GLYPHS[kind]
    if stack and stack[-1] is kind:
        stack.pop()
        return closing
    if kind in stack and _looks_closing(text, index):
        # An inner quote was never closed; unwind down to the matching one.
        while stack.pop() is not kind:
            pass
        return closing
    if _looks_closing(text, index):
        return closing
    stack.append(kind)
    return opening


def quotes(text: str) -> str:
    """Replace straight quotes with typographic quotation marks.

    Double quotes alternate between opening and closing according to a nesting
    stack. A single quote directly following a letter or digit is an
    apostrophe; other single quotes alternate like double quotes. Unbalanced
    input never fails: a quote that can only be closing gets the closing glyph.
    """
    if '"' not in text and "'" not in text:
        return text

    stack: list[QuoteKind] = []
    output: list[str] = []
    for index, char in enumerate(text):
        kind = _STRAIGHT_QUOTES.get(char)
        if kind is None:
            output.append(char)
            continue
        previous, _ = _neighbours(text, index)
        if kind is QuoteKind.SINGLE and previous is not None and is_word_char(previous):
            if stack and stack[-1] is QuoteKind.SINGLE and _looks_closing(text, index):
                stack.pop()
            output.append(APOSTROPHE)
            continue
        output.append(_resolve(kind, stack, text, index))

    if stack:
        _log.debug(
            "Unbalanced quotes, still open at end of text: %s",
            ", ".join(kind.name.lower() for kind in stack),
        )
    return "".join(output)


__all__ = [
    "APOSTROPHE",
    "QuoteKind",
    "dashes",
    "ellipsis",
    "guillemets",
    "quotes",
    "whitespaces",
]
