"""French spacing rules built on top of the cleanup and escaping passes.

French typography separates most double punctuation from the preceding word
with a non-breaking space (narrow before ``; ! ? %``, full before ``:``) and
pads the inside of guillemets. The formatter scans cleaned text once and for
each mark either turns the adjacent ordinary space into the required
non-breaking one, inserts it when missing, or leaves an existing non-breaking
space untouched so that formatting twice changes nothing.

Scanning alternates between two states: plain scanning, and *after a spaced
mark* while a space owed after ``«`` (or a dialogue dash) is pending. The
pending space replaces the next ordinary space, or is emitted before the next
character, or at the very end of the text.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from functools import lru_cache
import logging
from typing import Any
import unicodedata

from . import clean, escape
from .classify import (
    EM_DASH,
    NBSP,
    NNBSP,
    SpaceWidth,
    SpacingRule,
    is_clause_end,
    is_hard_non_breaking,
    is_opening_bracket,
    is_plain_whitespace,
    punctuation_rule,
)
from .config import FrenchOptions


_log = logging.getLogger(__name__)

_Token = str | SpaceWidth

_EXISTING_SPACES = {NBSP: SpaceWidth.REGULAR, NNBSP: SpaceWidth.NARROW}
_STACKING_MARKS = frozenset("!?")


def _resolve_width(width: SpaceWidth | None, options: FrenchOptions) -> SpaceWidth | None:
    if width is SpaceWidth.NARROW:
        return options.narrow_space_variant
    return width


@lru_cache(maxsize=32)
def _rule_table(options: FrenchOptions) -> Mapping[str, SpacingRule]:
    """Return the punctuation rules enabled by *options*."""
    enabled = {
        ":": options.space_before_colon,
        ";": options.space_before_semicolon,
        "!": options.space_before_exclamation,
        "?": options.space_before_question,
        "%": options.space_before_percent,
        "«": options.space_around_guillemets,
        "»": options.space_around_guillemets,
    }
    table: dict[str, SpacingRule] = {}
    for mark, active in enabled.items():
        rule = punctuation_rule(mark)
        if not active or rule is None:
            continue
        table[mark] = SpacingRule(
            mark,
            before=_resolve_width(rule.before, options),
            after=_resolve_width(rule.after, options),
        )
    return table


def _follows_amount(text: str, index: int) -> bool:
    position = index - 1
    if position >= 0 and is_plain_whitespace(text[position]):
        position -= 1
    return position >= 0 and text[position].isdigit()


@dataclass(frozen=True, slots=True)
class FrenchFormatter:
    """Apply French non-breaking space rules to plain text.

    Instances are immutable and may be shared between threads.
    """

    options: FrenchOptions = field(default_factory=FrenchOptions)

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any] | None) -> FrenchFormatter:
        """Build a formatter from a plain options mapping."""
        return cls(FrenchOptions.from_mapping(data))

    def format(self, text: str) -> str:
        """Return *text* with cleaned whitespace and French non-breaking spaces."""
        tokens = self._space(clean.whitespaces(text))
        return "".join(
            token.char if isinstance(token, SpaceWidth) else token for token in tokens
        )

    def format_tex(self, text: str, *, legacy_accents: bool = False) -> str:
        """Return LaTeX-escaped *text* using ``~`` and ``\\,`` for non-breaking spaces.

        Ordinary text runs go through :func:`typosmith.escape.tex`; the space
        commands are spliced in afterwards so they are never escaped.
        """
        parts: list[str] = []
        run: list[str] = []
        for token in self._space(clean.whitespaces(text)):
            if isinstance(token, SpaceWidth):
                parts.append(escape.tex("".join(run), legacy_accents=legacy_accents))
                parts.append(token.latex)
                run.clear()
            else:
                run.append(token)
        parts.append(escape.tex("".join(run), legacy_accents=legacy_accents))
        return "".join(parts)

    def _rule_at(
        self,
        text: str,
        index: int,
        table: Mapping[str, SpacingRule],
        at_start: bool,
    ) -> SpacingRule | None:
        char = text[index]
        rule = table.get(char)
        if rule is not None:
            return rule
        options = self.options
        if (
            options.space_before_currency
            and unicodedata.category(char) == "Sc"
            and _follows_amount(text, index)
        ):
            return SpacingRule(char, before=SpaceWidth.REGULAR)
        if options.space_after_dialogue_dash and char == EM_DASH and at_start:
            return SpacingRule(char, after=SpaceWidth.REGULAR)
        return None

    def _lead(self, tokens: list[_Token], width: SpaceWidth, text: str, index: int) -> bool:
        """Put *width* before the mark at *index*; return ``True`` when changed."""
        if not tokens:
            return False
        last = tokens[-1]
        if isinstance(last, SpaceWidth) or is_hard_non_breaking(last):
            return False
        if is_plain_whitespace(last):
            tokens[-1] = width
            return True
        if last in _STACKING_MARKS and text[index] in _STACKING_MARKS:
            return False
        if is_opening_bracket(last):
            return False
        following = text[index + 1] if index + 1 < len(text) else None
        if not is_clause_end(following):
            return False
        tokens.append(width)
        return True

    def _space(self, text: str) -> list[_Token]:
        table = _rule_table(self.options)
        tokens: list[_Token] = []
        pending: SpaceWidth | None = None
        changes = 0
        at_start = True

        for index, char in enumerate(text):
            existing = _EXISTING_SPACES.get(char)
            if existing is not None:
                tokens.append(existing)
                pending = None
                continue
            if pending is not None:
                tokens.append(pending)
                changes += 1
                pending = None
                if is_plain_whitespace(char):
                    continue

            rule = self._rule_at(text, index, table, at_start)
            if rule is not None and rule.before is not None:
                changes += self._lead(tokens, rule.before, text, index)
            tokens.append(char)
            if not char.isspace():
                at_start = False
            if rule is not None and rule.after is not None:
                pending = rule.after

        if pending is not None:
            tokens.append(pending)
            changes += 1

        if changes:
            _log.debug("Placed %d non-breaking space(s) in %d characters", changes, len(text))
        return tokens


__all__ = ["FrenchFormatter"]
