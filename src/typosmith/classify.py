"""Character classification shared by the cleaning, escaping and spacing passes.

Every helper takes a single character and is total over Unicode: characters
that fall outside the known categories are reported as :attr:`CharClass.OTHER`
and yield no spacing rule.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, auto
import unicodedata


NBSP = "\u00a0"
NNBSP = "\u202f"
FIGURE_SPACE = "\u2007"

ELLIPSIS = "\u2026"
EN_DASH = "\u2013"
EM_DASH = "\u2014"


class CharClass(Enum):
    """Coarse category assigned to a character while scanning text."""

    WHITESPACE = auto()
    NON_BREAKING_SPACE = auto()
    PERIOD = auto()
    DOUBLE_QUOTE = auto()
    SINGLE_QUOTE = auto()
    OPENING_BRACKET = auto()
    FRENCH_PUNCTUATION = auto()
    LETTER = auto()
    OTHER = auto()


class SpaceWidth(str, Enum):
    """Width of a non-breaking space and its rendering per output format."""

    REGULAR = "regular"
    NARROW = "narrow"

    @property
    def char(self) -> str:
        return NBSP if self is SpaceWidth.REGULAR else NNBSP

    @property
    def latex(self) -> str:
        return "~" if self is SpaceWidth.REGULAR else r"\,"

    @property
    def html(self) -> str:
        return "&nbsp;" if self is SpaceWidth.REGULAR else "&#8239;"


@dataclass(frozen=True, slots=True)
class SpacingRule:
    """Non-breaking spaces a punctuation mark requires on each side."""

    mark: str
    before: SpaceWidth | None = None
    after: SpaceWidth | None = None


_NON_BREAKING = frozenset({NBSP, NNBSP, FIGURE_SPACE})

_FRENCH_RULES: dict[str, SpacingRule] = {
    ":": SpacingRule(":", before=SpaceWidth.REGULAR),
    ";": SpacingRule(";", before=SpaceWidth.NARROW),
    "!": SpacingRule("!", before=SpaceWidth.NARROW),
    "?": SpacingRule("?", before=SpaceWidth.NARROW),
    "%": SpacingRule("%", before=SpaceWidth.NARROW),
    "«": SpacingRule("«", after=SpaceWidth.REGULAR),
    "»": SpacingRule("»", before=SpaceWidth.REGULAR),
}

# Marks that close a clause; a spaced mark followed by one of these is not part
# of a token such as ``10:30`` or ``http://``.
_CLAUSE_END = frozenset(".,;:!?%…)]}»\"'”’–—")


def is_whitespace_like(char: str) -> bool:
    """Return ``True`` for any whitespace, non-breaking variants included."""
    return char.isspace() or char in _NON_BREAKING


def is_hard_non_breaking(char: str) -> bool:
    """Return ``True`` for spaces that whitespace cleanup must never touch."""
    return char in _NON_BREAKING


def is_plain_whitespace(char: str) -> bool:
    return is_whitespace_like(char) and char not in _NON_BREAKING


def is_word_char(char: str) -> bool:
    """Return ``True`` for letters and digits in any script."""
    return char.isalnum()


def is_opening_bracket(char: str) -> bool:
    return char == "«" or unicodedata.category(char) == "Ps"


def is_clause_end(char: str | None) -> bool:
    """Return ``True`` when *char* may follow a mark that closes a clause."""
    return char is None or is_whitespace_like(char) or char in _CLAUSE_END


def punctuation_rule(char: str) -> SpacingRule | None:
    """Return the default French spacing rule for *char*, if any."""
    return _FRENCH_RULES.get(char)


def classify(char: str) -> CharClass:
    """Return the :class:`CharClass` of a single character."""
    if char in _NON_BREAKING:
        return CharClass.NON_BREAKING_SPACE
    if char.isspace():
        return CharClass.WHITESPACE
    if char == ".":
        return CharClass.PERIOD
    if char == '"':
        return CharClass.DOUBLE_QUOTE
    if char == "'":
        return CharClass.SINGLE_QUOTE
    if char in _FRENCH_RULES:
        return CharClass.FRENCH_PUNCTUATION
    if is_opening_bracket(char):
        return CharClass.OPENING_BRACKET
    if is_word_char(char):
        return CharClass.LETTER
    return CharClass.OTHER


__all__ = [
    "ELLIPSIS",
    "EM_DASH",
    "EN_DASH",
    "FIGURE_SPACE",
    "NBSP",
    "NNBSP",
    "CharClass",
    "SpaceWidth",
    "SpacingRule",
    "classify",
    "is_clause_end",
    "is_hard_non_breaking",
    "is_opening_bracket",
    "is_plain_whitespace",
    "is_whitespace_like",
    "is_word_char",
    "punctuation_rule",
]
