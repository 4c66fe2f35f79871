"""Configuration models used by the French formatter.

FrenchOptions

`space_before_colon` (`bool`)
: Put a non-breaking space before ``:``. The space is always full width.

`space_before_semicolon` (`bool`)
: Put a non-breaking space before ``;``.

`space_before_exclamation` (`bool`)
: Put a non-breaking space before ``!``.

`space_before_question` (`bool`)
: Put a non-breaking space before ``?``.

`space_before_percent` (`bool`)
: Put a non-breaking space before ``%``.

`space_around_guillemets` (`bool`)
: Put a non-breaking space inside ``« »``, after the opening guillemet and
  before the closing one.

`space_before_currency` (`bool`)
: Keep an amount and its currency symbol together (``10 €``) with a full
  non-breaking space.

`space_after_dialogue_dash` (`bool`)
: Follow an em dash opening a dialogue line with a full non-breaking space.

`narrow_space_variant` (`SpaceWidth`)
: Width used before ``;``, ``!``, ``?`` and ``%``. ``narrow`` selects the narrow
  no-break space (U+202F, ``\\,`` in LaTeX); ``regular`` falls back to the
  regular no-break space (U+00A0, ``~``) for fonts lacking the narrow glyph.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from pydantic import BaseModel, ConfigDict, ValidationError

from .classify import SpaceWidth
from .exceptions import InvalidOptionsError


class FrenchOptions(BaseModel):
    """Toggles selecting which French spacing rules apply."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    space_before_colon: bool = True
    space_before_semicolon: bool = True
    space_before_exclamation: bool = True
    space_before_question: bool = True
    space_before_percent: bool = True
    space_around_guillemets: bool = True
    space_before_currency: bool = True
    space_after_dialogue_dash: bool = True
    narrow_space_variant: SpaceWidth = SpaceWidth.NARROW

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any] | None) -> FrenchOptions:
        """Validate a plain mapping, typically read from a project config file."""
        try:
            return cls.model_validate(dict(data or {}))
        except ValidationError as exc:
            raise InvalidOptionsError(f"Invalid French formatter options: {exc}") from exc


__all__ = ["FrenchOptions"]
