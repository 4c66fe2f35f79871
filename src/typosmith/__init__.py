"""Typographic cleanup and escaping for HTML and LaTeX output."""

from __future__ import annotations

from importlib.metadata import PackageNotFoundError, version as _pkg_version

from typosmith import clean, escape
from typosmith.classify import CharClass, SpaceWidth, SpacingRule
from typosmith.config import FrenchOptions
from typosmith.exceptions import InvalidOptionsError, TypographyError
from typosmith.french import FrenchFormatter
from typosmith.pipeline import OutputFormat, typeset


try:
    __version__ = _pkg_version("typosmith")
except PackageNotFoundError:
    __version__ = "0.0.0"


def get_version() -> str:
    """Return the installed typosmith version."""
    return __version__


__all__ = [
    "CharClass",
    "FrenchFormatter",
    "FrenchOptions",
    "InvalidOptionsError",
    "OutputFormat",
    "SpaceWidth",
    "SpacingRule",
    "TypographyError",
    "__version__",
    "clean",
    "escape",
    "get_version",
    "typeset",
]
