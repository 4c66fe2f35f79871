"""Custom exception hierarchy for the typography helpers."""

from __future__ import annotations


class TypographyError(ValueError):
    """Base exception for typography configuration failures."""


class InvalidOptionsError(TypographyError):
    """Raised when formatter options cannot be validated."""
