from __future__ import annotations

from pydantic import ValidationError
import pytest

from typosmith import FrenchOptions, InvalidOptionsError, TypographyError
from typosmith.classify import SpaceWidth


def test_defaults_enable_every_rule() -> None:
    options = FrenchOptions()
    assert options.space_before_colon
    assert options.space_before_semicolon
    assert options.space_before_exclamation
    assert options.space_before_question
    assert options.space_around_guillemets
    assert options.narrow_space_variant is SpaceWidth.NARROW


def test_options_are_frozen_and_hashable() -> None:
    options = FrenchOptions()
    with pytest.raises(ValidationError):
        options.space_before_colon = False  # type: ignore[misc]
    assert hash(options) == hash(FrenchOptions())


def test_from_mapping_accepts_partial_configuration() -> None:
    options = FrenchOptions.from_mapping({"space_before_colon": False})
    assert options.space_before_colon is False
    assert options.space_before_question is True
    assert FrenchOptions.from_mapping(None) == FrenchOptions()


def test_from_mapping_rejects_unknown_keys() -> None:
    with pytest.raises(InvalidOptionsError) as excinfo:
        FrenchOptions.from_mapping({"space_before_comma": True})
    assert isinstance(excinfo.value.__cause__, ValidationError)
    assert isinstance(excinfo.value, TypographyError)
    assert isinstance(excinfo.value, ValueError)


def test_from_mapping_rejects_unknown_width() -> None:
    with pytest.raises(InvalidOptionsError, match="narrow_space_variant"):
        FrenchOptions.from_mapping({"narrow_space_variant": "wide"})
