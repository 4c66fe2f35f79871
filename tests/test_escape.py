from __future__ import annotations

import importlib.util
import re

import pytest

from typosmith import escape
from typosmith.classify import NBSP, NNBSP


PYLATEXENC_AVAILABLE = importlib.util.find_spec("pylatexenc") is not None

LATEX_SPECIALS = "\\&%$#_{}~^"


def test_html_escapes_markup_characters() -> None:
    assert escape.html("<a href=\"x\">Tom & Jerry's</a>") == (
        "&lt;a href=&quot;x&quot;&gt;Tom &amp; Jerry&apos;s&lt;/a&gt;"
    )


def test_html_leaves_other_characters_alone() -> None:
    text = "Café — 50 % « ok » \\ {}"
    assert escape.html(text) == text


def test_html_does_not_protect_existing_entities() -> None:
    assert escape.html("&amp;") == "&amp;amp;"
    assert escape.html(escape.html("<")) == "&amp;lt;"


def test_tex_escapes_every_special_character() -> None:
    assert escape.tex("\\") == r"\textbackslash{}"
    assert escape.tex("&%$#_{}") == r"\&\%\$\#\_\{\}"
    assert escape.tex("~") == r"\textasciitilde{}"
    assert escape.tex("^") == r"\textasciicircum{}"


def test_tex_does_not_rescan_inserted_sequences() -> None:
    assert escape.tex("a\\b{c}") == r"a\textbackslash{}b\{c\}"
    assert escape.tex("100% of $5") == r"100\% of \$5"


def test_tex_output_has_no_unescaped_specials() -> None:
    fragments = [escape.tex(char * 2 + " text") for char in LATEX_SPECIALS]
    combined = "".join(fragments)
    stripped = re.sub(
        r"\\textbackslash\{\}|\\textasciitilde\{\}|\\textasciicircum\{\}|\\[&%$#_{}]",
        "",
        combined,
    )
    for char in LATEX_SPECIALS:
        assert char not in stripped


def test_tex_keeps_unicode_by_default() -> None:
    escaped = escape.tex("café — 50%")
    assert "café" in escaped
    assert "—" in escaped
    assert "\\%" in escaped


@pytest.mark.skipif(not PYLATEXENC_AVAILABLE, reason="pylatexenc not installed")
def test_tex_uses_legacy_macros_when_enabled() -> None:
    escaped = escape.tex("café — 50%", legacy_accents=True)
    assert "\\'{e}" in escaped
    assert "\\textemdash" in escaped
    assert "\\%" in escaped


@pytest.mark.skipif(not PYLATEXENC_AVAILABLE, reason="pylatexenc not installed")
def test_tex_legacy_mode_keeps_superscripts() -> None:
    escaped = escape.tex("x² & é", legacy_accents=True)
    assert "²" in escaped
    assert "\\&" in escaped


@pytest.mark.skipif(not PYLATEXENC_AVAILABLE, reason="pylatexenc not installed")
def test_tex_legacy_mode_braces_dotless_i_targets() -> None:
    escaped = escape.tex("naïve", legacy_accents=True)
    assert '\\"{\\i}' in escaped
    assert '\\"\\i' not in escaped


def test_empty_input() -> None:
    assert escape.html("") == ""
    assert escape.tex("") == ""


def test_nb_space_helpers() -> None:
    text = f"Bonjour{NNBSP}! Voici{NBSP}:"
    assert escape.html_nb_spaces(text) == "Bonjour&#8239;! Voici&nbsp;:"
    assert escape.tex_nb_spaces(escape.tex(text)) == "Bonjour\\,! Voici~:"
