"""Escape text for HTML and LaTeX output.

Both escapers work in a single pass and never look at what they emitted, so
running one twice escapes the escapes. Callers must feed raw text only.
"""

from __future__ import annotations

import re
import unicodedata

from pylatexenc.latexencode import unicode_to_latex

from .classify import NBSP, NNBSP, SpaceWidth


_HTML_ESCAPE_MAP = {
    "&": "&amp;",
    "<": "&lt;",
    ">": "&gt;",
    '"': "&quot;",
    "'": "&apos;",
}

_LATEX_ESCAPE_MAP = {
    "\\": r"\textbackslash{}",
    "&": r"\&",
    "%": r"\%",
    "$": r"\$",
    "#": r"\#",
    "_": r"\_",
    "{": r"\{",
    "}": r"\}",
    "~": r"\textasciitilde{}",
    "^": r"\textasciicircum{}",
}

_NB_SPACE_WIDTHS = {NBSP: SpaceWidth.REGULAR, NNBSP: SpaceWidth.NARROW}

_ACCENT_NEEDS_BRACES_PATTERN = re.compile(
    r"\\([" + re.escape("`'^\"~=\\.Hrvuck") + r"])\s*([A-Za-z])(?!\{)"
)
_ACCENT_CONTROL_TARGET_PATTERN = re.compile(
    r"\\([" + re.escape("`'^\"~=\\.Hrvuck") + r"])\s*(\\[ij])"
)


def html(text: str) -> str:
    """Replace ``& < > " '`` with their named HTML entities."""
    return "".join(_HTML_ESCAPE_MAP.get(char, char) for char in text)


def _wrap_latex_output(payload: str) -> str:
    """Ensure accent macros wrap their payload in braces."""

    def _repl(match: re.Match[str]) -> str:
        command, char = match.groups()
        return f"\\{command}{{{char}}}"

    payload = _ACCENT_NEEDS_BRACES_PATTERN.sub(_repl, payload)
    return _ACCENT_CONTROL_TARGET_PATTERN.sub(_repl, payload)


def _should_skip_encoding(char: str) -> bool:
    try:
        name = unicodedata.name(char)
    except ValueError:
        return False
    if "SUPERSCRIPT" in name or "SUBSCRIPT" in name:
        return True
    return "MODIFIER LETTER" in name and ("SMALL" in name or "CAPITAL" in name)


def tex(text: str, *, legacy_accents: bool = False) -> str:
    """Escape the LaTeX special characters ``\\ & % $ # _ { } ~ ^``.

    With ``legacy_accents`` enabled, non-ASCII characters are also converted to
    legacy LaTeX macros (``é`` becomes ``\\'{e}``) for engines without Unicode
    input support. Superscript, subscript and modifier letters are kept as-is.
    """
    if not text:
        return text
    if not legacy_accents:
        return "".join(_LATEX_ESCAPE_MAP.get(char, char) for char in text)

    parts: list[str] = []
    buffer: list[str] = []

    def _flush() -> None:
        if not buffer:
            return
        escaped = "".join(_LATEX_ESCAPE_MAP.get(char, char) for char in buffer)
        encoded = unicode_to_latex(escaped, non_ascii_only=True, unknown_char_warning=False)
        parts.append(_wrap_latex_output(encoded))
        buffer.clear()

    for char in text:
        if _should_skip_encoding(char):
            _flush()
            parts.append(char)
        else:
            buffer.append(char)
    _flush()
    return "".join(parts)


def html_nb_spaces(text: str) -> str:
    """Spell non-breaking spaces as HTML entities."""
    return "".join(
        _NB_SPACE_WIDTHS[char].html if char in _NB_SPACE_WIDTHS else char for char in text
    )


def tex_nb_spaces(text: str) -> str:
    """Replace non-breaking spaces with ``~`` and ``\\,``.

    Run it after :func:`tex`, which would otherwise escape the inserted
    commands.
    """
    return "".join(
        _NB_SPACE_WIDTHS[char].latex if char in _NB_SPACE_WIDTHS else char for char in text
    )


__all__ = ["html", "html_nb_spaces", "tex", "tex_nb_spaces"]
