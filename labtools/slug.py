"""Conversion of arbitrary text into URL slugs."""

from __future__ import annotations

_SUBS_IN = "àáâäæãåāăąçćčđďèéêëēėęěğǵḧîïíīįìıİłḿñńǹňôöòóœøōõőṕŕřßśšşșťțûüùúūǘůűųẃẍÿýžźż"
_SUBS_OUT = "aaaaaaaaaacccddeeeeeeeegghiiiiiiiilmnnnnoooooooooprrsssssttuuuuuuuuuwxyyzzz"

_SUBSTITUTIONS = dict(zip(_SUBS_IN, _SUBS_OUT))

SEPARATOR = "-"


def conv(c: str) -> str:
    """Map one character to its slug form: accented letters lose the accent,
    ASCII letters and digits stay, everything else becomes a dash."""
    if c in _SUBSTITUTIONS:
        return _SUBSTITUTIONS[c]
    if c.isascii() and c.isalnum():
        return c
    return SEPARATOR


def slugify(s: str) -> str:
    """Lower-case ``s``, convert each character and collapse runs of dashes."""
    parts: list[str] = []
    previous = ""
    for char in s.lower():
        converted = conv(char)
        if not (converted == SEPARATOR and previous == SEPARATOR):
            parts.append(converted)
        previous = converted
    return "".join(parts)


def is_slug(s: str) -> bool:
    """Return True if ``s`` is already in slug form."""
    return s == slugify(s)


def to_slug(s: str) -> str:
    """Return the slug form of ``s``."""
    return slugify(s)