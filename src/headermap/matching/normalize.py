"""Header text normalization.

Both sides of every comparison go through normalize() so that case and
common separators never affect matching.
"""

from __future__ import annotations

import re

# Separators that are treated as word breaks: _ - . ( ) /
_SEPARATORS = re.compile(r"[_\-.()/]")
_WHITESPACE = re.compile(r"\s+")


def normalize(text: str) -> str:
    """Canonicalize a header or schema string for comparison.

    Lowercases, turns each separator into a space, trims, and collapses
    whitespace runs to a single space. Idempotent.

    Examples:
        >>> normalize("Total_Gas")
        'total gas'
        >>> normalize("  D1-Mixer (1) / A ")
        'd1 mixer 1 a'
    """
    if not text or text.isspace():
        return ""
    spaced = _SEPARATORS.sub(" ", text.lower())
    return _WHITESPACE.sub(" ", spaced).strip()
