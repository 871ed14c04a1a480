"""String similarity scores over normalized strings.

All scores are integers in [0, 100] where 100 means identical. Inputs are
expected to be normalized already (see :mod:`headermap.matching.normalize`).
"""

from __future__ import annotations

from rapidfuzz import fuzz


def ratio(a: str, b: str) -> int:
    """Edit-distance similarity between two strings.

    Normalized Indel similarity, rounded half-to-even. Symmetric.
    Two empty strings score 100; one empty string scores 0.
    """
    if not a or not b:
        return 100 if a == b else 0
    return round(fuzz.ratio(a, b))


def token_set_ratio(a: str, b: str) -> int:
    """Order- and duplicate-insensitive token overlap similarity.

    Both strings are split on whitespace into token sets. The score grows
    with the shared tokens relative to the size of each set. Returns 0 when
    either side has no tokens.
    """
    if not a.split() or not b.split():
        return 0
    return round(fuzz.token_set_ratio(a, b))


def description_score(header: str, description: str) -> int:
    """Token-set score against a field description, halved.

    Capped at 50.
    """
    return token_set_ratio(header, description) // 2
