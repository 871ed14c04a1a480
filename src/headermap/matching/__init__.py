"""Header matching engine.

Normalizes headers, scores them against the schema catalog, and classifies
the resulting confidence into a recommended action.
"""

from headermap.matching.classifier import classify
from headermap.matching.matcher import HeaderMatcher
from headermap.matching.normalize import normalize
from headermap.matching.similarity import description_score, ratio, token_set_ratio

__all__ = [
    "HeaderMatcher",
    "classify",
    "description_score",
    "normalize",
    "ratio",
    "token_set_ratio",
]
