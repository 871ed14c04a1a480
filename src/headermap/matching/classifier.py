"""Confidence -> recommended action classification."""

from __future__ import annotations

from headermap.models.config import MatchingConfig
from headermap.models.mapping import MappingAction


def classify(confidence: float, is_required: bool, config: MatchingConfig) -> MappingAction:
    """Map a confidence score to a recommended action.

    Required fields use ``config.required_thresholds``, optional fields use
    ``config.optional_thresholds``.

    Args:
        confidence: Confidence score between 0.0 and 1.0.
        is_required: Whether the target field is required.
        config: Matching policy holding both threshold pairs.

    Returns:
        AUTO_MAP at or above the auto-map threshold, REVIEW at or above the
        review threshold, else MANUAL_MAP.
    """
    thresholds = config.thresholds_for(is_required)
    if confidence >= thresholds.auto_map_threshold:
        return MappingAction.AUTO_MAP
    if confidence >= thresholds.review_threshold:
        return MappingAction.REVIEW
    return MappingAction.MANUAL_MAP
