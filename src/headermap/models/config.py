"""Matching configuration models.

Thresholds are validated once at construction; a config whose auto-map
threshold does not exceed its review threshold is rejected.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field, model_validator


class ThresholdPair(BaseModel):
    """Confidence thresholds for one field importance class."""

    model_config = ConfigDict(frozen=True)

    auto_map_threshold: float = Field(
        ..., ge=0.0, le=1.0, description="Confidence at or above which a mapping is auto-accepted"
    )
    review_threshold: float = Field(
        ..., ge=0.0, le=1.0, description="Confidence at or above which a mapping goes to review"
    )

    @model_validator(mode="after")
    def _validate_ordering(self) -> ThresholdPair:
        if self.auto_map_threshold <= self.review_threshold:
            msg = (
                f"auto_map_threshold ({self.auto_map_threshold}) must be greater than "
                f"review_threshold ({self.review_threshold})"
            )
            raise ValueError(msg)
        return self


class MatchingConfig(BaseModel):
    """Immutable matching policy shared by every engine call."""

    model_config = ConfigDict(frozen=True)

    fuzzy_min_threshold: int = Field(
        default=60, ge=0, le=100, description="Minimum similarity score (0-100) for a fuzzy match"
    )
    required_thresholds: ThresholdPair = Field(
        default=ThresholdPair(auto_map_threshold=0.90, review_threshold=0.75),
        description="Thresholds applied to required fields",
    )
    optional_thresholds: ThresholdPair = Field(
        default=ThresholdPair(auto_map_threshold=0.85, review_threshold=0.70),
        description="Thresholds applied to optional fields",
    )

    def thresholds_for(self, is_required: bool) -> ThresholdPair:
        """Return the threshold pair for a required or optional field."""
        return self.required_thresholds if is_required else self.optional_thresholds
