"""Mapping result models produced by the header matching engine.

A MappingResult is created fresh for every query and never mutated.
MappingReport groups the results for one header source (a sheet or a
delimited file) with per-action counts for presentation and export.
"""

from __future__ import annotations

from enum import StrEnum

from pydantic import BaseModel, ConfigDict, Field


class MatchType(StrEnum):
    """Which matching layer produced a result.

    - EXACT: normalized header equals a normalized canonical name
    - ALIAS: normalized header equals a normalized alias
    - FUZZY: similarity score at or above the configured minimum
    - NO_MATCH: nothing qualified
    """

    EXACT = "exact"
    ALIAS = "alias"
    FUZZY = "fuzzy"
    NO_MATCH = "no_match"


class MappingAction(StrEnum):
    """Recommended disposition, ordered by how much human attention it needs."""

    AUTO_MAP = "auto_map"
    REVIEW = "review"
    MANUAL_MAP = "manual_map"


class MappingResult(BaseModel):
    """Proposed mapping of one user column to a canonical column."""

    model_config = ConfigDict(frozen=True)

    user_column: str = Field(..., description="Header exactly as supplied by the user")
    canonical_column: str = Field(
        default="", description="Canonical column name, empty when nothing matched"
    )
    confidence: float = Field(..., ge=0.0, le=1.0, description="Confidence score (0.0 to 1.0)")
    match_type: MatchType = Field(..., description="Layer that produced the match")
    match_details: str = Field(..., description="Human-readable explanation of the match")
    recommended_action: MappingAction = Field(..., description="Recommended disposition")


class MappingReport(BaseModel):
    """Mapping results for every header of one source, in header order."""

    source: str = Field(..., description="Source label (e.g., 'plant.xlsx / Sheet1')")
    results: list[MappingResult] = Field(default_factory=list, description="Results in input order")
    auto_map_count: int = Field(default=0, ge=0, description="Results recommended for AUTO_MAP")
    review_count: int = Field(default=0, ge=0, description="Results recommended for REVIEW")
    manual_map_count: int = Field(default=0, ge=0, description="Results recommended for MANUAL_MAP")

    @property
    def unmatched_columns(self) -> list[str]:
        """User columns with no canonical match."""
        return [r.user_column for r in self.results if r.match_type == MatchType.NO_MATCH]


def summarize_results(source: str, results: list[MappingResult]) -> MappingReport:
    """Build a MappingReport with per-action counts.

    Args:
        source: Label describing where the headers came from.
        results: Mapping results in header order.

    Returns:
        MappingReport carrying the results and their action counts.
    """
    counts = dict.fromkeys(MappingAction, 0)
    for r in results:
        counts[r.recommended_action] += 1

    return MappingReport(
        source=source,
        results=list(results),
        auto_map_count=counts[MappingAction.AUTO_MAP],
        review_count=counts[MappingAction.REVIEW],
        manual_map_count=counts[MappingAction.MANUAL_MAP],
    )
