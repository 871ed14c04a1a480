"""Tests for MappingResult and report summaries."""

from __future__ import annotations

import pytest
from pydantic import ValidationError

from headermap.models.mapping import (
    MappingAction,
    MappingResult,
    MatchType,
    summarize_results,
)


def _result(column: str, action: MappingAction, match_type: MatchType) -> MappingResult:
    return MappingResult(
        user_column=column,
        canonical_column="" if match_type == MatchType.NO_MATCH else "target",
        confidence=0.0 if match_type == MatchType.NO_MATCH else 0.8,
        match_type=match_type,
        match_details="details",
        recommended_action=action,
    )


class TestMappingResult:
    def test_confidence_bounds(self) -> None:
        with pytest.raises(ValidationError):
            MappingResult(
                user_column="x",
                confidence=1.5,
                match_type=MatchType.FUZZY,
                match_details="",
                recommended_action=MappingAction.REVIEW,
            )

    def test_frozen(self) -> None:
        result = _result("x", MappingAction.REVIEW, MatchType.FUZZY)
        with pytest.raises(ValidationError):
            result.confidence = 1.0  # type: ignore[misc]

    def test_enum_values_serialize(self) -> None:
        data = _result("x", MappingAction.AUTO_MAP, MatchType.ALIAS).model_dump(mode="json")
        assert data["match_type"] == "alias"
        assert data["recommended_action"] == "auto_map"


class TestSummarizeResults:
    def test_counts_per_action(self) -> None:
        results = [
            _result("a", MappingAction.AUTO_MAP, MatchType.EXACT),
            _result("b", MappingAction.AUTO_MAP, MatchType.ALIAS),
            _result("c", MappingAction.REVIEW, MatchType.FUZZY),
            _result("d", MappingAction.MANUAL_MAP, MatchType.NO_MATCH),
        ]
        report = summarize_results("plant.xlsx / Daily", results)
        assert report.source == "plant.xlsx / Daily"
        assert report.auto_map_count == 2
        assert report.review_count == 1
        assert report.manual_map_count == 1
        assert report.unmatched_columns == ["d"]
        assert [r.user_column for r in report.results] == ["a", "b", "c", "d"]

    def test_empty(self) -> None:
        report = summarize_results("empty", [])
        assert report.auto_map_count == 0
        assert report.results == []
        assert report.unmatched_columns == []
