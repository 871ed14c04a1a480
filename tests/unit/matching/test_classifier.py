"""Tests for confidence -> action classification."""

from __future__ import annotations

import pytest

from headermap.matching.classifier import classify
from headermap.models.config import MatchingConfig, ThresholdPair
from headermap.models.mapping import MappingAction

# Higher means less human attention needed.
_ACTION_STRENGTH = {
    MappingAction.MANUAL_MAP: 0,
    MappingAction.REVIEW: 1,
    MappingAction.AUTO_MAP: 2,
}


@pytest.fixture()
def config() -> MatchingConfig:
    return MatchingConfig(
        fuzzy_min_threshold=20,
        required_thresholds=ThresholdPair(auto_map_threshold=0.90, review_threshold=0.75),
        optional_thresholds=ThresholdPair(auto_map_threshold=0.85, review_threshold=0.70),
    )


class TestClassify:
    @pytest.mark.parametrize(
        ("confidence", "expected"),
        [
            (1.0, MappingAction.AUTO_MAP),
            (0.90, MappingAction.AUTO_MAP),
            (0.89, MappingAction.REVIEW),
            (0.75, MappingAction.REVIEW),
            (0.74, MappingAction.MANUAL_MAP),
            (0.0, MappingAction.MANUAL_MAP),
        ],
    )
    def test_required_thresholds(
        self, confidence: float, expected: MappingAction, config: MatchingConfig
    ) -> None:
        assert classify(confidence, True, config) == expected

    @pytest.mark.parametrize(
        ("confidence", "expected"),
        [
            (0.85, MappingAction.AUTO_MAP),
            (0.84, MappingAction.REVIEW),
            (0.72, MappingAction.REVIEW),
            (0.70, MappingAction.REVIEW),
            (0.69, MappingAction.MANUAL_MAP),
        ],
    )
    def test_optional_thresholds(
        self, confidence: float, expected: MappingAction, config: MatchingConfig
    ) -> None:
        assert classify(confidence, False, config) == expected

    def test_same_confidence_stricter_for_required(self, config: MatchingConfig) -> None:
        assert classify(0.87, False, config) == MappingAction.AUTO_MAP
        assert classify(0.87, True, config) == MappingAction.REVIEW

    @pytest.mark.parametrize("is_required", [True, False])
    def test_monotonic_in_confidence(self, is_required: bool, config: MatchingConfig) -> None:
        strengths = [
            _ACTION_STRENGTH[classify(step / 100, is_required, config)] for step in range(101)
        ]
        assert strengths == sorted(strengths)
        assert strengths[0] == _ACTION_STRENGTH[MappingAction.MANUAL_MAP]
        assert strengths[-1] == _ACTION_STRENGTH[MappingAction.AUTO_MAP]
