"""Tests for MatchingConfig and ThresholdPair validation."""

from __future__ import annotations

import pytest
from pydantic import ValidationError

from headermap.models.config import MatchingConfig, ThresholdPair


class TestThresholdPair:
    def test_valid_pair(self) -> None:
        pair = ThresholdPair(auto_map_threshold=0.9, review_threshold=0.75)
        assert pair.auto_map_threshold == 0.9
        assert pair.review_threshold == 0.75

    def test_equal_thresholds_rejected(self) -> None:
        with pytest.raises(ValidationError, match="must be greater than"):
            ThresholdPair(auto_map_threshold=0.8, review_threshold=0.8)

    def test_inverted_thresholds_rejected(self) -> None:
        with pytest.raises(ValidationError, match="must be greater than"):
            ThresholdPair(auto_map_threshold=0.7, review_threshold=0.9)

    @pytest.mark.parametrize(("auto", "review"), [(1.2, 0.5), (0.9, -0.1)])
    def test_out_of_range_rejected(self, auto: float, review: float) -> None:
        with pytest.raises(ValidationError):
            ThresholdPair(auto_map_threshold=auto, review_threshold=review)

    def test_frozen(self) -> None:
        pair = ThresholdPair(auto_map_threshold=0.9, review_threshold=0.75)
        with pytest.raises(ValidationError):
            pair.review_threshold = 0.5  # type: ignore[misc]


class TestMatchingConfig:
    def test_defaults(self) -> None:
        config = MatchingConfig()
        assert config.fuzzy_min_threshold == 60
        assert config.required_thresholds.auto_map_threshold == 0.90
        assert config.required_thresholds.review_threshold == 0.75
        assert config.optional_thresholds.auto_map_threshold == 0.85
        assert config.optional_thresholds.review_threshold == 0.70

    def test_thresholds_for(self) -> None:
        config = MatchingConfig()
        assert config.thresholds_for(True) is config.required_thresholds
        assert config.thresholds_for(False) is config.optional_thresholds

    @pytest.mark.parametrize("score", [-1, 101])
    def test_fuzzy_threshold_range(self, score: int) -> None:
        with pytest.raises(ValidationError):
            MatchingConfig(fuzzy_min_threshold=score)

    def test_invalid_nested_pair_rejected_from_dict(self) -> None:
        with pytest.raises(ValidationError, match="must be greater than"):
            MatchingConfig.model_validate(
                {
                    "optional_thresholds": {
                        "auto_map_threshold": 0.5,
                        "review_threshold": 0.6,
                    }
                }
            )

    def test_frozen(self) -> None:
        config = MatchingConfig()
        with pytest.raises(ValidationError):
            config.fuzzy_min_threshold = 10  # type: ignore[misc]
