"""Tests for similarity scoring functions."""

from __future__ import annotations

import pytest

from headermap.matching.similarity import description_score, ratio, token_set_ratio


class TestRatio:
    def test_identical_strings_score_100(self) -> None:
        assert ratio("total biogas m3", "total biogas m3") == 100

    def test_disjoint_strings_score_0(self) -> None:
        assert ratio("abc", "xyz") == 0

    def test_single_typo_scores_high(self) -> None:
        assert ratio("totl biogas", "total biogas m3") >= 85

    @pytest.mark.parametrize(
        ("a", "b"),
        [("totl biogas", "total biogas m3"), ("mixer 1", "d1 mixer 1 a"), ("gas", "")],
    )
    def test_symmetric(self, a: str, b: str) -> None:
        assert ratio(a, b) == ratio(b, a)

    def test_empty_strings(self) -> None:
        assert ratio("", "") == 100
        assert ratio("", "date") == 0

    def test_returns_int_in_range(self) -> None:
        score = ratio("biogas yeild", "biogas yield")
        assert isinstance(score, int)
        assert 0 <= score <= 100

    def test_closer_string_scores_higher(self) -> None:
        assert ratio("biogas yeild", "biogas yield") > ratio("biogas yeild", "ph value")


class TestTokenSetRatio:
    def test_order_insensitive(self) -> None:
        assert token_set_ratio("gas total", "total gas") == 100

    def test_duplicate_tokens_ignored(self) -> None:
        assert token_set_ratio("gas gas total", "total gas") == 100

    def test_more_overlap_scores_higher(self) -> None:
        desc = "total biogas produced per day"
        assert token_set_ratio("total biogas", desc) > token_set_ratio("total energy", desc)

    def test_empty_side_scores_0(self) -> None:
        assert token_set_ratio("", "total gas") == 0
        assert token_set_ratio("total gas", "   ") == 0


class TestDescriptionScore:
    def test_halved(self) -> None:
        assert description_score("methane concentration", "methane concentration") == 50

    def test_never_exceeds_50(self) -> None:
        assert description_score("total gas", "total gas per day") <= 50

    def test_integer_halving(self) -> None:
        full = token_set_ratio("daily gas", "gas output daily value")
        assert description_score("daily gas", "gas output daily value") == full // 2
