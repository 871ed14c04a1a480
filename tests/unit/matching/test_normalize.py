"""Tests for header normalization."""

from __future__ import annotations

import pytest

from headermap.matching.normalize import normalize


class TestNormalize:
    def test_case_and_separator_insensitive(self) -> None:
        assert normalize("Total_Gas") == "total gas"
        assert normalize("total gas") == "total gas"
        assert normalize("TOTAL-GAS") == "total gas"

    @pytest.mark.parametrize(
        ("raw", "expected"),
        [
            ("biogas.yield", "biogas yield"),
            ("CH4 (%)", "ch4 %"),
            ("m3/day", "m3 day"),
            ("  padded  ", "padded"),
            ("a__b--c", "a b c"),
            ("D1 - Mixer (1) / A", "d1 mixer 1 a"),
            ("tab\tand\nnewline", "tab and newline"),
        ],
    )
    def test_separators_become_single_spaces(self, raw: str, expected: str) -> None:
        assert normalize(raw) == expected

    @pytest.mark.parametrize("raw", ["", " ", "   \t  ", "___", "(/)"])
    def test_blank_input_normalizes_to_empty(self, raw: str) -> None:
        assert normalize(raw) == ""

    @pytest.mark.parametrize(
        "raw",
        ["Total_Gas", "  D1-Mixer (1) / A ", "%DM Maize DM", "", "already normal"],
    )
    def test_idempotent(self, raw: str) -> None:
        once = normalize(raw)
        assert normalize(once) == once

    def test_no_double_spaces(self) -> None:
        assert "  " not in normalize("a _ - . ( ) / b")
