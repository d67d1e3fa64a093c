"""
Severity ordering, parsing and threshold filtering.
"""

from __future__ import annotations

import logging

import pytest

from rotolog.exceptions import InvalidLevelError
from rotolog.levels import LevelFilter, Severity


class TestSeverityOrdering:
    """Severity must be a total order on integer ranks."""

    def test_ranks_are_ordered(self) -> None:
        assert Severity.DEBUG < Severity.INFO < Severity.WARN < Severity.ERROR < Severity.FATAL
        assert [int(s) for s in Severity] == [0, 1, 2, 3, 4]

    def test_labels_are_capitalised(self) -> None:
        assert [s.label for s in Severity] == ["Debug", "Info", "Warn", "Error", "Fatal"]


class TestSeverityParse:
    """Parsing from names, ranks and aliases"""

    @pytest.mark.parametrize(
        "value, expected",
        [
            ("debug", Severity.DEBUG),
            (" INFO ", Severity.INFO),
            ("warning", Severity.WARN),
            ("Critical", Severity.FATAL),
            (3, Severity.ERROR),
            ("2", Severity.WARN),
            (Severity.FATAL, Severity.FATAL),
        ],
    )
    def test_accepts_known_values(self, value, expected) -> None:
        assert Severity.parse(value) is expected

    @pytest.mark.parametrize("value", ["verbose", 7, -1, None, True, 1.5])
    def test_rejects_unknown_values(self, value) -> None:
        with pytest.raises(InvalidLevelError) as exc_info:
            Severity.parse(value)
        assert exc_info.value.code == "INVALID_LEVEL"

    def test_invalid_level_is_a_value_error(self) -> None:
        with pytest.raises(ValueError):
            Severity.parse("nope")


class TestStdlibMapping:
    def test_round_trip_of_exact_levels(self) -> None:
        for severity in Severity:
            assert Severity.from_stdlib(severity.to_stdlib()) is severity

    def test_intermediate_levels_round_down(self) -> None:
        assert Severity.from_stdlib(logging.NOTSET) is Severity.DEBUG
        assert Severity.from_stdlib(25) is Severity.INFO
        assert Severity.from_stdlib(45) is Severity.ERROR
        assert Severity.from_stdlib(100) is Severity.FATAL


class TestLevelFilter:
    @pytest.mark.parametrize("threshold", list(Severity))
    def test_allows_iff_at_or_above_threshold(self, threshold: Severity) -> None:
        level_filter = LevelFilter(threshold)
        for level in Severity:
            assert level_filter.allows(level) is (level >= threshold)

    def test_default_threshold_is_info(self) -> None:
        assert LevelFilter().threshold is Severity.INFO
