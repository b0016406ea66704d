"""
Unit tests for relative date matching.
"""

from datetime import date

import pytest

from chronofilter.processors.core.models import RangeKind
from chronofilter.processors.core.relative_matcher import (
    DEFAULT_MAX_RELATIVE_DAYS,
    RELATIVE_PATTERNS,
    match_relative_date,
)


class TestRelativeMatcher:
    """Test suite for match_relative_date"""

    @pytest.mark.parametrize("text,expected,kind,confidence", [
        ("last month", ("2025-05-01", "2025-05-31"), RangeKind.RELATIVE, 0.98),
        ("this month", ("2025-06-01", "2025-06-30"), RangeKind.RELATIVE, 0.98),
        ("current month", ("2025-06-01", "2025-06-30"), RangeKind.RELATIVE, 0.98),
        ("next month", ("2025-07-01", "2025-07-31"), RangeKind.RELATIVE, 0.98),
        ("last week", ("2025-06-08", "2025-06-14"), RangeKind.RELATIVE, 0.95),
        ("this week", ("2025-06-15", "2025-06-21"), RangeKind.RELATIVE, 0.95),
        ("next week", ("2025-06-22", "2025-06-28"), RangeKind.RELATIVE, 0.95),
        ("yesterday", ("2025-06-14", "2025-06-14"), RangeKind.SPECIFIC, 0.98),
        ("tomorrow", ("2025-06-16", "2025-06-16"), RangeKind.SPECIFIC, 0.98),
        ("today", ("2025-06-15", "2025-06-15"), RangeKind.SPECIFIC, 0.98),
        ("last 7 days", ("2025-06-08", "2025-06-15"), RangeKind.RELATIVE, 0.95),
        ("past 1 day", ("2025-06-14", "2025-06-15"), RangeKind.RELATIVE, 0.95),
        ("next 30 days", ("2025-06-15", "2025-07-15"), RangeKind.RELATIVE, 0.95),
    ])
    def test_expressions(self, text, expected, kind, confidence, reference_date):
        result = match_relative_date(text, reference_date)

        assert (result.start_date, result.end_date) == expected
        assert result.range_kind is kind
        assert result.confidence == confidence

    def test_case_insensitive(self, reference_date):
        result = match_relative_date("Patients seen LAST MONTH", reference_date)

        assert result.original_expression == "LAST MONTH"
        assert result.start_date == "2025-05-01"

    def test_table_order_decides_overlaps(self, reference_date):
        result = match_relative_date("last week and last month", reference_date)

        assert result.original_expression == "last month"

    def test_month_rollover(self):
        assert match_relative_date("last month", date(2025, 1, 10)).start_date == "2024-12-01"
        assert match_relative_date("next month", date(2025, 12, 5)).end_date == "2026-01-31"

    def test_day_offsets_cross_leap_day(self):
        result = match_relative_date("yesterday", date(2024, 3, 1))

        assert result.start_date == "2024-02-29"

    def test_week_relative_to_midweek_reference(self):
        result = match_relative_date("this week", date(2025, 6, 18))

        assert (result.start_date, result.end_date) == ("2025-06-15", "2025-06-21")

    def test_day_window_cap(self, reference_date):
        assert match_relative_date(f"last {DEFAULT_MAX_RELATIVE_DAYS + 1} days", reference_date) is None
        assert match_relative_date("next 31 days", reference_date, max_days=30) is None

        result = match_relative_date("next 30 days", reference_date, max_days=30)
        assert result.end_date == "2025-07-15"

    def test_capped_window_falls_through_to_later_patterns(self, reference_date):
        result = match_relative_date("last 9999 days or next 5 days", reference_date)

        assert result.original_expression == "next 5 days"
        assert (result.start_date, result.end_date) == ("2025-06-15", "2025-06-20")

    def test_no_relative_expression(self, reference_date):
        assert match_relative_date("show me everything", reference_date) is None

    def test_pattern_table_shape(self):
        for pattern_config in RELATIVE_PATTERNS:
            assert {"pattern", "type", "resolve", "kind", "confidence"} <= set(pattern_config)
            assert 0.0 <= pattern_config["confidence"] <= 1.0
