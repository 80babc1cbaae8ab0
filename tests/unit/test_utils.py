"""
Unit tests for utils.py module.

Tests reductions, guarded ratios, rate conversions, calendar helpers and
formatting utilities.
"""

import pytest
from datetime import date, datetime, timezone

from wealthcalc.utils import (
    add_years,
    annual_pct_to_monthly,
    first_of_year,
    format_currency,
    format_percent,
    inflation_deflator,
    is_finite,
    safe_percentage,
    sum_values,
    utc_timestamp,
)


class TestReductions:
    """Test mapping sums."""

    def test_sum_values(self):
        assert sum_values({"a": 1.5, "b": 2.5}) == 4.0

    @pytest.mark.parametrize("mapping", [None, {}])
    def test_empty(self, mapping):
        assert sum_values(mapping) == 0.0


class TestRatios:
    """Test zero-guarded percentages."""

    def test_percentage(self):
        assert safe_percentage(450, 3_120) == pytest.approx(14.423, abs=1e-3)

    @pytest.mark.parametrize("denominator", [0, -1, -3_000])
    def test_non_positive_denominator(self, denominator):
        assert safe_percentage(100, denominator) == 0.0


class TestRateConversion:
    """Test percent rate conversions."""

    def test_annual_pct_to_monthly(self):
        assert annual_pct_to_monthly(12) == pytest.approx(0.01)
        assert annual_pct_to_monthly(0) == 0.0

    def test_inflation_deflator(self):
        assert inflation_deflator(2) == pytest.approx(0.98)
        assert inflation_deflator(0) == 1.0


class TestCalendar:
    """Test calendar helpers."""

    def test_first_of_year(self):
        assert first_of_year(2030) == date(2030, 1, 1)
        assert first_of_year(10_000) is None
        assert first_of_year(0) is None

    def test_add_years_drops_month_and_day(self):
        assert add_years(date(2025, 11, 30), 5) == date(2030, 1, 1)

    def test_utc_timestamp(self):
        stamp = utc_timestamp(datetime(2025, 1, 1, 9, 30, 15, 123456, tzinfo=timezone.utc))
        assert stamp == "2025-01-01T09:30:15.123Z"

    def test_utc_timestamp_naive(self):
        assert utc_timestamp(datetime(2025, 1, 1)) == "2025-01-01T00:00:00.000Z"


class TestNumericGuards:
    """Test finiteness checks."""

    def test_is_finite(self):
        assert is_finite(1.0, -2.0, 0)
        assert not is_finite(float("inf"))
        assert not is_finite(1.0, float("nan"))


class TestFormatting:
    """Test reporting helpers."""

    def test_format_currency(self):
        assert format_currency(12_682.5) == "$12,682"
        assert format_currency(3_120, decimals=2) == "$3,120.00"
        assert format_currency(-25_000) == "-$25,000"

    def test_format_percent(self):
        assert format_percent(2.564) == "2.6%"
        assert format_percent(60, decimals=0) == "60%"
