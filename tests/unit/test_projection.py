"""
Unit tests for projection.py module.

Tests the monthly compounding recurrence, its yearly inflation deflation,
checkpoint projection under the scenario rates and tabular output.
"""

import sys
from datetime import date

import pandas as pd
import pytest

from wealthcalc.config import ProjectionConfig
from wealthcalc.projection import (
    ProjectionPoint,
    growth_path,
    months_in,
    project_growth,
    project_net_worth,
    projection_frame,
)


class TestMonthsIn:
    """Test horizon to month-count conversion."""

    @pytest.mark.parametrize("years, months", [(0, 0), (-2, 0), (1, 12), (20, 240), (0.5, 6), (0.01, 1)])
    def test_months(self, years, months):
        assert months_in(years) == months


class TestProjectGrowth:
    """Test the growth recurrence."""

    def test_one_year_at_twelve_percent(self):
        """
        Contribution is added before each month's growth, so one year of
        1,000/month at 1%/month is the annuity-due value: the ordinary
        annuity value 12,682.50 times 1.01.
        """
        value = project_growth(0, 1_000, 1, 12, 0)

        assert value == pytest.approx(12_809.33, abs=0.01)
        assert value == pytest.approx(12_682.503 * 1.01, rel=1e-6)

    @pytest.mark.parametrize("years", [0, 1, 5, 20])
    def test_zero_in_zero_out(self, years):
        assert project_growth(0, 0, years, 9.5, 2) == 0.0

    @pytest.mark.parametrize("years", [0, -1, -10.5])
    def test_non_positive_horizon_returns_principal(self, years):
        assert project_growth(5_000, 100, years, 7, 2) == 5_000.0

    def test_no_growth_no_inflation(self):
        assert project_growth(1_000, 100, 2, 0, 0) == pytest.approx(3_400)

    def test_inflation_applied_every_twelfth_month(self):
        assert project_growth(1_000, 0, 1, 0, 2) == pytest.approx(980.0)
        assert project_growth(1_000, 0, 2, 0, 2) == pytest.approx(960.4)

    def test_no_deflation_before_year_end(self):
        assert project_growth(1_000, 0, 0.5, 0, 50) == pytest.approx(1_000.0)

    def test_zero_inflation_stays_zero(self):
        """A 0% inflation rate means no deflation, not a default rate."""
        assert project_growth(10_000, 0, 10, 0, 0) == pytest.approx(10_000.0)

    def test_fractional_years_round_up_to_whole_months(self):
        assert project_growth(0, 100, 0.5, 0, 0) == pytest.approx(600)
        assert project_growth(0, 100, 0.51, 0, 0) == pytest.approx(700)

    def test_negative_contribution_is_withdrawal(self):
        assert project_growth(10_000, -100, 1, 0, 0) == pytest.approx(8_800)

    def test_negative_principal_compounds(self):
        assert project_growth(-1_000, 0, 1, 12, 0) == pytest.approx(-1_000 * 1.01 ** 12)

    def test_monotone_in_years(self):
        """Non-negative contribution and return, no inflation: never decreasing."""
        values = [project_growth(1_000, 500, n, 7, 0) for n in range(31)]
        assert all(b >= a for a, b in zip(values, values[1:]))

    def test_higher_rate_higher_value(self):
        low = project_growth(10_000, 500, 10, 4.5, 2)
        high = project_growth(10_000, 500, 10, 9.5, 2)
        assert high > low

    def test_finite_for_long_horizons(self):
        value = project_growth(1_000_000, 50_000, 100, 9.5, 2)
        assert value == value and value < float("inf")

    def test_overflow_saturates(self):
        assert project_growth(1e306, 1e306, 100, 9.5, 0) == sys.float_info.max
        assert project_growth(-1e306, -1e306, 100, 9.5, 0) == -sys.float_info.max

    def test_total_loss_after_overflow_is_zero(self):
        """A -1200% annual rate wipes the balance instead of producing nan."""
        assert project_growth(1e308, 1e308, 1, -1_200, 0) == 0.0


class TestGrowthPath:
    """Test the year-end trajectory."""

    def test_overflow_saturates(self):
        path = growth_path(1e306, 1e306, 100, 9.5, 0)
        assert path.iloc[-1] == sys.float_info.max

    def test_matches_project_growth(self):
        path = growth_path(25_000, 750, 20, 7, 2)

        assert isinstance(path, pd.Series)
        assert path.index.name == "year"
        assert list(path.index) == list(range(21))
        for n in (0, 1, 5, 20):
            assert path.loc[n] == pytest.approx(project_growth(25_000, 750, n, 7, 2))

    def test_zero_years(self):
        path = growth_path(500, 100, 0, 7, 2)
        assert list(path) == [500.0]

    def test_series_name(self):
        assert growth_path(0, 1, 1, 0, 0, name="balance").name == "balance"


class TestProjectNetWorth:
    """Test checkpoint projection under the three scenario rates."""

    def test_default_checkpoints_and_dates(self):
        points = project_net_worth(10_000, 500, 2.0, as_of=date(2025, 6, 15))

        assert [p.years for p in points] == [5, 10, 20]
        assert [p.date for p in points] == [date(2030, 1, 1), date(2035, 1, 1), date(2045, 1, 1)]

    def test_scenario_ordering(self, as_of):
        for p in project_net_worth(50_000, 1_000, 2.0, as_of=as_of):
            assert p.conservative < p.moderate < p.aggressive

    def test_uses_scenario_rates(self, as_of):
        points = project_net_worth(10_000, 500, 2.0, as_of=as_of)

        assert points[0].conservative == pytest.approx(project_growth(10_000, 500, 5, 4.5, 2))
        assert points[1].moderate == pytest.approx(project_growth(10_000, 500, 10, 7.0, 2))
        assert points[2].aggressive == pytest.approx(project_growth(10_000, 500, 20, 9.5, 2))

    def test_custom_config(self, as_of):
        config = ProjectionConfig(
            checkpoint_years=[1, 3],
            scenario_rates={"conservative": 0, "moderate": 0, "aggressive": 0},
        )
        points = project_net_worth(1_000, 100, 0, config=config, as_of=as_of)

        assert [p.years for p in points] == [1, 3]
        assert points[1].moderate == pytest.approx(1_000 + 100 * 36)
        assert points[0].date == date(2026, 1, 1)

    def test_zero_everything(self, as_of):
        for p in project_net_worth(0, 0, 2.0, as_of=as_of):
            assert (p.conservative, p.moderate, p.aggressive) == (0.0, 0.0, 0.0)


class TestProjectionPoint:
    """Test point accessors and tabulation."""

    def test_value_by_posture(self):
        point = ProjectionPoint(years=5, date=date(2030, 1, 1), conservative=1.0, moderate=2.0, aggressive=3.0)

        assert point.value("moderate") == 2.0
        with pytest.raises(KeyError):
            point.value("reckless")

    def test_as_dict(self):
        point = ProjectionPoint(years=5, date=date(2030, 1, 1), conservative=1.0, moderate=2.0, aggressive=3.0)
        assert point.as_dict()["date"] == "2030-01-01"

    def test_projection_frame(self, as_of):
        df = projection_frame(project_net_worth(10_000, 500, 2.0, as_of=as_of))

        assert list(df.columns) == ["years", "conservative", "moderate", "aggressive"]
        assert df.index.name == "date"
        assert isinstance(df.index, pd.DatetimeIndex)
        assert df.index[0] == pd.Timestamp("2030-01-01")
        assert len(df) == 3

    def test_empty_frame(self):
        df = projection_frame([])

        assert df.empty
        assert list(df.columns) == ["years", "conservative", "moderate", "aggressive"]
