"""
Unit tests for engine.py module.

Tests the compute_derived_metrics orchestration, the contribution split
and the result's dict / DataFrame views.
"""

import functools
import json
import logging
from datetime import date

import pandas as pd
import pytest

from wealthcalc.config import ProjectionConfig
from wealthcalc.engine import DerivedMetrics, compute_derived_metrics, split_contribution
from wealthcalc.profiles import get_profile
from wealthcalc.snapshot import FinancialSnapshot, InvestmentSettings


class TestSplitContribution:
    """Test the 70/30 display split."""

    def test_default_split(self):
        split = split_contribution(1_000)

        assert split.contribution == 1_000.0
        assert split.tax_advantaged == pytest.approx(700.0)
        assert split.taxable == pytest.approx(300.0)

    def test_zero(self):
        split = split_contribution(0)
        assert (split.tax_advantaged, split.taxable) == (0.0, 0.0)

    def test_custom_shares(self):
        config = ProjectionConfig(tax_advantaged_share=0.5, taxable_share=0.5)
        split = split_contribution(800, config)

        assert split.tax_advantaged == pytest.approx(400.0)
        assert split.taxable == pytest.approx(400.0)


class TestComputeDerivedMetrics:
    """Test the full engine on a household snapshot."""

    def test_summary_metrics(self, household_snapshot, as_of):
        metrics = compute_derived_metrics(household_snapshot, as_of=as_of)

        assert isinstance(metrics, DerivedMetrics)
        assert metrics.as_of == as_of
        assert metrics.monthly_net == pytest.approx(8_500 * 0.76)
        assert metrics.net_worth == pytest.approx(270_000)
        assert metrics.target_allocation.risk_tolerance == "moderate"

    def test_projection_series(self, household_snapshot, as_of):
        metrics = compute_derived_metrics(household_snapshot, as_of=as_of)

        assert [p.years for p in metrics.projection_series] == [5, 10, 20]
        assert metrics.projection_series[0].date == date(2030, 1, 1)

    def test_milestones_above_net_worth(self, household_snapshot, as_of):
        metrics = compute_derived_metrics(household_snapshot, as_of=as_of)

        assert [m.amount for m in metrics.milestone_projections] == [500_000, 1_000_000]
        assert all(m.projected_date.year > as_of.year for m in metrics.milestone_projections)

    def test_goal_projections(self, household_snapshot, as_of):
        metrics = compute_derived_metrics(household_snapshot, as_of=as_of)

        assert [g.label for g in metrics.goal_projections] == ["Retirement"]

    def test_contribution_split(self, household_snapshot, as_of):
        split = compute_derived_metrics(household_snapshot, as_of=as_of).contribution_split

        assert split.contribution == 1_500
        assert split.tax_advantaged == pytest.approx(1_050)
        assert split.taxable == pytest.approx(450)

    def test_deterministic(self, household_snapshot, as_of):
        first = compute_derived_metrics(household_snapshot, as_of=as_of)
        second = compute_derived_metrics(household_snapshot, as_of=as_of)

        assert first == second
        assert first.to_dict() == second.to_dict()

    def test_return_rate_drives_goal_seek_only(self, as_of):
        """The snapshot's return rate changes milestone dates, not the projection."""
        slow = FinancialSnapshot(investment_settings=InvestmentSettings(monthly_contribution=1_000, return_rate=2))
        fast = FinancialSnapshot(investment_settings=InvestmentSettings(monthly_contribution=1_000, return_rate=12))

        m_slow = compute_derived_metrics(slow, as_of=as_of)
        m_fast = compute_derived_metrics(fast, as_of=as_of)

        assert m_slow.projection_series == m_fast.projection_series
        assert m_fast.milestone_projections[-1].projected_date < m_slow.milestone_projections[-1].projected_date

    def test_zero_inflation_is_respected(self, as_of):
        snap = FinancialSnapshot(
            investment_settings=InvestmentSettings(monthly_contribution=100, inflation_rate=0)
        )
        config = ProjectionConfig(
            checkpoint_years=[5],
            scenario_rates={"conservative": 0, "moderate": 0, "aggressive": 0},
        )
        point = compute_derived_metrics(snap, config, as_of=as_of).projection_series[0]

        assert point.moderate == pytest.approx(6_000)

    def test_empty_snapshot(self, empty_snapshot, as_of):
        metrics = compute_derived_metrics(empty_snapshot, as_of=as_of)

        assert metrics.net_worth == 0.0
        assert metrics.savings_rate == 0.0
        assert len(metrics.milestone_projections) == 6
        assert {m.projected_date for m in metrics.milestone_projections} == {date(2025, 1, 1)}
        assert metrics.goal_projections == ()
        assert all(p.moderate == 0.0 for p in metrics.projection_series)

    def test_custom_checkpoints(self, household_snapshot, as_of):
        config = ProjectionConfig(checkpoint_years=[1, 30])
        metrics = compute_derived_metrics(household_snapshot, config, as_of=as_of)

        assert [p.date for p in metrics.projection_series] == [date(2026, 1, 1), date(2055, 1, 1)]

    def test_memoized_on_snapshot_equality(self, as_of):
        cached = functools.lru_cache(maxsize=8)(compute_derived_metrics)

        first = cached(get_profile("Mid-Career Family"), as_of=as_of)
        second = cached(get_profile("Mid-Career Family"), as_of=as_of)

        assert second is first
        assert cached.cache_info().hits == 1

    def test_defaults_to_today(self, empty_snapshot):
        assert compute_derived_metrics(empty_snapshot).as_of == date.today()

    def test_logs_debug_line(self, empty_snapshot, as_of, caplog):
        with caplog.at_level(logging.DEBUG, logger="wealthcalc.engine"):
            compute_derived_metrics(empty_snapshot, as_of=as_of)

        assert "computed metrics" in caplog.text


class TestDerivedMetricsViews:
    """Test dict and DataFrame views of the result."""

    def test_to_dict_is_json_ready(self, household_snapshot, as_of):
        data = compute_derived_metrics(household_snapshot, as_of=as_of).to_dict()
        text = json.dumps(data)

        assert json.loads(text)["as_of"] == "2025-01-01"
        assert data["monthly_expenses"]["debt"] == pytest.approx(2_800)
        assert data["asset_allocation"]["stocks_pct"] == pytest.approx(60.0)
        assert data["projection_series"][0]["date"] == "2030-01-01"
        assert data["goal_projections"][0]["target_date"] == "2045-12-31"
        assert data["contribution_split"]["taxable"] == pytest.approx(450)

    def test_projection_frame(self, household_snapshot, as_of):
        df = compute_derived_metrics(household_snapshot, as_of=as_of).projection_frame()

        assert isinstance(df, pd.DataFrame)
        assert df.shape == (3, 4)
        assert (df["aggressive"] > df["conservative"]).all()
