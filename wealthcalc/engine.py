"""
Derived-metrics engine for wealthcalc.

Purpose
-------
Single entry point that maps a FinancialSnapshot to a DerivedMetrics value:
aggregation first, then the net-worth projection, the milestone goal-seek
and the contribution split.

Key properties
--------------
- Pure: no I/O, no shared state; the snapshot is never modified
- Total: never raises for numeric content (see aggregator / goals)
- Deterministic for a fixed `as_of` date

Example
-------
>>> from datetime import date
>>> from wealthcalc import compute_derived_metrics, get_profile
>>> metrics = compute_derived_metrics(get_profile("Entry Level Professional"),
...                                   as_of=date(2025, 1, 1))
>>> metrics.net_worth
-21000.0
>>> [p.years for p in metrics.projection_series]
[5, 10, 20]
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import date
from typing import Optional, Tuple

import pandas as pd

from .aggregator import (
    AssetAllocation,
    ExpenseBreakdown,
    TargetAllocation,
    aggregate,
)
from .config import ProjectionConfig
from .goals import MilestoneProjection, project_goals, project_milestones
from .projection import ProjectionPoint, project_net_worth, projection_frame
from .snapshot import FinancialSnapshot
from .types import DerivedMetricsDict

__all__ = [
    "ContributionSplit",
    "DerivedMetrics",
    "split_contribution",
    "compute_derived_metrics",
]

logger = logging.getLogger(__name__)


# ---------------------------------------------------------------------------
# Contribution split
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class ContributionSplit:
    """Display split of the monthly contribution. Not a tax rule."""
    contribution: float
    tax_advantaged: float
    taxable: float


def split_contribution(
    monthly_contribution: float,
    config: Optional[ProjectionConfig] = None,
) -> ContributionSplit:
    """
    Proportional split of the monthly contribution.

    Defaults to 70% tax-advantaged and 30% taxable; the shares come from
    `ProjectionConfig`.

    Examples
    --------
    >>> split_contribution(1_000)
    ContributionSplit(contribution=1000.0, tax_advantaged=700.0, taxable=300.0)
    """
    config = config or ProjectionConfig()
    amount = float(monthly_contribution)
    return ContributionSplit(
        contribution=amount,
        tax_advantaged=amount * config.tax_advantaged_share,
        taxable=amount * config.taxable_share,
    )


# ---------------------------------------------------------------------------
# Result
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class DerivedMetrics:
    """
    Read-only result of `compute_derived_metrics`.

    Attributes
    ----------
    as_of : datetime.date
        Anchor date of the projection.
    monthly_net : float
        Net monthly income after the flat tax rate.
    monthly_expenses : ExpenseBreakdown
        Fixed / variable / debt subtotals.
    total_expenses : float
        Sum of the three subtotals.
    savings_rate, debt_to_income : float
        Percentages of monthly_net; 0 when monthly_net <= 0.
    total_savings, total_assets, total_liabilities, net_worth : float
        Balance-sheet totals. net_worth may be negative.
    asset_allocation : AssetAllocation
        Current stock / bond / other mix.
    target_allocation : TargetAllocation
        Advisory split for the snapshot's risk tolerance.
    projection_series : Tuple[ProjectionPoint, ...]
        Net worth per checkpoint and risk posture.
    milestone_projections : Tuple[MilestoneProjection, ...]
        Thresholds above net worth with their estimated arrival dates.
    goal_projections : Tuple[MilestoneProjection, ...]
        Same goal-seek for the user's own milestone goals.
    contribution_split : ContributionSplit
        Tax-advantaged / taxable split of the monthly contribution.
    """
    as_of: date
    monthly_net: float
    monthly_expenses: ExpenseBreakdown
    total_expenses: float
    savings_rate: float
    debt_to_income: float
    total_savings: float
    total_assets: float
    total_liabilities: float
    net_worth: float
    asset_allocation: AssetAllocation
    target_allocation: TargetAllocation
    projection_series: Tuple[ProjectionPoint, ...]
    milestone_projections: Tuple[MilestoneProjection, ...]
    goal_projections: Tuple[MilestoneProjection, ...]
    contribution_split: ContributionSplit

    def projection_frame(self) -> pd.DataFrame:
        """Checkpoints as a DataFrame indexed by date, one column per posture."""
        return projection_frame(list(self.projection_series))

    def to_dict(self) -> DerivedMetricsDict:
        """Plain-dict view (ISO date strings, nested dicts) for JSON output."""
        expenses = self.monthly_expenses
        alloc = self.asset_allocation
        target = self.target_allocation
        split = self.contribution_split
        return {
            "as_of": self.as_of.isoformat(),
            "monthly_net": self.monthly_net,
            "total_expenses": self.total_expenses,
            "monthly_expenses": {
                "fixed": expenses.fixed,
                "variable": expenses.variable,
                "debt": expenses.debt,
            },
            "savings_rate": self.savings_rate,
            "debt_to_income": self.debt_to_income,
            "total_savings": self.total_savings,
            "total_assets": self.total_assets,
            "total_liabilities": self.total_liabilities,
            "net_worth": self.net_worth,
            "asset_allocation": {
                "stocks": alloc.stocks,
                "bonds": alloc.bonds,
                "other": alloc.other,
                "total": alloc.total,
                "stocks_pct": alloc.stocks_pct,
                "bonds_pct": alloc.bonds_pct,
                "other_pct": alloc.other_pct,
            },
            "target_allocation": {
                "risk_tolerance": target.risk_tolerance,
                "stocks": target.stocks,
                "bonds": target.bonds,
            },
            "projection_series": [p.as_dict() for p in self.projection_series],
            "milestone_projections": [m.as_dict() for m in self.milestone_projections],
            "goal_projections": [g.as_dict() for g in self.goal_projections],
            "contribution_split": {
                "contribution": split.contribution,
                "tax_advantaged": split.tax_advantaged,
                "taxable": split.taxable,
            },
        }


# ---------------------------------------------------------------------------
# Entry point
# ---------------------------------------------------------------------------

def compute_derived_metrics(
    snapshot: FinancialSnapshot,
    config: Optional[ProjectionConfig] = None,
    *,
    as_of: Optional[date] = None,
) -> DerivedMetrics:
    """
    Compute every derived metric and projection of a snapshot.

    Parameters
    ----------
    snapshot : FinancialSnapshot
        Household data. Not validated; validate payloads with
        `serialization.snapshot_from_dict` first.
    config : ProjectionConfig, optional
        Milestone table, checkpoint horizons, scenario rates and split
        shares. Defaults to ProjectionConfig().
    as_of : date, optional
        Anchor for checkpoint and milestone dates. Defaults to today;
        pass a fixed date for reproducible output.

    Returns
    -------
    DerivedMetrics

    Notes
    -----
    - The growth simulation uses the three scenario rates of the config;
      the milestone goal-seek uses the snapshot's own return rate.
    - Both use the snapshot's monthly contribution and current net worth.
    """
    config = config or ProjectionConfig()
    as_of = as_of or date.today()
    settings = snapshot.investment_settings

    summary = aggregate(snapshot)
    net_worth = summary.net_worth
    contribution = settings.monthly_contribution

    series = project_net_worth(
        net_worth,
        contribution,
        settings.inflation_rate,
        config=config,
        as_of=as_of,
    )
    milestones = project_milestones(
        net_worth,
        contribution,
        settings.return_rate,
        config=config,
        as_of=as_of,
    )
    goals = project_goals(
        snapshot.milestone_goals,
        net_worth,
        contribution,
        settings.return_rate,
        config=config,
        as_of=as_of,
    )

    logger.debug(
        "computed metrics as_of=%s net_worth=%.2f checkpoints=%d milestones=%d goals=%d",
        as_of.isoformat(), net_worth, len(series), len(milestones), len(goals),
    )

    return DerivedMetrics(
        as_of=as_of,
        monthly_net=summary.monthly_net,
        monthly_expenses=summary.monthly_expenses,
        total_expenses=summary.total_expenses,
        savings_rate=summary.savings_rate,
        debt_to_income=summary.debt_to_income,
        total_savings=summary.total_savings,
        total_assets=summary.total_assets,
        total_liabilities=summary.total_liabilities,
        net_worth=net_worth,
        asset_allocation=summary.asset_allocation,
        target_allocation=summary.target_allocation,
        projection_series=tuple(series),
        milestone_projections=tuple(milestones),
        goal_projections=tuple(goals),
        contribution_split=split_contribution(contribution, config),
    )
