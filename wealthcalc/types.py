"""
Type definitions for wealthcalc.

Purpose
-------
Provides TypedDict definitions for the dictionaries produced by
`DerivedMetrics.to_dict()` and `serialization.metrics_to_dict()`. Using
TypedDicts documents the payload handed to presentation layers (cards,
charts and milestone lists) and enables IDE autocompletion.

Usage
-----
>>> from wealthcalc.types import ProjectionPointDict
>>>
>>> point: ProjectionPointDict = {
...     "years": 5,
...     "date": "2031-01-01",
...     "conservative": 152_000.0,
...     "moderate": 171_000.0,
...     "aggressive": 193_000.0,
... }

Type Definitions
----------------
ExpenseBreakdownDict
    Category subtotals: {"fixed", "variable", "debt"}

AssetAllocationDict
    Current investment mix: amounts, total and percentage shares

TargetAllocationDict
    Advisory stock/bond split for a risk tolerance

ProjectionPointDict
    One checkpoint of the net-worth projection

MilestoneProjectionDict
    Projected arrival of a net-worth threshold or user goal

ContributionSplitDict
    Tax-advantaged / taxable split of the monthly contribution

DerivedMetricsDict
    Full engine output
"""

from typing import List
from typing_extensions import TypedDict, NotRequired

__all__ = [
    "ExpenseBreakdownDict",
    "AssetAllocationDict",
    "TargetAllocationDict",
    "ProjectionPointDict",
    "MilestoneProjectionDict",
    "ContributionSplitDict",
    "DerivedMetricsDict",
]


class ExpenseBreakdownDict(TypedDict):
    """
    Monthly expense subtotals by category.

    Attributes
    ----------
    fixed : float
        Sum of fixed expenses (rent, utilities, ...).
    variable : float
        Sum of variable expenses (groceries, entertainment, ...).
    debt : float
        Sum of debt-service payments.
    """

    fixed: float
    variable: float
    debt: float


class AssetAllocationDict(TypedDict):
    """
    Current investment allocation.

    Attributes
    ----------
    stocks, bonds, other : float
        Invested amounts per bucket.
    total : float
        stocks + bonds + other.
    stocks_pct, bonds_pct, other_pct : float
        Share of each bucket in percent. All 0.0 when total is 0.

    Examples
    --------
    >>> alloc: AssetAllocationDict = metrics.to_dict()["asset_allocation"]
    >>> alloc["stocks_pct"] + alloc["bonds_pct"] + alloc["other_pct"]
    100.0
    """

    stocks: float
    bonds: float
    other: float
    total: float
    stocks_pct: float
    bonds_pct: float
    other_pct: float


class TargetAllocationDict(TypedDict):
    """Advisory split (percent) for the snapshot's risk tolerance."""

    risk_tolerance: str
    stocks: float
    bonds: float


class ProjectionPointDict(TypedDict):
    """
    Projected net worth at one checkpoint.

    Attributes
    ----------
    years : int
        Horizon in years.
    date : str
        ISO date of January 1 of the checkpoint year.
    conservative, moderate, aggressive : float
        Inflation-deflated net worth per risk posture.
    """

    years: int
    date: str
    conservative: float
    moderate: float
    aggressive: float


class MilestoneProjectionDict(TypedDict):
    """
    Estimated arrival of a net-worth target.

    Attributes
    ----------
    label : str
        Milestone label or user goal name.
    amount : float
        Target net worth.
    projected_date : str
        ISO date (January 1 of the arrival year).
    years : float, optional
        Unrounded goal-seek result; absent when the fallback year was used.
    target_date : str, optional
        User-entered target date (user goals only).
    """

    label: str
    amount: float
    projected_date: str
    years: NotRequired[float]
    target_date: NotRequired[str]


class ContributionSplitDict(TypedDict):
    """Proportional split of the monthly contribution."""

    contribution: float
    tax_advantaged: float
    taxable: float


class DerivedMetricsDict(TypedDict):
    """
    Serialized engine output.

    Examples
    --------
    >>> data: DerivedMetricsDict = compute_derived_metrics(snapshot).to_dict()
    >>> data["monthly_net"], data["savings_rate"]
    (3120.0, 2.564...)
    """

    as_of: str
    monthly_net: float
    total_expenses: float
    monthly_expenses: ExpenseBreakdownDict
    savings_rate: float
    debt_to_income: float
    total_savings: float
    total_assets: float
    total_liabilities: float
    net_worth: float
    asset_allocation: AssetAllocationDict
    target_allocation: TargetAllocationDict
    projection_series: List[ProjectionPointDict]
    milestone_projections: List[MilestoneProjectionDict]
    goal_projections: List[MilestoneProjectionDict]
    contribution_split: ContributionSplitDict
