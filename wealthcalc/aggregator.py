"""
Snapshot aggregation module for wealthcalc.

Purpose
-------
Reduces a FinancialSnapshot to point-in-time summary metrics:

    net      = gross * (1 - tax/100)
    expenses = fixed + variable + debt
    savings% = (net - expenses) / net * 100     (0 when net <= 0)
    DTI%     = debt / net * 100                 (0 when net <= 0)
    assets   = cash + properties + stocks + bonds + other
    debts    = mortgages + loans + credit cards
    worth    = assets - debts

No validation happens here: a tax rate above 100 yields a negative net income,
negative balances flow through the sums. Division by a non-positive
denominator yields 0 instead of an error.

Example
-------
>>> from wealthcalc.snapshot import FinancialSnapshot, Income, Expenses
>>> snap = FinancialSnapshot(
...     income=Income(monthly_gross=4_000, tax_rate=22),
...     expenses=Expenses(fixed={"Rent": 1_640}, variable={"Food": 950},
...                       debt={"Loan": 450}),
... )
>>> m = aggregate(snap)
>>> m.monthly_net, m.total_expenses, round(m.savings_rate, 2)
(3120.0, 3040.0, 2.56)
"""

from __future__ import annotations

from dataclasses import dataclass

from .constants import TARGET_ALLOCATIONS
from .snapshot import FinancialSnapshot, Investments
from .utils import safe_percentage, sum_values

__all__ = [
    "ExpenseBreakdown",
    "AssetAllocation",
    "TargetAllocation",
    "SnapshotMetrics",
    "aggregate",
    "net_income",
    "expense_breakdown",
    "total_assets",
    "total_liabilities",
    "asset_allocation",
    "target_allocation",
]


@dataclass(frozen=True)
class ExpenseBreakdown:
    """Monthly expense subtotals by category."""
    fixed: float
    variable: float
    debt: float

    @property
    def total(self) -> float:
        return self.fixed + self.variable + self.debt


@dataclass(frozen=True)
class AssetAllocation:
    """Current investment mix: amounts and percentage shares."""
    stocks: float
    bonds: float
    other: float
    total: float
    stocks_pct: float
    bonds_pct: float
    other_pct: float


@dataclass(frozen=True)
class TargetAllocation:
    """Advisory stock/bond split (percent) for a risk tolerance."""
    risk_tolerance: str
    stocks: float
    bonds: float


@dataclass(frozen=True)
class SnapshotMetrics:
    """Summary metrics of a snapshot (everything except projections)."""
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


# ---------------------------------------------------------------------------
# Components
# ---------------------------------------------------------------------------

def net_income(monthly_gross: float, tax_rate: float) -> float:
    """Monthly net income after a flat tax rate (percent). No floor at zero."""
    return float(monthly_gross) * (1.0 - float(tax_rate) / 100.0)


def expense_breakdown(snapshot: FinancialSnapshot) -> ExpenseBreakdown:
    """Sum each expense category."""
    expenses = snapshot.expenses
    return ExpenseBreakdown(
        fixed=sum_values(expenses.fixed),
        variable=sum_values(expenses.variable),
        debt=sum_values(expenses.debt),
    )


def total_assets(snapshot: FinancialSnapshot) -> float:
    """Cash + properties + invested balances."""
    assets = snapshot.assets
    return float(assets.cash) + sum_values(assets.properties) + assets.investments.total


def total_liabilities(snapshot: FinancialSnapshot) -> float:
    """Mortgages + loans + credit cards."""
    liabilities = snapshot.liabilities
    return (
        sum_values(liabilities.mortgages)
        + sum_values(liabilities.loans)
        + sum_values(liabilities.credit_cards)
    )


def asset_allocation(investments: Investments) -> AssetAllocation:
    """
    Share of each investment bucket.

    Parameters
    ----------
    investments : Investments
        Stock / bond / other balances.

    Returns
    -------
    AssetAllocation
        Amounts, their total and percentage shares. Shares are all 0.0
        when nothing is invested.
    """
    total = investments.total
    return AssetAllocation(
        stocks=float(investments.stocks),
        bonds=float(investments.bonds),
        other=float(investments.other),
        total=total,
        stocks_pct=safe_percentage(investments.stocks, total),
        bonds_pct=safe_percentage(investments.bonds, total),
        other_pct=safe_percentage(investments.other, total),
    )


def target_allocation(risk_tolerance: str) -> TargetAllocation:
    """Advisory stock/bond split; unknown tolerances fall back to "moderate"."""
    key = risk_tolerance if risk_tolerance in TARGET_ALLOCATIONS else "moderate"
    split = TARGET_ALLOCATIONS[key]
    return TargetAllocation(
        risk_tolerance=key,
        stocks=split["stocks"],
        bonds=split["bonds"],
    )


# ---------------------------------------------------------------------------
# Aggregate
# ---------------------------------------------------------------------------

def aggregate(snapshot: FinancialSnapshot) -> SnapshotMetrics:
    """
    Compute all point-in-time metrics of a snapshot.

    Parameters
    ----------
    snapshot : FinancialSnapshot
        Household data. Not validated.

    Returns
    -------
    SnapshotMetrics
        New value object; the snapshot is not modified.

    Notes
    -----
    - savings_rate and debt_to_income are percentages and are exactly 0.0
      whenever monthly_net <= 0.
    - net_worth may be negative.
    """
    monthly_net = net_income(snapshot.income.monthly_gross, snapshot.income.tax_rate)
    breakdown = expense_breakdown(snapshot)
    total_expenses = breakdown.total

    savings = snapshot.savings
    assets = total_assets(snapshot)
    liabilities = total_liabilities(snapshot)

    return SnapshotMetrics(
        monthly_net=monthly_net,
        monthly_expenses=breakdown,
        total_expenses=total_expenses,
        savings_rate=safe_percentage(monthly_net - total_expenses, monthly_net),
        debt_to_income=safe_percentage(breakdown.debt, monthly_net),
        total_savings=float(savings.emergency + savings.retirement + savings.investment),
        total_assets=assets,
        total_liabilities=liabilities,
        net_worth=assets - liabilities,
        asset_allocation=asset_allocation(snapshot.assets.investments),
        target_allocation=target_allocation(snapshot.investment_settings.risk_tolerance),
    )
