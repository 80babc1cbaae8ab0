"""
Financial snapshot module for wealthcalc.

Purpose
-------
Immutable domain objects describing a household's financial state at one
instant. A snapshot is the only input of the derived-metrics engine:

- Income: gross monthly income and a flat effective tax rate
- Expenses: fixed / variable / debt-service mappings (label -> monthly amount)
- Savings: emergency / retirement / investment balances
- Assets: cash, named properties, stocks / bonds / other investments
- Liabilities: mortgages / loans / credit cards mappings
- InvestmentSettings: contribution, risk tolerance and rate assumptions
- MilestoneGoal: user-named net-worth targets
- Metadata: save / modification timestamps maintained by the store

Design principles
-----------------
- Frozen dataclasses: a snapshot cannot change during a computation
- Read-only mappings: label mappings are copied into MappingProxyType views
  and hashed by content, so snapshots can key a cache
- Zero defaults: every field has a default, so FinancialSnapshot() is the
  documented empty snapshot (no validation happens here; see config.py)

Example
-------
>>> from wealthcalc.snapshot import FinancialSnapshot, Income, Expenses
>>> snap = FinancialSnapshot(
...     income=Income(monthly_gross=4_000, tax_rate=22),
...     expenses=Expenses(fixed={"Rent": 1_200}, variable={"Groceries": 400}),
... )
>>> snap.expenses.fixed["Rent"]
1200
"""

from __future__ import annotations

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Literal, Mapping, Optional, Tuple

from .constants import (
    DEFAULT_INFLATION_RATE,
    DEFAULT_RETURN_RATE,
    DEFAULT_RISK_TOLERANCE,
    DEFAULT_TAX_RATE,
)

__all__ = [
    "RiskTolerance",
    "Income",
    "Expenses",
    "Savings",
    "Investments",
    "Assets",
    "Liabilities",
    "AccountTypes",
    "InvestmentSettings",
    "MilestoneGoal",
    "Metadata",
    "FinancialSnapshot",
]

RiskTolerance = Literal["conservative", "moderate", "aggressive"]


def _frozen_mapping(obj, *names: str) -> None:
    """Replace mapping attributes of a frozen dataclass with read-only copies."""
    for name in names:
        value = getattr(obj, name)
        object.__setattr__(obj, name, MappingProxyType(dict(value or {})))


def _mapping_key(obj, *names: str) -> tuple:
    """Hashable view of mapping attributes (label order is irrelevant)."""
    return tuple(frozenset(getattr(obj, name).items()) for name in names)


# ---------------------------------------------------------------------------
# Income / Expenses / Savings
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class Income:
    """
    Gross monthly income with a flat effective tax rate.

    Parameters
    ----------
    monthly_gross : float, default 0.0
        Gross monthly income.
    tax_rate : float, default 25.0
        Flat effective tax rate in percent (22 means 22%).
    """
    monthly_gross: float = 0.0
    tax_rate: float = DEFAULT_TAX_RATE


@dataclass(frozen=True)
class Expenses:
    """
    Monthly spending split into three label -> amount mappings.

    Labels are free-form and unique within a mapping; order is irrelevant.
    """
    fixed: Mapping[str, float] = field(default_factory=dict)
    variable: Mapping[str, float] = field(default_factory=dict)
    debt: Mapping[str, float] = field(default_factory=dict)

    def __post_init__(self) -> None:
        _frozen_mapping(self, "fixed", "variable", "debt")

    def __hash__(self) -> int:
        return hash(_mapping_key(self, "fixed", "variable", "debt"))


@dataclass(frozen=True)
class Savings:
    """Balances of the three fixed savings buckets."""
    emergency: float = 0.0
    retirement: float = 0.0
    investment: float = 0.0


# ---------------------------------------------------------------------------
# Assets / Liabilities
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class Investments:
    """Invested balances split into stocks, bonds and other holdings."""
    stocks: float = 0.0
    bonds: float = 0.0
    other: float = 0.0

    @property
    def total(self) -> float:
        return float(self.stocks + self.bonds + self.other)


@dataclass(frozen=True)
class Assets:
    """
    Household assets.

    Parameters
    ----------
    cash : float, default 0.0
        Cash balance.
    properties : Mapping[str, float]
        Property label -> market value.
    investments : Investments
        Stock / bond / other split.
    """
    cash: float = 0.0
    properties: Mapping[str, float] = field(default_factory=dict)
    investments: Investments = field(default_factory=Investments)

    def __post_init__(self) -> None:
        _frozen_mapping(self, "properties")

    def __hash__(self) -> int:
        return hash((self.cash, _mapping_key(self, "properties"), self.investments))


@dataclass(frozen=True)
class Liabilities:
    """Outstanding balances: mortgages, loans and credit cards (label -> balance)."""
    mortgages: Mapping[str, float] = field(default_factory=dict)
    loans: Mapping[str, float] = field(default_factory=dict)
    credit_cards: Mapping[str, float] = field(default_factory=dict)

    def __post_init__(self) -> None:
        _frozen_mapping(self, "mortgages", "loans", "credit_cards")

    def __hash__(self) -> int:
        return hash(_mapping_key(self, "mortgages", "loans", "credit_cards"))


# ---------------------------------------------------------------------------
# Investment settings
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class AccountTypes:
    """Balances per account type. Carried with the snapshot, not used in projections."""
    taxable: float = 0.0
    traditional_401k: float = 0.0
    roth_ira: float = 0.0


@dataclass(frozen=True)
class InvestmentSettings:
    """
    Investment assumptions.

    Parameters
    ----------
    monthly_contribution : float, default 0.0
        Amount invested every month. Negative values model withdrawals.
    risk_tolerance : {"conservative", "moderate", "aggressive"}
        Advisory only; selects the target allocation, not the growth rates.
    return_rate : float, default 7.0
        Expected annual return in percent (used by the milestone goal-seek).
    inflation_rate : float, default 2.0
        Annual inflation in percent (deflates projected net worth yearly).
    tax_rate : float, default 25.0
        Investment tax rate in percent.
    account_types : AccountTypes
        Balances per account type.
    """
    monthly_contribution: float = 0.0
    risk_tolerance: RiskTolerance = DEFAULT_RISK_TOLERANCE
    return_rate: float = DEFAULT_RETURN_RATE
    inflation_rate: float = DEFAULT_INFLATION_RATE
    tax_rate: float = DEFAULT_TAX_RATE
    account_types: AccountTypes = field(default_factory=AccountTypes)


# ---------------------------------------------------------------------------
# Goals / Metadata
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class MilestoneGoal:
    """
    User-named net-worth target.

    `target_date` is free-form text and is never compared with projections.
    """
    name: str = ""
    goal: float = 0.0
    target_date: str = ""

    def __repr__(self) -> str:
        return (
            f"MilestoneGoal(name={self.name!r}, goal={self.goal:,.0f}, "
            f"target_date={self.target_date!r})"
        )


@dataclass(frozen=True)
class Metadata:
    """ISO-8601 timestamps of the last save and last modification."""
    last_saved: Optional[str] = None
    last_modified: Optional[str] = None


# ---------------------------------------------------------------------------
# Snapshot
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class FinancialSnapshot:
    """
    Complete, immutable description of a household's finances.

    `FinancialSnapshot()` is the empty snapshot: no income, 25% tax, no
    expenses, savings or liabilities, 7% expected return and 2% inflation.

    Examples
    --------
    >>> snap = FinancialSnapshot(income=Income(monthly_gross=8_500, tax_rate=24))
    >>> snap.investment_settings.return_rate
    7.0
    """
    income: Income = field(default_factory=Income)
    expenses: Expenses = field(default_factory=Expenses)
    savings: Savings = field(default_factory=Savings)
    assets: Assets = field(default_factory=Assets)
    liabilities: Liabilities = field(default_factory=Liabilities)
    investment_settings: InvestmentSettings = field(default_factory=InvestmentSettings)
    milestone_goals: Tuple[MilestoneGoal, ...] = ()
    metadata: Metadata = field(default_factory=Metadata)

    def __post_init__(self) -> None:
        object.__setattr__(self, "milestone_goals", tuple(self.milestone_goals))
