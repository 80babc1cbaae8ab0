"""
Global constants for wealthcalc.

Purpose
-------
Centralizes default values and magic numbers used by the derived-metrics
engine. The projection tables below are the defaults of
`wealthcalc.config.ProjectionConfig`; pass a custom config to the engine
instead of editing them.

Usage
-----
>>> from wealthcalc.constants import SCENARIO_RATES, DEFAULT_MILESTONES
>>> SCENARIO_RATES["moderate"]
7.0

Categories
----------
- Time: months per year, checkpoint horizons, fallback year
- Projection: scenario return rates, milestone thresholds
- Snapshot defaults: tax, return and inflation rates of an empty snapshot
- Contributions: tax-advantaged / taxable split
- Allocation: advisory stock/bond split per risk tolerance
- Storage: default snapshot key
"""

from typing import Dict, Tuple

__all__ = [
    # Time
    "MONTHS_PER_YEAR",
    "DEFAULT_CHECKPOINT_YEARS",
    "FALLBACK_YEAR",
    # Projection
    "RISK_POSTURES",
    "SCENARIO_RATES",
    "DEFAULT_MILESTONES",
    # Snapshot defaults
    "DEFAULT_TAX_RATE",
    "DEFAULT_RETURN_RATE",
    "DEFAULT_INFLATION_RATE",
    "DEFAULT_RISK_TOLERANCE",
    # Contributions
    "TAX_ADVANTAGED_SHARE",
    "TAXABLE_SHARE",
    # Allocation
    "TARGET_ALLOCATIONS",
    # Storage
    "DEFAULT_SNAPSHOT_KEY",
]


# =============================================================================
# Time
# =============================================================================

MONTHS_PER_YEAR: int = 12
"""Number of months in a year (compounding periods per year)."""

DEFAULT_CHECKPOINT_YEARS: Tuple[int, ...] = (5, 10, 20)
"""Years from today at which projected net worth is reported."""

FALLBACK_YEAR: int = 2100
"""Arrival year reported when a milestone cannot be solved for."""


# =============================================================================
# Projection
# =============================================================================

RISK_POSTURES: Tuple[str, ...] = ("conservative", "moderate", "aggressive")
"""Risk postures, in the order they appear in projection output."""

SCENARIO_RATES: Dict[str, float] = {
    "conservative": 4.5,
    "moderate": 7.0,
    "aggressive": 9.5,
}
"""Nominal annual return (percent) per risk posture.

Fixed scenario rates. The snapshot's own return rate and risk tolerance do
not change them.
"""

DEFAULT_MILESTONES: Tuple[Tuple[float, str], ...] = (
    (10_000.0, "$10k Net Worth"),
    (50_000.0, "$50k Net Worth"),
    (100_000.0, "$100k Net Worth"),
    (250_000.0, "$250k Net Worth"),
    (500_000.0, "$500k Net Worth"),
    (1_000_000.0, "$1M Net Worth"),
)
"""Ascending (amount, label) net-worth thresholds."""


# =============================================================================
# Snapshot Defaults
# =============================================================================

DEFAULT_TAX_RATE: float = 25.0
"""Flat effective tax rate (percent) of an empty snapshot."""

DEFAULT_RETURN_RATE: float = 7.0
"""Expected annual return (percent) of an empty snapshot."""

DEFAULT_INFLATION_RATE: float = 2.0
"""Annual inflation (percent) of an empty snapshot."""

DEFAULT_RISK_TOLERANCE: str = "moderate"
"""Risk tolerance of an empty snapshot."""


# =============================================================================
# Contributions
# =============================================================================

TAX_ADVANTAGED_SHARE: float = 0.7
"""Share of the monthly contribution reported as tax-advantaged.

Placeholder proportion for display, not a tax rule.
"""

TAXABLE_SHARE: float = 0.3
"""Share of the monthly contribution reported as taxable."""


# =============================================================================
# Allocation
# =============================================================================

TARGET_ALLOCATIONS: Dict[str, Dict[str, float]] = {
    "conservative": {"stocks": 20.0, "bonds": 80.0},
    "moderate": {"stocks": 60.0, "bonds": 40.0},
    "aggressive": {"stocks": 80.0, "bonds": 20.0},
}
"""Advisory stock/bond split (percent) per risk tolerance."""


# =============================================================================
# Storage
# =============================================================================

DEFAULT_SNAPSHOT_KEY: str = "financeData"
"""Key under which the household snapshot is stored."""
