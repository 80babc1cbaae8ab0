"""General utilities for wealthcalc

Contents
--------
- Reduction helpers (sum_values)
- Ratio helpers (safe_percentage)
- Rate conversions (percent annual -> monthly, inflation deflator)
- Calendar helpers (first_of_year, add_years, utc_timestamp)
- Numeric guards (is_finite)
- Reporting helpers (format_currency, format_percent)
"""

from __future__ import annotations

from datetime import date, datetime, timezone
from typing import Mapping, Optional

import numpy as np

from .constants import MONTHS_PER_YEAR

__all__ = [
    # Reductions
    "sum_values",
    # Ratios
    "safe_percentage",
    # Rates
    "annual_pct_to_monthly",
    "inflation_deflator",
    # Calendar
    "first_of_year",
    "add_years",
    "utc_timestamp",
    # Numeric guards
    "is_finite",
    # Reporting
    "format_currency",
    "format_percent",
]


# ---------------------------------------------------------------------------
# Reduction helpers
# ---------------------------------------------------------------------------

def sum_values(mapping: Optional[Mapping[str, float]]) -> float:
    """Sum the values of a label -> amount mapping (empty or None sums to 0)."""
    if not mapping:
        return 0.0
    return float(sum(float(v) for v in mapping.values()))


# ---------------------------------------------------------------------------
# Ratio helpers
# ---------------------------------------------------------------------------

def safe_percentage(numerator: float, denominator: float) -> float:
    """Return numerator / denominator * 100, or 0.0 when denominator <= 0.

    The guard replaces a division by zero with a zero ratio instead of
    signalling an error.
    """
    if denominator <= 0:
        return 0.0
    return float(numerator) / float(denominator) * 100.0


# ---------------------------------------------------------------------------
# Rate conversions (percent, simple)
# ---------------------------------------------------------------------------

def annual_pct_to_monthly(rate_pct: float) -> float:
    """Convert a nominal annual percentage to a simple monthly rate.

    Uses: rate_pct / 12 / 100 (no compounding). 12 -> 0.01.
    """
    return float(rate_pct) / MONTHS_PER_YEAR / 100.0


def inflation_deflator(inflation_pct: float) -> float:
    """Per-year multiplicative deflator for an annual inflation percentage.

    Uses: 1 - inflation_pct / 100. 2 -> 0.98.
    """
    return 1.0 - float(inflation_pct) / 100.0


# ---------------------------------------------------------------------------
# Calendar helpers
# ---------------------------------------------------------------------------

def first_of_year(year: int) -> Optional[date]:
    """January 1 of *year*, or None when the year is not representable."""
    if not (date.min.year <= year <= date.max.year):
        return None
    return date(int(year), 1, 1)


def add_years(as_of: date, years: int) -> Optional[date]:
    """January 1 of the year *years* after *as_of* (day and month dropped)."""
    return first_of_year(as_of.year + int(years))


def utc_timestamp(now: Optional[datetime] = None) -> str:
    """ISO-8601 UTC timestamp with millisecond precision: '2025-01-01T09:30:00.000Z'."""
    now = now or datetime.now(timezone.utc)
    if now.tzinfo is not None:
        now = now.astimezone(timezone.utc).replace(tzinfo=None)
    return now.isoformat(timespec="milliseconds") + "Z"


# ---------------------------------------------------------------------------
# Numeric guards
# ---------------------------------------------------------------------------

def is_finite(*values: float) -> bool:
    """True when every value is a finite float (no NaN / +-inf)."""
    return bool(np.all(np.isfinite(np.asarray(values, dtype=float))))


# ---------------------------------------------------------------------------
# Reporting helpers
# ---------------------------------------------------------------------------

def format_currency(value, decimals=0, symbol='$'):
    """
    Format a monetary amount for tables and labels.

    Parameters
    ----------
    value : float
        Amount in currency units.
    decimals : int, default 0
        Number of decimal places to display.
    symbol : str, default '$'
        Currency symbol prefix.

    Returns
    -------
    str
        Formatted string with thousands separators. Negative amounts keep
        the sign in front of the symbol.

    Examples
    --------
    >>> format_currency(12_682.5)
    '$12,682'
    >>> format_currency(3120, decimals=2)
    '$3,120.00'
    >>> format_currency(-25_000)
    '-$25,000'
    """
    sign = '-' if value < 0 else ''
    return f'{sign}{symbol}{abs(value):,.{decimals}f}'


def format_percent(value, decimals=1):
    """Format a percentage value (already scaled to 0-100): 2.564 -> '2.6%'."""
    return f'{value:.{decimals}f}%'
