"""
Net-worth projection module for wealthcalc.

Purpose
-------
Forward simulation of net worth under monthly compounding with a yearly
inflation deflator, evaluated for three risk postures at fixed checkpoints.

Mathematical Model
------------------
With monthly rate r = R / 12 / 100 and deflator d = 1 - I / 100:

    W_0     = principal
    W_{t+1} = (W_t + A) * (1 + r)
    W_{t+1} = W_{t+1} * d                  if t mod 12 == 11

for t = 0 .. 12*years - 1, where A is the monthly contribution (negative
values model withdrawals). The recurrence mirrors the portfolio dynamics
W_{t+1} = (W_t + A_t)(1 + R_t) with a constant return path.

Scenario rates
--------------
Each checkpoint is evaluated with the three fixed scenario rates of
ProjectionConfig (conservative 4.5%, moderate 7%, aggressive 9.5% by default).
The snapshot's own return rate and risk tolerance do not enter this model.

Example
-------
>>> round(project_growth(0, 1_000, 1, 12, 0), 2)
12809.33
>>> from datetime import date
>>> points = project_net_worth(10_000, 500, 2.0, as_of=date(2025, 6, 15))
>>> [p.date.isoformat() for p in points]
['2030-01-01', '2035-01-01', '2045-01-01']
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from typing import Dict, List, Optional

import numpy as np
import pandas as pd

from .config import ProjectionConfig
from .constants import MONTHS_PER_YEAR, RISK_POSTURES
from .utils import add_years, annual_pct_to_monthly, inflation_deflator

_FLOAT_MAX = float(np.finfo(float).max)

__all__ = [
    "ProjectionPoint",
    "months_in",
    "project_growth",
    "growth_path",
    "project_net_worth",
    "projection_frame",
]


@dataclass(frozen=True)
class ProjectionPoint:
    """
    Projected net worth at one checkpoint.

    Attributes
    ----------
    years : int
        Horizon in years.
    date : datetime.date
        January 1 of the checkpoint year.
    conservative, moderate, aggressive : float
        Net worth per risk posture.
    """
    years: int
    date: date
    conservative: float
    moderate: float
    aggressive: float

    def value(self, posture: str) -> float:
        """Projected value for a risk posture name."""
        if posture not in RISK_POSTURES:
            raise KeyError(f"unknown risk posture {posture!r}, expected one of {RISK_POSTURES}")
        return getattr(self, posture)

    def as_dict(self) -> Dict[str, object]:
        return {
            "years": self.years,
            "date": self.date.isoformat(),
            "conservative": self.conservative,
            "moderate": self.moderate,
            "aggressive": self.aggressive,
        }


# ---------------------------------------------------------------------------
# Growth recurrence
# ---------------------------------------------------------------------------

def months_in(years: float) -> int:
    """Number of simulated months for a horizon; 0 for non-positive horizons."""
    if not years > 0:
        return 0
    return int(np.ceil(years * MONTHS_PER_YEAR))


def _saturate(value: float) -> float:
    """Clamp to the largest finite float so overflow never yields inf or nan."""
    return min(max(value, -_FLOAT_MAX), _FLOAT_MAX)


def _grow_month(value, contribution, monthly_rate, deflator, year_end) -> float:
    value = _saturate(_saturate(value + contribution) * (1.0 + monthly_rate))
    if year_end:
        value = _saturate(value * deflator)
    return value


def project_growth(
    principal: float,
    monthly_contribution: float,
    years: float,
    annual_return_rate: float,
    annual_inflation_rate: float,
) -> float:
    """
    Future value after monthly compounding and yearly inflation deflation.

    Parameters
    ----------
    principal : float
        Starting value (may be negative).
    monthly_contribution : float
        Amount added at the start of every month (negative = withdrawal).
    years : float
        Horizon. Non-positive horizons return `principal` unchanged;
        fractional horizons run ceil(years * 12) months.
    annual_return_rate : float
        Nominal annual return in percent.
    annual_inflation_rate : float
        Annual inflation in percent, applied at every 12th month.

    Returns
    -------
    float
        Value at the end of the horizon. Values that would overflow
        saturate at the largest finite float, so finite inputs always
        produce a finite result.

    Examples
    --------
    >>> project_growth(0, 0, 20, 9.5, 2)
    0.0
    >>> project_growth(5_000, 100, 0, 7, 2)
    5000.0
    """
    monthly_rate = annual_pct_to_monthly(annual_return_rate)
    deflator = inflation_deflator(annual_inflation_rate)
    value = float(principal)

    for month in range(months_in(years)):
        year_end = month % MONTHS_PER_YEAR == MONTHS_PER_YEAR - 1
        value = _grow_month(value, monthly_contribution, monthly_rate, deflator, year_end)

    return value


def growth_path(
    principal: float,
    monthly_contribution: float,
    years: int,
    annual_return_rate: float,
    annual_inflation_rate: float,
    *,
    name: str = "net_worth",
) -> pd.Series:
    """
    Year-end values of the growth recurrence.

    Returns a Series indexed by year offset 0..years where entry n equals
    ``project_growth(principal, monthly_contribution, n, ...)``. Useful to
    draw a continuous trajectory between checkpoints.

    Examples
    --------
    >>> path = growth_path(0, 1_000, 2, 12, 0)
    >>> list(path.index)
    [0, 1, 2]
    >>> round(path.loc[1], 2)
    12809.33
    """
    n_years = max(int(years), 0)
    monthly_rate = annual_pct_to_monthly(annual_return_rate)
    deflator = inflation_deflator(annual_inflation_rate)

    values = np.empty(n_years + 1, dtype=float)
    value = float(principal)
    values[0] = value
    for month in range(n_years * MONTHS_PER_YEAR):
        year_end = month % MONTHS_PER_YEAR == MONTHS_PER_YEAR - 1
        value = _grow_month(value, monthly_contribution, monthly_rate, deflator, year_end)
        if year_end:
            values[(month + 1) // MONTHS_PER_YEAR] = value

    index = pd.RangeIndex(n_years + 1, name="year")
    return pd.Series(values, index=index, name=name)


# ---------------------------------------------------------------------------
# Checkpoint projection
# ---------------------------------------------------------------------------

def project_net_worth(
    net_worth: float,
    monthly_contribution: float,
    inflation_rate: float,
    *,
    config: Optional[ProjectionConfig] = None,
    as_of: Optional[date] = None,
) -> List[ProjectionPoint]:
    """
    Project net worth at every checkpoint under the three scenario rates.

    Parameters
    ----------
    net_worth : float
        Current net worth (principal of the simulation).
    monthly_contribution : float
        Monthly amount invested.
    inflation_rate : float
        Annual inflation in percent.
    config : ProjectionConfig, optional
        Checkpoint horizons and scenario rates. Defaults to ProjectionConfig().
    as_of : date, optional
        Anchor date; defaults to today. Checkpoint dates are January 1 of
        as_of.year + horizon.

    Returns
    -------
    List[ProjectionPoint]
        One point per configured horizon, in configuration order.
    """
    config = config or ProjectionConfig()
    as_of = as_of or date.today()
    rates = config.scenario_rates

    points = []
    for years in config.checkpoint_years:
        values = {
            posture: project_growth(
                net_worth,
                monthly_contribution,
                years,
                getattr(rates, posture),
                inflation_rate,
            )
            for posture in RISK_POSTURES
        }
        points.append(ProjectionPoint(years=years, date=add_years(as_of, years), **values))
    return points


def projection_frame(points: List[ProjectionPoint]) -> pd.DataFrame:
    """
    Tabulate projection points for chart consumers.

    Returns a DataFrame indexed by checkpoint date (DatetimeIndex named
    "date") with a `years` column and one column per risk posture.
    """
    columns = ["years", *RISK_POSTURES]
    if not points:
        return pd.DataFrame(columns=columns, index=pd.DatetimeIndex([], name="date"))
    df = pd.DataFrame(
        [[p.years] + [p.value(posture) for posture in RISK_POSTURES] for p in points],
        columns=columns,
        index=pd.DatetimeIndex([pd.Timestamp(p.date) for p in points], name="date"),
    )
    return df
