# wealthcalc/goals.py
"""
Milestone goal-seek module.

Purpose
-------
Estimates when net worth reaches a target under constant monthly
contributions and a constant monthly rate, by inverting the future value
of an ordinary annuity in closed form.

Mathematical Framework
----------------------
With r = R / 1200, contribution A and gap G = target - net_worth:

    G = A * ((1 + r)^n - 1) / r
    n = ln(1 + G * r / A) / ln(1 + r)          (months)
    years = n / 12

The arrival date is January 1 of ``as_of.year + ceil(max(0, years))``.

Fallbacks
---------
- A <= 0 or R <= 0: the equation cannot be solved; 0 years is returned and
  the milestone is reported as due this year. This is a known approximation.
- G <= 0: already reached, 0 years.
- Logarithm argument <= 0 or any non-finite intermediate: no estimate; the
  milestone is reported on January 1 of the fallback year (2100).
No NaN or infinity ever leaves this module.

Example
-------
>>> from datetime import date
>>> estimate_years_to_target(0, 100_000, 1_000, 7)
6.58...
>>> [m.label for m in project_milestones(60_000, 1_000, 7, as_of=date(2025, 1, 1))]
['$100k Net Worth', '$250k Net Worth', '$500k Net Worth', '$1M Net Worth']
"""

from __future__ import annotations
from dataclasses import dataclass
from typing import Dict, Iterable, List, Optional, Sequence, Tuple, TYPE_CHECKING
from datetime import date
import numpy as np

from .config import MilestoneConfig, ProjectionConfig
from .constants import FALLBACK_YEAR, MONTHS_PER_YEAR
from .utils import first_of_year, is_finite

if TYPE_CHECKING:
    from .snapshot import MilestoneGoal

__all__ = [
    "MilestoneProjection",
    "estimate_years_to_target",
    "projected_milestone_date",
    "project_milestones",
    "project_goals",
]


# ---------------------------------------------------------------------------
# Result
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class MilestoneProjection:
    """
    Estimated arrival of a net-worth target.

    Parameters
    ----------
    label : str
        Milestone label or user goal name.
    amount : float
        Target net worth.
    projected_date : datetime.date
        January 1 of the estimated arrival year.
    years : float, optional
        Unrounded goal-seek result; None when the fallback year was used.
    target_date : str, optional
        User-entered target date, passed through unvalidated (user goals).
    """
    label: str
    amount: float
    projected_date: date
    years: Optional[float] = None
    target_date: Optional[str] = None

    @property
    def is_fallback(self) -> bool:
        """True when no estimate was possible and the fallback year is reported."""
        return self.years is None

    def as_dict(self) -> Dict[str, object]:
        out: Dict[str, object] = {
            "label": self.label,
            "amount": self.amount,
            "projected_date": self.projected_date.isoformat(),
        }
        if self.years is not None:
            out["years"] = self.years
        if self.target_date is not None:
            out["target_date"] = self.target_date
        return out

    def __repr__(self) -> str:
        return (
            f"MilestoneProjection(label={self.label!r}, amount={self.amount:,.0f}, "
            f"projected_date={self.projected_date.isoformat()})"
        )


# ---------------------------------------------------------------------------
# Goal-seek
# ---------------------------------------------------------------------------

def estimate_years_to_target(
    current_net_worth: float,
    target: float,
    monthly_contribution: float,
    annual_return_rate: float,
) -> Optional[float]:
    """
    Years of contributions needed to grow net worth to *target*.

    Parameters
    ----------
    current_net_worth : float
        Starting net worth.
    target : float
        Target net worth.
    monthly_contribution : float
        Constant monthly contribution.
    annual_return_rate : float
        Nominal annual return in percent.

    Returns
    -------
    float or None
        Non-negative years, 0.0 for the degenerate cases (no contribution,
        no positive return, target already met), None when no finite
        estimate exists.

    Examples
    --------
    >>> estimate_years_to_target(0, 50_000, 0, 7)
    0.0
    >>> estimate_years_to_target(80_000, 50_000, 500, 7)
    0.0
    """
    if monthly_contribution <= 0 or annual_return_rate <= 0:
        return 0.0

    target_growth = target - current_net_worth
    if not is_finite(target_growth):
        return None
    if target_growth <= 0:
        return 0.0

    monthly_rate = annual_return_rate / (MONTHS_PER_YEAR * 100.0)
    log_arg = 1.0 + target_growth * monthly_rate / monthly_contribution
    if not is_finite(log_arg) or log_arg <= 0:
        return None

    with np.errstate(divide="ignore", invalid="ignore", over="ignore"):
        months = float(np.log(log_arg) / np.log1p(monthly_rate))
    if not is_finite(months):
        return None

    return max(0.0, months / MONTHS_PER_YEAR)


def projected_milestone_date(
    years: Optional[float],
    as_of: date,
    *,
    fallback_year: int = FALLBACK_YEAR,
) -> date:
    """
    Calendar date for a goal-seek result.

    January 1 of ``as_of.year + ceil(max(0, years))``; January 1 of
    *fallback_year* when *years* is None or the year is not representable.

    Examples
    --------
    >>> projected_milestone_date(6.58, date(2025, 3, 14))
    datetime.date(2032, 1, 1)
    >>> projected_milestone_date(None, date(2025, 3, 14))
    datetime.date(2100, 1, 1)
    """
    fallback = date(fallback_year, 1, 1)
    if years is None or not is_finite(years):
        return fallback
    offset = int(np.ceil(max(0.0, years)))
    if offset > date.max.year:
        return fallback
    return first_of_year(as_of.year + offset) or fallback


def _seek(
    targets: Iterable[Tuple[str, float, Optional[str]]],
    net_worth: float,
    monthly_contribution: float,
    annual_return_rate: float,
    as_of: date,
    fallback_year: int,
) -> List[MilestoneProjection]:
    """Project (label, amount, target_date) targets strictly above net worth."""
    projections = []
    for label, amount, target_date in targets:
        if not amount > net_worth:
            continue
        years = estimate_years_to_target(
            net_worth, amount, monthly_contribution, annual_return_rate
        )
        projections.append(
            MilestoneProjection(
                label=label,
                amount=float(amount),
                projected_date=projected_milestone_date(
                    years, as_of, fallback_year=fallback_year
                ),
                years=years,
                target_date=target_date,
            )
        )
    return projections


def project_milestones(
    net_worth: float,
    monthly_contribution: float,
    annual_return_rate: float,
    *,
    milestones: Optional[Sequence[MilestoneConfig]] = None,
    config: Optional[ProjectionConfig] = None,
    as_of: Optional[date] = None,
) -> List[MilestoneProjection]:
    """
    Arrival dates of the configured net-worth thresholds not yet reached.

    Parameters
    ----------
    net_worth : float
        Current net worth. Thresholds <= net_worth are omitted.
    monthly_contribution : float
        Constant monthly contribution.
    annual_return_rate : float
        Expected annual return in percent (the snapshot's own rate).
    milestones : Sequence[MilestoneConfig], optional
        Thresholds to project; defaults to ``config.milestones``.
    config : ProjectionConfig, optional
        Source of default thresholds and the fallback year.
    as_of : date, optional
        Anchor date; defaults to today.

    Returns
    -------
    List[MilestoneProjection]
        In threshold order.
    """
    config = config or ProjectionConfig()
    as_of = as_of or date.today()
    table = config.milestones if milestones is None else milestones
    return _seek(
        ((m.label, m.amount, None) for m in table),
        net_worth,
        monthly_contribution,
        annual_return_rate,
        as_of,
        config.fallback_year,
    )


def project_goals(
    goals: Sequence["MilestoneGoal"],
    net_worth: float,
    monthly_contribution: float,
    annual_return_rate: float,
    *,
    config: Optional[ProjectionConfig] = None,
    as_of: Optional[date] = None,
) -> List[MilestoneProjection]:
    """
    Arrival dates of the user's own milestone goals not yet reached.

    Goals keep their input order; each goal's free-form target date is
    carried through untouched.
    """
    config = config or ProjectionConfig()
    as_of = as_of or date.today()
    return _seek(
        ((g.name, g.goal, g.target_date) for g in goals),
        net_worth,
        monthly_contribution,
        annual_return_rate,
        as_of,
        config.fallback_year,
    )
