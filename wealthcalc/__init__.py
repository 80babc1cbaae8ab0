"""
wealthcalc — Personal Finance Metrics and Projections

A small, pure calculation engine that turns a household snapshot into
summary ratios, net-worth projections and milestone arrival dates.

Modules
-------
- snapshot      : Immutable household snapshot (income, expenses, balances)
- aggregator    : Net income, expense totals, savings rate, DTI, net worth
- projection    : Monthly compounding with yearly inflation deflation
- goals         : Milestone goal-seek (closed-form annuity inversion)
- engine        : compute_derived_metrics orchestration
- config        : Pydantic schemas and settings
- serialization : JSON persistence with schema versioning
- store         : Key-value snapshot store
- profiles      : Sample households
- utils         : Shared helpers (ratios, rates, calendar, formatting)

"""

__version__ = "0.1.0"

from .snapshot import FinancialSnapshot, Income, Expenses, Savings, Assets, Liabilities
from .config import ProjectionConfig
from .engine import DerivedMetrics, compute_derived_metrics, split_contribution
from .profiles import get_profile, list_profiles
from . import utils
