"""
Configuration management module for wealthcalc.

Purpose
-------
Centralized configuration using Pydantic models for type-safe parameter
management, validation, and serialization:

- Snapshot schema (SnapshotConfig and its sections): the validation boundary
  for household data arriving as JSON. Field aliases follow the camelCase
  names of the stored payload ("monthlyGross", "creditCards", ...).
- ProjectionConfig: milestone thresholds, checkpoint horizons, scenario rates
  and the contribution split used by the engine.
- AppSettings: environment-driven application settings.

Design Principles
-----------------
- Type-safe: Pydantic enforces types and validates ranges
- Immutable: Frozen models prevent accidental mutation
- Serializable: Easy conversion to/from JSON
- Environment-aware: Supports .env files through pydantic-settings
- Defaults: Sensible defaults for all parameters

The engine never validates its inputs; range checks live here, at the edge.

Example
-------
>>> from wealthcalc.config import ProjectionConfig, SnapshotConfig
>>> config = ProjectionConfig(checkpoint_years=[1, 5, 10, 30])
>>> config.checkpoint_years
[1, 5, 10, 30]
>>>
>>> payload = {"income": {"monthlyGross": 4000, "taxRate": 22}}
>>> SnapshotConfig.model_validate(payload).income.monthly_gross
4000.0
"""

from __future__ import annotations
from typing import Dict, List, Literal, Optional
from pathlib import Path

from pydantic import BaseModel, Field, field_validator, ConfigDict
from pydantic.alias_generators import to_camel
from pydantic_settings import BaseSettings, SettingsConfigDict

from .constants import (
    DEFAULT_CHECKPOINT_YEARS,
    DEFAULT_INFLATION_RATE,
    DEFAULT_MILESTONES,
    DEFAULT_RETURN_RATE,
    DEFAULT_RISK_TOLERANCE,
    DEFAULT_SNAPSHOT_KEY,
    DEFAULT_TAX_RATE,
    FALLBACK_YEAR,
    SCENARIO_RATES,
    TAX_ADVANTAGED_SHARE,
    TAXABLE_SHARE,
)

__all__ = [
    "IncomeConfig",
    "ExpensesConfig",
    "SavingsConfig",
    "InvestmentsConfig",
    "AssetsConfig",
    "LiabilitiesConfig",
    "AccountTypesConfig",
    "InvestmentSettingsConfig",
    "MilestoneGoalConfig",
    "ProjectionsConfig",
    "MetadataConfig",
    "SnapshotConfig",
    "MilestoneConfig",
    "ScenarioRatesConfig",
    "ProjectionConfig",
    "AppSettings",
]


_SNAPSHOT_MODEL_CONFIG = ConfigDict(
    frozen=True,
    extra="forbid",
    alias_generator=to_camel,
    populate_by_name=True,
    allow_inf_nan=False,
)


def _check_amounts(v: Dict[str, float]) -> Dict[str, float]:
    """Ensure every amount in a label -> amount mapping is non-negative."""
    for label, amount in v.items():
        if amount < 0:
            raise ValueError(f"amount for {label!r} must be non-negative, got {amount}")
    return v


# ---------------------------------------------------------------------------
# Snapshot Schema
# ---------------------------------------------------------------------------

class IncomeConfig(BaseModel):
    """Gross monthly income and flat effective tax rate (percent)."""

    model_config = _SNAPSHOT_MODEL_CONFIG

    monthly_gross: float = Field(
        default=0.0,
        ge=0,
        description="Gross monthly income"
    )
    tax_rate: float = Field(
        default=DEFAULT_TAX_RATE,
        ge=0,
        le=100,
        description="Flat effective tax rate in percent"
    )


class ExpensesConfig(BaseModel):
    """Monthly expenses by category (label -> amount)."""

    model_config = _SNAPSHOT_MODEL_CONFIG

    fixed: Dict[str, float] = Field(default_factory=dict)
    variable: Dict[str, float] = Field(default_factory=dict)
    debt: Dict[str, float] = Field(default_factory=dict)

    @field_validator("fixed", "variable", "debt")
    @classmethod
    def validate_amounts(cls, v):
        """Expense amounts cannot be negative."""
        return _check_amounts(v)


class SavingsConfig(BaseModel):
    """Savings bucket balances."""

    model_config = _SNAPSHOT_MODEL_CONFIG

    emergency: float = Field(default=0.0, ge=0)
    retirement: float = Field(default=0.0, ge=0)
    investment: float = Field(default=0.0, ge=0)


class InvestmentsConfig(BaseModel):
    """Stock / bond / other investment balances."""

    model_config = _SNAPSHOT_MODEL_CONFIG

    stocks: float = Field(default=0.0, ge=0)
    bonds: float = Field(default=0.0, ge=0)
    other: float = Field(default=0.0, ge=0)


class AssetsConfig(BaseModel):
    """
    Household assets.

    Attributes
    ----------
    cash : float
        Cash balance.
    properties : Dict[str, float]
        Property label -> market value.
    investments : InvestmentsConfig
        Stock / bond / other split.
    """

    model_config = _SNAPSHOT_MODEL_CONFIG

    cash: float = Field(default=0.0, ge=0)
    properties: Dict[str, float] = Field(default_factory=dict)
    investments: InvestmentsConfig = Field(default_factory=InvestmentsConfig)

    @field_validator("properties")
    @classmethod
    def validate_properties(cls, v):
        """Property values cannot be negative."""
        return _check_amounts(v)


class LiabilitiesConfig(BaseModel):
    """Outstanding balances by liability type (label -> balance)."""

    model_config = _SNAPSHOT_MODEL_CONFIG

    mortgages: Dict[str, float] = Field(default_factory=dict)
    loans: Dict[str, float] = Field(default_factory=dict)
    credit_cards: Dict[str, float] = Field(default_factory=dict)

    @field_validator("mortgages", "loans", "credit_cards")
    @classmethod
    def validate_balances(cls, v):
        """Liability balances cannot be negative."""
        return _check_amounts(v)


class AccountTypesConfig(BaseModel):
    """Balances per account type."""

    model_config = _SNAPSHOT_MODEL_CONFIG

    taxable: float = Field(default=0.0, ge=0)
    traditional_401k: float = Field(default=0.0, ge=0, alias="traditional401k")
    roth_ira: float = Field(default=0.0, ge=0)


class InvestmentSettingsConfig(BaseModel):
    """
    Investment assumptions.

    Attributes
    ----------
    monthly_contribution : float
        Amount invested every month.
    risk_tolerance : str
        "conservative", "moderate" or "aggressive".
    return_rate : float
        Expected annual return in percent (-100 to 100).
    inflation_rate : float
        Annual inflation in percent (0-100).
    tax_rate : float
        Investment tax rate in percent (0-100).
    account_types : AccountTypesConfig
        Balances per account type.

    Examples
    --------
    >>> settings = InvestmentSettingsConfig(monthly_contribution=400, risk_tolerance="aggressive")
    >>> settings.return_rate
    7.0
    """

    model_config = _SNAPSHOT_MODEL_CONFIG

    monthly_contribution: float = Field(
        default=0.0,
        ge=0,
        description="Monthly investment contribution"
    )
    risk_tolerance: Literal["conservative", "moderate", "aggressive"] = Field(
        default=DEFAULT_RISK_TOLERANCE,
        description="Advisory risk tolerance"
    )
    return_rate: float = Field(
        default=DEFAULT_RETURN_RATE,
        ge=-100,
        le=100,
        description="Expected annual return in percent"
    )
    inflation_rate: float = Field(
        default=DEFAULT_INFLATION_RATE,
        ge=0,
        le=100,
        description="Annual inflation in percent"
    )
    tax_rate: float = Field(
        default=DEFAULT_TAX_RATE,
        ge=0,
        le=100,
        description="Investment tax rate in percent"
    )
    account_types: AccountTypesConfig = Field(default_factory=AccountTypesConfig)


class MilestoneGoalConfig(BaseModel):
    """User-named net-worth target. `target_date` is free-form text."""

    model_config = _SNAPSHOT_MODEL_CONFIG

    name: str = Field(default="", max_length=200)
    goal: float = Field(default=0.0, ge=0)
    target_date: str = Field(default="", max_length=100)


class ProjectionsConfig(BaseModel):
    """Container for the user's milestone goals."""

    model_config = _SNAPSHOT_MODEL_CONFIG

    milestones: List[MilestoneGoalConfig] = Field(default_factory=list)


class MetadataConfig(BaseModel):
    """ISO-8601 save / modification timestamps."""

    model_config = _SNAPSHOT_MODEL_CONFIG

    last_saved: Optional[str] = None
    last_modified: Optional[str] = None


class SnapshotConfig(BaseModel):
    """
    Validated household snapshot payload.

    Every section is optional and defaults to the empty snapshot, so
    `SnapshotConfig()` describes a household with no data yet.

    Examples
    --------
    >>> payload = {
    ...     "income": {"monthlyGross": 4000, "taxRate": 22},
    ...     "expenses": {"fixed": {"Rent": 1200}},
    ...     "liabilities": {"creditCards": {"Visa": 2000}},
    ... }
    >>> config = SnapshotConfig.model_validate(payload)
    >>> config.liabilities.credit_cards
    {'Visa': 2000.0}
    """

    model_config = _SNAPSHOT_MODEL_CONFIG

    income: IncomeConfig = Field(default_factory=IncomeConfig)
    expenses: ExpensesConfig = Field(default_factory=ExpensesConfig)
    savings: SavingsConfig = Field(default_factory=SavingsConfig)
    assets: AssetsConfig = Field(default_factory=AssetsConfig)
    liabilities: LiabilitiesConfig = Field(default_factory=LiabilitiesConfig)
    investment_settings: InvestmentSettingsConfig = Field(
        default_factory=InvestmentSettingsConfig
    )
    projections: ProjectionsConfig = Field(default_factory=ProjectionsConfig)
    metadata: MetadataConfig = Field(default_factory=MetadataConfig)


# ---------------------------------------------------------------------------
# Projection Configuration
# ---------------------------------------------------------------------------

class MilestoneConfig(BaseModel):
    """A net-worth threshold and its display label."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    amount: float = Field(
        gt=0,
        description="Net-worth threshold"
    )
    label: str = Field(
        min_length=1,
        max_length=100,
        description="Display label"
    )


class ScenarioRatesConfig(BaseModel):
    """Nominal annual return (percent) per risk posture."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    conservative: float = Field(default=SCENARIO_RATES["conservative"], ge=-100, le=100)
    moderate: float = Field(default=SCENARIO_RATES["moderate"], ge=-100, le=100)
    aggressive: float = Field(default=SCENARIO_RATES["aggressive"], ge=-100, le=100)


class ProjectionConfig(BaseModel):
    """
    Tables driving the projector.

    Attributes
    ----------
    milestones : List[MilestoneConfig]
        Strictly ascending net-worth thresholds for the goal-seek.
    checkpoint_years : List[int]
        Horizons (years from today) of the net-worth projection.
    scenario_rates : ScenarioRatesConfig
        Return rate per risk posture for the growth simulation.
    fallback_year : int
        Arrival year reported when a milestone cannot be solved for.
    tax_advantaged_share : float
        Share of the monthly contribution reported as tax-advantaged.
    taxable_share : float
        Share reported as taxable. Both shares must sum to 1.

    Examples
    --------
    >>> config = ProjectionConfig(
    ...     milestones=[{"amount": 2_000_000, "label": "$2M Net Worth"}],
    ...     checkpoint_years=[30],
    ... )
    >>> config.milestones[0].label
    '$2M Net Worth'
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    milestones: List[MilestoneConfig] = Field(
        default_factory=lambda: [
            MilestoneConfig(amount=amount, label=label)
            for amount, label in DEFAULT_MILESTONES
        ],
        description="Ascending net-worth thresholds"
    )
    checkpoint_years: List[int] = Field(
        default_factory=lambda: list(DEFAULT_CHECKPOINT_YEARS),
        min_length=1,
        description="Projection horizons in years"
    )
    scenario_rates: ScenarioRatesConfig = Field(
        default_factory=ScenarioRatesConfig,
        description="Return rate per risk posture"
    )
    fallback_year: int = Field(
        default=FALLBACK_YEAR,
        ge=1,
        le=9999,
        description="Year reported for unsolvable milestones"
    )
    tax_advantaged_share: float = Field(
        default=TAX_ADVANTAGED_SHARE,
        ge=0,
        le=1,
        description="Tax-advantaged share of the contribution"
    )
    taxable_share: float = Field(
        default=TAXABLE_SHARE,
        ge=0,
        le=1,
        validate_default=True,
        description="Taxable share of the contribution"
    )

    @field_validator("milestones")
    @classmethod
    def validate_milestones_ascending(cls, v):
        """Ensure thresholds are strictly ascending."""
        for prev, cur in zip(v, v[1:]):
            if cur.amount <= prev.amount:
                raise ValueError(
                    f"milestones must be strictly ascending, "
                    f"got {cur.amount:,.0f} after {prev.amount:,.0f}"
                )
        return v

    @field_validator("checkpoint_years")
    @classmethod
    def validate_checkpoints(cls, v):
        """Ensure horizons are between 1 and 100 years."""
        if any(not (1 <= years <= 100) for years in v):
            raise ValueError(f"checkpoint_years must be within 1..100, got {v}")
        return v

    @field_validator("taxable_share")
    @classmethod
    def validate_shares(cls, v, info):
        """Ensure the contribution split covers the whole contribution."""
        tax_advantaged = info.data.get("tax_advantaged_share", TAX_ADVANTAGED_SHARE)
        if abs(tax_advantaged + v - 1.0) > 1e-9:
            raise ValueError(
                f"tax_advantaged_share ({tax_advantaged}) + taxable_share ({v}) must equal 1"
            )
        return v


# ---------------------------------------------------------------------------
# Application Settings (Environment Variables)
# ---------------------------------------------------------------------------

class AppSettings(BaseSettings):
    """
    Global application settings loaded from environment variables.

    Supports .env files for local development. Environment variables
    are prefixed with WEALTHCALC_ (e.g., WEALTHCALC_LOG_LEVEL=DEBUG).

    Attributes
    ----------
    debug : bool
        Enable debug mode (forces DEBUG logging)
    log_level : str
        Logging level: "DEBUG", "INFO", "WARNING", "ERROR"
    store_dir : Path
        Directory of the snapshot store
    default_key : str
        Key of the household snapshot inside the store

    Examples
    --------
    >>> settings = AppSettings()
    >>> settings.default_key
    'financeData'

    # With .env file:
    # WEALTHCALC_STORE_DIR=/tmp/wealthcalc
    >>> settings = AppSettings(_env_file=".env")
    >>> settings.store_dir
    PosixPath('/tmp/wealthcalc')
    """

    model_config = SettingsConfigDict(
        env_prefix="WEALTHCALC_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    debug: bool = Field(
        default=False,
        description="Enable debug mode"
    )
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = Field(
        default="INFO",
        description="Logging level"
    )
    store_dir: Path = Field(
        default=Path.home() / ".local" / "share" / "wealthcalc",
        description="Snapshot store directory"
    )
    default_key: str = Field(
        default=DEFAULT_SNAPSHOT_KEY,
        min_length=1,
        description="Snapshot key inside the store"
    )

    @property
    def effective_log_level(self) -> str:
        """DEBUG when debug mode is on, otherwise log_level."""
        return "DEBUG" if self.debug else self.log_level
