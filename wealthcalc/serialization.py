"""
Serialization module for wealthcalc persistence.

Purpose
-------
Provides JSON serialization and deserialization for snapshots, projection
configurations and engine results, enabling persistence, sharing and
inspection of household data.

Supports serialization of:
- FinancialSnapshot (camelCase payload: "monthlyGross", "creditCards",
  "investmentSettings", "projections": {"milestones": [...]}, ...)
- ProjectionConfig
- DerivedMetrics (engine output, write-only)

Design Principles
-----------------
- Type-safe: payloads are validated through the Pydantic schema in config.py
- Human-readable: indented JSON for easy editing
- Boundary errors: schema failures surface as wealthcalc exceptions
- Backward compatible: validates schema versions (mismatch -> UserWarning)

Example
-------
>>> from pathlib import Path
>>> from wealthcalc import get_profile
>>> from wealthcalc.serialization import save_snapshot, load_snapshot
>>>
>>> snapshot = get_profile("Mid-Career Family")
>>> save_snapshot(snapshot, Path("household.json"))
>>> load_snapshot(Path("household.json")) == snapshot
True
"""

from __future__ import annotations
from typing import Any, Dict, Mapping, TYPE_CHECKING
from pathlib import Path
import json
import warnings

from pydantic import ValidationError as PydanticValidationError

from .config import ProjectionConfig, SnapshotConfig
from .exceptions import ConfigurationError, ValidationError
from .snapshot import (
    AccountTypes,
    Assets,
    Expenses,
    FinancialSnapshot,
    Income,
    InvestmentSettings,
    Investments,
    Liabilities,
    Metadata,
    MilestoneGoal,
    Savings,
)

if TYPE_CHECKING:
    from .engine import DerivedMetrics

__all__ = [
    "SCHEMA_VERSION",
    "snapshot_to_dict",
    "snapshot_from_dict",
    "snapshot_from_config",
    "save_snapshot",
    "load_snapshot",
    "projection_config_from_dict",
    "load_projection_config",
    "metrics_to_dict",
    "save_metrics",
]


# ---------------------------------------------------------------------------
# Schema Version
# ---------------------------------------------------------------------------

SCHEMA_VERSION = "1.0.0"


def _check_schema_version(data: Mapping[str, Any]) -> None:
    schema_version = data.get("schema_version", "0.0.0")
    if schema_version != SCHEMA_VERSION:
        warnings.warn(
            f"File schema version {schema_version} differs from current "
            f"version {SCHEMA_VERSION}. May encounter compatibility issues.",
            UserWarning,
        )


def _read_json(path: Path) -> Dict[str, Any]:
    """Read a JSON object from disk; malformed content raises ValidationError."""
    with open(path, "r", encoding="utf-8") as f:
        try:
            data = json.load(f)
        except (json.JSONDecodeError, UnicodeDecodeError) as e:
            raise ValidationError(f"{path} is not valid JSON: {e}") from e
    if not isinstance(data, dict):
        raise ValidationError(
            f"{path} must contain a JSON object, got {type(data).__name__}"
        )
    return data


def _write_json(data: Mapping[str, Any], path: Path) -> None:
    path.parent.mkdir(parents=True, exist_ok=True)
    with open(path, "w", encoding="utf-8") as f:
        json.dump(data, f, indent=2)


# ---------------------------------------------------------------------------
# Snapshot Serialization
# ---------------------------------------------------------------------------

def snapshot_to_dict(snapshot: FinancialSnapshot) -> Dict[str, Any]:
    """
    Convert a FinancialSnapshot to its camelCase payload.

    Parameters
    ----------
    snapshot : FinancialSnapshot
        Snapshot to convert.

    Returns
    -------
    dict
        JSON-ready dictionary; round-trips through `snapshot_from_dict`.

    Examples
    --------
    >>> data = snapshot_to_dict(FinancialSnapshot(income=Income(monthly_gross=4_000)))
    >>> data["income"]
    {'monthlyGross': 4000, 'taxRate': 25.0}
    """
    inv = snapshot.assets.investments
    settings = snapshot.investment_settings
    accounts = settings.account_types
    return {
        "income": {
            "monthlyGross": snapshot.income.monthly_gross,
            "taxRate": snapshot.income.tax_rate,
        },
        "expenses": {
            "fixed": dict(snapshot.expenses.fixed),
            "variable": dict(snapshot.expenses.variable),
            "debt": dict(snapshot.expenses.debt),
        },
        "savings": {
            "emergency": snapshot.savings.emergency,
            "retirement": snapshot.savings.retirement,
            "investment": snapshot.savings.investment,
        },
        "assets": {
            "cash": snapshot.assets.cash,
            "properties": dict(snapshot.assets.properties),
            "investments": {
                "stocks": inv.stocks,
                "bonds": inv.bonds,
                "other": inv.other,
            },
        },
        "liabilities": {
            "mortgages": dict(snapshot.liabilities.mortgages),
            "loans": dict(snapshot.liabilities.loans),
            "creditCards": dict(snapshot.liabilities.credit_cards),
        },
        "investmentSettings": {
            "monthlyContribution": settings.monthly_contribution,
            "riskTolerance": settings.risk_tolerance,
            "returnRate": settings.return_rate,
            "inflationRate": settings.inflation_rate,
            "taxRate": settings.tax_rate,
            "accountTypes": {
                "taxable": accounts.taxable,
                "traditional401k": accounts.traditional_401k,
                "rothIra": accounts.roth_ira,
            },
        },
        "projections": {
            "milestones": [
                {"name": g.name, "goal": g.goal, "targetDate": g.target_date}
                for g in snapshot.milestone_goals
            ],
        },
        "metadata": {
            "lastSaved": snapshot.metadata.last_saved,
            "lastModified": snapshot.metadata.last_modified,
        },
    }


def snapshot_from_config(config: SnapshotConfig) -> FinancialSnapshot:
    """Build the immutable domain snapshot from a validated schema instance."""
    settings = config.investment_settings
    return FinancialSnapshot(
        income=Income(
            monthly_gross=config.income.monthly_gross,
            tax_rate=config.income.tax_rate,
        ),
        expenses=Expenses(
            fixed=config.expenses.fixed,
            variable=config.expenses.variable,
            debt=config.expenses.debt,
        ),
        savings=Savings(**config.savings.model_dump()),
        assets=Assets(
            cash=config.assets.cash,
            properties=config.assets.properties,
            investments=Investments(**config.assets.investments.model_dump()),
        ),
        liabilities=Liabilities(
            mortgages=config.liabilities.mortgages,
            loans=config.liabilities.loans,
            credit_cards=config.liabilities.credit_cards,
        ),
        investment_settings=InvestmentSettings(
            monthly_contribution=settings.monthly_contribution,
            risk_tolerance=settings.risk_tolerance,
            return_rate=settings.return_rate,
            inflation_rate=settings.inflation_rate,
            tax_rate=settings.tax_rate,
            account_types=AccountTypes(**settings.account_types.model_dump()),
        ),
        milestone_goals=tuple(
            MilestoneGoal(name=g.name, goal=g.goal, target_date=g.target_date)
            for g in config.projections.milestones
        ),
        metadata=Metadata(
            last_saved=config.metadata.last_saved,
            last_modified=config.metadata.last_modified,
        ),
    )


def snapshot_from_dict(data: Mapping[str, Any]) -> FinancialSnapshot:
    """
    Validate a payload and create a FinancialSnapshot.

    Parameters
    ----------
    data : dict
        camelCase (or snake_case) payload. Missing sections take the
        zero-valued defaults; a "schema_version" key is ignored.

    Returns
    -------
    FinancialSnapshot

    Raises
    ------
    ValidationError
        If the payload violates the schema (negative amounts, unknown keys,
        rates out of range, non-finite numbers, ...).
    """
    payload = {k: v for k, v in data.items() if k != "schema_version"}
    try:
        config = SnapshotConfig.model_validate(payload)
    except PydanticValidationError as e:
        raise ValidationError(f"Invalid snapshot payload: {e}") from e
    return snapshot_from_config(config)


def save_snapshot(snapshot: FinancialSnapshot, path: Path) -> None:
    """
    Save a FinancialSnapshot to a JSON file.

    Examples
    --------
    >>> from pathlib import Path
    >>> save_snapshot(snapshot, Path("household.json"))
    """
    data = {"schema_version": SCHEMA_VERSION, **snapshot_to_dict(snapshot)}
    _write_json(data, path)


def load_snapshot(path: Path) -> FinancialSnapshot:
    """
    Load a FinancialSnapshot from a JSON file.

    Parameters
    ----------
    path : Path
        Input file path.

    Returns
    -------
    FinancialSnapshot

    Raises
    ------
    ValidationError
        If the file is not a JSON object or fails schema validation.
    """
    data = _read_json(path)
    _check_schema_version(data)
    return snapshot_from_dict(data)


# ---------------------------------------------------------------------------
# ProjectionConfig Serialization
# ---------------------------------------------------------------------------

def projection_config_from_dict(data: Mapping[str, Any]) -> ProjectionConfig:
    """
    Validate a projection configuration payload.

    Raises
    ------
    ConfigurationError
        If thresholds are not ascending, horizons fall outside 1..100,
        shares do not sum to 1, or unknown keys are present.

    Examples
    --------
    >>> projection_config_from_dict({"checkpoint_years": [1, 30]}).checkpoint_years
    [1, 30]
    """
    payload = {k: v for k, v in data.items() if k != "schema_version"}
    try:
        return ProjectionConfig.model_validate(payload)
    except PydanticValidationError as e:
        raise ConfigurationError(f"Invalid projection config: {e}") from e


def load_projection_config(path: Path) -> ProjectionConfig:
    """Load a ProjectionConfig from a JSON file."""
    data = _read_json(path)
    _check_schema_version(data)
    return projection_config_from_dict(data)


# ---------------------------------------------------------------------------
# DerivedMetrics Serialization
# ---------------------------------------------------------------------------

def metrics_to_dict(metrics: DerivedMetrics) -> Dict[str, Any]:
    """Engine output as a JSON-ready dict tagged with the schema version."""
    return {"schema_version": SCHEMA_VERSION, **metrics.to_dict()}


def save_metrics(metrics: DerivedMetrics, path: Path) -> None:
    """
    Save DerivedMetrics to a JSON file.

    Write-only: results are cheap to recompute from the snapshot.

    Examples
    --------
    >>> from pathlib import Path
    >>> save_metrics(compute_derived_metrics(snapshot), Path("metrics.json"))
    """
    _write_json(metrics_to_dict(metrics), path)
