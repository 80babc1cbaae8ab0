"""
Command-Line Interface for wealthcalc.

Purpose
-------
Runs the derived-metrics engine on a snapshot file (or the stored household
snapshot), validates and creates snapshot files, and browses the sample
profiles without writing Python code.

Commands
--------
- compute: Derived metrics, projections and milestone dates for a snapshot
- snapshot: Validate, create or store snapshot files
- profiles: List and inspect the sample household profiles
- info: Package, settings and dependency information

Example Usage
-------------
    # Metrics for a snapshot file, pinned to a date
    $ wealthcalc compute --snapshot household.json --as-of 2025-01-01

    # Machine-readable output saved to disk
    $ wealthcalc compute -s household.json --format json -o metrics.json

    # Start from a sample profile
    $ wealthcalc snapshot create household.json --profile "Mid-Career Family"

    # Show version
    $ wealthcalc --version
"""

from __future__ import annotations

import json
import logging
import sys
from datetime import date
from pathlib import Path
from typing import Optional

import click

from . import __version__


def _get_console():
    """Lazy import Rich for better startup time."""
    from rich.console import Console
    return Console()


def _fail(message: str) -> None:
    click.echo(f"Error: {message}", err=True)
    sys.exit(1)


def _configure_logging(level: str) -> None:
    logging.basicConfig(
        level=getattr(logging, level),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    logging.getLogger("wealthcalc").setLevel(getattr(logging, level))


@click.group()
@click.version_option(version=__version__, prog_name="wealthcalc")
@click.option("--quiet", "-q", is_flag=True, help="Suppress non-essential output")
@click.pass_context
def main(ctx: click.Context, quiet: bool) -> None:
    """
    wealthcalc - Personal finance metrics and net-worth projections.

    Computes savings rate, debt-to-income and net worth from a household
    snapshot, projects net worth under three risk postures and estimates
    when wealth milestones are reached.

    Use 'wealthcalc COMMAND --help' for command-specific help.
    """
    from pydantic import ValidationError as PydanticValidationError
    from .config import AppSettings

    try:
        settings = AppSettings()
    except PydanticValidationError as e:
        _fail(f"invalid WEALTHCALC_* settings: {e}")

    level = "WARNING" if quiet else settings.effective_log_level
    _configure_logging(level)

    ctx.ensure_object(dict)
    ctx.obj["quiet"] = quiet
    ctx.obj["settings"] = settings
    ctx.obj["console"] = _get_console()


# ---------------------------------------------------------------------------
# compute
# ---------------------------------------------------------------------------

@main.command()
@click.option(
    "--snapshot", "-s",
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
    default=None,
    help="Snapshot file (JSON). Defaults to the stored household snapshot."
)
@click.option(
    "--config", "-c",
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
    default=None,
    help="Projection config file (JSON): milestones, horizons, scenario rates"
)
@click.option(
    "--as-of",
    type=click.DateTime(formats=["%Y-%m-%d"]),
    default=None,
    help="Anchor date YYYY-MM-DD (default: today)"
)
@click.option(
    "--output", "-o",
    type=click.Path(dir_okay=False, path_type=Path),
    default=None,
    help="Write the full result as JSON to this file"
)
@click.option(
    "--format", "-f",
    type=click.Choice(["table", "json"]),
    default="table",
    help="Output format (default: table)"
)
@click.pass_context
def compute(
    ctx: click.Context,
    snapshot: Optional[Path],
    config: Optional[Path],
    as_of,
    output: Optional[Path],
    format: str,
) -> None:
    """
    Compute derived metrics and projections.

    Example:
        wealthcalc compute -s household.json --as-of 2025-01-01
    """
    console = ctx.obj.get("console")
    quiet = ctx.obj.get("quiet", False)
    settings = ctx.obj["settings"]

    from .engine import compute_derived_metrics
    from .exceptions import WealthCalcError
    from .serialization import (
        load_projection_config,
        load_snapshot,
        metrics_to_dict,
        save_metrics,
    )
    from .store import SnapshotStore

    try:
        if snapshot is not None:
            snap = load_snapshot(snapshot)
        else:
            snap = SnapshotStore(settings.store_dir).load(settings.default_key)
        projection_config = load_projection_config(config) if config else None
    except WealthCalcError as e:
        _fail(str(e))

    anchor: date = as_of.date() if as_of else date.today()
    metrics = compute_derived_metrics(snap, projection_config, as_of=anchor)

    if format == "json":
        click.echo(json.dumps(metrics_to_dict(metrics), indent=2))
    else:
        _print_metrics(console, metrics)

    if output:
        try:
            save_metrics(metrics, output)
        except OSError as e:
            _fail(f"Cannot write {output}: {e}")
        if not quiet:
            click.echo(f"Results saved to {output}", err=format == "json")


def _print_metrics(console, metrics) -> None:
    from rich.table import Table
    from .utils import format_currency, format_percent

    summary = Table(title=f"Financial Summary (as of {metrics.as_of.isoformat()})")
    summary.add_column("Metric", style="cyan")
    summary.add_column("Value", style="green", justify="right")
    summary.add_row("Monthly Net Income", format_currency(metrics.monthly_net))
    summary.add_row("Monthly Expenses", format_currency(metrics.total_expenses))
    summary.add_row("Savings Rate", format_percent(metrics.savings_rate))
    summary.add_row("Debt-to-Income", format_percent(metrics.debt_to_income))
    summary.add_row("Total Savings", format_currency(metrics.total_savings))
    summary.add_row("Total Assets", format_currency(metrics.total_assets))
    summary.add_row("Total Liabilities", format_currency(metrics.total_liabilities))
    summary.add_row("Net Worth", format_currency(metrics.net_worth))
    console.print(summary)

    alloc = metrics.asset_allocation
    target = metrics.target_allocation
    allocation = Table(title=f"Asset Allocation (target: {target.risk_tolerance})")
    allocation.add_column("Bucket", style="cyan")
    allocation.add_column("Amount", justify="right")
    allocation.add_column("Share", justify="right")
    allocation.add_column("Target", justify="right")
    allocation.add_row("Stocks", format_currency(alloc.stocks),
                       format_percent(alloc.stocks_pct), format_percent(target.stocks))
    allocation.add_row("Bonds", format_currency(alloc.bonds),
                       format_percent(alloc.bonds_pct), format_percent(target.bonds))
    allocation.add_row("Other", format_currency(alloc.other),
                       format_percent(alloc.other_pct), "-")
    console.print(allocation)

    projection = Table(title="Net Worth Projection")
    projection.add_column("Horizon", style="cyan")
    projection.add_column("Date")
    projection.add_column("Conservative", justify="right")
    projection.add_column("Moderate", justify="right")
    projection.add_column("Aggressive", justify="right")
    for point in metrics.projection_series:
        projection.add_row(
            f"{point.years} years",
            point.date.isoformat() if point.date else "-",
            format_currency(point.conservative),
            format_currency(point.moderate),
            format_currency(point.aggressive),
        )
    console.print(projection)

    for title, rows in (
        ("Milestones", metrics.milestone_projections),
        ("Your Goals", metrics.goal_projections),
    ):
        if not rows:
            continue
        table = Table(title=title)
        table.add_column("Milestone", style="cyan")
        table.add_column("Amount", justify="right")
        table.add_column("Projected", justify="right")
        for m in rows:
            table.add_row(m.label, format_currency(m.amount), str(m.projected_date.year))
        console.print(table)

    split = metrics.contribution_split
    console.print(
        f"Monthly contribution {format_currency(split.contribution)}: "
        f"{format_currency(split.tax_advantaged)} tax-advantaged, "
        f"{format_currency(split.taxable)} taxable"
    )


# ---------------------------------------------------------------------------
# snapshot
# ---------------------------------------------------------------------------

@main.group()
def snapshot() -> None:
    """Snapshot file management commands."""
    pass


@snapshot.command("validate")
@click.argument("snapshot_file", type=click.Path(exists=True, dir_okay=False, path_type=Path))
@click.pass_context
def snapshot_validate(ctx: click.Context, snapshot_file: Path) -> None:
    """
    Validate a snapshot file.

    Example:
        wealthcalc snapshot validate household.json
    """
    quiet = ctx.obj.get("quiet", False)

    from .aggregator import aggregate
    from .exceptions import WealthCalcError
    from .serialization import load_snapshot
    from .utils import format_currency

    try:
        snap = load_snapshot(snapshot_file)
    except WealthCalcError as e:
        _fail(f"snapshot validation failed: {e}")

    if not quiet:
        summary = aggregate(snap)
        click.echo("Snapshot is valid")
        click.echo(f"Net worth: {format_currency(summary.net_worth)}")
        click.echo(f"Milestone goals: {len(snap.milestone_goals)}")


@snapshot.command("create")
@click.argument("output_file", type=click.Path(dir_okay=False, path_type=Path))
@click.option(
    "--profile", "-p",
    type=str,
    default=None,
    help="Sample profile to start from (default: empty snapshot)"
)
@click.pass_context
def snapshot_create(ctx: click.Context, output_file: Path, profile: Optional[str]) -> None:
    """
    Create a new snapshot file.

    Example:
        wealthcalc snapshot create household.json --profile "Entry Level Professional"
    """
    console = ctx.obj.get("console")
    quiet = ctx.obj.get("quiet", False)

    from .profiles import get_profile
    from .serialization import save_snapshot
    from .snapshot import FinancialSnapshot

    try:
        snap = get_profile(profile) if profile else FinancialSnapshot()
    except ValueError as e:
        _fail(str(e))

    try:
        save_snapshot(snap, output_file)
    except OSError as e:
        _fail(f"Cannot write {output_file}: {e}")

    if not quiet:
        console.print(f"[green]Created snapshot file: {output_file}[/green]")


@snapshot.command("save")
@click.argument("snapshot_file", type=click.Path(exists=True, dir_okay=False, path_type=Path))
@click.option("--key", "-k", type=str, default=None, help="Store key (default: settings)")
@click.pass_context
def snapshot_save(ctx: click.Context, snapshot_file: Path, key: Optional[str]) -> None:
    """
    Copy a snapshot file into the snapshot store.

    Example:
        wealthcalc snapshot save household.json
    """
    quiet = ctx.obj.get("quiet", False)
    settings = ctx.obj["settings"]

    from .exceptions import WealthCalcError
    from .serialization import load_snapshot
    from .store import SnapshotStore

    store = SnapshotStore(settings.store_dir)
    key = key or settings.default_key
    try:
        saved = store.save(key, load_snapshot(snapshot_file))
    except WealthCalcError as e:
        _fail(str(e))

    if not quiet:
        click.echo(f"Stored snapshot {key!r} in {store.root} at {saved.metadata.last_saved}")


# ---------------------------------------------------------------------------
# profiles
# ---------------------------------------------------------------------------

@main.group()
def profiles() -> None:
    """Sample household profiles."""
    pass


@profiles.command("list")
@click.pass_context
def profiles_list(ctx: click.Context) -> None:
    """List sample profiles."""
    console = ctx.obj.get("console")

    from rich.table import Table
    from .profiles import PROFILES

    table = Table(title="Sample Profiles")
    table.add_column("Name", style="cyan")
    table.add_column("Description")
    for p in PROFILES:
        table.add_row(p.name, p.description)
    console.print(table)


@profiles.command("show")
@click.argument("name")
@click.option("--format", "-f", type=click.Choice(["json", "table"]), default="table")
@click.pass_context
def profiles_show(ctx: click.Context, name: str, format: str) -> None:
    """
    Display a sample profile.

    Example:
        wealthcalc profiles show "Wealthy Investor" --format json
    """
    console = ctx.obj.get("console")

    from .profiles import get_profile, get_profile_payload

    try:
        payload = get_profile_payload(name)
    except ValueError as e:
        _fail(str(e))

    if format == "json":
        click.echo(json.dumps(payload, indent=2))
        return

    from rich.table import Table
    from .aggregator import aggregate
    from .utils import format_currency, format_percent

    snap = get_profile(name)
    summary = aggregate(snap)
    settings = snap.investment_settings

    table = Table(title=name)
    table.add_column("Field", style="cyan")
    table.add_column("Value", justify="right")
    table.add_row("Monthly Gross", format_currency(snap.income.monthly_gross))
    table.add_row("Tax Rate", format_percent(snap.income.tax_rate, decimals=0))
    table.add_row("Monthly Expenses", format_currency(summary.total_expenses))
    table.add_row("Net Worth", format_currency(summary.net_worth))
    table.add_row("Monthly Contribution", format_currency(settings.monthly_contribution))
    table.add_row("Risk Tolerance", settings.risk_tolerance)
    table.add_row("Expected Return", format_percent(settings.return_rate))
    console.print(table)


# ---------------------------------------------------------------------------
# info
# ---------------------------------------------------------------------------

@main.command()
@click.pass_context
def info(ctx: click.Context) -> None:
    """
    Display system and package information.

    Shows version numbers, installed dependencies, and the active
    settings.
    """
    console = ctx.obj.get("console")
    settings = ctx.obj["settings"]

    info_lines = [
        f"wealthcalc Version: {__version__}",
        f"Python: {sys.version.split()[0]}",
        f"Store: {settings.store_dir}",
        f"Snapshot key: {settings.default_key}",
        f"Log level: {settings.effective_log_level}",
    ]

    from importlib.metadata import PackageNotFoundError, version

    for name in ("numpy", "pandas", "pydantic", "pydantic-settings", "click", "rich"):
        try:
            info_lines.append(f"{name}: {version(name)}")
        except PackageNotFoundError:
            info_lines.append(f"{name}: not installed")

    from rich.panel import Panel
    console.print(Panel("\n".join(info_lines), title="System Information"))


if __name__ == "__main__":
    main()
