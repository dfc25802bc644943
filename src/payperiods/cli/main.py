"""CLI entry point for payperiods."""

from __future__ import annotations

from pathlib import Path

import click

from payperiods.config.defaults import DEFAULT_PERIOD_COUNT, LOOKAHEAD_WINDOW
from payperiods.config.schema import PayPeriodConfig
from payperiods.core.aggregator import (
    PayPeriod,
    aggregate,
    generate_periods,
    total_income_for_month,
    total_income_for_range,
)
from payperiods.core.store import SettingsStore
from payperiods.io.serialize import dump_calculation, dump_periods, load_settings_file
from payperiods.utils.exceptions import PayPeriodError

config_option = click.option(
    "--config",
    "config_path",
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
    required=True,
    help="Path to a JSON or YAML pay period settings file.",
)


def _load_configs(config_path: Path) -> list[PayPeriodConfig]:
    try:
        store = SettingsStore(load_settings_file(config_path))
    except PayPeriodError as exc:
        raise click.ClickException(str(exc)) from exc
    if not store.is_enabled():
        click.echo("Pay periods are disabled in this settings file.", err=True)
    return store.effective_configs()


def _format_period(period: PayPeriod) -> str:
    return (
        f"{period.id:<16} {period.start_date.isoformat()} → {period.end_date.isoformat()}"
        f"  {period.amount:>12,.2f}  {period.source}"
    )


@click.group()
@click.version_option(package_name="payperiods")
def cli() -> None:
    """payperiods — budget against recurring pay periods."""


@cli.command()
@config_option
@click.option(
    "--count",
    default=DEFAULT_PERIOD_COUNT,
    show_default=True,
    type=click.IntRange(min=0),
    help="Number of periods per income source.",
)
@click.option("--json", "as_json", is_flag=True, help="Print periods as JSON.")
def periods(config_path: Path, count: int, as_json: bool) -> None:
    """List generated pay periods for every active income source."""
    generated: list[PayPeriod] = []
    for config in _load_configs(config_path):
        if config.is_active:
            generated.extend(generate_periods(config, count))

    if as_json:
        click.echo(dump_periods(generated))
        return
    for period in generated:
        click.echo(_format_period(period))


@cli.command()
@config_option
@click.option("--date", "reference_date", required=True, help="Reference date (YYYY-MM-DD).")
@click.option(
    "--window",
    default=LOOKAHEAD_WINDOW,
    show_default=True,
    type=click.IntRange(min=1),
    help="Periods generated forward from each anchor.",
)
@click.option("--json", "as_json", is_flag=True, help="Print the calculation as JSON.")
def status(config_path: Path, reference_date: str, window: int, as_json: bool) -> None:
    """Show the current, next, and previous pay periods around a date."""
    configs = _load_configs(config_path)
    try:
        calculation = aggregate(configs, reference_date, window=window)
    except PayPeriodError as exc:
        raise click.ClickException(str(exc)) from exc

    if as_json:
        click.echo(dump_calculation(calculation))
        return

    click.echo(f"Pay periods as of {reference_date}")
    for label, period in (
        ("Current", calculation.current_period),
        ("Next", calculation.next_period),
        ("Previous", calculation.previous_period),
    ):
        click.echo(f"  {label + ':':<10}{_format_period(period) if period else 'none'}")
    if calculation.upcoming_periods:
        click.echo("Upcoming:")
        for period in calculation.upcoming_periods:
            click.echo(f"  {_format_period(period)}")


@cli.command()
@config_option
@click.option("--start", "range_start", default=None, help="Range start (YYYY-MM-DD).")
@click.option("--end", "range_end", default=None, help="Range end (YYYY-MM-DD).")
@click.option("--month", default=None, help="Calendar month (YYYY-MM) instead of a range.")
def income(
    config_path: Path,
    range_start: str | None,
    range_end: str | None,
    month: str | None,
) -> None:
    """Total income from pay periods overlapping a date range or month."""
    if month is None and (range_start is None or range_end is None):
        raise click.UsageError("Provide either --month or both --start and --end.")
    if month is not None and (range_start is not None or range_end is not None):
        raise click.UsageError("--month cannot be combined with --start/--end.")

    configs = _load_configs(config_path)
    try:
        if month is not None:
            total = total_income_for_month(configs, month)
            label = month
        else:
            total = total_income_for_range(configs, range_start, range_end)
            label = f"{range_start} → {range_end}"
    except PayPeriodError as exc:
        raise click.ClickException(str(exc)) from exc

    click.echo(f"Income for {label}: {total:,.2f}")


if __name__ == "__main__":
    cli()
