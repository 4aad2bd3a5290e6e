"""Command‑line interface for the interest calculator.

This module uses ``click`` to expose the same calculation the form performs.
Users can print the breakdown table and the summary for a selected month,
export the table to JSON/CSV, and read or change the remembered monthly rate.
"""

from __future__ import annotations

import csv
import json
import logging
from pathlib import Path
from typing import Any, Dict, List, Optional

import click

from . import config
from .data_models import LoanInput, ScheduleRow
from .engine import display_horizon, schedule_for
from .exceptions import InvalidRateError, PreferenceStoreError
from .formatter import print_schedule, print_summary, rate_format, schedule_to_dicts
from .preferences import (
    MemoryPreferenceStore,
    PreferenceStore,
    load_interest_rate,
    save_interest_rate,
)
from .selection import select_row, selected_month, summary_row, track_term
from .validation import INTEREST_RATE, LOAN_AMOUNT, MONTHS, validate_loan_form

DEFAULT_DATABASE_URL = "sqlite:///preferences.sqlite3"


def parse_amount(value: str) -> float:
    """Parse a numeric string with optional suffixes.

    Accepts plain numbers ("5000", "5,000") and shorthand with ``k``/``m``
    suffixes (e.g., "50k" meaning 50_000). Returns a float.
    """
    value = value.strip().lower().replace(",", "")
    factor = 1.0
    if value.endswith("k"):
        factor = 1_000.0
        value = value[:-1]
    elif value.endswith("m"):
        factor = 1_000_000.0
        value = value[:-1]
    try:
        return float(value) * factor
    except ValueError:
        raise click.BadParameter(f"Invalid amount: {value}")


def open_store(database_url: Optional[str], no_store: bool = False) -> PreferenceStore:
    if no_store:
        return MemoryPreferenceStore()
    from interest_calc_web.preference_store import create_store_from_env

    return create_store_from_env(database_url)


def resolve_rate(rate: Optional[float], database_url: Optional[str], no_store: bool = False) -> float:
    """Return ``rate``, or the remembered rate when none was given."""
    if rate is not None:
        return rate
    try:
        return load_interest_rate(open_store(database_url, no_store))
    except PreferenceStoreError as exc:
        click.echo(f"Warning: {exc.message}; using {rate_format(config.DEFAULT_MONTHLY_RATE)}", err=True)
        return config.DEFAULT_MONTHLY_RATE


def build_loan_from_options(principal: str, months: int, rate: float) -> LoanInput:
    """Validate command line options the same way the form validates fields."""
    result = validate_loan_form(
        {LOAN_AMOUNT: parse_amount(principal), MONTHS: months, INTEREST_RATE: rate}
    )
    hints = {LOAN_AMOUNT: "--principal", MONTHS: "--months", INTEREST_RATE: "--rate"}
    if result.errors:
        if len(result.errors) == 1:
            err = result.errors[0]
            raise click.BadParameter(err.message, param_hint=hints[err.field])
        raise click.UsageError("; ".join(e.message for e in result.errors))
    if result.loan is None:
        missing = [hint for field, hint in hints.items() if result.values[field] is None]
        raise click.BadParameter("Please enter a valid number", param_hint=missing or None)
    return result.loan


def export_to_json(path: Path, loan: LoanInput, schedule: List[ScheduleRow]) -> None:
    """Export the loan parameters and breakdown to a JSON file."""
    data: Dict[str, Any] = {
        "loan": {
            "loanAmount": loan.principal,
            "months": loan.term_months,
            "interestRatePerMonth": loan.monthly_rate_percent,
        },
        "horizon": display_horizon(loan.term_months),
        "schedule": schedule_to_dicts(schedule),
    }
    with path.open("w", encoding="utf-8") as f:
        json.dump(data, f, indent=2)


def export_to_csv(path: Path, schedule: List[ScheduleRow]) -> None:
    """Export the breakdown to a CSV file."""
    header = ["Month", "Interest", "Total_Loan", "Monthly_Payment"]
    with path.open("w", newline="", encoding="utf-8") as f:
        writer = csv.writer(f)
        writer.writerow(header)
        for row in schedule:
            writer.writerow([row.month, row.interest_amount, row.total_amount, row.monthly_payment])


principal_option = click.option("--principal", "-p", "principal", required=True, help="Loan amount")
months_option = click.option(
    "--months", "-t", "months", required=True, type=int, help="Loan term in months (1-360)"
)
rate_option = click.option(
    "--rate",
    "-r",
    "rate",
    type=float,
    help="Interest rate per month (percent). Defaults to the saved rate.",
)
database_option = click.option(
    "--database-url",
    "database_url",
    envvar="PREFERENCE_DATABASE_URL",
    help="SQLAlchemy URL of the preference database",
)
no_store_option = click.option(
    "--no-store",
    "no_store",
    is_flag=True,
    help="Keep the interest rate in memory instead of the preference database",
)


@click.group()
@click.option("--verbose", "-v", is_flag=True, help="Log preference access")
def cli(verbose: bool) -> None:
    """A flat-interest loan calculator."""
    logging.basicConfig(level=logging.INFO if verbose else logging.WARNING)


@cli.command()
@principal_option
@months_option
@rate_option
@database_option
@no_store_option
@click.option("--output", "output", type=str, help="Output file path (.json or .csv)")
def schedule(
    principal: str,
    months: int,
    rate: Optional[float],
    database_url: Optional[str],
    no_store: bool,
    output: Optional[str],
) -> None:
    """Print the summary for the full term and the breakdown table."""
    loan = build_loan_from_options(principal, months, resolve_rate(rate, database_url, no_store))
    rows = schedule_for(loan)
    if output:
        path = Path(output)
        if path.suffix.lower() == ".json":
            export_to_json(path, loan, rows)
        elif path.suffix.lower() == ".csv":
            export_to_csv(path, rows)
        else:
            raise click.BadParameter("Unsupported output format; use .json or .csv")
        click.echo(f"Schedule exported to {path}")
        return
    selection = track_term(loan.term_months)
    print_summary(loan, summary_row(selection, rows))
    print_schedule(rows, selected_month(selection))


@cli.command()
@principal_option
@months_option
@rate_option
@database_option
@no_store_option
@click.option("--month", "month", type=int, help="Summarise this row instead of the term")
def summary(
    principal: str,
    months: int,
    rate: Optional[float],
    database_url: Optional[str],
    no_store: bool,
    month: Optional[int],
) -> None:
    """Print only the summary card.

    Picking a row with ``--month`` also makes it the term, exactly like tapping
    a row in the form, so the table is sized from that month.
    """
    if month is not None:
        selection, months = select_row(month)
    else:
        selection = track_term(months)
    loan = build_loan_from_options(principal, months, resolve_rate(rate, database_url, no_store))
    print_summary(loan, summary_row(selection, schedule_for(loan)))


@cli.group()
def rate() -> None:
    """Read or change the remembered interest rate."""


@rate.command("show")
@database_option
@no_store_option
def rate_show(database_url: Optional[str], no_store: bool) -> None:
    """Print the rate the form starts with."""
    try:
        value = load_interest_rate(open_store(database_url, no_store))
    except PreferenceStoreError as exc:
        raise click.ClickException(str(exc))
    click.echo(rate_format(value))


@rate.command("set")
@database_option
@no_store_option
@click.argument("value")
def rate_set(database_url: Optional[str], no_store: bool, value: str) -> None:
    """Save VALUE as the remembered interest rate."""
    try:
        saved = save_interest_rate(open_store(database_url), value)
    except InvalidRateError as exc:
        raise click.BadParameter(exc.message, param_hint="VALUE")
    except PreferenceStoreError as exc:
        raise click.ClickException(str(exc))
    click.echo(f"Interest rate saved: {rate_format(saved)}")


if __name__ == "__main__":
    cli()
