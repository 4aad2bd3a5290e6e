"""Output helpers for the interest calculator.

This module renders amounts the way the form displays them and prints the
summary card and breakdown table as plain text for the command line. Values
are rounded to two decimals here and nowhere else.
"""

from __future__ import annotations

import math
from typing import Any, Dict, Iterable, List, Optional

from . import config
from .data_models import LoanInput, ScheduleRow
from .selection import selected_month_label


def currency_format(value: Optional[float]) -> str:
    """Format an amount as ``"₱ 1,234.56"``; missing or NaN values show as zero."""
    if value is None or (isinstance(value, float) and math.isnan(value)):
        return f"{config.CURRENCY_SYMBOL} 0.00"
    return f"{config.CURRENCY_SYMBOL} {value:,.2f}"


def rate_format(value: Optional[float]) -> str:
    """Format a monthly rate with one decimal, e.g. ``"10.0%"``."""
    if value is None:
        return "N/A"
    return f"{value:.1f}%"


def row_to_dict(row: ScheduleRow) -> Dict[str, Any]:
    return {
        "month": row.month,
        "interestAmount": row.interest_amount,
        "totalAmount": row.total_amount,
        "monthlyPayment": row.monthly_payment,
    }


def schedule_to_dicts(schedule: Iterable[ScheduleRow]) -> List[Dict[str, Any]]:
    """Convert schedule rows into JSON-serialisable dictionaries."""
    return [row_to_dict(row) for row in schedule]


def print_summary(loan: LoanInput, row: Optional[ScheduleRow]) -> None:
    """Print the summary card for the row in focus."""
    if row is None:
        print("Nothing to summarise.")
        return
    print(f"Summary for {selected_month_label(row.month)}")
    print("-" * 48)
    print(f"Loan               : {currency_format(loan.principal)}")
    print(f"Total loan         : {currency_format(row.total_amount)} (incl. interest)")
    print(f"Interest rate      : {rate_format(loan.monthly_rate_percent)}")
    print(f"Total interest     : {currency_format(row.interest_amount)}")
    print(f"Monthly payment    : {currency_format(row.monthly_payment)}")
    print("-" * 48)


def print_schedule(schedule: List[ScheduleRow], selected: Optional[int] = None) -> None:
    """Print the breakdown as a tab separated table.

    Parameters
    ----------
    schedule: List[ScheduleRow]
        The rows to print.
    selected: Optional[int]
        Month of the row in focus; it is marked with ``*``.
    """
    horizon = schedule[-1].month if schedule else 0
    print(f"Calculations (Up to {horizon} Months)")
    print("\t".join(["", "Month", "Interest", "Total Loan", "Monthly Pay"]))
    for row in schedule:
        marker = "*" if row.month == selected else ""
        print(
            "\t".join(
                [
                    marker,
                    str(row.month),
                    currency_format(row.interest_amount),
                    currency_format(row.total_amount),
                    currency_format(row.monthly_payment),
                ]
            )
        )
