"""Core calculation engine for the interest calculator.

Interest is flat simple interest: every month is charged against the original
principal, never a reducing balance. The engine builds the breakdown table
shown under the form, one row per month up to the display horizon. Results
are plain lists of ``ScheduleRow`` objects; nothing is cached between calls.
"""

from __future__ import annotations

import math
from typing import List, Optional

from . import config
from .data_models import LoanInput, ScheduleRow


def display_horizon(term_months: int) -> int:
    """Return how many months the breakdown table shows for a term.

    The term is rounded up to the next whole year so short loans still show
    their first twelve months, and capped at the 360 month maximum::

        horizon = min(ceil(term / 12) * 12, 360)
    """
    years = math.ceil(term_months / config.MONTHS_PER_YEAR)
    return min(years * config.MONTHS_PER_YEAR, config.MAX_TERM_MONTHS)


def calculate_interest(principal: float, monthly_rate_percent: float, months: int) -> float:
    """Return the simple interest accrued on ``principal`` after ``months``."""
    return principal * (monthly_rate_percent / 100) * months


def generate_schedule(
    principal: Optional[float],
    monthly_rate_percent: Optional[float],
    term_months: Optional[int],
) -> List[ScheduleRow]:
    """Compute the month-by-month breakdown for a flat-interest loan.

    Parameters
    ----------
    principal: Optional[float]
        The amount borrowed.
    monthly_rate_percent: Optional[float]
        Monthly interest in percent.
    term_months: Optional[int]
        The loan term; only used to size the table.

    Returns
    -------
    List[ScheduleRow]
        Rows for months ``1..display_horizon(term_months)`` in order. The
        list is empty when any argument is missing or the term is below one
        month. No rounding is applied.
    """
    if principal is None or monthly_rate_percent is None or term_months is None:
        return []
    if term_months < config.MIN_TERM_MONTHS:
        return []

    schedule: List[ScheduleRow] = []
    for month in range(1, display_horizon(term_months) + 1):
        interest = calculate_interest(principal, monthly_rate_percent, month)
        total = principal + interest
        schedule.append(
            ScheduleRow(
                month=month,
                interest_amount=interest,
                total_amount=total,
                monthly_payment=total / month,
            )
        )
    return schedule


def schedule_for(loan: Optional[LoanInput]) -> List[ScheduleRow]:
    """Compute the breakdown for a validated ``LoanInput`` (empty for ``None``)."""
    if loan is None:
        return []
    return generate_schedule(loan.principal, loan.monthly_rate_percent, loan.term_months)
