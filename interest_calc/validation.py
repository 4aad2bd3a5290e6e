"""Validation of the three loan form fields.

Each field is checked on its own, so an error on one field never blocks
editing of the others. An empty or non-numeric field is not an error: it is
treated as "no value yet", which keeps the schedule empty instead of showing
stale numbers while the user is typing.
"""

from __future__ import annotations

import logging
from typing import Any, Mapping, Optional

from . import config
from .data_models import FieldError, LoanInput, ValidationResult
from .utils import parse_int, parse_number

logger = logging.getLogger(__name__)

LOAN_AMOUNT = "loanAmount"
MONTHS = "months"
INTEREST_RATE = "interestRatePerMonth"

FIELDS = (LOAN_AMOUNT, MONTHS, INTEREST_RATE)


def _check_loan_amount(value: Optional[float]) -> Optional[FieldError]:
    if value is None:
        return None
    if value < config.MIN_LOAN_AMOUNT:
        return FieldError(LOAN_AMOUNT, "Loan amount must be greater than 0")
    if value > config.MAX_LOAN_AMOUNT:
        return FieldError(LOAN_AMOUNT, "Loan amount must be less than 1,000,000")
    return None


def _check_months(value: Optional[int]) -> Optional[FieldError]:
    if value is None:
        return None
    if value < config.MIN_TERM_MONTHS:
        return FieldError(MONTHS, "Months must be at least 1")
    if value > config.MAX_TERM_MONTHS:
        return FieldError(MONTHS, "Months cannot exceed 360")
    return None


def _check_interest_rate(value: Optional[float]) -> Optional[FieldError]:
    if value is None:
        return None
    if value < config.MIN_MONTHLY_RATE:
        return FieldError(INTEREST_RATE, "Interest rate must be at least 0.1%")
    if value > config.MAX_MONTHLY_RATE:
        return FieldError(INTEREST_RATE, "Interest rate cannot exceed 100%")
    return None


def validate_interest_rate(value: Optional[float]) -> Optional[FieldError]:
    """Return the bound error for a monthly rate, or ``None`` if it is usable."""
    return _check_interest_rate(value)


def validate_loan_form(raw: Mapping[str, Any]) -> ValidationResult:
    """Parse and validate the raw form fields.

    Parameters
    ----------
    raw: Mapping[str, Any]
        Field name to raw value (form text or JSON number). Missing keys are
        treated as empty fields.

    Returns
    -------
    ValidationResult
        ``loan`` is a ``LoanInput`` only when all three fields are present and
        in range; ``errors`` lists every field that is out of range.
    """
    loan_amount = parse_number(raw.get(LOAN_AMOUNT))
    months = parse_int(raw.get(MONTHS))
    rate = parse_number(raw.get(INTEREST_RATE))

    errors = [
        err
        for err in (
            _check_loan_amount(loan_amount),
            _check_months(months),
            _check_interest_rate(rate),
        )
        if err is not None
    ]
    values = {LOAN_AMOUNT: loan_amount, MONTHS: months, INTEREST_RATE: rate}
    result = ValidationResult(values=values, errors=errors)
    if errors:
        logger.debug("Form rejected: %s", result.errors_by_field())
        return result
    if loan_amount is None or months is None or rate is None:
        return result
    result.loan = LoanInput(
        principal=loan_amount,
        term_months=months,
        monthly_rate_percent=rate,
    )
    return result


def snap_months_on_blur(value: Any) -> int:
    """Repair the months field when it loses focus.

    An empty, non-numeric or sub-1 value snaps up to 1 and a value above 360
    snaps down to 360; anything in range is returned unchanged. Only the
    months field is repaired this way.
    """
    months = parse_int(value)
    if months is None or months < config.MIN_TERM_MONTHS:
        return config.MIN_TERM_MONTHS
    if months > config.MAX_TERM_MONTHS:
        return config.MAX_TERM_MONTHS
    return months


def step_months(value: Any, delta: int) -> int:
    """Apply the +/- buttons to the months field.

    An empty field counts as 0. Decrementing never goes below 1 and
    incrementing never goes above 360; each button only guards its own end.
    """
    months = parse_int(value) or 0
    if delta < 0:
        return max(config.MIN_TERM_MONTHS, months + delta)
    return min(config.MAX_TERM_MONTHS, months + delta)
