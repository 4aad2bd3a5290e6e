"""Data models for the interest calculator.

This module defines dataclasses for the validated loan parameters, the rows of
the month-by-month breakdown, the inline messages produced by validation and
the two states of the selected-month tracker. All of them are frozen: a new
value is built whenever the form changes, nothing is updated in place.
"""

from dataclasses import dataclass, field
from typing import Dict, List, Optional, Union


@dataclass(frozen=True)
class LoanInput:
    """Validated loan parameters.

    Attributes
    ----------
    principal: float
        The amount borrowed, within [1, 1_000_000].
    term_months: int
        The loan term in months, within [1, 360].
    monthly_rate_percent: float
        Flat interest charged per month on the original principal, in percent
        (``10`` means 10 % per month), within [0.1, 100].
    """

    principal: float
    term_months: int
    monthly_rate_percent: float


@dataclass(frozen=True)
class ScheduleRow:
    """One month of the breakdown table.

    Values keep full floating point precision; rounding happens only when a
    row is formatted for display.
    """

    month: int
    interest_amount: float  # cumulative simple interest through ``month``
    total_amount: float  # principal + interest_amount
    monthly_payment: float  # total_amount / month


@dataclass(frozen=True)
class FieldError:
    """An inline validation message attached to one form field."""

    field: str  # "loanAmount", "months" or "interestRatePerMonth"
    message: str


@dataclass
class ValidationResult:
    """Outcome of validating the three form fields.

    ``loan`` is only set when every field is present and within bounds.
    ``values`` holds the parsed value of each field (``None`` when the field is
    empty or not a number) so the form can be shown again as the user left it.
    """

    values: Dict[str, Optional[float]]
    errors: List[FieldError] = field(default_factory=list)
    loan: Optional[LoanInput] = None

    @property
    def ok(self) -> bool:
        return self.loan is not None

    def errors_by_field(self) -> Dict[str, str]:
        return {e.field: e.message for e in self.errors}


@dataclass(frozen=True)
class Unselected:
    """No row is in focus; the summary falls back to the first row."""


@dataclass(frozen=True)
class Selected:
    """The row for ``month`` is in focus."""

    month: int


Selection = Union[Unselected, Selected]
