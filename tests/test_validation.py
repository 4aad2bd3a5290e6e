from __future__ import annotations

import pytest

from interest_calc.data_models import LoanInput
from interest_calc.validation import snap_months_on_blur, step_months, validate_loan_form


def form(loan_amount="1000", months="12", rate="10"):
    return {"loanAmount": loan_amount, "months": months, "interestRatePerMonth": rate}


def test_valid_form_builds_loan_input():
    result = validate_loan_form(form())

    assert result.ok
    assert result.errors == []
    assert result.loan == LoanInput(principal=1000.0, term_months=12, monthly_rate_percent=10.0)


def test_loan_input_is_immutable():
    loan = validate_loan_form(form()).loan
    with pytest.raises(AttributeError):
        loan.principal = 5  # type: ignore[misc]


@pytest.mark.parametrize(
    "loan_amount, message",
    [
        ("0", "Loan amount must be greater than 0"),
        ("-5", "Loan amount must be greater than 0"),
        ("1000000.01", "Loan amount must be less than 1,000,000"),
    ],
)
def test_loan_amount_bounds(loan_amount, message):
    result = validate_loan_form(form(loan_amount=loan_amount))

    assert not result.ok
    assert result.errors_by_field() == {"loanAmount": message}


def test_loan_amount_upper_bound_is_inclusive():
    assert validate_loan_form(form(loan_amount="1000000")).ok


@pytest.mark.parametrize(
    "months, message",
    [("0", "Months must be at least 1"), ("361", "Months cannot exceed 360")],
)
def test_months_bounds(months, message):
    assert validate_loan_form(form(months=months)).errors_by_field() == {"months": message}


@pytest.mark.parametrize(
    "rate, message",
    [("0.05", "Interest rate must be at least 0.1%"), ("100.5", "Interest rate cannot exceed 100%")],
)
def test_interest_rate_bounds(rate, message):
    result = validate_loan_form(form(rate=rate))
    assert result.errors_by_field() == {"interestRatePerMonth": message}


def test_each_field_is_reported_independently():
    result = validate_loan_form(form(loan_amount="0", months="400", rate="0.01"))

    assert set(result.errors_by_field()) == {"loanAmount", "months", "interestRatePerMonth"}
    assert result.loan is None


@pytest.mark.parametrize("field", ["loanAmount", "months", "interestRatePerMonth"])
@pytest.mark.parametrize("text", ["", "abc", None])
def test_unparseable_text_is_absence_not_error(field, text):
    raw = form()
    raw[field] = text
    result = validate_loan_form(raw)

    assert result.errors == []
    assert result.loan is None
    assert result.values[field] is None


def test_months_keeps_integer_prefix():
    result = validate_loan_form(form(months="12.9"))
    assert result.loan.term_months == 12


def test_numbers_pass_through_from_json():
    result = validate_loan_form({"loanAmount": 2500, "months": 6, "interestRatePerMonth": 2.5})
    assert result.loan == LoanInput(principal=2500.0, term_months=6, monthly_rate_percent=2.5)


@pytest.mark.parametrize(
    "value, snapped",
    [("", 1), (None, 1), ("abc", 1), ("0", 1), ("-3", 1), ("361", 360), ("9999", 360), ("45", 45), (360, 360)],
)
def test_months_snap_on_blur(value, snapped):
    assert snap_months_on_blur(value) == snapped


@pytest.mark.parametrize(
    "value, delta, expected",
    [
        ("5", 1, 6),
        ("5", -1, 4),
        ("1", -1, 1),
        ("360", 1, 360),
        ("", 1, 1),
        ("", -1, 1),
        ("400", -1, 399),
    ],
)
def test_step_months_guards_one_end_per_button(value, delta, expected):
    assert step_months(value, delta) == expected
