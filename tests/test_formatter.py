from __future__ import annotations

import math

from interest_calc.data_models import LoanInput
from interest_calc.engine import generate_schedule
from interest_calc.formatter import (
    currency_format,
    print_schedule,
    print_summary,
    rate_format,
    schedule_to_dicts,
)


def test_currency_format():
    assert currency_format(1234567.891) == "₱ 1,234,567.89"
    assert currency_format(183.333333) == "₱ 183.33"
    assert currency_format(0) == "₱ 0.00"


def test_currency_format_missing_values():
    assert currency_format(None) == "₱ 0.00"
    assert currency_format(math.nan) == "₱ 0.00"


def test_rate_format():
    assert rate_format(10) == "10.0%"
    assert rate_format(12.5) == "12.5%"
    assert rate_format(None) == "N/A"


def test_schedule_to_dicts_keeps_precision():
    rows = schedule_to_dicts(generate_schedule(1000, 10, 1))
    assert set(rows[11]) == {"month", "interestAmount", "totalAmount", "monthlyPayment"}
    assert rows[11]["month"] == 12
    assert rows[11]["monthlyPayment"] == 2200 / 12


def test_print_summary_and_schedule(capsys):
    loan = LoanInput(principal=1000, term_months=1, monthly_rate_percent=10)
    rows = generate_schedule(1000, 10, 1)

    print_summary(loan, rows[0])
    print_schedule(rows, selected=1)
    out = capsys.readouterr().out

    assert "Summary for 1 Month" in out
    assert "₱ 1,100.00" in out
    assert "Calculations (Up to 12 Months)" in out
    assert "*\t1\t" in out
    assert "\t12\t₱ 1,200.00\t₱ 2,200.00\t₱ 183.33" in out


def test_print_summary_without_row(capsys):
    print_summary(LoanInput(1000, 1, 10), None)
    assert "Nothing to summarise." in capsys.readouterr().out
