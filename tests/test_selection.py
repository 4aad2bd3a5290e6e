from __future__ import annotations

from interest_calc.data_models import Selected, Unselected
from interest_calc.engine import generate_schedule
from interest_calc.selection import (
    select_row,
    selected_month,
    selected_month_label,
    summary_row,
    track_term,
)


def test_selection_follows_term():
    assert track_term(7) == Selected(7)
    assert track_term(None) == Unselected()


def test_selecting_a_row_also_sets_the_term():
    selection, term = select_row(4)
    assert selection == Selected(4)
    assert term == 4


def test_summary_defaults_to_term_row():
    schedule = generate_schedule(1000, 10, 5)
    row = summary_row(track_term(5), schedule)
    assert row.month == 5


def test_summary_falls_back_to_first_row_without_selection():
    schedule = generate_schedule(1000, 10, 5)
    assert summary_row(Unselected(), schedule).month == 1


def test_summary_is_empty_without_rows():
    assert summary_row(Unselected(), []) is None
    assert summary_row(Selected(3), []) is None


def test_summary_for_month_outside_table():
    schedule = generate_schedule(1000, 10, 5)
    assert summary_row(Selected(13), schedule) is None


def test_selected_month_and_label():
    assert selected_month(Selected(3)) == 3
    assert selected_month(Unselected()) is None
    assert selected_month_label(1) == "1 Month"
    assert selected_month_label(12) == "12 Months"
