"""Selected-month tracking.

Exactly one row of the breakdown is "in focus" for the summary card. The
tracker has two states, ``Unselected`` and ``Selected(month)``. Editing the
term moves the focus to the new term, and picking a row sets both the focus
and the term, so the two always describe the same month.
"""

from __future__ import annotations

from typing import Optional, Sequence, Tuple

from .data_models import ScheduleRow, Selected, Selection, Unselected


def track_term(term_months: Optional[int]) -> Selection:
    """Return the selection that follows a change of the term field."""
    if term_months is None:
        return Unselected()
    return Selected(term_months)


def select_row(month: int) -> Tuple[Selection, int]:
    """Select the row for ``month``.

    Returns the new selection and the value the months field must take.
    """
    return Selected(month), month


def summary_row(selection: Selection, schedule: Sequence[ScheduleRow]) -> Optional[ScheduleRow]:
    """Return the row the summary card describes.

    With no selection the first row is used. ``None`` means there is nothing
    to summarise: the schedule is empty, or the selected month is not in it.
    """
    if not schedule:
        return None
    if isinstance(selection, Unselected):
        return schedule[0]
    for row in schedule:
        if row.month == selection.month:
            return row
    return None


def selected_month(selection: Selection) -> Optional[int]:
    return selection.month if isinstance(selection, Selected) else None


def selected_month_label(month: int) -> str:
    return f"{month} Month" if month == 1 else f"{month} Months"
