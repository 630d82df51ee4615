# src/zenith_tasker/util/calendar_grid.py

"""
Month grid and date comparisons for the calendar view.

The grid always covers whole Sunday-to-Saturday weeks: it starts on the
Sunday on/before the 1st and ends on the Saturday on/after the last day.
"""

from __future__ import annotations

import calendar
from dataclasses import dataclass
from datetime import date, datetime, timedelta

WEEKDAY_HEADERS = ("Sun", "Mon", "Tue", "Wed", "Thu", "Fri", "Sat")


@dataclass(frozen=True, slots=True)
class CalendarCell:
    day: date
    in_month: bool  # styling only; out-of-month cells are padding
    is_today: bool


def _as_date(d: date | datetime) -> date:
    return d.date() if isinstance(d, datetime) else d


def is_same_day(a: date | datetime, b: date | datetime) -> bool:
    return _as_date(a) == _as_date(b)


def is_same_month(a: date | datetime, b: date | datetime) -> bool:
    a, b = _as_date(a), _as_date(b)
    return (a.year, a.month) == (b.year, b.month)


def is_today(d: date | datetime, *, today: date | None = None) -> bool:
    return _as_date(d) == (today or date.today())


def start_of_month(d: date | datetime) -> date:
    return _as_date(d).replace(day=1)


def end_of_month(d: date | datetime) -> date:
    d = _as_date(d)
    return d.replace(day=calendar.monthrange(d.year, d.month)[1])


def add_months(d: date | datetime, n: int) -> date:
    """First day of the month `n` months away from `d`."""
    d = _as_date(d)
    idx = d.year * 12 + (d.month - 1) + int(n)
    return date(idx // 12, idx % 12 + 1, 1)


def next_month(d: date | datetime) -> date:
    return add_months(d, 1)


def prev_month(d: date | datetime) -> date:
    return add_months(d, -1)


def _start_of_week(d: date) -> date:
    # date.weekday(): Monday=0 .. Sunday=6
    return d - timedelta(days=(d.weekday() + 1) % 7)


def _end_of_week(d: date) -> date:
    return _start_of_week(d) + timedelta(days=6)


def month_grid(reference: date | datetime, *, today: date | None = None) -> list[CalendarCell]:
    first = start_of_month(reference)
    last = end_of_month(reference)
    start = _start_of_week(first)
    end = _end_of_week(last)
    today = today or date.today()

    cells: list[CalendarCell] = []
    day = start
    while day <= end:
        cells.append(
            CalendarCell(day=day, in_month=is_same_month(day, first), is_today=day == today)
        )
        day += timedelta(days=1)
    return cells


def weeks(cells: list[CalendarCell]) -> list[list[CalendarCell]]:
    return [cells[i : i + 7] for i in range(0, len(cells), 7)]
