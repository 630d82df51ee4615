# tests/test_calendar_grid.py

from __future__ import annotations

import calendar
from datetime import date, datetime, timedelta

import pytest

from zenith_tasker.util.calendar_grid import (
    add_months,
    end_of_month,
    is_same_day,
    is_same_month,
    is_today,
    month_grid,
    next_month,
    prev_month,
    weeks,
)


@pytest.mark.parametrize(
    ("year", "month", "expected_len"),
    [
        (2026, 2, 28),  # starts on Sunday, ends on Saturday
        (2026, 10, 35),
        (2026, 8, 42),  # starts on Saturday, 31 days
        (2024, 2, 35),  # leap year
    ],
)
def test_month_grid_shape(year: int, month: int, expected_len: int) -> None:
    cells = month_grid(date(year, month, 15), today=date(2026, 10, 19))

    assert len(cells) == expected_len
    assert len(cells) % 7 == 0
    assert cells[0].day.weekday() == 6  # Sunday
    assert cells[-1].day.weekday() == 5  # Saturday
    for a, b in zip(cells, cells[1:]):
        assert b.day - a.day == timedelta(days=1)

    in_month = [c.day for c in cells if c.in_month]
    days = calendar.monthrange(year, month)[1]
    assert in_month == [date(year, month, d) for d in range(1, days + 1)]


def test_month_grid_covers_every_month_of_a_decade() -> None:
    for year in range(2020, 2030):
        for month in range(1, 13):
            cells = month_grid(date(year, month, 1))
            assert len(cells) in (28, 35, 42)
            assert sum(c.in_month for c in cells) == calendar.monthrange(year, month)[1]


def test_month_grid_marks_today_once() -> None:
    cells = month_grid(date(2026, 10, 1), today=date(2026, 10, 19))
    assert [c.day for c in cells if c.is_today] == [date(2026, 10, 19)]


def test_weeks_splits_rows_of_seven() -> None:
    rows = weeks(month_grid(date(2026, 10, 1)))
    assert len(rows) == 5
    assert all(len(r) == 7 for r in rows)


def test_same_day_and_month_ignore_time() -> None:
    assert is_same_day(datetime(2026, 10, 19, 23, 59), date(2026, 10, 19))
    assert not is_same_day(date(2026, 10, 19), date(2025, 10, 19))
    assert is_same_month(date(2026, 10, 1), datetime(2026, 10, 31, 12))
    assert not is_same_month(date(2026, 10, 1), date(2025, 10, 1))


def test_is_today() -> None:
    assert is_today(datetime(2026, 10, 19, 7), today=date(2026, 10, 19))
    assert not is_today(date(2026, 10, 18), today=date(2026, 10, 19))
    assert is_today(date(2026, 10, 19), today=date(2026, 10, 19))


def test_month_navigation() -> None:
    assert next_month(date(2026, 12, 31)) == date(2027, 1, 1)
    assert prev_month(date(2026, 1, 15)) == date(2025, 12, 1)
    assert add_months(date(2026, 10, 19), -13) == date(2025, 9, 1)
    assert end_of_month(date(2028, 2, 3)) == date(2028, 2, 29)
