# src/zenith_tasker/tasks/views.py

"""
Read-side views over a task snapshot.

Everything here is a pure function of its arguments: the store snapshot is
passed in, nothing is cached and nothing writes back.
"""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass
from datetime import date

from ..util.calendar_grid import is_same_day, is_same_month
from .task_models import Category, Task, TaskStatus

DAY_DOTS_LIMIT = 3


@dataclass(frozen=True, slots=True)
class StatusCount:
    status: TaskStatus
    count: int

    @property
    def label(self) -> str:
        return self.status.label


@dataclass(frozen=True, slots=True)
class CategoryCount:
    category: Category
    count: int

    @property
    def label(self) -> str:
        return self.category.label


def day_agenda(tasks: Iterable[Task], selected: date) -> list[Task]:
    """Tasks on `selected`, by start time (HH:MM sorts lexically; sort is stable)."""
    return sorted((t for t in tasks if is_same_day(t.task_date, selected)), key=lambda t: t.start_time)


def month_tasks(tasks: Iterable[Task], reference: date) -> list[Task]:
    return [t for t in tasks if is_same_month(t.task_date, reference)]


def day_dots(tasks: Iterable[Task], day: date, limit: int = DAY_DOTS_LIMIT) -> list[Task]:
    """First `limit` tasks on `day`, in list order (rendered as status dots)."""
    out: list[Task] = []
    for t in tasks:
        if len(out) >= limit:
            break
        if is_same_day(t.task_date, day):
            out.append(t)
    return out


def status_distribution(tasks: Iterable[Task]) -> list[StatusCount]:
    """Count per status over the whole list; every status is present, zeros included."""
    counts = {s: 0 for s in TaskStatus}
    for t in tasks:
        counts[t.status] += 1
    return [StatusCount(status=s, count=n) for s, n in counts.items()]


def category_distribution(tasks: Iterable[Task]) -> list[CategoryCount]:
    """Count per category over the whole list; zero-count categories are left out."""
    counts = {c: 0 for c in Category}
    for t in tasks:
        counts[t.category] += 1
    return [CategoryCount(category=c, count=n) for c, n in counts.items() if n > 0]


def subtask_progress(task: Task) -> tuple[int, int]:
    return task.completed_subtasks, len(task.subtasks)
