# src/zenith_tasker/render/text.py

"""
Plain-text rendering for the console: month calendar, day agenda, dashboard.

Renderers take snapshots and return strings; they never touch the store.
"""

from __future__ import annotations

from collections.abc import Sequence
from datetime import date

from ..tasks.task_models import Task, TaskStatus
from ..tasks.views import (
    category_distribution,
    day_agenda,
    day_dots,
    month_tasks,
    status_distribution,
    subtask_progress,
)
from ..util.calendar_grid import WEEKDAY_HEADERS, is_same_day, month_grid, weeks

STATUS_MARKS: dict[TaskStatus, str] = {
    TaskStatus.NOT_STARTED: "o",
    TaskStatus.IN_PROGRESS: "~",
    TaskStatus.COMPLETED: "x",
}

_CELL_WIDTH = 8
_BAR_WIDTH = 30


def render_month(
    tasks: Sequence[Task],
    reference: date,
    *,
    selected: date | None = None,
    today: date | None = None,
    dots_limit: int = 3,
) -> str:
    """
    Month calendar, one row per week.

    Cell: `[19*]ox~`: brackets mark the selected day, `*` today, `.` a padding
    day from an adjacent month; then up to `dots_limit` status marks.
    """
    in_month = month_tasks(tasks, reference)
    lines = [reference.strftime("%B %Y").center(_CELL_WIDTH * 7).rstrip()]
    lines.append("".join(h.ljust(_CELL_WIDTH) for h in WEEKDAY_HEADERS).rstrip())

    for week in weeks(month_grid(reference, today=today)):
        row: list[str] = []
        for cell in week:
            is_selected = selected is not None and is_same_day(cell.day, selected)
            left, right = ("[", "]") if is_selected else (" " if cell.in_month else ".", " ")
            marks = "".join(STATUS_MARKS[t.status] for t in day_dots(in_month, cell.day, dots_limit))
            text = f"{left}{cell.day.day:>2}{'*' if cell.is_today else ' '}{right}{marks}"
            row.append(text.ljust(_CELL_WIDTH))
        lines.append("".join(row).rstrip())

    legend = "  ".join(f"{mark}={status.label}" for status, mark in STATUS_MARKS.items())
    lines.append(legend)
    return "\n".join(lines)


def render_task(task: Task) -> str:
    head = (
        f"#{task.id} {task.start_time} - {task.end_time} ({task.duration}m) "
        f"{task.title}  [{task.category.icon} {task.category.label}] {task.status.label}"
    )
    lines = [head]
    if task.description:
        lines.append(f"    {task.description}")
    done, total = subtask_progress(task)
    if total:
        lines.append(f"    Progress: {done}/{total}")
        for st in task.subtasks:
            lines.append(f"    [{'x' if st.is_completed else ' '}] {st.title} (#{st.id})")
    return "\n".join(lines)


def render_agenda(tasks: Sequence[Task], selected: date) -> str:
    items = day_agenda(tasks, selected)
    header = f"Tasks for {selected.strftime('%b %d, %Y').replace(' 0', ' ')}"
    if not items:
        return f"{header}\n  No tasks scheduled for this day."
    return "\n".join([header, *(render_task(t) for t in items)])


def _bar(count: int, peak: int) -> str:
    if peak <= 0 or count <= 0:
        return ""
    return "#" * max(1, round(_BAR_WIDTH * count / peak))


def render_dashboard(tasks: Sequence[Task], analysis: str | None = None) -> str:
    statuses = status_distribution(tasks)
    categories = category_distribution(tasks)
    peak = max((s.count for s in statuses), default=0)
    total = sum(c.count for c in categories)

    lines = ["Task Status"]
    for s in statuses:
        lines.append(f"  {s.label:<12} {s.count:>3} {_bar(s.count, peak)}")

    lines.append("Categories")
    if not categories:
        lines.append("  (no tasks)")
    for c in categories:
        share = 100.0 * c.count / total
        lines.append(f"  {c.category.icon} {c.label:<10} {c.count:>3} ({share:.0f}%)")

    if analysis:
        lines.append("AI Schedule Analysis")
        lines.extend(f"  {line}" for line in analysis.splitlines())
    return "\n".join(lines)
