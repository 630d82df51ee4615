# src/zenith_tasker/tasks/seed.py

"""Demo tasks the app starts with (around today, so the calendar isn't empty)."""

from __future__ import annotations

from datetime import date, datetime, timedelta

from .task_models import Category, Subtask, Task, TaskStatus


def demo_tasks(today: date | None = None, *, now: datetime | None = None) -> list[Task]:
    today = today or date.today()
    now = now or datetime.now()

    return [
        Task(
            id=1,
            title="Q3 Financial Review",
            description="Analyze the quarterly reports.",
            task_date=today,
            start_time="09:00",
            end_time="11:00",
            duration=120,
            status=TaskStatus.IN_PROGRESS,
            category=Category.WORK,
            created_at=now,
            subtasks=(
                Subtask(id=101, title="Gather data from Sales", is_completed=True),
                Subtask(id=102, title="Review expense reports"),
                Subtask(id=103, title="Draft executive summary"),
            ),
        ),
        Task(
            id=2,
            title="Grocery Shopping",
            description="Buy milk, eggs, and bread.",
            task_date=today,
            start_time="17:30",
            end_time="18:15",
            duration=45,
            status=TaskStatus.NOT_STARTED,
            category=Category.PERSONAL,
            created_at=now,
            subtasks=(Subtask(id=201, title="Check pantry"),),
        ),
        Task(
            id=3,
            title="Server Migration",
            description="Critical security patch deployment.",
            task_date=today + timedelta(days=2),
            start_time="10:00",
            end_time="12:00",
            duration=120,
            status=TaskStatus.NOT_STARTED,
            category=Category.URGENT,
            created_at=now,
        ),
        Task(
            id=4,
            title="Weekly Standup",
            description="Team sync.",
            task_date=today - timedelta(days=1),
            start_time="09:00",
            end_time="09:30",
            duration=30,
            status=TaskStatus.COMPLETED,
            category=Category.WORK,
            created_at=now,
        ),
    ]
