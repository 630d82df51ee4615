# tests/test_views.py

from __future__ import annotations

from datetime import date, timedelta

from zenith_tasker.tasks.task_models import Category, TaskStatus
from zenith_tasker.tasks.task_store import TaskStore
from zenith_tasker.tasks.views import (
    category_distribution,
    day_agenda,
    day_dots,
    month_tasks,
    status_distribution,
    subtask_progress,
)

from .fakes import TODAY, new_task


def test_day_agenda_filters_and_sorts_by_start(store: TaskStore) -> None:
    store.add_task(new_task("Lunch", start_time="12:00"))
    store.add_task(new_task("Gym", start_time="07:30"))
    store.add_task(new_task("Tomorrow", day=TODAY + timedelta(days=1), start_time="06:00"))
    store.add_task(new_task("Call", start_time="12:00"))

    agenda = day_agenda(store.tasks, TODAY)

    assert [t.title for t in agenda] == ["Gym", "Lunch", "Call"]


def test_day_agenda_is_pure(seeded_store: TaskStore) -> None:
    snapshot = seeded_store.tasks
    first = day_agenda(snapshot, TODAY)
    second = day_agenda(snapshot, TODAY)

    assert first == second
    assert seeded_store.tasks is snapshot


def test_month_tasks_keeps_list_order(seeded_store: TaskStore) -> None:
    seeded_store.add_task(new_task("Next month", day=date(2026, 11, 2)))
    assert [t.id for t in month_tasks(seeded_store.tasks, date(2026, 10, 1))] == [1, 2, 3, 4]


def test_day_dots_caps_at_three_in_list_order(store: TaskStore) -> None:
    for i, start in enumerate(["15:00", "08:00", "11:00", "09:00"]):
        store.add_task(new_task(f"T{i}", start_time=start))

    dots = day_dots(store.tasks, TODAY)

    assert [t.title for t in dots] == ["T0", "T1", "T2"]
    assert day_dots(store.tasks, TODAY + timedelta(days=3)) == []


def test_status_distribution_includes_zero_counts(store: TaskStore) -> None:
    store.add_task(new_task("A", status=TaskStatus.COMPLETED))
    store.add_task(new_task("B", status=TaskStatus.COMPLETED, day=date(2020, 1, 1)))

    counts = {c.status: c.count for c in status_distribution(store.tasks)}

    assert counts == {
        TaskStatus.NOT_STARTED: 0,
        TaskStatus.IN_PROGRESS: 0,
        TaskStatus.COMPLETED: 2,
    }


def test_category_distribution_excludes_zero_counts(seeded_store: TaskStore) -> None:
    seeded_store.delete_task(3)  # the only urgent task

    dist = category_distribution(seeded_store.tasks)

    assert [(c.category, c.count) for c in dist] == [(Category.WORK, 2), (Category.PERSONAL, 1)]
    assert dist[0].label == "Work"


def test_distributions_on_empty_list() -> None:
    assert [c.count for c in status_distribution([])] == [0, 0, 0]
    assert category_distribution([]) == []


def test_subtask_progress(seeded_store: TaskStore) -> None:
    assert subtask_progress(seeded_store.get_task(1)) == (1, 3)
    assert subtask_progress(seeded_store.get_task(3)) == (0, 0)
