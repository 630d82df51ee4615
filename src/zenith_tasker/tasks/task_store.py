# src/zenith_tasker/tasks/task_store.py

from __future__ import annotations

import itertools
import logging
from collections.abc import Callable, Iterable
from dataclasses import replace
from datetime import datetime

from .task_models import NewTask, Subtask, Task, TaskStatus

logger = logging.getLogger(__name__)

TaskListener = Callable[[tuple[Task, ...]], None]

# Subtask ids are process-wide; seed data uses ids below this.
_SUBTASK_IDS = itertools.count(1000)


def next_subtask_id() -> int:
    return next(_SUBTASK_IDS)


class TaskStore:
    """
    In-memory task store.

    The list is an immutable tuple of immutable Tasks. Each effective mutation
    builds a new tuple and notifies subscribers, so a snapshot taken from
    `tasks` never changes and `old is not new` detects changes.

    All mutations are total: blank titles and unknown ids are silent no-ops.
    """

    def __init__(
        self,
        tasks: Iterable[Task] = (),
        *,
        clock: Callable[[], datetime] = datetime.now,
    ) -> None:
        self._tasks: tuple[Task, ...] = tuple(tasks)
        self._clock = clock
        self._listeners: list[TaskListener] = []
        logger.info("TaskStore ready total=%s", len(self._tasks))

    # ---- read side ----

    @property
    def tasks(self) -> tuple[Task, ...]:
        return self._tasks

    def get_task(self, task_id: int) -> Task | None:
        for t in self._tasks:
            if t.id == task_id:
                return t
        return None

    def count_tasks(self) -> int:
        return len(self._tasks)

    def subscribe(self, listener: TaskListener) -> Callable[[], None]:
        """Register a change listener; returns a callable that unsubscribes it."""
        self._listeners.append(listener)

        def _unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return _unsubscribe

    # ---- low-level helpers ----

    def _commit(self, tasks: tuple[Task, ...]) -> None:
        self._tasks = tasks
        for listener in list(self._listeners):
            try:
                listener(tasks)
            except Exception:
                logger.exception("Task listener failed")

    def _replace_task(self, task_id: int, fn: Callable[[Task], Task | None]) -> bool:
        """Swap the task with `task_id` for fn(task). fn returning None means no change."""
        for i, t in enumerate(self._tasks):
            if t.id != task_id:
                continue
            updated = fn(t)
            if updated is None:
                return False
            self._commit(self._tasks[:i] + (updated,) + self._tasks[i + 1 :])
            return True
        logger.debug("Task %s not found", task_id)
        return False

    # ---- public API ----

    def add_task(self, new: NewTask) -> Task | None:
        title = (new.title or "").strip()
        if not title:
            logger.debug("add_task rejected: blank title")
            return None

        task_id = max((t.id for t in self._tasks), default=0) + 1
        subtasks = tuple(
            Subtask(id=next_subtask_id(), title=s.strip())
            for s in new.subtasks
            if s and s.strip()
        )
        task = Task(
            id=task_id,
            title=title,
            description=new.description or "",
            task_date=new.task_date,
            start_time=new.start_time,
            end_time=new.end_time,
            duration=max(0, int(new.duration)),
            status=new.status,
            category=new.category,
            created_at=self._clock(),
            subtasks=subtasks,
        )
        self._commit(self._tasks + (task,))
        logger.debug(
            "Task added id=%s date=%s %s-%s status=%s",
            task.id,
            task.task_date,
            task.start_time,
            task.end_time,
            task.status.value,
        )
        return task

    def update_task_status(self, task_id: int, new_status: TaskStatus) -> None:
        status = TaskStatus(new_status)

        def _apply(t: Task) -> Task | None:
            if t.status == status:
                return None
            return replace(t, status=status)

        if self._replace_task(task_id, _apply):
            logger.debug("Task %s -> %s", task_id, status.value)

    def delete_task(self, task_id: int) -> None:
        kept = tuple(t for t in self._tasks if t.id != task_id)
        if len(kept) == len(self._tasks):
            logger.debug("delete_task: %s not found", task_id)
            return
        self._commit(kept)
        logger.debug("Task %s deleted", task_id)

    def toggle_subtask(self, task_id: int, subtask_id: int) -> None:
        def _apply(t: Task) -> Task | None:
            if not any(st.id == subtask_id for st in t.subtasks):
                logger.debug("Subtask %s not found on task %s", subtask_id, task_id)
                return None
            subtasks = tuple(
                replace(st, is_completed=not st.is_completed) if st.id == subtask_id else st
                for st in t.subtasks
            )
            return replace(t, subtasks=subtasks)

        self._replace_task(task_id, _apply)

    def add_subtask(self, task_id: int, title: str) -> Subtask | None:
        title = (title or "").strip()
        if not title:
            logger.debug("add_subtask rejected: blank title")
            return None

        created: list[Subtask] = []

        def _apply(t: Task) -> Task:
            st = Subtask(id=next_subtask_id(), title=title)
            created.append(st)
            return replace(t, subtasks=t.subtasks + (st,))

        self._replace_task(task_id, _apply)
        return created[0] if created else None
