# src/zenith_tasker/tasks/task_models.py

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date, datetime
from enum import StrEnum


class TaskStatus(StrEnum):
    """
    Task progress status.

    Closed set, freely transitionable: any status may be set from any other.
    Subtask completion never changes it.
    """

    NOT_STARTED = "not_started"
    IN_PROGRESS = "in_progress"
    COMPLETED = "completed"

    @property
    def label(self) -> str:
        return _STATUS_LABELS[self]

    @classmethod
    def parse(cls, raw: str) -> TaskStatus:
        """Accept the value, the member name or the label (case-insensitive)."""
        key = (raw or "").strip().lower().replace("-", "_").replace(" ", "_")
        for member in cls:
            if key in (member.value, member.name.lower()):
                return member
        raise ValueError(f"unknown status: {raw!r}")


_STATUS_LABELS: dict[TaskStatus, str] = {
    TaskStatus.NOT_STARTED: "Not Started",
    TaskStatus.IN_PROGRESS: "In Progress",
    TaskStatus.COMPLETED: "Completed",
}


class Category(StrEnum):
    WORK = "work"
    PERSONAL = "personal"
    URGENT = "urgent"

    @property
    def label(self) -> str:
        return _CATEGORY_LABELS[self]

    @property
    def icon(self) -> str:
        return _CATEGORY_ICONS[self]

    @classmethod
    def parse(cls, raw: str) -> Category:
        key = (raw or "").strip().lower()
        for member in cls:
            if key == member.value:
                return member
        raise ValueError(f"unknown category: {raw!r}")


_CATEGORY_LABELS: dict[Category, str] = {
    Category.WORK: "Work",
    Category.PERSONAL: "Personal",
    Category.URGENT: "Urgent",
}

_CATEGORY_ICONS: dict[Category, str] = {
    Category.WORK: "💼",
    Category.PERSONAL: "🏠",
    Category.URGENT: "🔥",
}


@dataclass(frozen=True, slots=True)
class Subtask:
    id: int
    title: str
    is_completed: bool = False


@dataclass(frozen=True, slots=True)
class Task:
    """
    One scheduled work item.

    Instances are immutable: the store replaces a task with a modified copy
    (dataclasses.replace) on every mutation.
    """

    id: int
    title: str
    description: str
    task_date: date
    start_time: str  # HH:MM, zero-padded
    end_time: str  # HH:MM, zero-padded
    duration: int  # minutes, >= 0
    status: TaskStatus
    category: Category
    created_at: datetime
    subtasks: tuple[Subtask, ...] = ()

    @property
    def completed_subtasks(self) -> int:
        return sum(1 for st in self.subtasks if st.is_completed)


@dataclass(frozen=True, slots=True)
class NewTask:
    """Creation input: every Task field except the store-assigned id/created_at."""

    title: str
    task_date: date
    start_time: str = "09:00"
    end_time: str = "10:00"
    duration: int = 60
    status: TaskStatus = TaskStatus.NOT_STARTED
    category: Category = Category.WORK
    description: str = ""
    subtasks: tuple[str, ...] = field(default_factory=tuple)
