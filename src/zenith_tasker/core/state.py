# src/zenith_tasker/core/state.py

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date
from typing import Any

from ..tasks.analysis import ScheduleAnalyzer
from .ports import TaskRepo


@dataclass
class AppState:
    # Settings object (config.Settings or a test double).
    settings: Any

    task_store: TaskRepo
    analyzer: ScheduleAnalyzer

    # View selection: the agenda day and the month shown by the calendar.
    selected_date: date = field(default_factory=date.today)
    current_month: date = field(default_factory=lambda: date.today().replace(day=1))

    # Last AI summary, shown until the user clears it.
    analysis: str | None = None
