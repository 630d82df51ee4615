# tests/conftest.py

from __future__ import annotations

from types import SimpleNamespace

import pytest

from zenith_tasker.core.state import AppState
from zenith_tasker.tasks.analysis import ScheduleAnalyzer
from zenith_tasker.tasks.seed import demo_tasks
from zenith_tasker.tasks.task_store import TaskStore

from .fakes import NOW, TODAY, FakeLLMClient


@pytest.fixture()
def settings() -> SimpleNamespace:
    """
    Minimal settings object compatible with AppState and the commands.

    We intentionally use a SimpleNamespace rather than importing real config,
    to keep unit tests isolated from the environment.
    """
    return SimpleNamespace(
        app_name="Zenith Tasker",
        has_api_key=True,
        llm_models=["test/model"],
        day_dots_limit=3,
        seed_demo_tasks=True,
    )


@pytest.fixture()
def store() -> TaskStore:
    return TaskStore(clock=lambda: NOW)


@pytest.fixture()
def seeded_store() -> TaskStore:
    return TaskStore(demo_tasks(TODAY, now=NOW), clock=lambda: NOW)


@pytest.fixture()
def llm() -> FakeLLMClient:
    return FakeLLMClient("- **Busy** Monday")


@pytest.fixture()
def state(settings: SimpleNamespace, seeded_store: TaskStore, llm: FakeLLMClient) -> AppState:
    return AppState(
        settings=settings,
        task_store=seeded_store,
        analyzer=ScheduleAnalyzer(llm, api_key_present=True),
        selected_date=TODAY,
        current_month=TODAY.replace(day=1),
    )
