# src/zenith_tasker/cli/bootstrap.py

"""
CLI bootstrap helpers.

This module is the "composition root":
- loads settings once,
- wires concrete implementations into AppState (task store, LLM, analyzer),
- seeds the demo tasks when enabled.
"""

from __future__ import annotations

import logging
from datetime import date

from ..config import get_settings
from ..core.ports import LLMClient
from ..core.state import AppState
from ..llm.client import OpenRouterLLMClient
from ..tasks.analysis import ScheduleAnalyzer
from ..tasks.seed import demo_tasks
from ..tasks.task_store import TaskStore

logger = logging.getLogger(__name__)


def _build_llm(settings) -> LLMClient | None:
    if not getattr(settings, "has_api_key", False):
        return None
    try:
        return OpenRouterLLMClient(settings)
    except RuntimeError:
        logger.exception("LLM client could not be created; AI analysis disabled.")
        return None


def create_initial_state(*, settings=None, today: date | None = None) -> AppState:
    """
    Create AppState from the provided settings.

    Keeping settings injectable makes the app easier to test and avoids hidden global config reads.
    If settings is None, falls back to get_settings().
    """
    if settings is None:
        settings = get_settings()
    today = today or date.today()

    seed = demo_tasks(today) if getattr(settings, "seed_demo_tasks", True) else []
    llm = _build_llm(settings)

    return AppState(
        settings=settings,
        task_store=TaskStore(seed),
        analyzer=ScheduleAnalyzer(llm, api_key_present=bool(getattr(settings, "has_api_key", False))),
        selected_date=today,
        current_month=today.replace(day=1),
    )
