# src/zenith_tasker/tasks/analysis.py

"""
AI workload summary for the dashboard.

Each task becomes one plain-text line; the lines go to the LLM after a fixed
instruction asking for a 3-bullet markdown analysis. The reply is returned
verbatim. Failures never raise: they turn into one of the canned messages
below.
"""

from __future__ import annotations

import asyncio
import logging
from collections.abc import Iterable

from ..core.ports import LLMClient
from .task_models import Task

logger = logging.getLogger(__name__)

MISSING_KEY_MESSAGE = "API Key is missing. Please configure your environment to use AI features."
FAILURE_MESSAGE = "An error occurred while analyzing your schedule. Please try again."
EMPTY_MESSAGE = "Could not generate analysis."
BUSY_MESSAGE = "An analysis is already running. Please wait for it to finish."

ANALYSIS_PROMPT = """
You are a productivity expert assistant. Analyze the following list of tasks and provide a concise, 3-bullet point summary of the workload.
Focus on potential bottlenecks, the balance between work/personal life, duration of tasks, and urgent items.

Task List:
{task_list}

Output strictly in markdown format.
""".strip()


def summary_line(task: Task) -> str:
    """
    One task as a prompt line, e.g.
    - [Mon Oct 19 2026] Q3 Financial Review (Work): In Progress at 09:00 - 11:00 (120m) (1/3 subtasks done)
    """
    day = task.task_date.strftime("%a %b %d %Y")
    line = (
        f"- [{day}] {task.title} ({task.category.label}): {task.status.label} "
        f"at {task.start_time} - {task.end_time} ({task.duration}m)"
    )
    if task.subtasks:
        line += f" ({task.completed_subtasks}/{len(task.subtasks)} subtasks done)"
    return line


def build_prompt(tasks: Iterable[Task]) -> str:
    return ANALYSIS_PROMPT.format(task_list="\n".join(summary_line(t) for t in tasks))


class ScheduleAnalyzer:
    """
    Runs the AI summary with a single in-flight slot.

    The blocking LLM call runs in a worker thread, so the task store stays
    usable while a request is pending. A second analyze() while one is
    running returns BUSY_MESSAGE without calling the LLM.
    No caching, no retry.
    """

    def __init__(self, llm: LLMClient | None, *, api_key_present: bool) -> None:
        self._llm = llm
        self._api_key_present = api_key_present
        self._in_flight = False

    @property
    def has_client(self) -> bool:
        return self._llm is not None

    @property
    def busy(self) -> bool:
        return self._in_flight

    async def analyze(self, tasks: Iterable[Task]) -> str:
        if not self._api_key_present:
            logger.info("AI analysis skipped: no API key configured")
            return MISSING_KEY_MESSAGE

        if self._llm is None:
            logger.warning("AI analysis unavailable: LLM client was not created")
            return FAILURE_MESSAGE

        if self._in_flight:
            logger.info("AI analysis already in flight; ignoring request")
            return BUSY_MESSAGE

        snapshot = tuple(tasks)
        prompt = build_prompt(snapshot)
        self._in_flight = True
        try:
            logger.debug("AI analysis requested tasks=%d", len(snapshot))
            text = await asyncio.to_thread(self._llm.complete, prompt)
        except Exception:
            logger.exception("AI analysis failed")
            return FAILURE_MESSAGE
        finally:
            self._in_flight = False

        text = (text or "").strip()
        return text or EMPTY_MESSAGE
