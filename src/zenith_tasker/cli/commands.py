# src/zenith_tasker/cli/commands.py

from __future__ import annotations

import asyncio
import contextlib
import inspect
import logging
import re
from collections.abc import Callable
from datetime import date, timedelta
from typing import cast

from ..core.state import AppState
from ..render.text import render_agenda, render_dashboard, render_month
from ..tasks.task_models import Category, NewTask, TaskStatus
from ..util.calendar_grid import add_months, start_of_month
from ..util.timecalc import DEFAULT_RANGE, InvalidTimeError

CommandEmitter = Callable[[str], None]
CommandHandler2 = Callable[[AppState, list[str]], str]
CommandHandler3 = Callable[[AppState, list[str], CommandEmitter | None], str]
CommandHandler = CommandHandler2 | CommandHandler3

logger = logging.getLogger(__name__)

_TIME_OPT_RE = re.compile(r"^@(\d{1,2}:\d{2})(?:-(\d{1,2}:\d{2}))?$")


class CommandRegistry:
    """Simple slash-command registry used by the console (/help, /add, ...)."""

    def __init__(self) -> None:
        self._handlers: dict[str, CommandHandler] = {}
        self._help: dict[str, str] = {}

    def register(
        self,
        name: str,
        handler: CommandHandler,
        help_text: str,
        aliases: list[str] | None = None,
    ) -> None:
        aliases = aliases or []
        key = name.lower()
        self._handlers[key] = handler
        self._help[key] = help_text
        for alias in aliases:
            self._handlers[alias.lower()] = handler

    def handle(
        self,
        state: AppState,
        line: str,
        emit: CommandEmitter | None = None,
    ) -> str | None:
        """
        Handle a string like "/command args".
        Returns a reply string or None if not a command.
        """
        if not line.startswith("/"):
            return None

        parts = line[1:].split()
        if not parts:
            return "Empty command. Use /help to list available commands."

        name = parts[0].lower()
        args = parts[1:]

        handler = self._handlers.get(name)
        if not handler:
            return f"Unknown command: /{name}. Use /help to list available commands."

        try:
            nparams = len(inspect.signature(handler).parameters)
        except (TypeError, ValueError):
            nparams = 3

        if nparams >= 3:
            h3 = cast(CommandHandler3, handler)
            return h3(state, args, emit)

        h2 = cast(CommandHandler2, handler)
        return h2(state, args)

    def build_help(self) -> str:
        lines = ["Available commands:"]
        for name, help_text in self._help.items():
            lines.append(f"  /{name} - {help_text}")
        return "\n".join(lines)


registry = CommandRegistry()


def _parse_id(raw: str) -> int | None:
    try:
        return int(raw.lstrip("#"))
    except ValueError:
        return None


def _parse_day(raw: str, current: date) -> date | None:
    """YYYY-MM-DD, 'today', or a +N/-N day offset from `current`."""
    raw = raw.strip().lower()
    if raw == "today":
        return date.today()
    if raw[:1] in "+-" and raw[1:].isdigit():
        return current + timedelta(days=int(raw))
    try:
        return date.fromisoformat(raw)
    except ValueError:
        return None


def _select_day(state: AppState, day: date) -> None:
    state.selected_date = day
    state.current_month = start_of_month(day)


def cmd_help(state: AppState, args: list[str]) -> str:
    return registry.build_help()


def cmd_status(state: AppState, args: list[str]) -> str:
    if not getattr(state.settings, "has_api_key", False):
        ai = "OFF (no API key)"
    elif not state.analyzer.has_client:
        ai = "ERROR (LLM client could not be created, see the log)"
    else:
        ai = "ON"
    models = ", ".join(list(getattr(state.settings, "llm_models", []) or []))
    return (
        "Status:\n"
        f"  Tasks: {state.task_store.count_tasks()}\n"
        f"  Selected day: {state.selected_date.isoformat()}\n"
        f"  AI analysis: {ai}\n"
        f"  Models (priority -> fallback): {models}"
    )


def cmd_month(state: AppState, args: list[str]) -> str:
    """
    /month            -> show the current month
    /month next|prev  -> move one month
    /month YYYY-MM    -> jump to a month
    """
    if args:
        arg = args[0].lower()
        if arg in ("next", "n", ">"):
            state.current_month = add_months(state.current_month, 1)
        elif arg in ("prev", "p", "<"):
            state.current_month = add_months(state.current_month, -1)
        elif arg == "today":
            state.current_month = start_of_month(date.today())
        else:
            try:
                state.current_month = date.fromisoformat(f"{arg}-01")
            except ValueError:
                return "Usage: /month [next|prev|today|YYYY-MM]"

    return render_month(
        state.task_store.tasks,
        state.current_month,
        selected=state.selected_date,
        dots_limit=int(getattr(state.settings, "day_dots_limit", 3)),
    )


def cmd_day(state: AppState, args: list[str]) -> str:
    """/day [YYYY-MM-DD|today|+N|-N] -> select a day and show its agenda."""
    if args:
        day = _parse_day(args[0], state.selected_date)
        if day is None:
            return "Usage: /day [YYYY-MM-DD|today|+N|-N]"
        _select_day(state, day)
    return render_agenda(state.task_store.tasks, state.selected_date)


def cmd_agenda(state: AppState, args: list[str]) -> str:
    return render_agenda(state.task_store.tasks, state.selected_date)


def cmd_add(state: AppState, args: list[str]) -> str:
    """
    /add <title> [@HH:MM[-HH:MM]] [+MIN] [#category] [!status] [;subtask;subtask]

    Options may appear anywhere; everything else is the title. The task is
    created on the selected day.
    """
    title_parts: list[str] = []
    start: str | None = None
    end: str | None = None
    duration: str | None = None
    category = Category.WORK
    status = TaskStatus.NOT_STARTED

    raw = " ".join(args)
    head, *subtask_titles = raw.split(";")

    for tok in head.split():
        m = _TIME_OPT_RE.match(tok)
        if m:
            start, end = m.group(1), m.group(2)
        elif tok.startswith("+") and tok[1:].isdigit():
            duration = tok[1:]
        elif tok.startswith("#") and len(tok) > 1:
            try:
                category = Category.parse(tok[1:])
            except ValueError:
                return f"Unknown category: {tok[1:]}. Use one of: {', '.join(c.value for c in Category)}."
        elif tok.startswith("!") and len(tok) > 1:
            try:
                status = TaskStatus.parse(tok[1:])
            except ValueError:
                return f"Unknown status: {tok[1:]}. Use one of: {', '.join(s.value for s in TaskStatus)}."
        else:
            title_parts.append(tok)

    # Same order as the form: start, then duration or end.
    rng = DEFAULT_RANGE
    try:
        if start is not None:
            rng = rng.with_start(start, strict=True)
        if duration is not None:
            rng = rng.with_duration(duration, strict=True)
        if end is not None:
            rng = rng.with_end(end, strict=True)
    except InvalidTimeError as e:
        return f"Invalid time: {e}"

    task = state.task_store.add_task(
        NewTask(
            title=" ".join(title_parts),
            task_date=state.selected_date,
            start_time=rng.start,
            end_time=rng.end,
            duration=rng.duration,
            status=status,
            category=category,
            subtasks=tuple(subtask_titles),
        )
    )
    if task is None:
        return "Usage: /add <title> [@HH:MM[-HH:MM]] [+MIN] [#category] [!status] [;subtask...]"
    return f"Added #{task.id} {task.title} on {task.task_date.isoformat()} {task.start_time}-{task.end_time}."


def cmd_set(state: AppState, args: list[str]) -> str:
    """/set <id> <status> -> change a task's status."""
    if len(args) < 2 or _parse_id(args[0]) is None:
        return "Usage: /set <id> <not_started|in_progress|completed>"
    try:
        status = TaskStatus.parse(" ".join(args[1:]))
    except ValueError:
        return f"Unknown status. Use one of: {', '.join(s.value for s in TaskStatus)}."
    task_id = cast(int, _parse_id(args[0]))
    state.task_store.update_task_status(task_id, status)
    task = state.task_store.get_task(task_id)
    if task is None:
        return f"No task #{task_id}."
    return f"#{task_id} is now {task.status.label}."


def cmd_delete(state: AppState, args: list[str]) -> str:
    task_id = _parse_id(args[0]) if args else None
    if task_id is None:
        return "Usage: /delete <id>"
    before = state.task_store.count_tasks()
    state.task_store.delete_task(task_id)
    if state.task_store.count_tasks() == before:
        return f"No task #{task_id}."
    return f"Deleted #{task_id}."


def cmd_sub(state: AppState, args: list[str]) -> str:
    """/sub <id> <title> -> append a subtask."""
    task_id = _parse_id(args[0]) if args else None
    if task_id is None or len(args) < 2:
        return "Usage: /sub <id> <title>"
    subtask = state.task_store.add_subtask(task_id, " ".join(args[1:]))
    if subtask is None:
        return f"No task #{task_id}."
    return f"Added subtask #{subtask.id} to #{task_id}."


def cmd_toggle(state: AppState, args: list[str]) -> str:
    """/toggle <id> <subtask_id> -> flip a subtask's completion."""
    if len(args) < 2:
        return "Usage: /toggle <id> <subtask_id>"
    task_id, subtask_id = _parse_id(args[0]), _parse_id(args[1])
    if task_id is None or subtask_id is None:
        return "Usage: /toggle <id> <subtask_id>"
    state.task_store.toggle_subtask(task_id, subtask_id)
    task = state.task_store.get_task(task_id)
    subtask = next((st for st in task.subtasks if st.id == subtask_id), None) if task else None
    if subtask is None:
        return f"No subtask #{subtask_id} on task #{task_id}."
    return f"{subtask.title}: {'done' if subtask.is_completed else 'open'}."


def cmd_dash(state: AppState, args: list[str]) -> str:
    return render_dashboard(state.task_store.tasks, state.analysis)


def cmd_analyze(state: AppState, args: list[str], emit: CommandEmitter | None = None) -> str:
    logger.debug("AI analysis requested from console (tasks=%d)", state.task_store.count_tasks())
    if emit:
        with contextlib.suppress(Exception):
            emit("[AI] Analyzing your schedule...")
    state.analysis = asyncio.run(state.analyzer.analyze(state.task_store.tasks))
    return state.analysis


def cmd_clear(state: AppState, args: list[str]) -> str:
    state.analysis = None
    return "Analysis cleared."


registry.register("help", cmd_help, help_text="Show available commands.", aliases=["h", "?"])
registry.register("status", cmd_status, help_text="Show task count, selected day and AI settings.")
registry.register("month", cmd_month, help_text="Calendar: /month [next|prev|today|YYYY-MM].", aliases=["cal"])
registry.register("day", cmd_day, help_text="Select a day: /day [YYYY-MM-DD|today|+N|-N].")
registry.register("agenda", cmd_agenda, help_text="List tasks for the selected day.", aliases=["ls"])
registry.register(
    "add",
    cmd_add,
    help_text="Add a task: /add <title> [@HH:MM[-HH:MM]] [+MIN] [#category] [!status] [;subtask...].",
)
registry.register("set", cmd_set, help_text="Change status: /set <id> <status>.")
registry.register("delete", cmd_delete, help_text="Delete a task: /delete <id>.", aliases=["rm"])
registry.register("sub", cmd_sub, help_text="Add a subtask: /sub <id> <title>.")
registry.register("toggle", cmd_toggle, help_text="Toggle a subtask: /toggle <id> <subtask_id>.")
registry.register("dash", cmd_dash, help_text="Dashboard: status and category charts.")
registry.register("analyze", cmd_analyze, help_text="Ask the AI for a workload summary.")
registry.register("clear", cmd_clear, help_text="Clear the AI summary.")
