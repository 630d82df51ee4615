# tests/test_commands.py

from __future__ import annotations

from datetime import date

from zenith_tasker.cli.commands import CommandRegistry, registry
from zenith_tasker.core.state import AppState
from zenith_tasker.tasks.analysis import MISSING_KEY_MESSAGE, ScheduleAnalyzer
from zenith_tasker.tasks.task_models import Category, TaskStatus

from .fakes import TODAY, FakeLLMClient


def test_command_registry_routes_2_and_3_params(state: AppState) -> None:
    reg = CommandRegistry()
    called = {"h2": 0, "h3": 0}
    notes: list[str] = []

    def h2(state, args):
        called["h2"] += 1
        return "h2"

    def h3(state, args, emit):
        called["h3"] += 1
        if emit is not None:
            emit("note")
        return "h3"

    reg.register("a", h2, "a")
    reg.register("b", h3, "b", aliases=["bee"])

    assert reg.handle(state, "/a x") == "h2"
    assert reg.handle(state, "/BEE y", emit=notes.append) == "h3"
    assert called == {"h2": 1, "h3": 1}
    assert notes == ["note"]


def test_command_registry_unknown_and_non_command(state: AppState) -> None:
    reg = CommandRegistry()
    assert reg.handle(state, "hello") is None
    assert "Unknown command" in (reg.handle(state, "/nope") or "")
    assert "Empty command" in (reg.handle(state, "/") or "")


def test_add_with_options_and_subtasks(state: AppState) -> None:
    reply = registry.handle(state, "/add Team sync @14:00 +45 #personal !in_progress ;agenda;notes")

    task = state.task_store.get_task(5)
    assert reply is not None and reply.startswith("Added #5")
    assert task.title == "Team sync"
    assert (task.start_time, task.end_time, task.duration) == ("14:00", "14:45", 45)
    assert task.category == Category.PERSONAL
    assert task.status == TaskStatus.IN_PROGRESS
    assert task.task_date == TODAY
    assert [st.title for st in task.subtasks] == ["agenda", "notes"]


def test_add_with_end_time_computes_duration(state: AppState) -> None:
    registry.handle(state, "/add Deep work @13:00-15:30")
    task = state.task_store.get_task(5)
    assert (task.start_time, task.end_time, task.duration) == ("13:00", "15:30", 150)


def test_add_rejects_bad_input(state: AppState) -> None:
    assert (registry.handle(state, "/add") or "").startswith("Usage")
    assert "Invalid time" in (registry.handle(state, "/add Late @25:00") or "")
    assert "Unknown category" in (registry.handle(state, "/add X #hobby") or "")
    assert state.task_store.count_tasks() == 4


def test_add_with_huge_duration_wraps_end_time(state: AppState) -> None:
    reply = registry.handle(state, "/add Long +99999999999")

    task = state.task_store.get_task(5)
    assert reply is not None and reply.startswith("Added #5")
    assert (task.start_time, task.end_time, task.duration) == ("09:00", "19:39", 99999999999)


def test_set_delete_sub_toggle(state: AppState) -> None:
    assert registry.handle(state, "/set 2 completed") == "#2 is now Completed."
    assert state.task_store.get_task(2).status == TaskStatus.COMPLETED
    assert registry.handle(state, "/set 99 completed") == "No task #99."

    reply = registry.handle(state, "/sub 3 Back up database")
    assert reply is not None and reply.startswith("Added subtask")
    sub = state.task_store.get_task(3).subtasks[0]

    assert registry.handle(state, f"/toggle 3 {sub.id}") == "Back up database: done."
    assert registry.handle(state, f"/toggle 3 {sub.id}") == "Back up database: open."
    assert registry.handle(state, "/toggle 3 1") == "No subtask #1 on task #3."

    assert registry.handle(state, "/delete 4") == "Deleted #4."
    assert registry.handle(state, "/delete 4") == "No task #4."


def test_day_and_month_navigation(state: AppState) -> None:
    reply = registry.handle(state, "/day +2")
    assert state.selected_date == date(2026, 10, 21)
    assert "Server Migration" in (reply or "")

    registry.handle(state, "/day 2026-12-05")
    assert state.current_month == date(2026, 12, 1)

    registry.handle(state, "/month next")
    assert state.current_month == date(2027, 1, 1)
    registry.handle(state, "/month 2026-10")
    assert state.current_month == date(2026, 10, 1)
    assert (registry.handle(state, "/month someday") or "").startswith("Usage")
    assert (registry.handle(state, "/day soon") or "").startswith("Usage")


def test_analyze_stores_result_until_cleared(state: AppState) -> None:
    notes: list[str] = []

    assert registry.handle(state, "/analyze", emit=notes.append) == "- **Busy** Monday"
    assert notes
    assert "- **Busy** Monday" in (registry.handle(state, "/dash") or "")

    assert registry.handle(state, "/clear") == "Analysis cleared."
    assert state.analysis is None
    assert "AI Schedule Analysis" not in (registry.handle(state, "/dash") or "")


def test_analyze_without_key(state: AppState) -> None:
    llm = FakeLLMClient()
    state.analyzer = ScheduleAnalyzer(llm, api_key_present=False)

    assert registry.handle(state, "/analyze") == MISSING_KEY_MESSAGE
    assert llm.calls == []


def test_help_lists_commands(state: AppState) -> None:
    text = registry.handle(state, "/help") or ""
    for name in ("/add", "/month", "/day", "/dash", "/analyze", "/toggle"):
        assert name in text
