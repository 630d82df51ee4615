# src/zenith_tasker/core/ports.py

from __future__ import annotations

"""
Ports (interfaces) used by the core.

The core depends on Protocols instead of concrete implementations.
This keeps the LLM provider swappable and makes testing easier.
"""

from collections.abc import Callable, Iterable
from typing import Any, Protocol

ChatMessage = dict[str, str]
# OpenAI-style chat messages: {"role": "...", "content": "..."}.


class LLMClient(Protocol):
    """Text completion client (OpenAI/OpenRouter-compatible)."""

    def stream_chat(self, messages: list[ChatMessage], system_prompt: str) -> Iterable[str]: ...

    def complete(self, prompt: str, system_prompt: str = "") -> str: ...


class TaskRepo(Protocol):
    """What the presentation layer may do with tasks (see tasks/task_store.py)."""

    @property
    def tasks(self) -> tuple[Any, ...]: ...

    def get_task(self, task_id: int) -> Any | None: ...
    def count_tasks(self) -> int: ...

    # Mutations
    def add_task(self, new: Any) -> Any | None: ...
    def update_task_status(self, task_id: int, new_status: Any) -> None: ...
    def delete_task(self, task_id: int) -> None: ...
    def toggle_subtask(self, task_id: int, subtask_id: int) -> None: ...
    def add_subtask(self, task_id: int, title: str) -> Any | None: ...

    # Change notification
    def subscribe(self, listener: Callable[[tuple[Any, ...]], None]) -> Callable[[], None]: ...
