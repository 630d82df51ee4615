# src/zenith_tasker/connectors/console_connector.py

from __future__ import annotations

import logging
from datetime import datetime

from ..cli.commands import registry as command_registry
from ..core.state import AppState

logger = logging.getLogger(__name__)


def _ts_local() -> str:
    return datetime.now().astimezone().strftime("%Y-%m-%d %H:%M:%S")


def _print_ts(text: str) -> None:
    print(f"[{_ts_local()}] {text}")


def run_console_loop(state: AppState) -> None:
    logger.info("Console connector started (tasks=%s).", state.task_store.count_tasks())
    app_name = str(getattr(state.settings, "app_name", "Zenith Tasker"))
    _print_ts(f"[{app_name}] Use /help for commands, /exit to quit.\n")

    def emit(text: str) -> None:
        # Immediate user-visible feedback for long operations (AI analysis)
        print(f"[{_ts_local()}] {text}", flush=True)

    # Show the calendar and today's agenda on start.
    for start_cmd in ("/month", "/agenda"):
        print(command_registry.handle(state, start_cmd))
        print()

    while True:
        try:
            user_input = input(">>> ").strip()
        except EOFError:
            logger.info("Console EOF received, exiting.")
            break
        except KeyboardInterrupt:
            logger.info("Console KeyboardInterrupt, exiting.")
            print()
            break

        if not user_input:
            continue

        if user_input.lower() in ("/exit", "/quit"):
            logger.info("Console exit command received.")
            break

        try:
            response = command_registry.handle(state, user_input, emit=emit)
        except Exception:
            logger.exception("Command handler crashed.")
            response = "Internal error while handling a command."

        if response is None:
            response = "Commands start with '/'. Use /help to list them."
        print(f"{response}\n")

    logger.info("Console connector finished.")
