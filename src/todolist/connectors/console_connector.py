# src/todolist/connectors/console_connector.py

from __future__ import annotations

import logging
from collections.abc import Callable

from ..cli.commands import registry as command_registry
from ..core.ports import Emitter
from ..core.state import AppState
from ..tasks import task_api

logger = logging.getLogger(__name__)

EXIT_COMMANDS = ("/exit", "/quit", "/q")


def handle_line(state: AppState, line: str, emit: Emitter) -> str | None:
    """
    Process one line of console input.

    Returns the reply to print, or None for blank input.
    Slash commands go to the registry; anything else is added as a task.
    """
    text = line.strip()
    if not text:
        return None

    try:
        cmd_response = command_registry.handle(state, text, emit=emit)
    except Exception:
        logger.exception("Command handler crashed.")
        return "Internal error while handling a command."

    if cmd_response is not None:
        return cmd_response

    msg = task_api.add_task(state, text)
    return f"{msg}\n{task_api.render_tasks(state)}"


def run_console_loop(
    state: AppState,
    *,
    read: Callable[[str], str] = input,
    emit: Emitter = print,
) -> None:
    app_name = str(getattr(getattr(state, "settings", None), "app_name", "todolist"))
    logger.info("Console connector started.")
    emit(f"[{app_name}] Type a task to add it. Use /help for commands, /exit to quit.\n")
    emit(task_api.render_tasks(state))

    while True:
        try:
            user_input = read("> ")
        except EOFError:
            logger.info("Console EOF received, exiting.")
            break
        except KeyboardInterrupt:
            logger.info("Console KeyboardInterrupt, exiting.")
            emit("")
            break

        if user_input.strip().lower() in EXIT_COMMANDS:
            logger.info("Console exit command received.")
            break

        reply = handle_line(state, user_input, emit)
        if reply is not None:
            emit(reply)

    logger.info("Console connector finished.")
