# src/todolist/cli/commands.py

from __future__ import annotations

import inspect
import logging
from collections.abc import Callable
from typing import cast

from ..core.ports import Emitter
from ..core.state import AppState
from ..tasks import task_api

CommandHandler2 = Callable[[AppState, list[str]], str]
CommandHandler3 = Callable[[AppState, list[str], Emitter | None], str]
CommandHandler = CommandHandler2 | CommandHandler3

logger = logging.getLogger(__name__)


class CommandRegistry:
    """Simple slash-command registry used by the console connector (/help, /add, ...)."""

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
        emit: Emitter | None = None,
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
        lines.append("Plain text (no leading /) adds it as a new task.")
        return "\n".join(lines)


registry = CommandRegistry()


def parse_position(args: list[str]) -> int | None:
    """
    Convert a 1-based task number from the console into a 0-based index.

    None means "no selection" (missing or not a number). Numbers < 1 map to
    negative indices, which the store rejects as out of range.
    """
    if not args:
        return None
    try:
        return int(args[0]) - 1
    except ValueError:
        return None


def _with_list(state: AppState, message: str) -> str:
    return f"{message}\n{task_api.render_tasks(state)}"


def cmd_help(state: AppState, args: list[str]) -> str:
    return registry.build_help()


def cmd_list(state: AppState, args: list[str]) -> str:
    return task_api.render_tasks(state)


def cmd_add(state: AppState, args: list[str]) -> str:
    """
    /add buy milk  -> append "buy milk"
    """
    return _with_list(state, task_api.add_task(state, " ".join(args)))


def cmd_done(state: AppState, args: list[str]) -> str:
    return _with_list(state, task_api.complete_task(state, parse_position(args)))


def cmd_remove(state: AppState, args: list[str]) -> str:
    return _with_list(state, task_api.remove_task(state, parse_position(args)))


def cmd_save(state: AppState, args: list[str]) -> str:
    return task_api.save_tasks(state)


def cmd_load(
    state: AppState,
    args: list[str],
    emit: Emitter | None = None,
) -> str:
    """
    /load        -> reload from the task file (refuses if there are unsaved changes)
    /load force  -> reload and discard unsaved changes
    """
    force = bool(args) and args[0].lower() in ("force", "-f", "!")
    if state.dirty and not force:
        return "You have unsaved changes. Use /save first, or /load force to discard them."

    if emit:
        emit(f"Reloading tasks from {state.tasks.path}...")
    logger.debug("Reload requested (force=%s)", force)
    return _with_list(state, task_api.load_tasks(state))


def cmd_status(state: AppState, args: list[str]) -> str:
    tasks = state.tasks.list_tasks()
    done = sum(1 for t in tasks if t.is_complete())
    save_on_exit = "ON" if getattr(state.settings, "save_on_exit", True) else "OFF"
    return (
        "Status:\n"
        f"  Task file: {state.tasks.path}\n"
        f"  Tasks: {len(tasks)} ({done} complete, {len(tasks) - done} open)\n"
        f"  Unsaved changes: {'yes' if state.dirty else 'no'}\n"
        f"  Save on exit: {save_on_exit}"
    )


registry.register("help", cmd_help, help_text="Show available commands.", aliases=["h", "?"])
registry.register("list", cmd_list, help_text="Show the task list.", aliases=["ls"])
registry.register("add", cmd_add, help_text="Add a task: /add <description>.", aliases=["a"])
registry.register(
    "done", cmd_done, help_text="Mark a task complete: /done <n>.", aliases=["complete", "x"]
)
registry.register("rm", cmd_remove, help_text="Remove a task: /rm <n>.", aliases=["remove", "del"])
registry.register("save", cmd_save, help_text="Save tasks to the task file now.")
registry.register(
    "load", cmd_load, help_text="Reload tasks from the task file: /load | /load force."
)
registry.register("status", cmd_status, help_text="Show task file, counts and unsaved state.")
