# src/todolist/cli/bootstrap.py

"""
CLI bootstrap helpers.

This module is the "composition root":
- loads settings once,
- wires the concrete TaskStore into AppState,
- runs the startup load and the shutdown save.
"""

from __future__ import annotations

import logging

from ..config import get_settings
from ..core.state import AppState
from ..tasks import task_api
from ..tasks.task_store import TaskStore

logger = logging.getLogger(__name__)


def create_initial_state(*, settings=None) -> AppState:
    """
    Create AppState from the provided settings.

    Keeping settings injectable makes the app easier to test and avoids hidden global config reads.
    If settings is None, falls back to get_settings().
    """
    if settings is None:
        settings = get_settings()

    return AppState(settings=settings, tasks=TaskStore(settings.tasks_file))


def load_on_startup(state: AppState) -> str:
    """Load the task file; any failure is already folded into the returned message."""
    return task_api.load_tasks(state)


def save_on_shutdown(state: AppState) -> str | None:
    """
    Save if enabled. Returns the message to show, or None if saving is off.

    An unreadable task file is not replaced by an empty list on exit; it is
    only overwritten once the user has changed the list or runs /save.
    """
    if not getattr(state.settings, "save_on_exit", True):
        logger.info("save_on_exit disabled; %d task(s) not saved.", len(state.tasks))
        return None
    if state.load_failed and not state.dirty:
        logger.warning(
            "Task file %s could not be read and nothing changed; not overwriting it.",
            state.tasks.path,
        )
        return f"Task file {state.tasks.path} was unreadable and is left untouched."
    return task_api.save_tasks(state)
