# src/todolist/tasks/task_api.py

"""
Boundary helpers: run one store operation and turn its outcome into a
user-facing message. Core errors are caught here and never reach the loop.
"""

from __future__ import annotations

import logging

from ..core.state import AppState
from .task_models import (
    CompleteResult,
    InvalidInputError,
    LoadReport,
    LoadStatus,
    SaveError,
    TaskIndexError,
)

logger = logging.getLogger(__name__)


def render_tasks(state: AppState) -> str:
    """Numbered (1-based) task list, or a placeholder when empty."""
    tasks = state.tasks.list_tasks()
    if not tasks:
        return "No tasks yet. Type a task and press Enter to add it."
    lines = [f"{i:>3}. {t.render_label()}" for i, t in enumerate(tasks, start=1)]
    return "\n".join(lines)


def add_task(state: AppState, text: str) -> str:
    try:
        task = state.tasks.add_task(text)
    except InvalidInputError:
        return "Task description cannot be empty."
    state.dirty = True
    return f"Added: {task.description}"


def complete_task(state: AppState, index: int | None) -> str:
    if index is None:
        return "Please select a task to mark complete."
    try:
        result = state.tasks.mark_complete(index)
    except TaskIndexError:
        logger.debug("complete_task: index %s out of range", index)
        return "Please select a task to mark complete."

    if result is CompleteResult.ALREADY_COMPLETE:
        return "Task is already complete."

    state.dirty = True
    return f"Completed: {state.tasks.list_tasks()[index].description}"


def remove_task(state: AppState, index: int | None) -> str:
    if index is None:
        return "Please select a task to remove."
    try:
        task = state.tasks.remove_task(index)
    except TaskIndexError:
        logger.debug("remove_task: index %s out of range", index)
        return "Please select a task to remove."
    state.dirty = True
    return f"Removed: {task.description}"


def describe_load(report: LoadReport, state: AppState) -> str:
    path = state.tasks.path
    if report.status is LoadStatus.LOADED:
        return f"Loaded {report.count} task(s) from {path}."
    if report.status is LoadStatus.MISSING:
        return f"No saved tasks at {path}; starting with an empty list."
    return f"Error loading tasks: {report.error}. Starting fresh."


def load_tasks(state: AppState) -> str:
    report = state.tasks.load()
    state.dirty = False
    state.load_failed = report.status is LoadStatus.CORRUPT
    return describe_load(report, state)


def save_tasks(state: AppState) -> str:
    try:
        path = state.tasks.save()
    except SaveError as e:
        return f"Error saving tasks: {e}"
    state.dirty = False
    state.load_failed = False
    return f"Saved {len(state.tasks)} task(s) to {path}."
