# tests/test_task_api.py

from __future__ import annotations

from pathlib import Path

from todolist.core.state import AppState
from todolist.tasks import task_api
from todolist.tasks.task_models import Task
from todolist.tasks.task_store import TaskStore


def test_render_empty_and_numbered(state: AppState) -> None:
    assert "No tasks yet" in task_api.render_tasks(state)

    state.tasks.add_task("a")
    state.tasks.add_task("b")
    state.tasks.mark_complete(1)

    assert task_api.render_tasks(state) == "  1. [ ] a\n  2. [X] b"


def test_add_marks_dirty_only_on_success(state: AppState) -> None:
    assert task_api.add_task(state, "  ") == "Task description cannot be empty."
    assert state.dirty is False

    assert task_api.add_task(state, "milk") == "Added: milk"
    assert state.dirty is True


def test_complete_reports_no_selection_and_already_complete(state: AppState) -> None:
    state.tasks.add_task("a")

    assert task_api.complete_task(state, None) == "Please select a task to mark complete."
    assert task_api.complete_task(state, 5) == "Please select a task to mark complete."
    assert task_api.complete_task(state, 0) == "Completed: a"
    assert task_api.complete_task(state, 0) == "Task is already complete."
    assert state.tasks.list_tasks() == (Task("a", True),)


def test_remove_reports_no_selection(state: AppState) -> None:
    state.tasks.add_task("a")

    assert task_api.remove_task(state, None) == "Please select a task to remove."
    assert task_api.remove_task(state, -1) == "Please select a task to remove."
    assert task_api.remove_task(state, 0) == "Removed: a"
    assert len(state.tasks) == 0


def test_save_and_load_messages(state: AppState) -> None:
    assert "No saved tasks" in task_api.load_tasks(state)

    state.tasks.add_task("a")
    state.dirty = True
    msg = task_api.save_tasks(state)
    assert msg.startswith("Saved 1 task(s)")
    assert state.dirty is False

    assert task_api.load_tasks(state).startswith("Loaded 1 task(s)")


def test_load_corrupt_message(state: AppState) -> None:
    state.tasks.path.write_text("garbage", "utf-8")
    msg = task_api.load_tasks(state)
    assert msg.startswith("Error loading tasks:")
    assert msg.endswith("Starting fresh.")
    assert len(state.tasks) == 0


def test_save_error_message_keeps_dirty(tmp_path: Path, settings) -> None:
    blocker = tmp_path / "file"
    blocker.write_text("x", "utf-8")
    state = AppState(settings=settings, tasks=TaskStore(blocker / "tasks.dat"))
    task_api.add_task(state, "a")

    msg = task_api.save_tasks(state)

    assert msg.startswith("Error saving tasks:")
    assert state.dirty is True
    assert len(state.tasks) == 1
