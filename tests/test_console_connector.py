# tests/test_console_connector.py

from __future__ import annotations

from todolist.connectors.console_connector import handle_line, run_console_loop
from todolist.core.state import AppState
from todolist.tasks.task_models import Task

from .fakes import CapturingEmitter, ScriptedInput


def test_plain_text_adds_task(state: AppState) -> None:
    out = handle_line(state, "  water plants ", CapturingEmitter())
    assert out is not None
    assert out.startswith("Added: water plants")
    assert state.tasks.list_tasks() == (Task("water plants"),)


def test_blank_line_is_ignored(state: AppState) -> None:
    assert handle_line(state, "   ", CapturingEmitter()) is None
    assert len(state.tasks) == 0


def test_crashing_command_is_contained(state: AppState, monkeypatch) -> None:
    from todolist.cli import commands

    def boom(state, args):
        raise RuntimeError("boom")

    monkeypatch.setitem(commands.registry._handlers, "list", boom)
    out = handle_line(state, "/list", CapturingEmitter())
    assert out == "Internal error while handling a command."


def test_loop_runs_until_exit(state: AppState) -> None:
    emitted = CapturingEmitter()
    read = ScriptedInput(["a", "b", "/done 1", "/exit", "never read"])

    run_console_loop(state, read=read, emit=emitted)

    assert state.tasks.list_tasks() == (Task("a", True), Task("b", False))
    assert len(read.prompts) == 4
    assert "Completed: a" in emitted.text


def test_loop_stops_on_eof_and_interrupt(state: AppState) -> None:
    run_console_loop(state, read=ScriptedInput(["x"]), emit=CapturingEmitter())
    assert len(state.tasks) == 1

    run_console_loop(state, read=ScriptedInput([KeyboardInterrupt()]), emit=CapturingEmitter())
    assert len(state.tasks) == 1
