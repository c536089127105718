# src/todolist/core/state.py

from __future__ import annotations

from dataclasses import dataclass

from .ports import TaskRepo


@dataclass
class AppState:
    # Settings object (config.Settings or a test SimpleNamespace).
    settings: object
    tasks: TaskRepo

    # Set by commands that change the list; cleared once saved.
    dirty: bool = False

    # Last load hit an unreadable task file; the file is kept as-is until the list changes.
    load_failed: bool = False
