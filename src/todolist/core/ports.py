# src/todolist/core/ports.py

from __future__ import annotations

"""
Ports (interfaces) used by the boundary helpers.

Commands and connectors depend on these Protocols instead of TaskStore,
so tests can swap in fakes.
"""

from collections.abc import Callable
from pathlib import Path
from typing import Protocol

from ..tasks.task_models import CompleteResult, LoadReport, Task

Emitter = Callable[[str], None]
# Immediate user-visible output (console print, test capture, ...).


class TaskRepo(Protocol):
    """Ordered task list with file persistence."""

    @property
    def path(self) -> Path: ...

    def __len__(self) -> int: ...

    def add_task(self, description: str) -> Task: ...

    def mark_complete(self, index: int) -> CompleteResult: ...

    def remove_task(self, index: int) -> Task: ...

    def list_tasks(self) -> tuple[Task, ...]: ...

    def load(self) -> LoadReport: ...

    def save(self) -> Path: ...
