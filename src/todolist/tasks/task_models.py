# tasks/task_models.py

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from enum import StrEnum
from pathlib import Path
from typing import Any


class TodoError(Exception):
    """Base class for recoverable to-do list errors (never fatal to the app)."""


class InvalidInputError(TodoError, ValueError):
    """Task description is empty or whitespace-only."""


class TaskIndexError(TodoError, IndexError):
    """Operation references a task position that does not exist."""

    def __init__(self, index: int, length: int) -> None:
        if length:
            msg = f"task index {index} out of range (0..{length - 1})"
        else:
            msg = f"task index {index} out of range (list is empty)"
        super().__init__(msg)
        self.index = index
        self.length = length


class LoadError(TodoError):
    """Task file exists but could not be read or decoded."""

    def __init__(self, message: str, path: Path | None = None) -> None:
        super().__init__(message)
        self.path = path


class SaveError(TodoError):
    """Task file could not be written."""

    def __init__(self, message: str, path: Path | None = None) -> None:
        super().__init__(message)
        self.path = path


class CompleteResult(StrEnum):
    """Outcome of TaskStore.mark_complete."""

    COMPLETED = "completed"
    ALREADY_COMPLETE = "already_complete"


class LoadStatus(StrEnum):
    """
    Outcome of TaskStore.load.

    Notes:
    - MISSING is informational: first run, nothing saved yet.
    - CORRUPT means the store fell back to an empty list.
    """

    LOADED = "loaded"
    MISSING = "missing"
    CORRUPT = "corrupt"


@dataclass(frozen=True, slots=True)
class LoadReport:
    status: LoadStatus
    count: int = 0
    error: LoadError | None = None

    @property
    def ok(self) -> bool:
        return self.error is None


@dataclass(slots=True)
class Task:
    description: str
    completed: bool = False

    @classmethod
    def create(cls, description: str | None) -> Task:
        if not isinstance(description, str):
            kind = type(description).__name__
            raise InvalidInputError(f"Task description must be text, got {kind}.")
        if not description.strip():
            raise InvalidInputError("Task description cannot be empty.")
        return cls(description=description.strip())

    def is_complete(self) -> bool:
        return self.completed

    def set_complete(self, value: bool = True) -> None:
        self.completed = bool(value)

    def render_label(self) -> str:
        return f"[{'X' if self.completed else ' '}] {self.description}"

    def __str__(self) -> str:
        return self.render_label()

    # ---- persisted record shape ----

    def to_record(self) -> dict[str, Any]:
        return {"description": self.description, "completed": self.completed}

    @classmethod
    def from_record(cls, obj: Any) -> Task:
        """
        Build a Task from a decoded JSON record.

        Raises LoadError for anything that is not task-shaped; no coercion of
        wrong types (a "completed": "yes" record is rejected, not guessed).
        """
        if not isinstance(obj, Mapping):
            raise LoadError(f"task record must be an object, got {type(obj).__name__}")

        desc = obj.get("description")
        if not isinstance(desc, str) or not desc.strip():
            raise LoadError("task record has no usable description")

        completed = obj.get("completed", False)
        if not isinstance(completed, bool):
            raise LoadError(f"task record 'completed' must be a boolean, got {completed!r}")

        return cls(description=desc.strip(), completed=completed)
