# tasks/task_store.py

from __future__ import annotations

import contextlib
import json
import logging
import os
from collections.abc import Iterable, Iterator
from pathlib import Path
from typing import Any

from .task_models import (
    CompleteResult,
    LoadError,
    LoadReport,
    LoadStatus,
    SaveError,
    Task,
    TaskIndexError,
)

logger = logging.getLogger(__name__)

DEFAULT_TASKS_FILE = "tasks.dat"
FORMAT_VERSION = 1


def encode_tasks(tasks: Iterable[Task]) -> str:
    """Serialize tasks into the task file document (UTF-8 JSON, order preserved)."""
    doc = {
        "version": FORMAT_VERSION,
        "tasks": [t.to_record() for t in tasks],
    }
    return json.dumps(doc, ensure_ascii=False, indent=2) + "\n"


def decode_tasks(raw: str) -> list[Task]:
    """
    Parse a task file document.

    Accepted shapes:
    - {"version": 1, "tasks": [record, ...]}
    - [record, ...]   (bare list, e.g. hand-edited files)

    Every record is validated; a single bad one rejects the whole document.
    """
    try:
        data: Any = json.loads(raw)
    except (ValueError, RecursionError) as e:
        # RecursionError: pathologically nested arrays/objects.
        raise LoadError(f"task file is not valid JSON: {e}") from e

    if isinstance(data, dict):
        version = data.get("version")
        if type(version) is not int or version != FORMAT_VERSION:
            raise LoadError(f"unsupported task file version: {version!r}")
        records = data.get("tasks")
    else:
        records = data

    if not isinstance(records, list):
        raise LoadError(f"task file must hold a list of tasks, got {type(records).__name__}")

    tasks: list[Task] = []
    for i, rec in enumerate(records):
        try:
            tasks.append(Task.from_record(rec))
        except LoadError as e:
            raise LoadError(f"task #{i}: {e}") from e
    return tasks


class TaskStore:
    """
    Ordered in-memory task list persisted to a single JSON file.

    - insertion order is display order and survives save/load
    - duplicate descriptions are allowed
    - load/save each open, use and release the file within the call
    """

    def __init__(self, path: str | Path = DEFAULT_TASKS_FILE) -> None:
        self._path = Path(path)
        self._tasks: list[Task] = []
        logger.debug("TaskStore ready path=%s", self._path)

    @property
    def path(self) -> Path:
        return self._path

    def __len__(self) -> int:
        return len(self._tasks)

    def __iter__(self) -> Iterator[Task]:
        return iter(self.list_tasks())

    # ---- low-level helpers ----

    def _check_index(self, index: int) -> None:
        # Negative indices are out of range here, never "from the end".
        if not 0 <= index < len(self._tasks):
            raise TaskIndexError(index, len(self._tasks))

    # ---- public API ----

    def add_task(self, description: str) -> Task:
        task = Task.create(description)
        self._tasks.append(task)
        logger.debug("Task added index=%d description=%r", len(self._tasks) - 1, task.description)
        return task

    def mark_complete(self, index: int) -> CompleteResult:
        self._check_index(index)
        task = self._tasks[index]
        if task.is_complete():
            return CompleteResult.ALREADY_COMPLETE
        task.set_complete(True)
        logger.debug("Task completed index=%d", index)
        return CompleteResult.COMPLETED

    def remove_task(self, index: int) -> Task:
        self._check_index(index)
        task = self._tasks.pop(index)
        logger.debug("Task removed index=%d description=%r", index, task.description)
        return task

    def list_tasks(self) -> tuple[Task, ...]:
        """Snapshot of the current tasks in display order."""
        return tuple(self._tasks)

    def load(self) -> LoadReport:
        """
        Replace the in-memory list with the contents of the task file.

        Never raises: a missing file yields MISSING, an unreadable or
        malformed one yields CORRUPT with the LoadError attached. Both
        leave the store empty.
        """
        path = self._path
        if not path.exists():
            self._tasks = []
            logger.info("No task file at %s, starting with an empty list.", path)
            return LoadReport(LoadStatus.MISSING)

        try:
            with open(path, encoding="utf-8") as f:
                raw = f.read()
            tasks = decode_tasks(raw)
        except LoadError as e:
            e.path = path
            return self._load_failed(e)
        except (OSError, UnicodeDecodeError) as e:
            return self._load_failed(LoadError(f"cannot read task file: {e}", path))

        self._tasks = tasks
        logger.info("Loaded %d tasks from %s", len(tasks), path)
        return LoadReport(LoadStatus.LOADED, count=len(tasks))

    def _load_failed(self, err: LoadError) -> LoadReport:
        self._tasks = []
        logger.warning("Failed to load tasks from %s (%s). Starting fresh.", self._path, err)
        return LoadReport(LoadStatus.CORRUPT, error=err)

    def save(self) -> Path:
        """
        Write the full list to the task file, replacing previous contents.

        The document goes to a sibling *.tmp file first and is moved into
        place with os.replace, so a failed write leaves the old file intact.
        Raises SaveError; in-memory tasks are unaffected either way.
        """
        path = self._path
        tmp = path.with_name(path.name + ".tmp")
        payload = encode_tasks(self._tasks)

        try:
            path.parent.mkdir(parents=True, exist_ok=True)
            with open(tmp, "w", encoding="utf-8") as f:
                f.write(payload)
            os.replace(tmp, path)
        except OSError as e:
            with contextlib.suppress(OSError):
                tmp.unlink(missing_ok=True)
            logger.warning("Failed to save tasks to %s: %s", path, e)
            raise SaveError(f"cannot write task file: {e}", path) from e

        logger.info("Saved %d tasks to %s", len(self._tasks), path)
        return path

    list = list_tasks
