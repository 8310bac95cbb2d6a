# src/todo_lists/tasks/state_file.py

from __future__ import annotations

import contextlib
import json
import logging
import os
import tempfile
from pathlib import Path
from typing import Any

from ..core.errors import CorruptState, StoreIOError
from .dates import DueDate
from .list_store import ListStore
from .task_models import Task, TodoList

logger = logging.getLogger(__name__)

FORMAT_VERSION = 1


class StateFile:
    """
    JSON file holding the whole ListStore.

    - load(): missing file -> empty store; anything unparseable -> CorruptState
      (the file is left untouched so the user can inspect it)
    - save(): temp file in the same directory + fsync + os.replace, so readers
      see either the old file or the new one, never half of it

    Overlapping invocations are not locked: the last save wins.
    """

    def __init__(self, path: str | Path) -> None:
        self._path = Path(path)

    @property
    def path(self) -> Path:
        return self._path

    # ---- encoding ----

    @staticmethod
    def _task_to_dict(task: Task) -> dict[str, Any]:
        return {
            "description": task.description,
            "completed": task.completed,
            "due_date": task.due_date.to_iso() if task.due_date is not None else None,
        }

    def _store_to_dict(self, store: ListStore) -> dict[str, Any]:
        return {
            "version": FORMAT_VERSION,
            "focused": store.focused,
            "lists": [
                {"name": todo.name, "tasks": [self._task_to_dict(t) for t in todo.tasks]}
                for todo in store.lists.values()
            ],
        }

    # ---- decoding ----

    def _corrupt(self, reason: str) -> CorruptState:
        return CorruptState(self._path, reason)

    def _task_from_dict(self, raw: Any, where: str) -> Task:
        if not isinstance(raw, dict):
            raise self._corrupt(f"{where} is not an object")

        description = raw.get("description")
        if not isinstance(description, str) or not description.strip():
            raise self._corrupt(f"{where} has no description")

        completed = raw.get("completed", False)
        if not isinstance(completed, bool):
            raise self._corrupt(f"{where} has a non-boolean 'completed'")

        due_raw = raw.get("due_date")
        due_date: DueDate | None = None
        if due_raw is not None:
            if not isinstance(due_raw, str):
                raise self._corrupt(f"{where} has a non-string 'due_date'")
            try:
                due_date = DueDate.from_iso(due_raw)
            except ValueError as exc:
                raise self._corrupt(f"{where} has an invalid due_date {due_raw!r}") from exc

        return Task(description=description, completed=completed, due_date=due_date)

    def _store_from_dict(self, data: Any) -> ListStore:
        if not isinstance(data, dict):
            raise self._corrupt("top level is not an object")

        version = data.get("version", FORMAT_VERSION)
        if version != FORMAT_VERSION:
            raise self._corrupt(f"unsupported format version {version!r}")

        raw_lists = data.get("lists", [])
        if not isinstance(raw_lists, list):
            raise self._corrupt("'lists' is not an array")

        store = ListStore()
        for i, raw_list in enumerate(raw_lists):
            if not isinstance(raw_list, dict):
                raise self._corrupt(f"list #{i + 1} is not an object")
            name = raw_list.get("name")
            if not isinstance(name, str) or not name:
                raise self._corrupt(f"list #{i + 1} has no name")
            if name in store.lists:
                raise self._corrupt(f"duplicate list name {name!r}")
            raw_tasks = raw_list.get("tasks", [])
            if not isinstance(raw_tasks, list):
                raise self._corrupt(f"list {name!r} has a non-array 'tasks'")

            tasks = [
                self._task_from_dict(t, f"task #{j + 1} of list {name!r}")
                for j, t in enumerate(raw_tasks)
            ]
            store.lists[name] = TodoList(name=name, tasks=tasks)

        focused = data.get("focused")
        if focused is not None and not isinstance(focused, str):
            raise self._corrupt("'focused' is not a string")
        store.focused = focused

        previous = store.focused
        if store.repair_focus():
            logger.warning(
                "State file %s had focus %r; moved focus to %r", self._path, previous, store.focused
            )
        return store

    # ---- public API ----

    def load(self) -> ListStore:
        if not self._path.exists():
            logger.info("No state file at %s, starting empty", self._path)
            return ListStore()

        try:
            raw = self._path.read_text("utf-8")
        except (OSError, UnicodeDecodeError) as exc:
            raise StoreIOError(self._path, "read", exc) from exc

        try:
            data = json.loads(raw)
        except json.JSONDecodeError as exc:
            raise self._corrupt(f"invalid JSON ({exc.msg} at line {exc.lineno})") from exc

        store = self._store_from_dict(data)
        logger.info("Loaded %d list(s) from %s", len(store), self._path)
        return store

    def save(self, store: ListStore) -> None:
        payload = json.dumps(self._store_to_dict(store), ensure_ascii=False, indent=2)

        tmp_name: str | None = None
        try:
            self._path.parent.mkdir(parents=True, exist_ok=True)
            fd, tmp_name = tempfile.mkstemp(
                prefix=f".{self._path.name}.", suffix=".tmp", dir=str(self._path.parent)
            )
            with os.fdopen(fd, "w", encoding="utf-8") as f:
                f.write(payload)
                f.write("\n")
                f.flush()
                os.fsync(f.fileno())
            os.replace(tmp_name, self._path)
            tmp_name = None
        except OSError as exc:
            logger.error("Failed to save state to %s: %s", self._path, exc)
            raise StoreIOError(self._path, "write", exc) from exc
        finally:
            if tmp_name is not None:
                with contextlib.suppress(OSError):
                    os.unlink(tmp_name)

        logger.info("Saved %d list(s) to %s", len(store), self._path)
