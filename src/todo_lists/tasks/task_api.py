# src/todo_lists/tasks/task_api.py

"""
Operations the command layer calls.

Each function mutates `state.store` in memory only and either returns a value
or raises a TodoError. Persisting is a separate, final `commit(state)`, so a
failed operation never reaches the disk.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Sequence
from datetime import date

from ..core.state import AppState
from .dates import DueDate, parse_date
from .task_models import Task, TaskRow, TodoList

logger = logging.getLogger(__name__)


def load(state: AppState) -> None:
    state.store = state.repo.load()


def commit(state: AppState) -> None:
    state.repo.save(state.store)


# ---- lists ----


def create_list(state: AppState, name: str) -> None:
    state.store.create_list(name)
    logger.info("Created list %s", name)


def get_list(state: AppState, name: str) -> TodoList:
    """Lookup used by the confirmation prompt before delete_list."""
    return state.store.get_list(name)


def delete_list(state: AppState, name: str) -> str | None:
    """Delete a list; returns the (possibly new) focused list name."""
    state.store.delete_list(name)
    logger.info("Deleted list %s; focused=%s", name, state.store.focused)
    return state.store.focused


def focus_list(state: AppState, name: str) -> None:
    state.store.focus_list(name)
    logger.info("Focused list %s", name)


def list_lists(state: AppState) -> list[tuple[str, bool]]:
    return state.store.list_lists()


# ---- tasks ----


def list_tasks(
    state: AppState, name: str | None = None, show_all: bool = False
) -> list[tuple[str, list[TaskRow]]]:
    """
    Rows for one list (named, else focused) or, with show_all, for every list
    in display order. Indices in the rows are the ones drop/complete accept.
    """
    store = state.store
    if show_all:
        return [(n, store.lists[n].rows()) for n in store.names()]
    todo = store.resolve(name)
    return [(todo.name, todo.rows())]


def add_tasks(
    state: AppState,
    descriptions: Sequence[str],
    date_text: str | None = None,
    list_name: str | None = None,
    today: date | None = None,
) -> list[Task]:
    todo = state.store.resolve(list_name)
    due_date: DueDate | None = None
    if date_text is not None:
        due_date = parse_date(date_text, today=today)
    added = todo.add_tasks(descriptions, due_date)
    logger.info("Added %d task(s) to %s", len(added), todo.name)
    return added


def drop_tasks(state: AppState, indices: Iterable[int], list_name: str | None = None) -> list[Task]:
    todo = state.store.resolve(list_name)
    dropped = todo.drop_tasks(indices)
    logger.info("Dropped %d task(s) from %s", len(dropped), todo.name)
    return dropped


def complete_tasks(
    state: AppState, indices: Iterable[int], list_name: str | None = None
) -> list[Task]:
    todo = state.store.resolve(list_name)
    return todo.complete(indices)


def uncomplete_tasks(
    state: AppState, indices: Iterable[int], list_name: str | None = None
) -> list[Task]:
    todo = state.store.resolve(list_name)
    return todo.uncomplete(indices)
