# src/todo_lists/core/ports.py

from __future__ import annotations

"""
Ports (interfaces) used by the core.

The task API depends on this Protocol instead of StateFile, so tests can swap
in an in-memory repo and the on-disk format stays replaceable.
"""

from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from ..tasks.list_store import ListStore


class StateRepo(Protocol):
    """Loads and saves the whole ListStore in one piece."""

    def load(self) -> ListStore: ...
    def save(self, store: ListStore) -> None: ...
