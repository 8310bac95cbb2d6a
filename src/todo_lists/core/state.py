# src/todo_lists/core/state.py

from __future__ import annotations

from dataclasses import dataclass, field

from ..tasks.list_store import ListStore
from .ports import StateRepo


@dataclass
class AppState:
    """
    Everything one invocation works with.

    The store (and with it the focus pointer) is passed around explicitly;
    there is no module-level "current list".
    """

    # Store Settings on the state for easy access in other modules later.
    settings: object

    repo: StateRepo
    store: ListStore = field(default_factory=ListStore)
