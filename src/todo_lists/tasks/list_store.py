# src/todo_lists/tasks/list_store.py

from __future__ import annotations

import logging
import re
from dataclasses import dataclass, field

from ..core.errors import DuplicateName, InvalidName, NoFocusedList, NotFound
from .task_models import TodoList

logger = logging.getLogger(__name__)

_NAME_RE = re.compile(r"[A-Za-z0-9][A-Za-z0-9_-]*")


def is_valid_name(name: str) -> bool:
    return bool(name) and _NAME_RE.fullmatch(name) is not None


@dataclass(slots=True)
class ListStore:
    """
    All lists keyed by name plus the focus pointer.

    Invariant: `focused` names an existing list whenever `lists` is non-empty,
    and is None otherwise. Every mutation below keeps it that way.
    """

    lists: dict[str, TodoList] = field(default_factory=dict)
    focused: str | None = None

    def __len__(self) -> int:
        return len(self.lists)

    def __contains__(self, name: object) -> bool:
        return name in self.lists

    def names(self) -> list[str]:
        """List names in display order (plain code-point sort)."""
        return sorted(self.lists)

    def _first_name(self) -> str | None:
        names = self.names()
        return names[0] if names else None

    # ---- lookups ----

    def get_list(self, name: str) -> TodoList:
        todo = self.lists.get(name)
        if todo is None:
            raise NotFound(name)
        return todo

    def get_focused(self) -> TodoList:
        if self.focused is None:
            raise NoFocusedList()
        return self.get_list(self.focused)

    def resolve(self, name: str | None) -> TodoList:
        """The named list, or the focused one when no name is given."""
        return self.get_focused() if name is None else self.get_list(name)

    # ---- list lifecycle ----

    def create_list(self, name: str) -> TodoList:
        if not is_valid_name(name):
            raise InvalidName(name)
        if name in self.lists:
            raise DuplicateName(name)

        todo = TodoList(name=name)
        self.lists[name] = todo
        if self.focused is None:
            self.focused = name
        logger.debug("Created list %s (focused=%s)", name, self.focused)
        return todo

    def delete_list(self, name: str) -> TodoList:
        if name not in self.lists:
            raise NotFound(name)

        removed = self.lists.pop(name)
        if self.focused is None or self.focused == name:
            self.focused = self._first_name()
            logger.debug("Deleted focused list %s, focus -> %s", name, self.focused)
        else:
            logger.debug("Deleted list %s", name)
        return removed

    def focus_list(self, name: str) -> None:
        if name not in self.lists:
            raise NotFound(name)
        self.focused = name

    def list_lists(self) -> list[tuple[str, bool]]:
        return [(n, n == self.focused) for n in self.names()]

    def repair_focus(self) -> bool:
        """
        Re-establish the focus invariant after loading foreign data.
        Returns True if the pointer had to change.
        """
        if self.focused is not None and self.focused in self.lists:
            return False
        new_focus = self._first_name()
        if new_focus == self.focused:
            return False
        self.focused = new_focus
        return True
