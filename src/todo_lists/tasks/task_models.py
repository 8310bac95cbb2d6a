# src/todo_lists/tasks/task_models.py

from __future__ import annotations

import logging
from collections.abc import Iterable, Sequence
from dataclasses import dataclass, field
from typing import NamedTuple

from ..core.errors import EmptyDescription, IndexOutOfRange
from .dates import DueDate

logger = logging.getLogger(__name__)


@dataclass(slots=True)
class Task:
    description: str
    completed: bool = False
    due_date: DueDate | None = None


class TaskRow(NamedTuple):
    """One displayed line of a list: what `view` prints and what indices refer to."""

    index: int
    completed: bool
    due_date: DueDate | None
    description: str


def _sort_key(task: Task) -> tuple:
    # Undated first; dated ascending. sorted() is stable, so ties keep insertion order.
    if task.due_date is None:
        return (0,)
    return (1, task.due_date)


@dataclass(slots=True)
class TodoList:
    """
    A named list of tasks.

    `tasks` is kept in insertion order. The order users see (and the indices
    they type) is always derived by `sorted_view()` and never stored.
    """

    name: str
    tasks: list[Task] = field(default_factory=list)

    def __len__(self) -> int:
        return len(self.tasks)

    # ---- ordering ----

    def sorted_view(self) -> list[tuple[int, Task]]:
        """Fresh 1-based (index, task) pairs in presentation order."""
        ordered = sorted(self.tasks, key=_sort_key)
        return list(enumerate(ordered, start=1))

    def rows(self) -> list[TaskRow]:
        return [
            TaskRow(index=i, completed=t.completed, due_date=t.due_date, description=t.description)
            for i, t in self.sorted_view()
        ]

    def _resolve(self, indices: Iterable[int]) -> list[Task]:
        """
        Map indices onto tasks using one snapshot of the sorted view.

        Every index is checked before anything is returned, so a bad index
        leaves the list untouched. Duplicates collapse.
        """
        view = self.sorted_view()
        count = len(view)
        picked: list[Task] = []
        seen: set[int] = set()
        for raw in indices:
            idx = int(raw)
            if not 1 <= idx <= count:
                raise IndexOutOfRange(idx, count)
            if idx in seen:
                continue
            seen.add(idx)
            picked.append(view[idx - 1][1])
        return picked

    # ---- task CRUD ----

    def add_tasks(self, descriptions: Sequence[str], due_date: DueDate | None = None) -> list[Task]:
        cleaned: list[str] = []
        for d in descriptions:
            if not d or not d.strip():
                raise EmptyDescription()
            cleaned.append(d.strip())

        added = [Task(description=d, due_date=due_date) for d in cleaned]
        self.tasks.extend(added)
        logger.debug("List %s: added %d task(s) due=%s", self.name, len(added), due_date)
        return added

    def drop_tasks(self, indices: Iterable[int]) -> list[Task]:
        doomed = self._resolve(indices)
        doomed_ids = {id(t) for t in doomed}
        # Remove by identity: equal-looking tasks elsewhere in the list must survive.
        self.tasks = [t for t in self.tasks if id(t) not in doomed_ids]
        logger.debug("List %s: dropped %d task(s)", self.name, len(doomed))
        return doomed

    def set_completed(self, indices: Iterable[int], completed: bool) -> list[Task]:
        picked = self._resolve(indices)
        for t in picked:
            t.completed = completed
        logger.debug("List %s: completed=%s for %d task(s)", self.name, completed, len(picked))
        return picked

    def complete(self, indices: Iterable[int]) -> list[Task]:
        return self.set_completed(indices, True)

    def uncomplete(self, indices: Iterable[int]) -> list[Task]:
        return self.set_completed(indices, False)
