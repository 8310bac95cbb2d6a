# src/todo_lists/core/errors.py

"""
Error kinds raised by the store and the persistence layer.

User-input errors (bad names, indices, dates) are reported and nothing is saved.
`environmental` errors (CorruptState, StoreIOError) mean the state file itself
is the problem; the CLI surfaces their cause instead of swallowing it.
"""

from __future__ import annotations


class TodoError(Exception):
    """Base class for every error the core reports to the command layer."""

    environmental = False


class InvalidName(TodoError):
    def __init__(self, name: str) -> None:
        super().__init__(
            f"Invalid list name {name!r}: must start with a letter or digit and "
            "contain only letters, digits, '-' and '_'."
        )
        self.name = name


class DuplicateName(TodoError):
    def __init__(self, name: str) -> None:
        super().__init__(f"Cannot create list {name!r}, a list already exists with this name.")
        self.name = name


class NotFound(TodoError):
    def __init__(self, name: str) -> None:
        super().__init__(f"No list named {name!r} exists.")
        self.name = name


class NoFocusedList(NotFound):
    def __init__(self) -> None:
        TodoError.__init__(self, "No list is focused; create one with 'todo create <name>'.")
        self.name = None


class IndexOutOfRange(TodoError):
    def __init__(self, index: int, count: int) -> None:
        if count == 0:
            msg = f"Task index {index} is out of range: the list is empty."
        else:
            msg = f"Task index {index} is out of range (1..{count})."
        super().__init__(msg)
        self.index = index
        self.count = count


class EmptyDescription(TodoError):
    def __init__(self) -> None:
        super().__init__("Task description must not be empty.")


class InvalidDate(TodoError):
    def __init__(self, given: str, reason: str) -> None:
        super().__init__(f"Could not parse date from {given!r}. {reason}")
        self.given = given
        self.reason = reason


class CorruptState(TodoError):
    environmental = True

    def __init__(self, path: object, reason: str) -> None:
        super().__init__(f"State file {path} is corrupt: {reason}")
        self.path = path
        self.reason = reason


class StoreIOError(TodoError):
    environmental = True

    def __init__(self, path: object, action: str, cause: BaseException | None = None) -> None:
        detail = f": {cause}" if cause is not None else ""
        super().__init__(f"Failed to {action} state file {path}{detail}")
        self.path = path
        self.action = action
