# src/todo_lists/cli/render.py

from __future__ import annotations

from collections.abc import Sequence

from ..tasks.task_models import TaskRow

MARK_DONE = "✓"
MARK_OPEN = "✕"


def format_row(row: TaskRow, width: int) -> str:
    mark = MARK_DONE if row.completed else MARK_OPEN
    due = f" [{row.due_date}]" if row.due_date is not None else ""
    return f"{row.index:>{width}} | {mark}{due} {row.description}"


def format_list(name: str, rows: Sequence[TaskRow]) -> str:
    """
    -- school --
    1 | ✕ write essay
    2 | ✓ [03/17/2024] lab report
    """
    lines = [f"-- {name} --"]
    width = len(str(len(rows)))
    lines.extend(format_row(r, width) for r in rows)
    if not rows:
        lines.append("(no tasks)")
    return "\n".join(lines)


def format_lists(pairs: Sequence[tuple[str, bool]]) -> str:
    if not pairs:
        return "No lists yet. Create one with: todo create <name>"
    return "\n".join(f"{'*' if focused else ' '} {name}" for name, focused in pairs)
