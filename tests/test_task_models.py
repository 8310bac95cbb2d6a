# tests/test_task_models.py

from __future__ import annotations

import pytest

from todo_lists.core.errors import EmptyDescription, IndexOutOfRange
from todo_lists.tasks.dates import DueDate
from todo_lists.tasks.task_models import TodoList


def _descriptions(todo: TodoList) -> list[str]:
    return [t.description for _, t in todo.sorted_view()]


def test_dated_tasks_sort_ascending() -> None:
    todo = TodoList("school")
    todo.add_tasks(["apr"], DueDate(2024, 4, 30))
    todo.add_tasks(["feb"], DueDate(2024, 2, 14))
    todo.add_tasks(["jun"], DueDate(2024, 6, 25))

    assert _descriptions(todo) == ["feb", "apr", "jun"]
    assert [i for i, _ in todo.sorted_view()] == [1, 2, 3]


def test_undated_first_in_insertion_order() -> None:
    todo = TodoList("home")
    todo.add_tasks(["undated-1"])
    todo.add_tasks(["dated"], DueDate(2024, 1, 5))
    todo.add_tasks(["undated-2"])

    assert _descriptions(todo) == ["undated-1", "undated-2", "dated"]


def test_same_date_keeps_insertion_order() -> None:
    todo = TodoList("home")
    d = DueDate(2024, 3, 1)
    todo.add_tasks(["a", "b"], d)
    todo.add_tasks(["c"], d)
    assert _descriptions(todo) == ["a", "b", "c"]


def test_year_beats_month() -> None:
    todo = TodoList("home")
    todo.add_tasks(["next-jan"], DueDate(2025, 1, 10))
    todo.add_tasks(["this-dec"], DueDate(2024, 12, 10))
    assert _descriptions(todo) == ["this-dec", "next-jan"]


def test_add_rejects_blank_description_and_adds_nothing() -> None:
    todo = TodoList("home")
    with pytest.raises(EmptyDescription):
        todo.add_tasks(["ok", "   "])
    assert len(todo) == 0


def test_add_strips_descriptions() -> None:
    todo = TodoList("home")
    todo.add_tasks(["  buy milk "])
    assert todo.tasks[0].description == "buy milk"
    assert todo.tasks[0].completed is False


def test_drop_resolves_all_indices_against_one_view() -> None:
    todo = TodoList("home")
    todo.add_tasks(["third"], DueDate(2024, 9, 1))
    todo.add_tasks(["first"])
    todo.add_tasks(["second"], DueDate(2024, 1, 1))
    assert _descriptions(todo) == ["first", "second", "third"]

    dropped = todo.drop_tasks({1, 2})

    assert [t.description for t in dropped] == ["first", "second"]
    assert _descriptions(todo) == ["third"]


def test_drop_order_of_indices_does_not_matter() -> None:
    todo = TodoList("home")
    todo.add_tasks(["a", "b", "c", "d"])
    todo.drop_tasks([4, 1, 3])
    assert _descriptions(todo) == ["b"]


def test_drop_removes_only_the_addressed_duplicate() -> None:
    todo = TodoList("home")
    todo.add_tasks(["same", "same"])
    todo.drop_tasks([2])
    assert len(todo) == 1


def test_duplicate_indices_collapse() -> None:
    todo = TodoList("home")
    todo.add_tasks(["a", "b"])
    dropped = todo.drop_tasks([1, 1])
    assert len(dropped) == 1
    assert _descriptions(todo) == ["b"]


@pytest.mark.parametrize("bad", [0, 4, -1])
def test_out_of_range_index_changes_nothing(bad: int) -> None:
    todo = TodoList("home")
    todo.add_tasks(["a", "b", "c"])

    with pytest.raises(IndexOutOfRange):
        todo.drop_tasks([1, bad])
    with pytest.raises(IndexOutOfRange):
        todo.complete([2, bad])

    assert _descriptions(todo) == ["a", "b", "c"]
    assert not any(t.completed for t in todo.tasks)


def test_index_on_empty_list() -> None:
    todo = TodoList("home")
    with pytest.raises(IndexOutOfRange) as exc_info:
        todo.complete([1])
    assert exc_info.value.count == 0


def test_complete_and_uncomplete_do_not_reorder() -> None:
    todo = TodoList("home")
    todo.add_tasks(["b"], DueDate(2024, 2, 1))
    todo.add_tasks(["a"])
    todo.add_tasks(["c"], DueDate(2024, 3, 1))

    todo.complete([1, 3])
    rows = todo.rows()
    assert [(r.index, r.description, r.completed) for r in rows] == [
        (1, "a", True),
        (2, "b", False),
        (3, "c", True),
    ]

    todo.uncomplete([3])
    assert [r.completed for r in todo.rows()] == [True, False, False]


def test_rows_carry_due_date() -> None:
    todo = TodoList("home")
    d = DueDate(2024, 3, 17)
    todo.add_tasks(["x"], d)
    (row,) = todo.rows()
    assert row.index == 1
    assert row.due_date == d
