# tests/conftest.py

from __future__ import annotations

import logging
from datetime import date
from pathlib import Path

import pytest

from todo_lists.config import Settings
from todo_lists.core.state import AppState
from todo_lists.tasks.state_file import StateFile


@pytest.fixture()
def settings(tmp_path: Path) -> Settings:
    """
    Settings pointing at tmp_path.

    Built directly rather than from the environment, so a developer's
    ~/.todo or TODO_* variables never leak into tests.
    """
    return Settings(
        app_name="todo",
        log_level="WARNING",
        log_to_file=False,
        data_dir=tmp_path,
        state_path=tmp_path / "lists.json",
        log_path=tmp_path / "todo.log",
    )


@pytest.fixture()
def state(settings: Settings) -> AppState:
    """
    AppState wired to a real StateFile under tmp_path.

    NOTE: the real JSON file is used because round-trip fidelity is part of
    what we want to test.
    """
    return AppState(settings=settings, repo=StateFile(settings.state_path))


@pytest.fixture()
def today() -> date:
    return date(2024, 5, 1)


@pytest.fixture(autouse=True)
def _restore_root_logging():
    """The CLI reconfigures the root logger on every invoke; undo that per test."""
    root = logging.getLogger()
    saved_handlers = list(root.handlers)
    saved_level = root.level
    yield
    for h in list(root.handlers):
        if h not in saved_handlers:
            root.removeHandler(h)
    for h in saved_handlers:
        if h not in root.handlers:
            root.addHandler(h)
    root.setLevel(saved_level)
    logging.captureWarnings(False)
