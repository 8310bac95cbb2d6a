# src/todo_lists/cli/bootstrap.py

"""
CLI bootstrap helpers.

This module is the "composition root":
- takes settings (injected, or loaded once),
- wires the concrete StateFile into AppState,
- loads the store so the command can run one operation on it.
"""

from __future__ import annotations

import logging

from ..config import get_settings
from ..core.state import AppState
from ..tasks import task_api
from ..tasks.state_file import StateFile

logger = logging.getLogger(__name__)


def create_initial_state(*, settings=None) -> AppState:
    """
    Create AppState from the provided settings and load the persisted store.

    Keeping settings injectable makes the app easier to test and avoids hidden global config reads.
    If settings is None, falls back to get_settings().
    """
    if settings is None:
        settings = get_settings()

    state = AppState(settings=settings, repo=StateFile(settings.state_path))
    task_api.load(state)
    logger.debug("State ready path=%s lists=%d", settings.state_path, len(state.store))
    return state
