# src/todo_tracker/cli/bootstrap.py

"""
CLI bootstrap helpers.

This module is the "composition root":
- loads settings once,
- wires the task store and the console/screen implementations into AppState.
"""

from __future__ import annotations

import logging

from ..config import get_settings
from ..connectors.terminal import StdConsole, build_screen
from ..core.ports import Console, Screen
from ..core.state import AppState
from ..tasks.task_store import TaskStore

logger = logging.getLogger(__name__)


def create_initial_state(
    *,
    settings=None,
    console: Console | None = None,
    screen: Screen | None = None,
) -> AppState:
    """
    Create AppState from the provided settings.

    Keeping settings, console and screen injectable makes the app easy to test
    and avoids hidden global config reads.
    If settings is None, falls back to get_settings().
    """
    if settings is None:
        settings = get_settings()

    task_store = TaskStore(
        settings.capacity,
        max_description_length=settings.max_description_length,
        allow_empty_description=settings.allow_empty_description,
    )

    state = AppState(
        settings=settings,
        task_store=task_store,
        console=console if console is not None else StdConsole(),
        screen=screen if screen is not None else build_screen(settings),
    )
    logger.debug(
        "State created capacity=%s screen=%s",
        task_store.capacity,
        type(state.screen).__name__,
    )
    return state
