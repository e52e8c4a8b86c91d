# src/todo_tracker/core/state.py

from __future__ import annotations

from dataclasses import dataclass

from .ports import Console, Screen, TaskRepo


@dataclass
class AppState:
    # Settings are kept on the state so handlers never read global config.
    settings: object

    task_store: TaskRepo
    console: Console
    screen: Screen
