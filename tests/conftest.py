# tests/conftest.py

from __future__ import annotations

from pathlib import Path
from types import SimpleNamespace

import pytest

from todo_tracker.cli.bootstrap import create_initial_state
from todo_tracker.core.state import AppState

from .fakes import RecordingScreen, ScriptedConsole


@pytest.fixture()
def settings(tmp_path: Path) -> SimpleNamespace:
    """
    Minimal settings object compatible with AppState and bootstrap.

    We intentionally use a SimpleNamespace rather than reading the environment,
    to keep unit tests isolated and deterministic.
    """
    return SimpleNamespace(
        app_title="C To-Do List",
        log_level="WARNING",
        log_file_enabled=False,
        data_dir=tmp_path / "todo",
        capacity=50,
        max_description_length=149,
        allow_empty_description=True,
        # Headless: no clearing, no pausing
        clear_screen=False,
        pause_after_action=False,
    )


@pytest.fixture()
def console() -> ScriptedConsole:
    return ScriptedConsole()


@pytest.fixture()
def screen() -> RecordingScreen:
    return RecordingScreen()


@pytest.fixture()
def state(settings: SimpleNamespace, console: ScriptedConsole, screen: RecordingScreen) -> AppState:
    """AppState wired with a scripted console and a recording screen."""
    return create_initial_state(settings=settings, console=console, screen=screen)
