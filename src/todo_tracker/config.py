# src/todo_tracker/config.py

"""Centralized settings loaded from environment variables (+ optional .env).

Design goals:
- One Settings object for the whole app.
- Every value has a default, so the tracker runs with no configuration at all.
- Presentation switches (clear/pause) default to "on" only for a real terminal.
"""

from __future__ import annotations

import os
import sys
from dataclasses import dataclass
from pathlib import Path

from dotenv import load_dotenv

ENV_PREFIX = "TODO"

DEFAULT_APP_TITLE = "C To-Do List"
DEFAULT_CAPACITY = 50
DEFAULT_MAX_DESCRIPTION_LENGTH = 149


def _k(suffix: str) -> str:
    """Build env var name with the project prefix."""
    return f"{ENV_PREFIX}_{suffix}"


def _env(name: str, default: str = "") -> str:
    v = os.getenv(name)
    return default if v is None else v


def _env_bool(name: str, default: bool) -> bool:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    return raw.strip().lower() in {"1", "true", "yes", "y", "on"}


def _env_int(name: str, default: int, *, minimum: int | None = None) -> int:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    try:
        value = int(raw)
    except ValueError:
        return default
    if minimum is not None and value < minimum:
        return default
    return value


def _env_path(name: str, default: Path) -> Path:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    return Path(raw).expanduser()


def _isatty(stream) -> bool:
    try:
        return bool(stream.isatty())
    except Exception:
        return False


@dataclass(frozen=True, slots=True)
class Settings:
    # ---- App / logging ----
    app_title: str
    log_level: str
    log_file_enabled: bool
    data_dir: Path

    # ---- Task store ----
    capacity: int
    max_description_length: int
    allow_empty_description: bool

    # ---- Presentation ----
    clear_screen: bool
    pause_after_action: bool

    @property
    def log_file_path(self) -> Path:
        return self.data_dir / "todo.log"

    @staticmethod
    def from_env(*, load_env_file: bool = True) -> "Settings":
        if load_env_file:
            load_dotenv(override=False)

        app_title = _env(_k("APP_TITLE"), DEFAULT_APP_TITLE).strip() or DEFAULT_APP_TITLE
        log_level = _env(_k("LOG_LEVEL"), "WARNING").strip().upper() or "WARNING"
        log_file_enabled = _env_bool(_k("LOG_FILE_ENABLED"), True)
        data_dir = _env_path(_k("DATA_DIR"), Path(".local/todo"))

        capacity = _env_int(_k("CAPACITY"), DEFAULT_CAPACITY, minimum=1)
        max_description_length = _env_int(
            _k("MAX_DESCRIPTION_LENGTH"), DEFAULT_MAX_DESCRIPTION_LENGTH, minimum=1
        )
        allow_empty_description = _env_bool(_k("ALLOW_EMPTY_DESCRIPTION"), True)

        clear_screen = _env_bool(_k("CLEAR_SCREEN"), _isatty(sys.stdout))
        pause_after_action = _env_bool(_k("PAUSE"), _isatty(sys.stdin))

        return Settings(
            app_title=app_title,
            log_level=log_level,
            log_file_enabled=log_file_enabled,
            data_dir=data_dir,
            capacity=capacity,
            max_description_length=max_description_length,
            allow_empty_description=allow_empty_description,
            clear_screen=clear_screen,
            pause_after_action=pause_after_action,
        )


_SETTINGS: Settings | None = None


def get_settings() -> Settings:
    """Return the process-wide Settings, reading the environment on first use."""
    global _SETTINGS
    if _SETTINGS is None:
        _SETTINGS = Settings.from_env()
    return _SETTINGS
