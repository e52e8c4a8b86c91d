# src/todo_tracker/tasks/task_api.py

from __future__ import annotations

import logging
import re

from ..core.state import AppState
from .errors import MalformedInput, TodoError
from .task_models import MarkOutcome

logger = logging.getLogger(__name__)

_INT_RE = re.compile(r"[+-]?[0-9]+")


def parse_int(raw: str, *, error: type[TodoError] = MalformedInput) -> int:
    """
    Parse one line of user input as a base-10 integer.

    Surrounding whitespace is ignored. Only an optional sign followed by ASCII
    digits is accepted; anything else raises `error`, so the whole offending
    line is discarded with it.
    """
    text = raw.strip()
    if not _INT_RE.fullmatch(text):
        logger.debug("Not an integer: %r", raw)
        raise error()
    return int(text, 10)


def add_task_from_input(state: AppState, raw_line: str) -> int:
    """
    Convenience helper: add the task described by one raw input line.
    Uses state.task_store (already constructed in bootstrap).
    """
    return state.task_store.add_task(raw_line)


def mark_task_from_input(state: AppState, raw_token: str) -> MarkOutcome:
    """Parse a position token and mark that task complete."""
    position = parse_int(raw_token)
    return state.task_store.mark_complete(position)
