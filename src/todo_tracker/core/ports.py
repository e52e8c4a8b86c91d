# src/todo_tracker/core/ports.py

from __future__ import annotations

"""
Ports (interfaces) used by the menu.

Handlers depend on Protocols instead of stdin/stdout and the real terminal.
This keeps the loop headless-testable: tests plug in scripted consoles.
"""

from typing import Any, Protocol


class Console(Protocol):
    """Line-oriented text I/O. Every prompt reads exactly one whole line."""

    def read_line(self, prompt: str = "") -> str:
        """Return one line without its terminator; raise EOFError at end of input."""
        ...

    def write(self, text: str = "") -> None:
        """Write `text` followed by a newline."""
        ...


class Screen(Protocol):
    """Presentation glue: clearing the terminal and waiting for a keypress."""

    def clear(self) -> None: ...
    def pause(self, console: Console) -> None: ...


class TaskRepo(Protocol):
    capacity: Any

    def count_tasks(self) -> int: ...
    def is_full(self) -> bool: ...
    def add_task(self, description: str) -> int: ...
    def list_tasks(self) -> list[Any]: ...
    def mark_complete(self, position: int) -> Any: ...
