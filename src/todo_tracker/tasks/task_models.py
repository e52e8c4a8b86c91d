# src/todo_tracker/tasks/task_models.py

from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum


class TaskStatus(StrEnum):
    """
    Task lifecycle status.

    The only transition is INCOMPLETE -> COMPLETE; COMPLETE is terminal.
    """

    INCOMPLETE = "incomplete"
    COMPLETE = "complete"


class MarkOutcome(StrEnum):
    MARKED = "marked"
    ALREADY_COMPLETE = "already_complete"


@dataclass(slots=True)
class Task:
    description: str
    status: TaskStatus = TaskStatus.INCOMPLETE

    @property
    def is_complete(self) -> bool:
        return self.status is TaskStatus.COMPLETE


@dataclass(frozen=True, slots=True)
class TaskView:
    """Read-only snapshot of a stored task at its current 1-based position."""

    position: int
    description: str
    is_complete: bool

    @property
    def checkbox(self) -> str:
        return "X" if self.is_complete else " "
