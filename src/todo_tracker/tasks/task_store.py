# src/todo_tracker/tasks/task_store.py

from __future__ import annotations

import logging
import threading

from ..config import DEFAULT_CAPACITY, DEFAULT_MAX_DESCRIPTION_LENGTH
from .errors import CapacityExceeded, EmptyStore, InvalidDescription, InvalidPosition
from .task_models import MarkOutcome, Task, TaskStatus, TaskView

logger = logging.getLogger(__name__)


class TaskStore:
    """
    In-memory, bounded, ordered task store.

    - tasks are only ever appended; order is insertion order
    - positions are 1-based and derived from the current order
    - count never exceeds capacity
    - nothing is persisted; the store lives as long as its owner

    Thread-safety:
    - mutation and iteration run under one re-entrant lock
    """

    def __init__(
        self,
        capacity: int = DEFAULT_CAPACITY,
        *,
        max_description_length: int = DEFAULT_MAX_DESCRIPTION_LENGTH,
        allow_empty_description: bool = True,
    ) -> None:
        if capacity < 1:
            raise ValueError("capacity must be >= 1")
        if max_description_length < 1:
            raise ValueError("max_description_length must be >= 1")

        self._capacity = int(capacity)
        self._max_description_length = int(max_description_length)
        self._allow_empty_description = allow_empty_description
        self._tasks: list[Task] = []
        self._lock = threading.RLock()
        logger.debug(
            "TaskStore ready capacity=%s max_description_length=%s allow_empty=%s",
            self._capacity,
            self._max_description_length,
            self._allow_empty_description,
        )

    @property
    def capacity(self) -> int:
        return self._capacity

    # ---- helpers ----

    def _normalize_description(self, description: str) -> str:
        text = description.rstrip("\r\n")
        if len(text) > self._max_description_length:
            logger.debug(
                "Description truncated from %s to %s chars",
                len(text),
                self._max_description_length,
            )
            text = text[: self._max_description_length]
        return text

    def _check_position(self, position: int) -> int:
        if not self._tasks:
            raise EmptyStore()
        if position < 1 or position > len(self._tasks):
            raise InvalidPosition()
        return position - 1

    # ---- public API ----

    def count_tasks(self) -> int:
        with self._lock:
            return len(self._tasks)

    def is_full(self) -> bool:
        with self._lock:
            return len(self._tasks) >= self._capacity

    def add_task(self, description: str) -> int:
        """
        Append a new incomplete task and return its 1-based position.

        Raises CapacityExceeded when the store is full, and InvalidDescription
        for a blank description when blank descriptions are disallowed.
        """
        with self._lock:
            if len(self._tasks) >= self._capacity:
                logger.info("Add rejected: store full (capacity=%s)", self._capacity)
                raise CapacityExceeded()

            text = self._normalize_description(description)
            if not self._allow_empty_description and not text.strip():
                raise InvalidDescription()

            self._tasks.append(Task(description=text))
            position = len(self._tasks)
            logger.debug("Task added position=%s len=%s", position, len(text))
            return position

    def list_tasks(self) -> list[TaskView]:
        with self._lock:
            return [
                TaskView(position=i, description=t.description, is_complete=t.is_complete)
                for i, t in enumerate(self._tasks, start=1)
            ]

    def mark_complete(self, position: int) -> MarkOutcome:
        """
        Mark the task at `position` complete.

        Idempotent: an already complete task is left as is and reported
        as MarkOutcome.ALREADY_COMPLETE.
        """
        with self._lock:
            idx = self._check_position(position)
            task = self._tasks[idx]
            if task.is_complete:
                logger.debug("Task already complete position=%s", position)
                return MarkOutcome.ALREADY_COMPLETE

            task.status = TaskStatus.COMPLETE
            logger.debug("Task marked complete position=%s", position)
            return MarkOutcome.MARKED
