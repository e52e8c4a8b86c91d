# src/todo_tracker/tasks/errors.py

"""
User-facing error taxonomy.

Every error carries the exact message shown to the user; str(err) returns it.
None of them is fatal except InputClosed, which ends the menu loop.
"""

from __future__ import annotations


class TodoError(Exception):
    default_message = "Something went wrong."

    def __init__(self, message: str | None = None) -> None:
        super().__init__(message or self.default_message)

    @property
    def message(self) -> str:
        return str(self.args[0])


class InvalidChoice(TodoError):
    default_message = "Invalid choice."


class CapacityExceeded(TodoError):
    default_message = "Sorry, the to-do list is full."


class EmptyStore(TodoError):
    default_message = "You have no tasks to mark."


class InvalidPosition(TodoError):
    default_message = "Invalid task number."


class MalformedInput(TodoError):
    default_message = "Error: Invalid input. Please enter a number."


class InvalidDescription(TodoError):
    default_message = "Task description cannot be empty."


class InputClosed(TodoError):
    default_message = "Input stream closed."
