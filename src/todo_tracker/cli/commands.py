# src/todo_tracker/cli/commands.py

from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import dataclass

from ..core.state import AppState
from ..tasks.errors import (
    CapacityExceeded,
    EmptyStore,
    InputClosed,
    InvalidChoice,
    InvalidDescription,
    InvalidPosition,
    MalformedInput,
)
from ..tasks.task_api import add_task_from_input, mark_task_from_input, parse_int
from ..tasks.task_models import MarkOutcome, TaskView

MenuHandler = Callable[[AppState], None]

logger = logging.getLogger(__name__)

CHOICE_PROMPT = "Enter your choice: "
DESCRIPTION_PROMPT = "Enter task description: "
POSITION_PROMPT = "\nWhich task number do you want to mark as complete? "


@dataclass(frozen=True, slots=True)
class MenuEntry:
    number: int
    label: str
    handler: MenuHandler
    exits: bool = False


class MenuRegistry:
    """Numbered menu used by the console loop (1. Add, 2. View, ...)."""

    def __init__(self) -> None:
        self._entries: dict[int, MenuEntry] = {}

    def register(
        self,
        number: int,
        handler: MenuHandler,
        label: str,
        *,
        exits: bool = False,
    ) -> None:
        if number in self._entries:
            raise ValueError(f"menu number {number} already registered")
        self._entries[number] = MenuEntry(number=number, label=label, handler=handler, exits=exits)

    def entries(self) -> list[MenuEntry]:
        return [self._entries[n] for n in sorted(self._entries)]

    def _bounds(self) -> tuple[int, int]:
        numbers = sorted(self._entries)
        if not numbers:
            return 0, 0
        return numbers[0], numbers[-1]

    def resolve(self, raw: str) -> MenuEntry:
        """
        Map one raw input line to a menu entry.
        Raises InvalidChoice for non-numeric input or an unknown number.
        """
        lo, hi = self._bounds()
        try:
            choice = parse_int(raw)
        except MalformedInput:
            raise InvalidChoice(
                f"Error: Invalid input. Please enter a number ({lo}-{hi})."
            ) from None

        entry = self._entries.get(choice)
        if entry is None:
            raise InvalidChoice(f"\nInvalid choice. Please pick a number from {lo} to {hi}.")
        return entry

    def build_menu(self, title: str) -> list[str]:
        lines = ["", f"--- {title} ---"]
        for entry in self.entries():
            lines.append(f"{entry.number}. {entry.label}")
        return lines


registry = MenuRegistry()


def render_task_lines(views: list[TaskView]) -> list[str]:
    return [f"{v.position}. [{v.checkbox}] {v.description}" for v in views]


def _read(state: AppState, prompt: str) -> str:
    try:
        return state.console.read_line(prompt)
    except EOFError:
        raise InputClosed() from None


def cmd_add(state: AppState) -> None:
    console = state.console

    # Checked before prompting so no input is consumed on a full list.
    if state.task_store.is_full():
        console.write(CapacityExceeded().message)
        return

    try:
        raw = console.read_line(DESCRIPTION_PROMPT)
    except EOFError:
        console.write("Error reading input. Task not added.")
        raise InputClosed() from None

    try:
        position = add_task_from_input(state, raw)
    except (CapacityExceeded, InvalidDescription) as e:
        console.write(e.message)
        return

    logger.debug("Added task at position %s", position)
    console.write("Task added!")


def cmd_view(state: AppState) -> None:
    console = state.console
    console.write("")
    console.write("--- Your Tasks ---")

    views = state.task_store.list_tasks()
    if not views:
        console.write("You have no tasks.")
        return

    for line in render_task_lines(views):
        console.write(line)


def cmd_mark(state: AppState) -> None:
    console = state.console

    if state.task_store.count_tasks() == 0:
        console.write(EmptyStore().message)
        return

    cmd_view(state)
    raw = _read(state, POSITION_PROMPT)

    try:
        outcome = mark_task_from_input(state, raw)
    except (MalformedInput, InvalidPosition, EmptyStore) as e:
        console.write(e.message)
        return

    if outcome is MarkOutcome.ALREADY_COMPLETE:
        console.write("That task is already complete.")
    else:
        console.write("Task marked as complete!")


def cmd_exit(state: AppState) -> None:
    state.console.write("")
    state.console.write("Goodbye!")


registry.register(1, cmd_add, "Add a new task")
registry.register(2, cmd_view, "View all tasks")
registry.register(3, cmd_mark, "Mark a task as complete")
registry.register(4, cmd_exit, "Exit", exits=True)
