# src/todo_tracker/connectors/console_connector.py

from __future__ import annotations

import logging

from ..cli.commands import CHOICE_PROMPT, MenuRegistry
from ..cli.commands import registry as menu_registry
from ..config import DEFAULT_APP_TITLE
from ..core.state import AppState
from ..tasks.errors import InputClosed, InvalidChoice, TodoError

logger = logging.getLogger(__name__)

EXIT_OK = 0
EXIT_INPUT_CLOSED = 1
EXIT_INTERRUPTED = 130


def run_console_loop(state: AppState, registry: MenuRegistry | None = None) -> int:
    """
    Menu loop: show menu, read one line, dispatch, pause, repeat.

    Returns the process exit status:
    - EXIT_OK after the exit entry
    - EXIT_INPUT_CLOSED when input ends (never loops on a dead stream)
    - EXIT_INTERRUPTED on Ctrl+C
    """
    registry = registry or menu_registry
    console = state.console
    screen = state.screen
    title = str(getattr(state.settings, "app_title", DEFAULT_APP_TITLE))

    logger.info("Console menu started (title=%s).", title)

    while True:
        try:
            screen.clear()
            for line in registry.build_menu(title):
                console.write(line)
            raw = console.read_line(CHOICE_PROMPT)

            try:
                entry = registry.resolve(raw)
            except InvalidChoice as e:
                console.write(e.message)
                screen.pause(console)
                continue

            if not entry.exits:
                screen.clear()

            try:
                entry.handler(state)
            except InputClosed:
                raise
            except TodoError as e:
                console.write(e.message)
            except Exception:
                logger.exception("Menu handler crashed (choice=%s).", entry.number)
                console.write("Internal error while handling your choice.")

            if entry.exits:
                logger.info("Console exit choice received.")
                return EXIT_OK

            screen.pause(console)

        except (EOFError, InputClosed):
            logger.info("Console input closed, exiting.")
            console.write("")
            return EXIT_INPUT_CLOSED
        except KeyboardInterrupt:
            logger.info("Console KeyboardInterrupt, exiting.")
            console.write("")
            return EXIT_INTERRUPTED
