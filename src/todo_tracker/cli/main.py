# src/todo_tracker/cli/main.py

"""
CLI entrypoint.

Initializes logging, builds AppState, then runs the console menu in the
main thread. The process exit status is whatever the menu loop returns.
"""

from __future__ import annotations

import logging

from ..cli.bootstrap import create_initial_state
from ..config import get_settings
from ..connectors.console_connector import run_console_loop
from ..logging_setup import setup_logging

logger = logging.getLogger(__name__)


def main() -> int:
    settings = get_settings()

    # choose console log level from settings.log_level
    level_name = str(getattr(settings, "log_level", "WARNING")).upper()
    console_level = getattr(logging, level_name, logging.WARNING)
    if not isinstance(console_level, int):
        console_level = logging.WARNING

    log_file = settings.log_file_path if settings.log_file_enabled else None
    setup_logging(log_file=log_file, console_level=console_level)

    logger.info("Starting %s...", settings.app_title)

    # IMPORTANT: reuse same settings object
    state = create_initial_state(settings=settings)

    try:
        code = run_console_loop(state)
    finally:
        logger.info("Bye. tasks=%s", state.task_store.count_tasks())
    return code


if __name__ == "__main__":
    raise SystemExit(main())
