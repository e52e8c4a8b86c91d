# src/todo_tracker/connectors/terminal.py

"""
Concrete Console / Screen implementations for a real terminal.

Clearing uses ANSI escapes instead of shelling out to `clear`/`cls`.
Both behaviors are optional; NullScreen keeps automated runs headless.
"""

from __future__ import annotations

import logging
import sys

from ..core.ports import Console

logger = logging.getLogger(__name__)

# ESC[H (home), ESC[2J (screen), ESC[H (home)
CLEAR_SEQUENCE = "\033[H\033[2J\033[H"
PAUSE_PROMPT = "\n\nPress Enter to continue..."


class StdConsole:
    """Console backed by input()/print().

    Undecodable input bytes become U+FFFD, so they reach the menu as an
    ordinary invalid choice or description instead of a decode error.
    """

    def __init__(self) -> None:
        reconfigure = getattr(sys.stdin, "reconfigure", None)
        if reconfigure is not None:
            try:
                reconfigure(errors="replace")
            except Exception:
                logger.debug("stdin reconfigure failed.", exc_info=True)

    def read_line(self, prompt: str = "") -> str:
        line = input(prompt)
        return line.rstrip("\r\n")

    def write(self, text: str = "") -> None:
        print(text, flush=True)


class TerminalScreen:
    def __init__(self, *, clear_enabled: bool = True, pause_enabled: bool = True) -> None:
        self.clear_enabled = clear_enabled
        self.pause_enabled = pause_enabled

    def clear(self) -> None:
        if not self.clear_enabled:
            return
        try:
            if sys.stdout.isatty():
                sys.stdout.write(CLEAR_SEQUENCE)
                sys.stdout.flush()
        except Exception:
            logger.debug("Screen clear failed.", exc_info=True)

    def pause(self, console: Console) -> None:
        if not self.pause_enabled:
            return
        # EOFError propagates: the loop treats it as closed input.
        console.read_line(PAUSE_PROMPT)


class NullScreen:
    """No clearing, no pausing."""

    def clear(self) -> None:
        return

    def pause(self, console: Console) -> None:
        return


def build_screen(settings) -> TerminalScreen | NullScreen:
    clear_enabled = bool(getattr(settings, "clear_screen", False))
    pause_enabled = bool(getattr(settings, "pause_after_action", False))
    if not clear_enabled and not pause_enabled:
        return NullScreen()
    return TerminalScreen(clear_enabled=clear_enabled, pause_enabled=pause_enabled)
