# tests/test_terminal.py

from __future__ import annotations

import io
from types import SimpleNamespace

import pytest

from todo_tracker.connectors.terminal import (
    PAUSE_PROMPT,
    NullScreen,
    StdConsole,
    TerminalScreen,
    build_screen,
)

from .fakes import ScriptedConsole


def test_build_screen_headless_is_null() -> None:
    settings = SimpleNamespace(clear_screen=False, pause_after_action=False)
    assert isinstance(build_screen(settings), NullScreen)


def test_build_screen_terminal() -> None:
    settings = SimpleNamespace(clear_screen=False, pause_after_action=True)
    screen = build_screen(settings)
    assert isinstance(screen, TerminalScreen)
    assert screen.pause_enabled is True
    assert screen.clear_enabled is False


def test_pause_reads_one_line() -> None:
    console = ScriptedConsole(["", "next"])
    TerminalScreen(clear_enabled=False).pause(console)

    assert console.prompts == [PAUSE_PROMPT]
    assert console.remaining == ["next"]


def test_pause_propagates_end_of_input() -> None:
    with pytest.raises(EOFError):
        TerminalScreen(clear_enabled=False).pause(ScriptedConsole())


def test_disabled_pause_consumes_nothing() -> None:
    console = ScriptedConsole(["keep"])
    TerminalScreen(clear_enabled=False, pause_enabled=False).pause(console)
    assert console.remaining == ["keep"]


def test_std_console(monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str]) -> None:
    monkeypatch.setattr("builtins.input", lambda prompt="": "typed\r")
    console = StdConsole()

    assert console.read_line("> ") == "typed"
    console.write("shown")
    assert capsys.readouterr().out == "shown\n"


def test_std_console_replaces_undecodable_bytes(monkeypatch: pytest.MonkeyPatch) -> None:
    stdin = io.TextIOWrapper(io.BytesIO(b"\xffx\n"), encoding="utf-8")
    monkeypatch.setattr("sys.stdin", stdin)

    assert StdConsole().read_line() == "\ufffdx"
