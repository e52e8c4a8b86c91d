# tests/test_logging_setup.py

from __future__ import annotations

import logging
from collections.abc import Iterator
from pathlib import Path

import pytest

from todo_tracker.logging_setup import _ConsoleNoiseFilter, setup_logging


@pytest.fixture()
def restore_root_logging() -> Iterator[None]:
    root = logging.getLogger()
    handlers, level = list(root.handlers), root.level
    yield
    for h in list(root.handlers):
        root.removeHandler(h)
        h.close()
    for h in handlers:
        root.addHandler(h)
    root.setLevel(level)
    logging.captureWarnings(False)


def _record(name: str, level: int) -> logging.LogRecord:
    return logging.LogRecord(name, level, __file__, 1, "msg", None, None)


def test_console_filter_keeps_app_logs_and_quiets_others() -> None:
    f = _ConsoleNoiseFilter()

    assert f.filter(_record("todo_tracker.tasks.task_store", logging.DEBUG))
    assert not f.filter(_record("dotenv.main", logging.WARNING))
    assert f.filter(_record("dotenv.main", logging.ERROR))
    assert not f.filter(_record("py.warnings", logging.WARNING))


def test_setup_logging_writes_file(tmp_path: Path, restore_root_logging: None) -> None:
    target = tmp_path / "logs" / "todo.log"
    log_file = setup_logging(log_file=target, console_level=logging.CRITICAL)

    assert log_file == target
    logging.getLogger("todo_tracker.test").debug("hello file")
    for h in logging.getLogger().handlers:
        h.flush()

    assert "hello file" in log_file.read_text("utf-8")


def test_setup_logging_without_file(restore_root_logging: None) -> None:
    assert setup_logging(log_file=None) is None
    handlers = logging.getLogger().handlers
    assert len(handlers) == 1
    assert not isinstance(handlers[0], logging.FileHandler)
