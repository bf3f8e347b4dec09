# tests/test_logging_setup.py

from __future__ import annotations

import logging
from pathlib import Path

from todo_tracker.logging_setup import _ConsoleNoiseFilter, setup_logging


def _record(name: str, level: int) -> logging.LogRecord:
    return logging.LogRecord(name, level, __file__, 1, "msg", None, None)


def test_console_filter_keeps_own_logs_and_mutes_third_party() -> None:
    f = _ConsoleNoiseFilter()
    assert f.filter(_record("todo_tracker.tasks.task_api", logging.DEBUG))
    assert not f.filter(_record("urllib3", logging.WARNING))
    assert f.filter(_record("urllib3", logging.ERROR))
    assert not f.filter(_record("py.warnings", logging.WARNING))


def test_file_handler_only_when_enabled(tmp_path: Path) -> None:
    root = logging.getLogger()
    saved = list(root.handlers)
    try:
        setup_logging(log_dir=tmp_path / "off", file_enabled=False)
        assert not (tmp_path / "off").exists()
        assert len(root.handlers) == 1

        setup_logging(log_dir=tmp_path / "on", file_enabled=True)
        assert len(root.handlers) == 2
        logging.getLogger("todo_tracker.test").debug("hello file")
        for h in root.handlers:
            h.flush()
        assert "hello file" in (tmp_path / "on" / "todo.log").read_text("utf-8")
    finally:
        for h in list(root.handlers):
            root.removeHandler(h)
            h.close()
        for h in saved:
            root.addHandler(h)
