# tests/test_config.py

from __future__ import annotations

from pathlib import Path

import pytest

from todo_tracker.config import Settings

ENV_NAMES = (
    "TODO_APP_NAME",
    "TODO_LOG_LEVEL",
    "TODO_LOG_DIR",
    "TODO_LOG_FILE",
    "TODO_STORE_PATH",
    "TODO_DUE_SOON_DAYS",
)


@pytest.fixture(autouse=True)
def clean_env(monkeypatch, tmp_path: Path) -> None:
    monkeypatch.chdir(tmp_path)
    for name in ENV_NAMES:
        monkeypatch.delenv(name, raising=False)


def test_defaults() -> None:
    s = Settings.from_env()
    assert s.app_name == "todo"
    assert s.log_level == "WARNING"
    assert s.log_file_enabled is False
    assert s.store_path == Path("todos.json")
    assert s.due_soon_days == 7


def test_overrides(monkeypatch, tmp_path: Path) -> None:
    monkeypatch.setenv("TODO_STORE_PATH", str(tmp_path / "elsewhere.json"))
    monkeypatch.setenv("TODO_LOG_LEVEL", "debug")
    monkeypatch.setenv("TODO_LOG_FILE", "yes")
    monkeypatch.setenv("TODO_DUE_SOON_DAYS", "3")

    s = Settings.from_env()
    assert s.store_path == tmp_path / "elsewhere.json"
    assert s.log_level == "debug"
    assert s.log_file_enabled is True
    assert s.due_soon_days == 3


@pytest.mark.parametrize("raw", ["soon", "-2", ""])
def test_bad_due_soon_days_falls_back(monkeypatch, raw: str) -> None:
    monkeypatch.setenv("TODO_DUE_SOON_DAYS", raw)
    assert Settings.from_env().due_soon_days == 7


def test_dotenv_file_is_loaded(monkeypatch, tmp_path: Path) -> None:
    # Register the variable with monkeypatch so the value load_dotenv sets is undone.
    monkeypatch.setenv("TODO_APP_NAME", "placeholder")
    monkeypatch.delenv("TODO_APP_NAME")

    (tmp_path / ".env").write_text("TODO_APP_NAME=from-dotenv\n", "utf-8")
    monkeypatch.setattr("todo_tracker.config.load_dotenv", _load_from(tmp_path / ".env"))
    assert Settings.from_env().app_name == "from-dotenv"


def test_dotenv_does_not_override_environment(monkeypatch, tmp_path: Path) -> None:
    monkeypatch.setenv("TODO_APP_NAME", "from-env")
    (tmp_path / ".env").write_text("TODO_APP_NAME=from-dotenv\n", "utf-8")
    monkeypatch.setattr("todo_tracker.config.load_dotenv", _load_from(tmp_path / ".env"))
    assert Settings.from_env().app_name == "from-env"


def _load_from(path: Path):
    from dotenv import load_dotenv

    def loader(override: bool = False) -> bool:
        return load_dotenv(path, override=override)

    return loader
