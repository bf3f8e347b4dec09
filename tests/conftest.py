# tests/conftest.py

from __future__ import annotations

from pathlib import Path
from types import SimpleNamespace

import pytest

from todo_tracker.core.state import AppState
from todo_tracker.tasks.task_store import TaskStore


@pytest.fixture()
def settings(tmp_path: Path) -> SimpleNamespace:
    """
    Minimal settings object compatible with AppState and the CLI.

    We intentionally use a SimpleNamespace rather than importing real config,
    to keep unit tests isolated from the environment and any local .env.
    """
    return SimpleNamespace(
        app_name="todo",
        log_level="WARNING",
        log_dir=tmp_path / "logs",
        log_file_enabled=False,
        store_path=tmp_path / "todos.json",
        due_soon_days=7,
    )


@pytest.fixture()
def store(settings: SimpleNamespace) -> TaskStore:
    return TaskStore(settings.store_path)


@pytest.fixture()
def state(settings: SimpleNamespace, store: TaskStore) -> AppState:
    """AppState wired with a real TaskStore in tmp_path."""
    return AppState(settings=settings, task_store=store)
