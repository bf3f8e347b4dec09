# src/todo_tracker/core/state.py

from __future__ import annotations

from dataclasses import dataclass

from ..tasks.task_store import TaskStore


@dataclass
class AppState:
    # Settings object (config.Settings or a test double with the same fields).
    settings: object
    task_store: TaskStore
