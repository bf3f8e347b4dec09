# src/todo_tracker/tasks/task_store.py

from __future__ import annotations

import contextlib
import json
import logging
import os
from datetime import date
from pathlib import Path
from typing import Any

from .errors import CorruptStore, StoreUnavailable
from .task_models import Priority, Task

logger = logging.getLogger(__name__)


class TaskStore:
    """
    JSON document task store.

    The whole collection lives in one human-readable document:
    - load() reads and parses it in full (missing file -> empty list)
    - save() rewrites it in full via temp file + os.replace
    - delete() removes it (used by "clear")

    There is no cache: every call round-trips through the file, so each
    invocation sees the latest on-disk state. No locking either, the last
    writer wins.
    """

    def __init__(self, path: str | Path = "todos.json") -> None:
        self._path = Path(path)

    @property
    def path(self) -> Path:
        return self._path

    def _unavailable(self, exc: OSError) -> StoreUnavailable:
        return StoreUnavailable(self._path, Path.cwd().resolve(), exc)

    # ---- (de)serialization ----

    @staticmethod
    def _task_to_dict(task: Task) -> dict[str, Any]:
        # Key order is part of the on-disk format; keep it stable.
        return {
            "text": task.text,
            "completed": task.completed,
            "priority": task.priority.value,
            "tags": list(task.tags),
            "due_date": task.due_date.isoformat() if task.due_date else None,
            "created_at": task.created_at.isoformat(),
        }

    @staticmethod
    def _dict_to_task(raw: Any) -> Task:
        if not isinstance(raw, dict):
            raise ValueError(f"task entry must be an object, got {type(raw).__name__}")

        text = raw["text"]
        if not isinstance(text, str) or not text.strip():
            raise ValueError("task text must be a non-empty string")

        completed = raw.get("completed", False)
        if not isinstance(completed, bool):
            raise ValueError(f"'completed' must be a boolean, got {completed!r}")

        tags = raw.get("tags") or []
        if not isinstance(tags, list) or not all(isinstance(t, str) for t in tags):
            raise ValueError(f"'tags' must be a list of strings, got {tags!r}")

        due_raw = raw.get("due_date")
        return Task(
            text=text,
            completed=completed,
            priority=Priority(raw.get("priority") or Priority.MEDIUM.value),
            tags=list(tags),
            due_date=date.fromisoformat(due_raw) if due_raw is not None else None,
            created_at=date.fromisoformat(raw["created_at"]),
        )

    def _parse(self, content: str) -> list[Task]:
        data = json.loads(content)
        # Accept a bare list as well as the {"tasks": [...]} document.
        entries = data.get("tasks") if isinstance(data, dict) else data
        if not isinstance(entries, list):
            raise ValueError("document must contain a list of tasks")
        return [self._dict_to_task(e) for e in entries]

    def dumps(self, tasks: list[Task]) -> str:
        doc = {"tasks": [self._task_to_dict(t) for t in tasks]}
        return json.dumps(doc, ensure_ascii=False, indent=2) + "\n"

    # ---- public API ----

    def exists(self) -> bool:
        return self._path.exists()

    def load(self) -> list[Task]:
        try:
            raw = self._path.read_bytes()
        except FileNotFoundError:
            logger.debug("No task file at %s; starting empty.", self._path)
            return []
        except OSError as exc:
            raise self._unavailable(exc) from exc

        try:
            tasks = self._parse(raw.decode("utf-8"))
        except (ValueError, KeyError, TypeError) as exc:
            # json.JSONDecodeError and UnicodeDecodeError are ValueErrors too.
            raise CorruptStore(self._path, exc) from exc

        logger.debug("Loaded %d tasks from %s", len(tasks), self._path)
        return tasks

    def save(self, tasks: list[Task]) -> None:
        payload = self.dumps(tasks)
        tmp = self._path.with_name(f".{self._path.name}.tmp")
        try:
            self._path.parent.mkdir(parents=True, exist_ok=True)
            tmp.write_text(payload, "utf-8")
            os.replace(tmp, self._path)
        except OSError as exc:
            with contextlib.suppress(OSError):
                tmp.unlink(missing_ok=True)
            raise self._unavailable(exc) from exc
        logger.debug("Saved %d tasks to %s", len(tasks), self._path)

    def delete(self) -> bool:
        """Remove the document. Returns False if there was nothing to remove."""
        try:
            self._path.unlink()
        except FileNotFoundError:
            return False
        except OSError as exc:
            raise self._unavailable(exc) from exc
        logger.debug("Deleted task file %s", self._path)
        return True
