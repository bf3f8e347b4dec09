# src/todo_tracker/tasks/task_api.py

"""
Mutation operations.

Each operation is a full read-modify-write cycle against the store:
load everything, validate the position against storage order, mutate in
memory, save everything. Rejected operations never write.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable
from datetime import date

from .errors import InvalidTaskId, TaskAlreadyInStatus
from .task_models import Priority, Task
from .task_store import TaskStore

logger = logging.getLogger(__name__)


def _index_for(tasks: list[Task], task_id: int) -> int:
    if not 1 <= task_id <= len(tasks):
        raise InvalidTaskId(task_id, len(tasks))
    return task_id - 1


def add_task(
    store: TaskStore,
    text: str,
    *,
    priority: Priority = Priority.MEDIUM,
    tags: Iterable[str] = (),
    due_date: date | None = None,
    today: date | None = None,
) -> tuple[int, Task]:
    """Append a new pending task; returns its position and the task."""
    if not text or not text.strip():
        raise ValueError("task text is required")

    tasks = store.load()
    task = Task(
        text=text.strip(),
        priority=priority,
        tags=list(tags),
        due_date=due_date,
        created_at=today if today is not None else date.today(),
    )
    tasks.append(task)
    store.save(tasks)

    position = len(tasks)
    logger.info(
        "Task added id=%s priority=%s tags=%s due=%s",
        position,
        task.priority.value,
        task.tags,
        task.due_date,
    )
    return position, task


def _set_completed(store: TaskStore, task_id: int, completed: bool) -> Task:
    tasks = store.load()
    idx = _index_for(tasks, task_id)
    task = tasks[idx]
    if task.completed == completed:
        status = "completed" if completed else "pending"
        logger.debug("Task %s already %s; nothing written.", task_id, status)
        raise TaskAlreadyInStatus(task_id, status)

    task.completed = completed
    store.save(tasks)
    logger.info("Task %s marked %s", task_id, "done" if completed else "pending")
    return task


def complete_task(store: TaskStore, task_id: int) -> Task:
    return _set_completed(store, task_id, True)


def uncomplete_task(store: TaskStore, task_id: int) -> Task:
    return _set_completed(store, task_id, False)


def remove_task(store: TaskStore, task_id: int) -> str:
    """
    Delete the task at `task_id` and return its text.

    Every task after it moves up one position. Removing the last remaining
    task deletes the document, leaving the same state as a fresh directory.
    """
    tasks = store.load()
    idx = _index_for(tasks, task_id)
    removed = tasks.pop(idx)
    if tasks:
        store.save(tasks)
    else:
        store.delete()
    logger.info("Task %s removed (%d left)", task_id, len(tasks))
    return removed.text


def clear_tasks(store: TaskStore) -> bool:
    """Delete the whole document. Returns False when there was none (not an error)."""
    deleted = store.delete()
    if deleted:
        logger.info("All tasks cleared (%s)", store.path)
    return deleted
