# src/todo_tracker/tasks/errors.py

"""
Error taxonomy for the task engine.

Every failure is raised as a TodoError subclass carrying its details as
attributes. The engine never recovers from these itself; the CLI layer turns
them into messages and exit codes.
"""

from __future__ import annotations

from pathlib import Path


class TodoError(Exception):
    """Base class for all task engine errors."""


class EmptyResult(TodoError):
    """A query matched nothing. Not a failure of the store or of the request."""


class InvalidTaskId(TodoError):
    def __init__(self, task_id: int, max_id: int) -> None:
        self.task_id = task_id
        self.max_id = max_id
        if max_id == 0:
            msg = f"invalid task id {task_id}: there are no tasks"
        else:
            msg = f"invalid task id {task_id} (valid range: 1-{max_id})"
        super().__init__(msg)


class TaskAlreadyInStatus(TodoError):
    def __init__(self, task_id: int, status: str) -> None:
        self.task_id = task_id
        self.status = status
        super().__init__(f"task {task_id} is already {status}")


class TagNotFound(EmptyResult):
    def __init__(self, tag: str) -> None:
        self.tag = tag
        super().__init__(f"no tasks tagged {tag!r}")


class NoTasksFound(EmptyResult):
    def __init__(self) -> None:
        super().__init__("no tasks found")


class NoTagsFound(EmptyResult):
    def __init__(self) -> None:
        super().__init__("no tags found")


class NoSearchResults(EmptyResult):
    def __init__(self, query: str) -> None:
        self.query = query
        super().__init__(f"no tasks matching {query!r}")


class CorruptStore(TodoError):
    """The task document exists but could not be parsed."""

    def __init__(self, path: Path, cause: Exception) -> None:
        self.path = path
        self.cause = cause
        super().__init__(f"task file {path} is corrupt: {cause}")


class StoreUnavailable(TodoError):
    """The task document could not be read or written (permissions, disk, ...)."""

    def __init__(self, path: Path, cwd: Path, cause: OSError) -> None:
        self.path = path
        self.cwd = cwd
        self.cause = cause
        super().__init__(f"cannot access task file {path} (working directory: {cwd}): {cause}")
