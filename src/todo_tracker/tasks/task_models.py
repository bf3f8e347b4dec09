# src/todo_tracker/tasks/task_models.py

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date
from enum import StrEnum

DUE_SOON_DAYS = 7


class Priority(StrEnum):
    """
    Task priority.

    Sort order is HIGH < MEDIUM < LOW (most urgent first).
    """

    HIGH = "high"
    MEDIUM = "medium"
    LOW = "low"

    @property
    def rank(self) -> int:
        if self is Priority.HIGH:
            return 0
        if self is Priority.MEDIUM:
            return 1
        if self is Priority.LOW:
            return 2
        raise AssertionError(f"unhandled priority: {self!r}")

    @classmethod
    def parse(cls, raw: str) -> Priority:
        try:
            return cls(raw.strip().lower())
        except ValueError:
            allowed = ", ".join(p.value for p in cls)
            raise ValueError(f"invalid priority {raw!r} (expected one of: {allowed})") from None


class StatusFilter(StrEnum):
    PENDING = "pending"
    DONE = "done"
    ALL = "all"


class DueFilter(StrEnum):
    OVERDUE = "overdue"
    SOON = "soon"
    WITH_DUE = "with-due"
    NO_DUE = "no-due"


class SortKey(StrEnum):
    PRIORITY = "priority"
    DUE = "due"
    CREATED = "created"


def _today(today: date | None) -> date:
    # Not cached: classification follows the calendar day of each call.
    return today if today is not None else date.today()


@dataclass(slots=True)
class Task:
    text: str
    completed: bool = False
    priority: Priority = Priority.MEDIUM
    tags: list[str] = field(default_factory=list)
    due_date: date | None = None
    created_at: date = field(default_factory=date.today)

    def matches_status(self, status: StatusFilter) -> bool:
        if status is StatusFilter.PENDING:
            return not self.completed
        if status is StatusFilter.DONE:
            return self.completed
        if status is StatusFilter.ALL:
            return True
        raise AssertionError(f"unhandled status filter: {status!r}")

    def days_until_due(self, *, today: date | None = None) -> int | None:
        if self.due_date is None:
            return None
        return (self.due_date - _today(today)).days

    def is_overdue(self, *, today: date | None = None) -> bool:
        if self.completed or self.due_date is None:
            return False
        return self.due_date < _today(today)

    def is_due_soon(self, window_days: int = DUE_SOON_DAYS, *, today: date | None = None) -> bool:
        if self.completed:
            return False
        days = self.days_until_due(today=today)
        return days is not None and 0 <= days <= window_days

    def matches_due_filter(self, kind: DueFilter, *, today: date | None = None) -> bool:
        if kind is DueFilter.OVERDUE:
            return self.is_overdue(today=today)
        if kind is DueFilter.SOON:
            return self.is_due_soon(DUE_SOON_DAYS, today=today)
        if kind is DueFilter.WITH_DUE:
            return self.due_date is not None
        if kind is DueFilter.NO_DUE:
            return self.due_date is None
        raise AssertionError(f"unhandled due filter: {kind!r}")

    def has_tag(self, tag: str) -> bool:
        return tag in self.tags
