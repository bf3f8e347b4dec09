# src/todo_tracker/tasks/task_query.py

"""
Read-only views over a task snapshot.

Positions are always storage positions (1-based index in the document).
Filtering and sorting change which rows are shown and in what order, never
the numbers attached to them, so "done 3" means the same task no matter
which view printed it.
"""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from dataclasses import dataclass
from datetime import date

from .errors import NoSearchResults, NoTagsFound, NoTasksFound, TagNotFound
from .task_models import DUE_SOON_DAYS, DueFilter, Priority, SortKey, StatusFilter, Task

Entry = tuple[int, Task]


@dataclass(frozen=True, slots=True)
class Summary:
    total: int
    completed: int
    pending: int
    overdue: int
    due_soon: int

    @property
    def percent(self) -> int:
        if self.total <= 0:
            return 0
        # Halves round up (12.5 -> 13); round() would round them to even.
        return (self.completed * 200 + self.total) // (2 * self.total)


def enumerate_tasks(tasks: Iterable[Task]) -> list[Entry]:
    return list(enumerate(tasks, start=1))


def filter_tasks(
    tasks: Sequence[Task],
    *,
    status: StatusFilter | None = None,
    priority: Priority | None = None,
    due: DueFilter | None = None,
    tag: str | None = None,
    today: date | None = None,
) -> list[Entry]:
    """
    Apply the optional filters in fixed order: status, priority, due, tag.

    Raises TagNotFound when the tag filter is what emptied the result, and
    NoTasksFound for any other empty outcome.
    """
    entries = enumerate_tasks(tasks)

    if status is not None:
        entries = [(pos, t) for pos, t in entries if t.matches_status(status)]
    if priority is not None:
        entries = [(pos, t) for pos, t in entries if t.priority is priority]
    if due is not None:
        entries = [(pos, t) for pos, t in entries if t.matches_due_filter(due, today=today)]
    if tag is not None:
        before = len(entries)
        entries = [(pos, t) for pos, t in entries if t.has_tag(tag)]
        if not entries and before > 0:
            raise TagNotFound(tag)

    if not entries:
        raise NoTasksFound()
    return entries


def _sort_key(key: SortKey):
    if key is SortKey.PRIORITY:
        return lambda e: e[1].priority.rank
    if key is SortKey.DUE:
        # Dated tasks first (ascending); undated ones tie and keep their order.
        return lambda e: (0, e[1].due_date) if e[1].due_date is not None else (1, date.min)
    if key is SortKey.CREATED:
        return lambda e: e[1].created_at
    raise AssertionError(f"unhandled sort key: {key!r}")


def sort_tasks(entries: Iterable[Entry], key: SortKey) -> list[Entry]:
    # sorted() is stable: ties keep storage order.
    return sorted(entries, key=_sort_key(key))


def list_tasks(
    tasks: Sequence[Task],
    *,
    status: StatusFilter | None = None,
    priority: Priority | None = None,
    due: DueFilter | None = None,
    tag: str | None = None,
    sort: SortKey | None = None,
    today: date | None = None,
) -> list[Entry]:
    entries = filter_tasks(tasks, status=status, priority=priority, due=due, tag=tag, today=today)
    if sort is not None:
        entries = sort_tasks(entries, sort)
    return entries


def search_tasks(tasks: Sequence[Task], query: str, *, tag: str | None = None) -> list[Entry]:
    """Case-insensitive substring search on task text, optionally narrowed by tag."""
    needle = query.casefold()
    entries = [(pos, t) for pos, t in enumerate_tasks(tasks) if needle in t.text.casefold()]
    if tag is not None:
        entries = [(pos, t) for pos, t in entries if t.has_tag(tag)]
    if not entries:
        raise NoSearchResults(query)
    return entries


def tag_counts(tasks: Iterable[Task]) -> list[tuple[str, int]]:
    """Distinct tags (sorted) with the number of tasks carrying each."""
    counts: dict[str, int] = {}
    for task in tasks:
        # dict.fromkeys: a tag repeated on one task counts once.
        for tag in dict.fromkeys(task.tags):
            counts[tag] = counts.get(tag, 0) + 1
    if not counts:
        raise NoTagsFound()
    return sorted(counts.items())


def summarize(
    tasks: Sequence[Task],
    *,
    due_soon_days: int = DUE_SOON_DAYS,
    today: date | None = None,
) -> Summary:
    completed = sum(1 for t in tasks if t.completed)
    return Summary(
        total=len(tasks),
        completed=completed,
        pending=len(tasks) - completed,
        overdue=sum(1 for t in tasks if t.is_overdue(today=today)),
        due_soon=sum(1 for t in tasks if t.is_due_soon(due_soon_days, today=today)),
    )


def view_title(status: StatusFilter | None = None, due: DueFilter | None = None) -> str:
    """Heading for a rendered list; the due filter wins over the status filter."""
    if due is not None:
        if due is DueFilter.OVERDUE:
            return "Overdue tasks"
        if due is DueFilter.SOON:
            return "Tasks due soon"
        if due is DueFilter.WITH_DUE:
            return "Tasks with a due date"
        if due is DueFilter.NO_DUE:
            return "Tasks without a due date"
        raise AssertionError(f"unhandled due filter: {due!r}")

    if status is None or status is StatusFilter.ALL:
        return "All tasks"
    if status is StatusFilter.PENDING:
        return "Pending tasks"
    if status is StatusFilter.DONE:
        return "Completed tasks"
    raise AssertionError(f"unhandled status filter: {status!r}")
