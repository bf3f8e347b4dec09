# tests/test_task_models.py

from __future__ import annotations

from datetime import date, timedelta

import pytest

from todo_tracker.tasks.task_models import DueFilter, Priority, StatusFilter, Task

TODAY = date(2025, 6, 15)


def _task(**kw) -> Task:
    kw.setdefault("text", "something")
    kw.setdefault("created_at", TODAY)
    return Task(**kw)


def test_defaults() -> None:
    t = Task(text="Buy milk")
    assert t.completed is False
    assert t.priority is Priority.MEDIUM
    assert t.tags == []
    assert t.due_date is None
    assert t.created_at == date.today()


def test_priority_rank_order() -> None:
    assert Priority.HIGH.rank < Priority.MEDIUM.rank < Priority.LOW.rank


@pytest.mark.parametrize("raw", ["high", "HIGH", " High "])
def test_priority_parse_accepts_any_case(raw: str) -> None:
    assert Priority.parse(raw) is Priority.HIGH


def test_priority_parse_rejects_unknown() -> None:
    with pytest.raises(ValueError, match="urgent"):
        Priority.parse("urgent")


def test_matches_status() -> None:
    pending = _task()
    done = _task(completed=True)
    assert pending.matches_status(StatusFilter.PENDING)
    assert not pending.matches_status(StatusFilter.DONE)
    assert done.matches_status(StatusFilter.DONE)
    assert not done.matches_status(StatusFilter.PENDING)
    assert pending.matches_status(StatusFilter.ALL)
    assert done.matches_status(StatusFilter.ALL)


def test_overdue_requires_past_due_and_pending() -> None:
    yesterday = TODAY - timedelta(days=1)
    assert _task(due_date=yesterday).is_overdue(today=TODAY)
    assert not _task(due_date=TODAY).is_overdue(today=TODAY)
    assert not _task(due_date=yesterday, completed=True).is_overdue(today=TODAY)
    assert not _task().is_overdue(today=TODAY)


def test_due_soon_window_bounds() -> None:
    assert _task(due_date=TODAY).is_due_soon(7, today=TODAY)
    assert _task(due_date=TODAY + timedelta(days=7)).is_due_soon(7, today=TODAY)
    assert not _task(due_date=TODAY + timedelta(days=8)).is_due_soon(7, today=TODAY)
    assert not _task(due_date=TODAY - timedelta(days=1)).is_due_soon(7, today=TODAY)
    assert not _task(due_date=TODAY, completed=True).is_due_soon(7, today=TODAY)
    assert not _task().is_due_soon(7, today=TODAY)


def test_classification_depends_on_the_day_asked() -> None:
    t = _task(due_date=TODAY)
    assert not t.is_overdue(today=TODAY)
    assert t.is_overdue(today=TODAY + timedelta(days=1))


def test_days_until_due() -> None:
    assert _task().days_until_due(today=TODAY) is None
    assert _task(due_date=TODAY + timedelta(days=3)).days_until_due(today=TODAY) == 3
    assert _task(due_date=TODAY - timedelta(days=2)).days_until_due(today=TODAY) == -2


def test_matches_due_filter() -> None:
    overdue = _task(due_date=TODAY - timedelta(days=1))
    soon = _task(due_date=TODAY + timedelta(days=2))
    later = _task(due_date=TODAY + timedelta(days=30))
    undated = _task()

    assert overdue.matches_due_filter(DueFilter.OVERDUE, today=TODAY)
    assert not soon.matches_due_filter(DueFilter.OVERDUE, today=TODAY)

    assert soon.matches_due_filter(DueFilter.SOON, today=TODAY)
    assert not later.matches_due_filter(DueFilter.SOON, today=TODAY)

    for t in (overdue, soon, later):
        assert t.matches_due_filter(DueFilter.WITH_DUE, today=TODAY)
        assert not t.matches_due_filter(DueFilter.NO_DUE, today=TODAY)
    assert undated.matches_due_filter(DueFilter.NO_DUE, today=TODAY)
    assert not undated.matches_due_filter(DueFilter.WITH_DUE, today=TODAY)
