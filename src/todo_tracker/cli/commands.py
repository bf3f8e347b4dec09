# src/todo_tracker/cli/commands.py

from __future__ import annotations

import argparse
import logging
from collections.abc import Callable
from datetime import date

from ..core.state import AppState
from ..tasks import task_api, task_query
from ..tasks.task_models import DueFilter, Priority, SortKey, StatusFilter, Task

CommandHandler = Callable[[AppState, list[str]], str]

logger = logging.getLogger(__name__)


class UsageError(Exception):
    """Raised for malformed command lines (unknown command, bad argument)."""


class _ArgParser(argparse.ArgumentParser):
    """ArgumentParser that raises UsageError instead of exiting the process."""

    def __init__(self, prog: str) -> None:
        super().__init__(prog=prog, add_help=False)

    def error(self, message: str):  # type: ignore[override]
        raise UsageError(f"{self.prog}: {message}")


class CommandRegistry:
    """Command registry: maps `todo <name> ...` to a handler."""

    def __init__(self) -> None:
        self._handlers: dict[str, CommandHandler] = {}
        self._help: dict[str, str] = {}

    def register(
        self,
        name: str,
        handler: CommandHandler,
        help_text: str,
        aliases: list[str] | None = None,
    ) -> None:
        aliases = aliases or []
        key = name.lower()
        self._handlers[key] = handler
        self._help[key] = help_text
        for alias in aliases:
            self._handlers[alias.lower()] = handler

    def handle(self, state: AppState, argv: list[str]) -> str:
        """Dispatch argv (without the program name) and return the text to print."""
        prog = str(getattr(state.settings, "app_name", "todo"))
        if not argv:
            raise UsageError(f"missing command. Use '{prog} help' to list available commands.")

        name = argv[0].lower()
        handler = self._handlers.get(name)
        if not handler:
            raise UsageError(f"unknown command: {argv[0]}. Use '{prog} help' to list available commands.")

        logger.debug("Dispatching command %s args=%s", name, argv[1:])
        return handler(state, argv[1:])

    def build_help(self, prog: str = "todo") -> str:
        lines = [f"Usage: {prog} <command> [arguments]", "", "Commands:"]
        width = max(len(n) for n in self._help)
        for name, help_text in self._help.items():
            lines.append(f"  {name.ljust(width)}  {help_text}")
        return "\n".join(lines)


registry = CommandRegistry()


# ---- argument types ----


def _date_arg(raw: str) -> date:
    try:
        return date.fromisoformat(raw)
    except ValueError:
        raise argparse.ArgumentTypeError(f"invalid date {raw!r} (expected YYYY-MM-DD)") from None


def _priority_arg(raw: str) -> Priority:
    try:
        return Priority.parse(raw)
    except ValueError as exc:
        raise argparse.ArgumentTypeError(str(exc)) from None


def _enum_arg(enum_cls):
    def convert(raw: str):
        try:
            return enum_cls(raw.strip().lower())
        except ValueError:
            allowed = ", ".join(e.value for e in enum_cls)
            raise argparse.ArgumentTypeError(
                f"invalid value {raw!r} (expected one of: {allowed})"
            ) from None

    return convert


def _tags_arg(raw: str) -> list[str]:
    return [t.strip() for t in raw.split(",") if t.strip()]


def _task_id_arg(raw: str) -> int:
    try:
        return int(raw)
    except ValueError:
        raise argparse.ArgumentTypeError(f"invalid task id {raw!r} (expected a number)") from None


def _id_parser(prog: str) -> _ArgParser:
    parser = _ArgParser(prog)
    parser.add_argument("task_id", type=_task_id_arg)
    return parser


# ---- rendering ----


def format_task(position: int, task: Task, *, today: date | None = None) -> str:
    mark = "x" if task.completed else " "
    parts = [f"{position:>3}. [{mark}] {task.text} ({task.priority.value})"]
    if task.tags:
        parts.append(" ".join(f"#{t}" for t in task.tags))
    if task.due_date is not None:
        due = f"due:{task.due_date.isoformat()}"
        if task.is_overdue(today=today):
            due += " (overdue)"
        parts.append(due)
    return " ".join(parts)


def _render(title: str, entries: list[task_query.Entry]) -> str:
    lines = [f"{title}:"]
    lines.extend(format_task(pos, task) for pos, task in entries)
    return "\n".join(lines)


# ---- handlers ----


def cmd_help(state: AppState, args: list[str]) -> str:
    return registry.build_help(str(getattr(state.settings, "app_name", "todo")))


def cmd_add(state: AppState, args: list[str]) -> str:
    """
    todo add "text" [--priority P] [--tags a,b] [--due YYYY-MM-DD]
    """
    parser = _ArgParser("todo add")
    parser.add_argument("text", nargs="+")
    parser.add_argument("--priority", "-p", type=_priority_arg, default=Priority.MEDIUM)
    parser.add_argument("--tags", "-t", type=_tags_arg, default=[])
    parser.add_argument("--due", "-d", type=_date_arg, default=None)
    ns = parser.parse_args(args)

    text = " ".join(ns.text).strip()
    if not text:
        raise UsageError("todo add: task text must not be empty")

    position, task = task_api.add_task(
        state.task_store,
        text,
        priority=ns.priority,
        tags=ns.tags,
        due_date=ns.due,
    )
    return f"Added task {position}: {task.text}"


def cmd_list(state: AppState, args: list[str]) -> str:
    parser = _ArgParser("todo list")
    parser.add_argument("--status", "-s", type=_enum_arg(StatusFilter), default=None)
    parser.add_argument("--priority", "-p", type=_priority_arg, default=None)
    parser.add_argument("--due", "-d", type=_enum_arg(DueFilter), default=None)
    parser.add_argument("--tag", "-t", default=None)
    parser.add_argument("--sort", type=_enum_arg(SortKey), default=None)
    ns = parser.parse_args(args)

    entries = task_query.list_tasks(
        state.task_store.load(),
        status=ns.status,
        priority=ns.priority,
        due=ns.due,
        tag=ns.tag,
        sort=ns.sort,
    )
    return _render(task_query.view_title(ns.status, ns.due), entries)


def cmd_done(state: AppState, args: list[str]) -> str:
    ns = _id_parser("todo done").parse_args(args)
    task = task_api.complete_task(state.task_store, ns.task_id)
    return f"Task {ns.task_id} marked as done: {task.text}"


def cmd_undone(state: AppState, args: list[str]) -> str:
    ns = _id_parser("todo undone").parse_args(args)
    task = task_api.uncomplete_task(state.task_store, ns.task_id)
    return f"Task {ns.task_id} marked as pending: {task.text}"


def cmd_remove(state: AppState, args: list[str]) -> str:
    ns = _id_parser("todo remove").parse_args(args)
    text = task_api.remove_task(state.task_store, ns.task_id)
    return f"Removed task {ns.task_id}: {text}"


def cmd_clear(state: AppState, args: list[str]) -> str:
    _ArgParser("todo clear").parse_args(args)
    if task_api.clear_tasks(state.task_store):
        return "All tasks removed."
    return "Nothing to clear."


def cmd_search(state: AppState, args: list[str]) -> str:
    parser = _ArgParser("todo search")
    parser.add_argument("query", nargs="+")
    parser.add_argument("--tag", "-t", default=None)
    ns = parser.parse_args(args)

    query = " ".join(ns.query)
    entries = task_query.search_tasks(state.task_store.load(), query, tag=ns.tag)
    return _render(f"Search results for {query!r}", entries)


def cmd_tags(state: AppState, args: list[str]) -> str:
    _ArgParser("todo tags").parse_args(args)
    counts = task_query.tag_counts(state.task_store.load())
    lines = ["Tags:"]
    for tag, n in counts:
        lines.append(f"  #{tag} ({n} {'task' if n == 1 else 'tasks'})")
    return "\n".join(lines)


def cmd_stats(state: AppState, args: list[str]) -> str:
    _ArgParser("todo stats").parse_args(args)
    window = int(getattr(state.settings, "due_soon_days", 7))
    s = task_query.summarize(state.task_store.load(), due_soon_days=window)
    return (
        "Statistics:\n"
        f"  Total:     {s.total}\n"
        f"  Completed: {s.completed} ({s.percent}%)\n"
        f"  Pending:   {s.pending}\n"
        f"  Overdue:   {s.overdue}\n"
        f"  Due within {window} days: {s.due_soon}"
    )


registry.register("add", cmd_add, help_text='Add a task: add "text" [--priority P] [--tags a,b] [--due YYYY-MM-DD]')
registry.register(
    "list",
    cmd_list,
    help_text="List tasks: list [--status S] [--priority P] [--due D] [--tag T] [--sort K]",
    aliases=["ls"],
)
registry.register("done", cmd_done, help_text="Mark task ID as done: done ID")
registry.register("undone", cmd_undone, help_text="Mark task ID as pending again: undone ID")
registry.register("remove", cmd_remove, help_text="Delete task ID: remove ID", aliases=["rm"])
registry.register("clear", cmd_clear, help_text="Delete all tasks.")
registry.register("search", cmd_search, help_text="Search task text: search QUERY [--tag T]")
registry.register("tags", cmd_tags, help_text="List tags with task counts.")
registry.register("stats", cmd_stats, help_text="Show completion statistics.")
registry.register("help", cmd_help, help_text="Show available commands.", aliases=["-h", "--help"])
