# src/todo_tracker/cli/main.py

"""
CLI entrypoint.

Initializes logging, builds AppState, runs exactly one command and maps the
outcome to an exit status:
- 0: success
- 0: also when a view is simply empty (no tasks, tags or matches)
- 1: task engine error (invalid id, already done, corrupt file, ...)
- 2: usage error (unknown command, bad argument)
"""

from __future__ import annotations

import logging
import sys

from ..cli.bootstrap import create_initial_state
from ..cli.commands import UsageError, registry
from ..config import get_settings
from ..logging_setup import setup_logging
from ..tasks.errors import EmptyResult, TodoError

logger = logging.getLogger(__name__)


def main(argv: list[str] | None = None, *, settings=None) -> int:
    if argv is None:
        argv = sys.argv[1:]
    if settings is None:
        settings = get_settings()

    level_name = str(getattr(settings, "log_level", "WARNING")).upper()
    console_level = getattr(logging, level_name, logging.WARNING)
    setup_logging(
        console_level=console_level,
        log_dir=getattr(settings, "log_dir", ".local/todo"),
        file_enabled=bool(getattr(settings, "log_file_enabled", False)),
    )

    state = create_initial_state(settings=settings)

    try:
        output = registry.handle(state, argv)
    except EmptyResult as exc:
        # An empty view is an answer, not a failure.
        msg = str(exc)
        print(f"{msg[:1].upper()}{msg[1:]}.")
        return 0
    except UsageError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 2
    except TodoError as exc:
        logger.debug("Command failed: %r", exc)
        print(f"Error: {exc}", file=sys.stderr)
        return 1

    print(output)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
