# src/todo_cli/cli/main.py

"""
CLI entrypoint.

Initializes logging, parses the command line, builds TodoApp and runs one
command. Exit status is 0 on success and 1 on any failure; the failure is
reported as a single line on stderr.
"""

from __future__ import annotations

import logging
import sys
from collections.abc import Sequence

from ..config import Settings, get_settings
from ..core.ports import RecurringTaskSource
from ..errors import TodoError
from ..logging_setup import setup_logging
from .bootstrap import create_app
from .commands import registry

logger = logging.getLogger(__name__)

EXIT_OK = 0
EXIT_FAILURE = 1


def console_level_for(name: str) -> int:
    """Numeric level for a level name; unknown names fall back to WARNING."""
    level = logging.getLevelName(name.strip().upper())
    return level if isinstance(level, int) else logging.WARNING


def main(
    argv: Sequence[str] | None = None,
    *,
    settings: Settings | None = None,
    source: RecurringTaskSource | None = None,
) -> int:
    if settings is None:
        settings = get_settings()

    setup_logging(
        console_level=console_level_for(settings.log_level),
        log_file=settings.log_file if settings.log_to_file else None,
    )

    parser = registry.build_parser()
    try:
        args = parser.parse_args(argv)
        app = create_app(settings=settings, source=source)
        if args.command is None:
            # Bare `todo` only makes sure the task file exists.
            return EXIT_OK

        output = registry.handle(app, args)
    except TodoError as exc:
        logger.debug("Command failed: %s", exc, exc_info=True)
        print(f"todo: {exc}", file=sys.stderr)
        return EXIT_FAILURE
    except Exception as exc:
        logger.exception("Unexpected failure")
        print(f"todo: unexpected error: {exc}", file=sys.stderr)
        return EXIT_FAILURE

    if output:
        sys.stdout.write(output)
        sys.stdout.flush()
    return EXIT_OK


def run() -> None:
    """Console-script wrapper."""
    sys.exit(main())


if __name__ == "__main__":
    run()
