# src/todo_cli/errors.py

"""
Error taxonomy.

Store and record code raise these; only the CLI entrypoint catches them,
reports the message on stderr and exits with status 1.
"""

from __future__ import annotations


class TodoError(Exception):
    """Base class for every failure reported to the user."""


class TaskIOError(TodoError):
    """The task file (or recurring-task file) could not be opened, read or written."""

    def __init__(self, message: str, path: object | None = None) -> None:
        super().__init__(message)
        self.path = path


class MalformedRecord(TodoError):
    """A line does not parse into a task, or a task cannot be serialized."""

    def __init__(self, message: str, line_no: int | None = None) -> None:
        if line_no is not None:
            message = f"line {line_no}: {message}"
        super().__init__(message)
        self.line_no = line_no


class InvalidPattern(TodoError):
    def __init__(self, pattern: str, reason: str) -> None:
        super().__init__(
            f"Invalid regular expression {pattern!r}: {reason}. See `todo --help` for usage."
        )
        self.pattern = pattern


class DuplicateName(TodoError):
    def __init__(self, name: str) -> None:
        super().__init__(f"Duplicate task '{name}'.")
        self.name = name


class UsageError(TodoError):
    """Command line could not be understood."""


class MissingArgument(UsageError):
    pass


class UnknownCommand(UsageError):
    pass
