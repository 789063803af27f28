# src/todo_cli/cli/commands.py

from __future__ import annotations

import argparse
import logging
from collections.abc import Callable
from typing import NoReturn

from .. import __version__
from ..config import parse_bool
from ..errors import MalformedRecord, MissingArgument, UnknownCommand, UsageError
from ..tasks.task_models import Task, parse_priority
from .bootstrap import TodoApp

CommandHandler = Callable[[TodoApp, argparse.Namespace], str | None]
ArgumentsHook = Callable[[argparse.ArgumentParser], None]

logger = logging.getLogger(__name__)


class _Parser(argparse.ArgumentParser):
    """ArgumentParser that raises UsageError instead of exiting with status 2."""

    def error(self, message: str) -> NoReturn:
        if "invalid choice" in message:
            raise UnknownCommand(f"{message}. See `todo --help` for usage.")
        if "required" in message:
            raise MissingArgument(f"{message}. See `todo --help` for usage.")
        raise UsageError(f"{message}. See `todo --help` for usage.")


class CommandRegistry:
    """Subcommand registry: name -> (handler, help text, argument setup)."""

    def __init__(self) -> None:
        self._handlers: dict[str, CommandHandler] = {}
        self._help: dict[str, str] = {}
        self._arguments: dict[str, ArgumentsHook | None] = {}

    def register(
        self,
        name: str,
        handler: CommandHandler,
        help_text: str,
        arguments: ArgumentsHook | None = None,
    ) -> None:
        key = name.lower()
        self._handlers[key] = handler
        self._help[key] = help_text
        self._arguments[key] = arguments

    def build_parser(self) -> argparse.ArgumentParser:
        parser = _Parser(prog="todo", description="Personal task list.")
        parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
        sub = parser.add_subparsers(dest="command", metavar="<command>")
        for name, help_text in self._help.items():
            p = sub.add_parser(name, help=help_text, description=help_text)
            hook = self._arguments[name]
            if hook is not None:
                hook(p)
        return parser

    def handle(self, app: TodoApp, args: argparse.Namespace) -> str | None:
        """Run the handler for args.command; returns text for stdout (or None)."""
        handler = self._handlers.get(args.command)
        if handler is None:
            raise UnknownCommand(f"Unknown command: {args.command}. See `todo --help` for usage.")
        logger.debug("Running command %s", args.command)
        return handler(app, args)


registry = CommandRegistry()


def _priority(raw: str) -> int:
    try:
        return parse_priority(raw)
    except MalformedRecord as exc:
        raise argparse.ArgumentTypeError(str(exc)) from None


def _flag(raw: str) -> bool:
    try:
        return parse_bool(raw)
    except ValueError as exc:
        raise argparse.ArgumentTypeError(str(exc)) from None


def format_task(task: Task) -> str:
    return f"* {task.name}:\n  {task.description}\n  Due by {task.due_date}\n\n"


def _add_arguments(p: argparse.ArgumentParser) -> None:
    p.add_argument("name")
    p.add_argument("description")
    p.add_argument("due_date")
    p.add_argument("priority", type=_priority, help="non-negative integer, higher comes first")
    p.add_argument("auto_delete", type=_flag, help="true/false: drop this task on the next refresh")


def cmd_add(app: TodoApp, args: argparse.Namespace) -> str | None:
    app.store.add_task(
        Task(
            name=args.name,
            description=args.description,
            due_date=args.due_date,
            priority=args.priority,
            auto_delete=args.auto_delete,
        )
    )
    return None


def _remove_arguments(p: argparse.ArgumentParser) -> None:
    p.add_argument("re", metavar="regex", help="remove every task whose name matches")


def cmd_remove(app: TodoApp, args: argparse.Namespace) -> str | None:
    app.store.remove_tasks(args.re)
    return None


def _list_arguments(p: argparse.ArgumentParser) -> None:
    p.add_argument("re", metavar="regex", nargs="?", default=None, help="only names matching")


def cmd_list(app: TodoApp, args: argparse.Namespace) -> str | None:
    tasks = app.store.list_tasks(args.re)
    return "".join(format_task(t) for t in tasks)


def cmd_refresh(app: TodoApp, args: argparse.Namespace) -> str | None:
    app.store.refresh(app.source)
    return None


def cmd_clear(app: TodoApp, args: argparse.Namespace) -> str | None:
    app.store.clear()
    return None


registry.register("add", cmd_add, help_text="Add a task.", arguments=_add_arguments)
registry.register("remove", cmd_remove, help_text="Remove tasks by name regex.", arguments=_remove_arguments)
registry.register("list", cmd_list, help_text="List tasks, optionally filtered by name regex.", arguments=_list_arguments)
registry.register("refresh", cmd_refresh, help_text="Merge recurring tasks and drop expired auto-delete tasks.")
registry.register("clear", cmd_clear, help_text="Remove all tasks.")
