# src/todo_cli/core/ports.py

from __future__ import annotations

"""
Ports (interfaces) used by the store and the CLI.

Refresh depends on a Protocol instead of a concrete recurring-task provider,
so tests can hand in a fake and other providers can be plugged in later.
"""

from pathlib import Path
from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from ..tasks.task_models import Task
    from ..tasks.task_store import RefreshResult


class RecurringTaskSource(Protocol):
    """Supplies the tasks that should exist after a refresh."""

    def fetch(self) -> list[Task]: ...


class TaskRepo(Protocol):
    # Read API
    def load(self) -> list[Task]: ...
    def list_tasks(self, pattern: str | None = None) -> list[Task]: ...

    # Mutations (each rewrites the whole file)
    def add_task(self, task: Task) -> None: ...
    def remove_tasks(self, pattern: str) -> list[Task]: ...
    def clear(self) -> list[Task]: ...
    def refresh(self, source: RecurringTaskSource) -> RefreshResult: ...

    @property
    def path(self) -> Path: ...
