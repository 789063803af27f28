# src/todo_cli/tasks/recurring.py

"""
Recurring-task sources used by `todo refresh`.

The default source is a second pipe-delimited file (same format as the task
file) listing the tasks that should come back every cycle. Mark one-off
reminders with the auto-delete flag so the next refresh drops them unless the
file still lists them.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable
from pathlib import Path

from .task_models import Task
from .task_store import read_task_file

logger = logging.getLogger(__name__)


class FileRecurringSource:
    def __init__(self, path: str | Path) -> None:
        self.path = Path(path)

    def fetch(self) -> list[Task]:
        if not self.path.exists():
            logger.debug("No recurring tasks file at %s; nothing to merge.", self.path)
            return []
        tasks = read_task_file(self.path)
        logger.debug("Fetched %d recurring tasks from %s", len(tasks), self.path)
        return tasks


class StaticRecurringSource:
    """Fixed in-memory list (embedding, tests)."""

    def __init__(self, tasks: Iterable[Task] = ()) -> None:
        self._tasks = list(tasks)

    def fetch(self) -> list[Task]:
        return list(self._tasks)
