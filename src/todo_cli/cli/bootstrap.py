# src/todo_cli/cli/bootstrap.py

"""
CLI bootstrap helpers.

This module is the "composition root":
- loads settings once,
- ensures the data directory and the task file exist,
- wires the store and the recurring-task source into TodoApp.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass

from ..config import Settings, get_settings
from ..core.ports import RecurringTaskSource, TaskRepo
from ..tasks.recurring import FileRecurringSource
from ..tasks.task_store import TaskStore

logger = logging.getLogger(__name__)


@dataclass(slots=True)
class TodoApp:
    settings: Settings
    store: TaskRepo
    source: RecurringTaskSource


def create_app(*, settings: Settings | None = None, source: RecurringTaskSource | None = None) -> TodoApp:
    """
    Build TodoApp from the provided settings.

    Settings and source are injectable so tests never touch the real environment.
    If settings is None, falls back to get_settings().
    """
    if settings is None:
        settings = get_settings()

    store = TaskStore(settings.tasks_path)
    store.ensure_exists()

    if source is None:
        source = FileRecurringSource(settings.recurring_path)

    logger.debug("App ready tasks=%s recurring=%s", settings.tasks_path, settings.recurring_path)
    return TodoApp(settings=settings, store=store, source=source)
