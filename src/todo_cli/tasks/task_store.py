# src/todo_cli/tasks/task_store.py

from __future__ import annotations

import contextlib
import logging
import os
from collections.abc import Callable, Iterable
from dataclasses import dataclass, field
from pathlib import Path

from ..core.ports import RecurringTaskSource
from ..errors import DuplicateName, TaskIOError
from .task_filters import NameMatcher, compile_name_matcher, match_all
from .task_models import Task, format_task_line, parse_task_line

logger = logging.getLogger(__name__)


@dataclass(slots=True)
class RefreshResult:
    """What a refresh did to the task list."""

    added: list[Task] = field(default_factory=list)
    expired: list[Task] = field(default_factory=list)
    skipped: list[str] = field(default_factory=list)
    total: int = 0


def read_task_file(path: Path) -> list[Task]:
    """
    Parse every non-blank line of a task file.

    Raises TaskIOError if the file cannot be read, MalformedRecord on a bad line.
    """
    try:
        with path.open("r", encoding="utf-8") as fh:
            lines = fh.readlines()
    except (OSError, UnicodeDecodeError) as exc:
        raise TaskIOError(f"Failed to read tasks file {path}: {exc}", path) from exc

    tasks: list[Task] = []
    for line_no, line in enumerate(lines, start=1):
        if not line.strip():
            continue
        tasks.append(parse_task_line(line, line_no=line_no))
    return tasks


def insert_by_priority(tasks: list[Task], task: Task) -> list[Task]:
    """
    Return a new list with `task` placed before the first task of strictly lower priority.

    Appends when no such task exists, so equal priorities keep insertion order.
    """
    out = list(tasks)
    for i, existing in enumerate(out):
        if existing.priority < task.priority:
            out.insert(i, task)
            return out
    out.append(task)
    return out


def merge_refresh(existing: Iterable[Task], incoming: Iterable[Task]) -> tuple[list[Task], RefreshResult]:
    """
    Merge recurring tasks into the stored list.

    Rules, in order:
    - stored auto-delete tasks expire (they come back only if `incoming` reissues them)
    - an incoming task whose name is already stored is skipped, the stored one wins
      (repeats of the same name inside `incoming` are skipped as well)
    - each remaining incoming task is emitted once, right before the first stored task
      of strictly lower priority; leftovers are appended in incoming order
    """
    result = RefreshResult()

    kept: list[Task] = []
    for task in existing:
        if task.auto_delete:
            result.expired.append(task)
        else:
            kept.append(task)

    seen = {t.name for t in kept}
    pending: list[Task] = []
    for task in incoming:
        if task.name in seen:
            result.skipped.append(task.name)
            continue
        seen.add(task.name)
        pending.append(task)

    merged: list[Task] = []
    for task in kept:
        still_pending: list[Task] = []
        for candidate in pending:
            if task.priority < candidate.priority:
                merged.append(candidate)
                result.added.append(candidate)
            else:
                still_pending.append(candidate)
        pending = still_pending
        merged.append(task)

    merged.extend(pending)
    result.added.extend(pending)
    result.total = len(merged)
    return merged, result


class TaskStore:
    """
    Flat-file task store.

    Every operation reads the whole file, works on the in-memory list and, for
    mutations, rewrites the file in full. The new content is written to a
    sibling temp file first and then moved over the target, so a failure
    never leaves a half-written task file.

    No locking: one process, one command at a time.
    """

    def __init__(
        self,
        path: str | Path,
        *,
        matcher_factory: Callable[[str], NameMatcher] = compile_name_matcher,
    ) -> None:
        self._path = Path(path)
        self._matcher_factory = matcher_factory

    @property
    def path(self) -> Path:
        return self._path

    # ---- low-level helpers ----

    def ensure_exists(self) -> None:
        """Create the parent directory and an empty task file if missing."""
        try:
            self._path.parent.mkdir(parents=True, exist_ok=True)
            if not self._path.exists():
                self._path.touch()
                logger.info("Created empty tasks file %s", self._path)
        except OSError as exc:
            raise TaskIOError(f"Failed to create tasks file {self._path}: {exc}", self._path) from exc

    def _write(self, tasks: Iterable[Task]) -> None:
        content = "".join(format_task_line(t) + "\n" for t in tasks)
        tmp = self._path.with_name(self._path.name + ".tmp")
        try:
            tmp.write_text(content, encoding="utf-8")
            os.replace(tmp, self._path)
        except OSError as exc:
            with contextlib.suppress(OSError):
                tmp.unlink()
            raise TaskIOError(f"Failed to write tasks file {self._path}: {exc}", self._path) from exc
        logger.debug("Wrote %d bytes to %s", len(content), self._path)

    # ---- public API ----

    def load(self) -> list[Task]:
        tasks = read_task_file(self._path)
        logger.debug("Loaded %d tasks from %s", len(tasks), self._path)
        return tasks

    def list_tasks(self, pattern: str | None = None) -> list[Task]:
        """Tasks in file order, optionally only those whose name matches `pattern`."""
        matcher = self._matcher_factory(pattern) if pattern is not None else None
        tasks = self.load()
        if matcher is None:
            return tasks
        return [t for t in tasks if matcher(t.name)]

    def add_task(self, task: Task) -> None:
        task.validate()
        tasks = self.load()
        if any(t.name == task.name for t in tasks):
            raise DuplicateName(task.name)

        self._write(insert_by_priority(tasks, task))
        logger.info("Task added name=%s priority=%s auto_delete=%s", task.name, task.priority, task.auto_delete)

    def remove_tasks(self, pattern: str) -> list[Task]:
        """Remove every task whose name matches `pattern`; returns the removed tasks."""
        return self.remove_matching(self._matcher_factory(pattern))

    def remove_matching(self, matcher: NameMatcher) -> list[Task]:
        tasks = self.load()
        kept: list[Task] = []
        removed: list[Task] = []
        for task in tasks:
            (removed if matcher(task.name) else kept).append(task)

        self._write(kept)
        logger.info("Removed %d task(s), %d left", len(removed), len(kept))
        return removed

    def clear(self) -> list[Task]:
        return self.remove_matching(match_all)

    def refresh(self, source: RecurringTaskSource) -> RefreshResult:
        incoming = source.fetch()
        for task in incoming:
            task.validate()
        existing = self.load()

        merged, result = merge_refresh(existing, incoming)
        self._write(merged)

        if result.skipped:
            logger.info("Refresh skipped already stored tasks: %s", ", ".join(result.skipped))
        logger.info(
            "Refresh done added=%d expired=%d total=%d",
            len(result.added),
            len(result.expired),
            result.total,
        )
        return result
