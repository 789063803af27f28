# src/todo_cli/tasks/task_models.py

from __future__ import annotations

from dataclasses import dataclass

from ..errors import MalformedRecord

FIELD_SEP = "|"
FIELD_COUNT = 5

_FLAG_ON = "1"
_FLAG_OFF = "0"


@dataclass(frozen=True, slots=True)
class Task:
    """
    One entry of the task list.

    Notes:
    - name is the unique key inside a store.
    - due_date is opaque text; nothing interprets it as a calendar date.
    - priority is a non-negative integer; the store keeps higher numbers first.
    - auto_delete tasks are dropped on every refresh unless the source reissues them.
    """

    name: str
    description: str
    due_date: str
    priority: int
    auto_delete: bool = False

    def validate(self) -> None:
        """Raise MalformedRecord if this task cannot be written as a single line."""
        if not self.name:
            raise MalformedRecord("task name must not be empty")
        for label, value in (
            ("name", self.name),
            ("description", self.description),
            ("due_date", self.due_date),
        ):
            if FIELD_SEP in value:
                raise MalformedRecord(f"{label} must not contain '{FIELD_SEP}': {value!r}")
            if "\n" in value or "\r" in value:
                raise MalformedRecord(f"{label} must not contain line breaks: {value!r}")
        if isinstance(self.priority, bool) or not isinstance(self.priority, int):
            raise MalformedRecord(f"priority must be an integer, got {self.priority!r}")
        if self.priority < 0:
            raise MalformedRecord(f"priority must be non-negative, got {self.priority}")


def parse_priority(raw: str) -> int:
    raw = raw.strip()
    if not raw.isdigit() or not raw.isascii():
        raise MalformedRecord(f"priority must be a non-negative integer, got {raw!r}")
    return int(raw)


def parse_task_line(line: str, *, line_no: int | None = None) -> Task:
    """
    Parse `name|description|due_date|priority|flag` into a Task.

    A trailing newline is ignored. Flag "1" means auto-delete, anything else is off.
    """
    fields = line.rstrip("\r\n").split(FIELD_SEP)
    if len(fields) < FIELD_COUNT:
        raise MalformedRecord(
            f"expected {FIELD_COUNT} fields, found {len(fields)}", line_no=line_no
        )
    if len(fields) > FIELD_COUNT:
        raise MalformedRecord(
            f"expected {FIELD_COUNT} fields, found {len(fields)} (unescaped '{FIELD_SEP}'?)",
            line_no=line_no,
        )

    name, description, due_date, raw_priority, flag = fields
    try:
        priority = parse_priority(raw_priority)
    except MalformedRecord as exc:
        raise MalformedRecord(str(exc), line_no=line_no) from None

    return Task(
        name=name,
        description=description,
        due_date=due_date,
        priority=priority,
        auto_delete=flag == _FLAG_ON,
    )


def format_task_line(task: Task) -> str:
    """Serialize a task to its line form (without the trailing newline)."""
    flag = _FLAG_ON if task.auto_delete else _FLAG_OFF
    return FIELD_SEP.join(
        (task.name, task.description, task.due_date, str(task.priority), flag)
    )
