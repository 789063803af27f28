# tests/conftest.py

from __future__ import annotations

from pathlib import Path

import pytest

from todo_cli.cli import main as cli_main
from todo_cli.config import Settings
from todo_cli.tasks.task_store import TaskStore


@pytest.fixture()
def settings(tmp_path: Path) -> Settings:
    """
    Settings pointing at a per-test data dir.

    Built directly rather than via get_settings() so the real environment and
    any local .env never leak into tests.
    """
    data_dir = tmp_path / ".todo"
    return Settings(
        log_level="WARNING",
        log_to_file=False,
        data_dir=data_dir,
        tasks_path=data_dir / "tasks.txt",
        recurring_path=data_dir / "recurring.txt",
    )


@pytest.fixture()
def tasks_file(tmp_path: Path) -> Path:
    path = tmp_path / "tasks.txt"
    path.write_text("", encoding="utf-8")
    return path


@pytest.fixture()
def store(tasks_file: Path) -> TaskStore:
    return TaskStore(tasks_file)


@pytest.fixture(autouse=True)
def _keep_pytest_logging(monkeypatch: pytest.MonkeyPatch) -> None:
    # setup_logging() replaces root handlers, which would drop pytest's capture handler.
    monkeypatch.setattr(cli_main, "setup_logging", lambda **_kw: None)
