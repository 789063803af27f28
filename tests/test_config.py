# tests/test_config.py

from __future__ import annotations

import os
from pathlib import Path

import pytest

from todo_cli.config import Settings, get_settings, parse_bool


@pytest.fixture()
def clean_env(monkeypatch: pytest.MonkeyPatch) -> pytest.MonkeyPatch:
    for name in ("TODO_LOG_LEVEL", "TODO_DATA_DIR", "TODO_TASKS_PATH", "TODO_RECURRING_PATH", "TODO_LOG_FILE"):
        monkeypatch.delenv(name, raising=False)
    return monkeypatch


def test_defaults_live_next_to_executable(clean_env: pytest.MonkeyPatch, tmp_path: Path) -> None:
    clean_env.setattr("sys.argv", [str(tmp_path / "bin" / "todo")])
    s = Settings.from_env()
    assert s.data_dir == (tmp_path / "bin").resolve() / ".todo"
    assert s.tasks_path == s.data_dir / "tasks.txt"
    assert s.recurring_path == s.data_dir / "recurring.txt"
    assert s.log_file == s.data_dir / "todo.log"
    assert s.log_level == "WARNING"
    assert s.log_to_file is True


def test_env_overrides(clean_env: pytest.MonkeyPatch, tmp_path: Path) -> None:
    clean_env.setenv("TODO_DATA_DIR", str(tmp_path / "data"))
    clean_env.setenv("TODO_RECURRING_PATH", str(tmp_path / "weekly.txt"))
    clean_env.setenv("TODO_LOG_LEVEL", "debug")
    clean_env.setenv("TODO_LOG_FILE", "off")
    s = Settings.from_env()
    assert s.tasks_path == tmp_path / "data" / "tasks.txt"
    assert s.recurring_path == tmp_path / "weekly.txt"
    assert s.log_level == "DEBUG"
    assert s.log_to_file is False


def test_bad_bool_env_falls_back(clean_env: pytest.MonkeyPatch) -> None:
    clean_env.setenv("TODO_LOG_FILE", "sometimes")
    assert Settings.from_env().log_to_file is True


@pytest.mark.parametrize("raw, expected", [("TRUE", True), ("1", True), (" yes ", True), ("off", False), ("0", False)])
def test_parse_bool(raw: str, expected: bool) -> None:
    assert parse_bool(raw) is expected


def test_parse_bool_rejects_other_words() -> None:
    with pytest.raises(ValueError):
        parse_bool("maybe")


def test_get_settings_reads_dotenv_from_working_directory(clean_env: pytest.MonkeyPatch, tmp_path: Path) -> None:
    # load_dotenv writes into os.environ; keep that inside this test
    clean_env.setattr(os, "environ", os.environ.copy())
    (tmp_path / ".env").write_text(f"TODO_DATA_DIR={tmp_path / 'from-dotenv'}\n", encoding="utf-8")
    clean_env.chdir(tmp_path)
    get_settings.cache_clear()
    try:
        s = get_settings()
    finally:
        get_settings.cache_clear()
    assert s.data_dir == tmp_path / "from-dotenv"
    assert s.tasks_path == tmp_path / "from-dotenv" / "tasks.txt"
