# src/todo_cli/config.py

"""Settings loaded from environment variables (+ optional .env).

Environment:
- TODO_LOG_LEVEL       console log level (default: WARNING)
- TODO_DATA_DIR        data directory (default: `.todo` next to the executable)
- TODO_TASKS_PATH      task file (default: <data_dir>/tasks.txt)
- TODO_RECURRING_PATH  recurring-task file read by `refresh` (default: <data_dir>/recurring.txt)
- TODO_LOG_FILE        also log to <data_dir>/todo.log (default: true)
"""

from __future__ import annotations

import os
import sys
from dataclasses import dataclass
from functools import lru_cache
from pathlib import Path

from dotenv import find_dotenv, load_dotenv

ENV_PREFIX = "TODO"

_TRUE = {"1", "true", "yes", "y", "on"}
_FALSE = {"0", "false", "no", "n", "off"}


def _k(suffix: str) -> str:
    """Build env var name with the project prefix."""
    return f"{ENV_PREFIX}_{suffix}"


def _env(name: str, default: str = "") -> str:
    v = os.getenv(name)
    return default if v is None else v


def parse_bool(raw: str) -> bool:
    """Parse a yes/no word. Raises ValueError on anything else."""
    value = raw.strip().lower()
    if value in _TRUE:
        return True
    if value in _FALSE:
        return False
    raise ValueError(f"expected one of true/false, yes/no, 1/0, on/off; got {raw!r}")


def _env_bool(name: str, default: bool) -> bool:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    try:
        return parse_bool(raw)
    except ValueError:
        return default


def _env_path(name: str, default: Path) -> Path:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    return Path(raw).expanduser()


def default_data_dir() -> Path:
    """`.todo` beside the running executable (the console script, or sys.executable)."""
    exe = sys.argv[0] if sys.argv and sys.argv[0] else sys.executable
    return Path(exe).resolve().parent / ".todo"


@dataclass(frozen=True, slots=True)
class Settings:
    # ---- Logging ----
    log_level: str
    log_to_file: bool

    # ---- Local data paths ----
    data_dir: Path
    tasks_path: Path
    recurring_path: Path

    @property
    def log_file(self) -> Path:
        return self.data_dir / "todo.log"

    @staticmethod
    def from_env() -> "Settings":
        log_level = _env(_k("LOG_LEVEL"), "WARNING").strip().upper() or "WARNING"
        log_to_file = _env_bool(_k("LOG_FILE"), True)

        data_dir = _env_path(_k("DATA_DIR"), default_data_dir())
        tasks_path = _env_path(_k("TASKS_PATH"), data_dir / "tasks.txt")
        recurring_path = _env_path(_k("RECURRING_PATH"), data_dir / "recurring.txt")

        return Settings(
            log_level=log_level,
            log_to_file=log_to_file,
            data_dir=data_dir,
            tasks_path=tasks_path,
            recurring_path=recurring_path,
        )


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    # .env from the working directory, not from the installed package dir
    load_dotenv(find_dotenv(usecwd=True), override=False)
    return Settings.from_env()
