# src/tasklist/config.py

"""Centralized settings loaded from environment variables (+ optional .env).

With no variables set the defaults reproduce the plain behaviour:
`todo.txt` in the working directory, pages of 9 tasks, colored output on a terminal.
"""

from __future__ import annotations

import os
import sys
from dataclasses import dataclass
from functools import lru_cache
from pathlib import Path

from dotenv import load_dotenv

ENV_PREFIX = "TASKLIST"
DEFAULT_PAGE_SIZE = 9


def _k(suffix: str) -> str:
    """Build env var name with the project prefix."""
    return f"{ENV_PREFIX}_{suffix}"


def _env(name: str, default: str = "") -> str:
    v = os.getenv(name)
    return default if v is None else v


def _env_bool(name: str, default: bool) -> bool:
    raw = os.getenv(name)
    if raw is None:
        return default
    return raw.strip().lower() in {"1", "true", "yes", "y", "on"}


def _env_int(name: str, default: int) -> int:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    try:
        return int(raw)
    except ValueError:
        return default


def _env_float(name: str, default: float) -> float:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    try:
        return float(raw)
    except ValueError:
        return default


def _env_path(name: str, default: Path) -> Path:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    return Path(raw).expanduser()


def _stdout_is_tty() -> bool:
    try:
        return sys.stdout.isatty()
    except (AttributeError, ValueError):
        return False


@dataclass(frozen=True, slots=True)
class Settings:
    # ---- App / logging ----
    app_name: str
    log_level: str
    data_dir: Path

    # ---- Storage ----
    todo_file: Path

    # ---- Screen ----
    page_size: int
    color_enabled: bool

    # ---- Pauses (seconds) ----
    intro_delay: float
    outro_delay: float
    invalid_delay: float

    @staticmethod
    def from_env() -> "Settings":
        page_size = _env_int(_k("PAGE_SIZE"), DEFAULT_PAGE_SIZE)
        if page_size < 1:
            page_size = DEFAULT_PAGE_SIZE

        # Piped output stays plain unless FORCE_COLOR; NO_COLOR (https://no-color.org) always wins.
        force_color = _env_bool("FORCE_COLOR", False)
        color_enabled = (
            _env_bool(_k("COLOR"), True)
            and (force_color or _stdout_is_tty())
            and os.getenv("NO_COLOR") is None
        )

        return Settings(
            app_name=_env(_k("APP_NAME"), "tasklist") or "tasklist",
            log_level=_env(_k("LOG_LEVEL"), "WARNING"),
            data_dir=_env_path(_k("DATA_DIR"), Path(".local/tasklist")),
            todo_file=_env_path(_k("TODO_FILE"), Path("todo.txt")),
            page_size=page_size,
            color_enabled=color_enabled,
            intro_delay=max(0.0, _env_float(_k("INTRO_DELAY"), 0.75)),
            outro_delay=max(0.0, _env_float(_k("OUTRO_DELAY"), 1.0)),
            invalid_delay=max(0.0, _env_float(_k("INVALID_DELAY"), 1.0)),
        )


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    load_dotenv(override=False)
    return Settings.from_env()
