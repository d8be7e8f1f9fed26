# tests/test_config.py

from __future__ import annotations

from pathlib import Path

import pytest

from tasklist import config
from tasklist.config import Settings


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch) -> None:
    for name in (
        "TASKLIST_TODO_FILE",
        "TASKLIST_PAGE_SIZE",
        "TASKLIST_COLOR",
        "TASKLIST_LOG_LEVEL",
        "TASKLIST_INTRO_DELAY",
        "TASKLIST_OUTRO_DELAY",
        "TASKLIST_INVALID_DELAY",
        "NO_COLOR",
        "FORCE_COLOR",
    ):
        monkeypatch.delenv(name, raising=False)
    monkeypatch.setattr(config, "_stdout_is_tty", lambda: True)


def test_defaults() -> None:
    s = Settings.from_env()
    assert s.todo_file == Path("todo.txt")
    assert s.page_size == 9
    assert s.color_enabled is True
    assert s.intro_delay == 0.75
    assert s.outro_delay == 1.0
    assert s.invalid_delay == 1.0


def test_overrides(monkeypatch) -> None:
    monkeypatch.setenv("TASKLIST_TODO_FILE", "/tmp/x/list.txt")
    monkeypatch.setenv("TASKLIST_PAGE_SIZE", "5")
    monkeypatch.setenv("TASKLIST_INTRO_DELAY", "0")
    s = Settings.from_env()
    assert s.todo_file == Path("/tmp/x/list.txt")
    assert s.page_size == 5
    assert s.intro_delay == 0.0


@pytest.mark.parametrize("raw", ["0", "-3", "nine"])
def test_bad_page_size_falls_back(monkeypatch, raw: str) -> None:
    monkeypatch.setenv("TASKLIST_PAGE_SIZE", raw)
    assert Settings.from_env().page_size == 9


def test_no_color_disables_color(monkeypatch) -> None:
    monkeypatch.setenv("NO_COLOR", "1")
    assert Settings.from_env().color_enabled is False


def test_piped_output_has_no_color(monkeypatch) -> None:
    monkeypatch.setattr(config, "_stdout_is_tty", lambda: False)
    assert Settings.from_env().color_enabled is False


def test_force_color_when_piped(monkeypatch) -> None:
    monkeypatch.setattr(config, "_stdout_is_tty", lambda: False)
    monkeypatch.setenv("FORCE_COLOR", "1")
    assert Settings.from_env().color_enabled is True

    monkeypatch.setenv("NO_COLOR", "1")
    assert Settings.from_env().color_enabled is False
