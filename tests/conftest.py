# tests/conftest.py

from __future__ import annotations

from pathlib import Path
from types import SimpleNamespace

import pytest

from tasklist.core.state import SessionState
from tasklist.tasks.task_models import Task, TaskStatus
from tasklist.tasks.task_store import TaskFileStore

from .fakes import FakeConsole


@pytest.fixture()
def settings(tmp_path: Path) -> SimpleNamespace:
    """
    Minimal settings object compatible with SessionState and the CLI.

    We intentionally use a SimpleNamespace rather than importing real config,
    to keep unit tests isolated from the environment and .env files.
    """
    return SimpleNamespace(
        app_name="tasklist",
        log_level="WARNING",
        data_dir=tmp_path / "data",
        todo_file=tmp_path / "todo.txt",
        page_size=9,
        color_enabled=False,
        intro_delay=0.0,
        outro_delay=0.0,
        invalid_delay=0.0,
    )


@pytest.fixture()
def store(settings: SimpleNamespace) -> TaskFileStore:
    return TaskFileStore(settings.todo_file)


@pytest.fixture()
def state(settings: SimpleNamespace, store: TaskFileStore) -> SessionState:
    return SessionState(settings=settings, store=store)


@pytest.fixture()
def make_state(settings: SimpleNamespace, store: TaskFileStore):
    """Build a state holding `n` todo tasks named "task 1".."task n"."""

    def _make(n: int) -> SessionState:
        tasks = [Task(description=f"task {i}", status=TaskStatus.TODO) for i in range(1, n + 1)]
        return SessionState(settings=settings, store=store, tasks=tasks)

    return _make


@pytest.fixture()
def console() -> FakeConsole:
    return FakeConsole()
