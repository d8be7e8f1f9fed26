# tests/test_main.py

from __future__ import annotations

from tasklist.cli.main import run
from tasklist.tasks.task_models import Task, TaskStatus
from tasklist.tasks.task_store import TaskFileStore

from .fakes import FakeConsole


def test_run_loads_existing_file_and_saves_changes(settings) -> None:
    TaskFileStore(settings.todo_file).save([Task("existing", TaskStatus.PENDING, "Ada")])

    console = FakeConsole(["2", "1", "complete", "quit"])
    assert run(settings, console) == 0

    assert settings.todo_file.read_text("utf-8") == "#|existing|Ada\n"
    assert console.lines[0] == "Welcome back boss !"


def test_unwritable_task_file_is_fatal(settings, tmp_path, capsys) -> None:
    # The parent "directory" is a regular file, so the task file can never be created.
    (tmp_path / "blocker").write_text("x", "utf-8")
    settings.todo_file = tmp_path / "blocker" / "todo.txt"

    console = FakeConsole(["1", "task", "", "q"])
    assert run(settings, console) == 1
    assert "Cannot write task file" in capsys.readouterr().err
