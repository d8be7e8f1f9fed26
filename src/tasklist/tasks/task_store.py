# src/tasklist/tasks/task_store.py

from __future__ import annotations

import contextlib
import logging
import os
from collections.abc import Iterable
from pathlib import Path

from ..errors import TaskStoreError
from .task_models import Task, TaskStatus

logger = logging.getLogger(__name__)

FIELD_SEP = "|"


class TaskFileStore:
    """
    Flat text task store.

    One record per line: `status-symbol|description|assignee`.
    The whole file is rewritten on every save; there is no incremental log.
    """

    def __init__(self, path: str | Path = "todo.txt") -> None:
        self._path = Path(path)

    @property
    def path(self) -> Path:
        return self._path

    def load(self) -> list[Task]:
        if not self._path.exists():
            logger.debug("Task file %s does not exist, starting empty.", self._path)
            return []

        tasks: list[Task] = []
        with open(self._path, "rb") as f:
            for lineno, raw in enumerate(f, start=1):
                try:
                    line = raw.decode("utf-8")
                except UnicodeDecodeError:
                    logger.debug("Skipping undecodable line %d in %s", lineno, self._path)
                    continue
                task = parse_line(line)
                if task is None:
                    logger.debug("Skipping malformed line %d in %s", lineno, self._path)
                    continue
                tasks.append(task)

        logger.debug("Loaded %d tasks from %s", len(tasks), self._path)
        return tasks

    def save(self, tasks: Iterable[Task]) -> None:
        text = "".join(format_line(t) + "\n" for t in tasks)
        tmp = self._path.with_name(self._path.name + ".tmp")
        try:
            self._path.parent.mkdir(parents=True, exist_ok=True)
            with open(tmp, "w", encoding="utf-8", newline="\n") as f:
                f.write(text)
            os.replace(tmp, self._path)
        except OSError as e:
            with contextlib.suppress(OSError):
                tmp.unlink(missing_ok=True)
            raise TaskStoreError(self._path, e) from e
        logger.debug("Saved %d tasks to %s", text.count("\n"), self._path)


def parse_line(line: str) -> Task | None:
    """Parse one stored record, or return None when it has fewer than three fields.

    Only the first two separators split; the assignee keeps any further "|".
    """
    parts = line.rstrip("\r\n").split(FIELD_SEP, 2)
    if len(parts) != 3:
        return None
    symbol, description, assignee = parts
    assignee = assignee.strip()
    return Task(
        description=description,
        status=TaskStatus.from_symbol(symbol),
        assignee=assignee or None,
    )


def format_line(task: Task) -> str:
    return FIELD_SEP.join((task.status.symbol, task.description, task.assignee or ""))
