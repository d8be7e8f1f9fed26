# src/tasklist/tasks/task_models.py

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

RESET = "\x1b[0m"


class TaskStatus(Enum):
    """
    Task lifecycle status.

    Each member carries its persisted one-character symbol, the keyword used
    by the "change status" prompt and the ANSI color used when rendering.
    """

    PENDING = ("O", "pending", "\x1b[93m")
    FINISHED = ("✓", "finish", "\x1b[94m")
    STOPPED = ("!", "stop", "\x1b[91m")
    COMPLETED = ("#", "complete", "\x1b[92m")
    TODO = (".", "todo", "\x1b[90m")

    def __init__(self, symbol: str, keyword: str, color: str) -> None:
        self.symbol = symbol
        self.keyword = keyword
        self.color = color

    @classmethod
    def from_symbol(cls, raw: str | None) -> TaskStatus:
        # Unknown symbols from disk are not an error.
        for status in cls:
            if status.symbol == raw:
                return status
        return cls.PENDING

    @classmethod
    def from_keyword(cls, raw: str | None) -> TaskStatus | None:
        key = (raw or "").strip().lower()
        for status in cls:
            if status.keyword == key:
                return status
        return None


@dataclass(slots=True)
class Task:
    description: str
    status: TaskStatus = TaskStatus.TODO
    assignee: str | None = None

    def apply_keyword(self, keyword: str) -> bool:
        """Set the status named by `keyword`; unknown keywords leave it unchanged."""
        status = TaskStatus.from_keyword(keyword)
        if status is None:
            return False
        self.status = status
        return True
