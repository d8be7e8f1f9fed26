# src/tasklist/core/state.py

from __future__ import annotations

from dataclasses import dataclass, field

from ..tasks.task_models import Task
from ..tasks.task_store import TaskFileStore


@dataclass
class SessionState:
    # Settings are kept on the state for easy access from handlers.
    settings: object
    store: TaskFileStore

    tasks: list[Task] = field(default_factory=list)
    page: int = 0
    running: bool = True

    @property
    def page_size(self) -> int:
        return int(getattr(self.settings, "page_size", 9))

    # ---- pagination ----

    def page_bounds(self) -> tuple[int, int]:
        """Return (start, end) slice indices of the current page."""
        start = self.page * self.page_size
        end = min(start + self.page_size, len(self.tasks))
        return start, max(start, end)

    def page_tasks(self) -> list[Task]:
        start, end = self.page_bounds()
        return self.tasks[start:end]

    def has_previous_page(self) -> bool:
        return self.page > 0

    def has_next_page(self) -> bool:
        return (self.page + 1) * self.page_size < len(self.tasks)

    def previous_page(self) -> bool:
        if not self.has_previous_page():
            return False
        self.page -= 1
        return True

    def next_page(self) -> bool:
        if not self.has_next_page():
            return False
        self.page += 1
        return True

    def clamp_page(self) -> None:
        """Move back to the last non-empty page after the list shrank."""
        last = max(0, (len(self.tasks) - 1) // self.page_size)
        if self.page > last:
            self.page = last

    # ---- persistence ----

    def save(self) -> None:
        self.store.save(self.tasks)
