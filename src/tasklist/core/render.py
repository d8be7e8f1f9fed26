# src/tasklist/core/render.py

"""Text for one frame of the session screen. Pure functions, no I/O."""

from __future__ import annotations

from ..tasks.task_models import RESET, Task
from .state import SessionState

LIST_HEADER = "\n========== LIST ==========\n"
LIST_FOOTER = "\n==============================\n"
EMPTY_PAGE = "(No task to display)"


def format_task(task: Task, number: int, *, color: bool = True) -> str:
    """One list row: `{n}. [{symbol}] {description} (for: X)`, wrapped in the status color."""
    suffix = f" (for: {task.assignee})" if task.assignee else ""
    line = f"{number}. [{task.status.symbol}] {task.description}{suffix}"
    if not color:
        return line
    return f"{task.status.color}{line}{RESET}"


def render_page(state: SessionState, *, color: bool = True) -> list[str]:
    lines = [LIST_HEADER]
    start, _ = state.page_bounds()
    rows = state.page_tasks()
    if not rows:
        lines.append(EMPTY_PAGE)
    for offset, task in enumerate(rows):
        lines.append(format_task(task, start + offset + 1, color=color))
    lines.append(LIST_FOOTER)
    return lines


def render_navigation(state: SessionState) -> list[str]:
    lines: list[str] = []
    if state.has_previous_page():
        lines.append(" a : Previous page")
    if state.has_next_page():
        lines.append(" e : Next page")
    if lines:
        lines.append("")
    return lines


def render_menu(state: SessionState) -> list[str]:
    lines = [" 1 : Add a task"]
    if state.tasks:
        lines += [
            " 2 : Change status of a task",
            " 3 : Remove a task",
            " 4 : Edit text of a task",
            " 5 : Edit person of a task",
        ]
    lines.append(" q : Quit")
    return lines


def render_screen(state: SessionState, *, color: bool = True) -> list[str]:
    return render_page(state, color=color) + render_navigation(state) + render_menu(state)
