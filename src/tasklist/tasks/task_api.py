# src/tasklist/tasks/task_api.py

"""
Task operations over the session state.

Tasks are addressed by their 1-based position in the list. Every helper that
changes the list persists it right away; helpers that receive an index the
list does not have return None/False and change nothing.
"""

from __future__ import annotations

import logging

from ..core.state import SessionState
from .task_models import Task, TaskStatus

logger = logging.getLogger(__name__)


def clean_field(raw: str | None) -> str:
    # "|" is the field separator on disk.
    return (raw or "").strip().replace("|", "/")


def parse_index(state: SessionState, raw: str | None) -> int | None:
    """Turn user input into a 0-based list index, or None when it is not a valid task number."""
    try:
        number = int((raw or "").strip())
    except ValueError:
        return None
    if number < 1 or number > len(state.tasks):
        return None
    return number - 1


def add_task(state: SessionState, description: str, assignee: str | None = None) -> Task:
    task = Task(
        description=clean_field(description),
        status=TaskStatus.TODO,
        assignee=clean_field(assignee) or None,
    )
    state.tasks.append(task)
    state.save()
    logger.info("Added task #%d", len(state.tasks))
    return task


def change_status(state: SessionState, index: int, keyword: str) -> bool:
    """Apply a status keyword to the task at `index`. Returns True if the status was recognised."""
    task = state.tasks[index]
    changed = task.apply_keyword(keyword)
    state.save()
    if changed:
        logger.info("Task #%d status -> %s", index + 1, task.status.name)
    else:
        logger.debug("Ignoring unknown status keyword %r", keyword)
    return changed


def remove_task(state: SessionState, index: int) -> Task:
    task = state.tasks.pop(index)
    state.clamp_page()
    state.save()
    logger.info("Removed task #%d", index + 1)
    return task


def edit_description(state: SessionState, index: int, description: str) -> Task:
    task = state.tasks[index]
    task.description = clean_field(description)
    state.save()
    logger.info("Edited text of task #%d", index + 1)
    return task


def edit_assignee(state: SessionState, index: int, assignee: str | None) -> Task:
    task = state.tasks[index]
    task.assignee = clean_field(assignee) or None
    state.save()
    logger.info("Edited assignee of task #%d", index + 1)
    return task
