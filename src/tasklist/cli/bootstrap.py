# src/tasklist/cli/bootstrap.py

"""
CLI bootstrap helpers.

This module is the "composition root": it takes the settings once and wires
the file store and the loaded task list into a SessionState.
"""

from __future__ import annotations

import logging

from ..config import get_settings
from ..core.state import SessionState
from ..tasks.task_store import TaskFileStore

logger = logging.getLogger(__name__)


def create_initial_state(*, settings=None) -> SessionState:
    """
    Create SessionState from the provided settings.

    If settings is None, falls back to get_settings().
    """
    if settings is None:
        settings = get_settings()

    store = TaskFileStore(settings.todo_file)
    tasks = store.load()
    logger.info("Loaded %d tasks from %s", len(tasks), store.path)
    return SessionState(settings=settings, store=store, tasks=tasks)
