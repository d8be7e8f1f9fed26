# src/tasklist/errors.py

"""Exceptions raised by tasklist."""


class TasklistError(Exception):
    """Base exception for tasklist."""

    pass


class TaskStoreError(TasklistError):
    """The task file could not be written."""

    def __init__(self, path, cause: OSError | None = None) -> None:
        super().__init__(f"Cannot write task file: {path}")
        self.path = path
        self.cause = cause
