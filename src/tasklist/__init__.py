"""tasklist: a paginated terminal task list backed by a flat text file."""

__version__ = "0.1.0"
