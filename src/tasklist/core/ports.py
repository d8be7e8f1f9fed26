# src/tasklist/core/ports.py

from __future__ import annotations

"""
Ports (interfaces) used by the core.

The session loop talks to the terminal only through `Console`, so tests can
drive it with scripted input instead of a real TTY.
"""

from typing import Protocol


class Console(Protocol):
    """Line-oriented terminal: prompts, output, screen clearing and pauses."""

    def prompt(self, text: str) -> str:
        """Show `text` and return the entered line, stripped. Raises EOFError at end of input."""
        ...

    def write(self, text: str = "") -> None: ...

    def clear(self) -> None: ...

    def pause(self, seconds: float) -> None: ...
