# src/tasklist/cli/commands.py

from __future__ import annotations

import logging
from collections.abc import Callable

from ..core.ports import Console
from ..core.state import SessionState
from ..tasks import task_api

CommandHandler = Callable[[SessionState, Console], None]

logger = logging.getLogger(__name__)

INDEX_PROMPT = "Which task (id): "
STATUS_PROMPT = "Set new status (pending / stop / complete / finish / todo): "
FAREWELL = "Salam boss !"


class CommandRegistry:
    """Maps a menu choice ("1", "a", "q", ...) to its handler."""

    def __init__(self) -> None:
        self._handlers: dict[str, CommandHandler] = {}

    def register(
        self,
        name: str,
        handler: CommandHandler,
        aliases: list[str] | None = None,
    ) -> None:
        aliases = aliases or []
        self._handlers[name] = handler
        for alias in aliases:
            self._handlers[alias] = handler

    def handle(self, state: SessionState, console: Console, choice: str) -> bool:
        """
        Run the handler for `choice`.
        Returns False if the choice is not a known menu entry.
        """
        handler = self._handlers.get(choice.strip())
        if handler is None:
            return False
        handler(state, console)
        return True


registry = CommandRegistry()


def _ask_index(state: SessionState, console: Console) -> int | None:
    index = task_api.parse_index(state, console.prompt(INDEX_PROMPT))
    if index is None:
        logger.debug("Ignoring invalid task number.")
    return index


def cmd_add(state: SessionState, console: Console) -> None:
    description = console.prompt("Task name: ")
    assignee = console.prompt("For who: ")
    task_api.add_task(state, description, assignee)


def cmd_status(state: SessionState, console: Console) -> None:
    index = _ask_index(state, console)
    if index is None:
        return
    task_api.change_status(state, index, console.prompt(STATUS_PROMPT))


def cmd_remove(state: SessionState, console: Console) -> None:
    index = _ask_index(state, console)
    if index is None:
        return
    task_api.remove_task(state, index)


def cmd_edit_text(state: SessionState, console: Console) -> None:
    index = _ask_index(state, console)
    if index is None:
        return
    task_api.edit_description(state, index, console.prompt("Rename to: "))


def cmd_edit_assignee(state: SessionState, console: Console) -> None:
    index = _ask_index(state, console)
    if index is None:
        return
    task_api.edit_assignee(state, index, console.prompt("Enter new person (empty to clear): "))


def cmd_previous_page(state: SessionState, console: Console) -> None:
    state.previous_page()


def cmd_next_page(state: SessionState, console: Console) -> None:
    state.next_page()


def cmd_quit(state: SessionState, console: Console) -> None:
    outro(state, console)
    state.running = False


def outro(state: SessionState, console: Console) -> None:
    console.clear()
    console.write(FAREWELL)
    console.pause(float(getattr(state.settings, "outro_delay", 1.0)))
    console.clear()


registry.register("1", cmd_add)
registry.register("2", cmd_status)
registry.register("3", cmd_remove)
registry.register("4", cmd_edit_text)
registry.register("5", cmd_edit_assignee)
registry.register("a", cmd_previous_page)
registry.register("e", cmd_next_page)
registry.register("q", cmd_quit, aliases=["quit", "exit"])
