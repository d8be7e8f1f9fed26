# src/tasklist/connectors/console_connector.py

from __future__ import annotations

import logging
import subprocess
import sys
import time

from ..cli.commands import registry as command_registry
from ..core.ports import Console
from ..core.render import render_screen
from ..core.state import SessionState

logger = logging.getLogger(__name__)

GREETING = "Welcome back boss !"
INVALID_OPTION = "Invalid option!"
ANSI_CLEAR = "\033[2J\033[H"


class TerminalConsole:
    """Console backed by stdin/stdout and the platform's clear command."""

    def prompt(self, text: str) -> str:
        return input(text).strip()

    def write(self, text: str = "") -> None:
        print(text, flush=True)

    def clear(self) -> None:
        cmd = ["cmd", "/C", "cls"] if sys.platform.startswith("win") else ["clear"]
        try:
            subprocess.run(cmd, check=False)
        except OSError:
            logger.debug("Clear command %s unavailable, using ANSI sequence.", cmd[0])
            sys.stdout.write(ANSI_CLEAR)
            sys.stdout.flush()

    def pause(self, seconds: float) -> None:
        if seconds > 0:
            time.sleep(seconds)


def intro(state: SessionState, console: Console) -> None:
    console.clear()
    console.write(GREETING)
    console.pause(float(getattr(state.settings, "intro_delay", 0.75)))


def draw(state: SessionState, console: Console) -> None:
    console.clear()
    color = bool(getattr(state.settings, "color_enabled", True))
    for line in render_screen(state, color=color):
        console.write(line)


def run_console_loop(state: SessionState, console: Console) -> None:
    """Render, read a menu choice, dispatch; until a quit choice or end of input."""
    logger.info("Session started with %d tasks.", len(state.tasks))

    while state.running:
        try:
            draw(state, console)
            choice = console.prompt("\nChoice : ")
            if not command_registry.handle(state, console, choice):
                logger.debug("Invalid menu choice %r", choice)
                console.write(INVALID_OPTION)
                console.pause(float(getattr(state.settings, "invalid_delay", 1.0)))
        except EOFError:
            logger.info("Console EOF received, exiting.")
            state.running = False
            break
        except KeyboardInterrupt:
            logger.info("Console KeyboardInterrupt, exiting.")
            console.write()
            state.running = False
            break

    logger.info("Session finished with %d tasks.", len(state.tasks))
