# src/tasklist/cli/main.py

"""
CLI entrypoint.

Initializes logging, loads the task file, then runs the interactive session
in the main thread. A task file that cannot be written ends the process.
"""

from __future__ import annotations

import logging
import sys

from ..cli.bootstrap import create_initial_state
from ..config import get_settings
from ..connectors.console_connector import TerminalConsole, intro, run_console_loop
from ..core.ports import Console
from ..errors import TaskStoreError
from ..logging_setup import setup_logging

logger = logging.getLogger(__name__)


def run(settings=None, console: Console | None = None) -> int:
    """Run one session and return the process exit status."""
    if settings is None:
        settings = get_settings()
    if console is None:
        console = TerminalConsole()

    state = create_initial_state(settings=settings)
    intro(state, console)
    try:
        run_console_loop(state, console)
    except TaskStoreError as e:
        logger.exception("Failed to save tasks to %s", e.path)
        print(str(e), file=sys.stderr)
        return 1
    return 0


def main() -> None:
    settings = get_settings()

    level_name = str(getattr(settings, "log_level", "WARNING")).upper()
    console_level = getattr(logging, level_name, logging.WARNING)
    setup_logging(log_dir=settings.data_dir, console_level=console_level)

    logger.info("Starting %s...", settings.app_name)
    status = run(settings)
    logger.info("Bye.")
    sys.exit(status)


if __name__ == "__main__":
    main()
