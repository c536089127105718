# src/todolist/cli/main.py

"""
CLI entrypoint.

Initializes logging, builds AppState, loads the task file, runs the console
REPL, and saves on the way out.
"""

from __future__ import annotations

import logging

from ..cli.bootstrap import create_initial_state, load_on_startup, save_on_shutdown
from ..config import get_settings
from ..connectors.console_connector import run_console_loop
from ..logging_setup import setup_logging

logger = logging.getLogger(__name__)


def _shutdown(state) -> None:
    """Best-effort shutdown (no exceptions should escape)."""
    try:
        msg = save_on_shutdown(state)
    except Exception:
        logger.exception("Failed to save tasks on shutdown.")
        return
    if msg:
        print(msg)


def main() -> None:
    settings = get_settings()

    level_name = str(getattr(settings, "log_level", "INFO")).upper()
    console_level = getattr(logging, level_name, logging.INFO)
    setup_logging(log_dir=settings.log_dir, console_level=console_level)

    logger.info("Starting %s (tasks file %s)...", settings.app_name, settings.tasks_file)

    state = create_initial_state(settings=settings)
    print(load_on_startup(state))

    try:
        run_console_loop(state)
    finally:
        _shutdown(state)
        logger.info("Bye.")


if __name__ == "__main__":
    main()
