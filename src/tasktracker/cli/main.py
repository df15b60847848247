# src/tasktracker/cli/main.py

"""
CLI entrypoint.

Initializes logging, builds AppState (loading the task file), runs the
interactive menus in the main thread and saves the task file on the way out.
"""

from __future__ import annotations

import logging
import sys

from ..cli.bootstrap import create_initial_state
from ..cli.console import TerminalConsole
from ..cli.menus import MAIN_MENU, run_menu
from ..config import get_settings
from ..core.ports import Console
from ..core.state import AppState
from ..errors import ParseError, WriteError
from ..logging_setup import setup_logging

logger = logging.getLogger(__name__)

BANNER = "=== TaskTracker CLI with System Metrics ==="


def _shutdown(state: AppState, console: Console) -> bool:
    """Save tasks. Returns False (after telling the user) if the write failed."""
    try:
        state.task_store.save()
    except WriteError as e:
        logger.error("Failed to save tasks: %s", e)
        console.say(f"Error saving tasks: {e}")
        return False
    return True


def run_app(state: AppState, console: Console) -> int:
    """Run the main menu until Exit/EOF/Ctrl+C, then save. Returns the exit status."""
    console.say(BANNER)
    try:
        run_menu(MAIN_MENU, state, console)
    except EOFError:
        logger.info("Console EOF received, exiting.")
    except KeyboardInterrupt:
        logger.info("Console KeyboardInterrupt, exiting.")
        console.say("")
    finally:
        saved = _shutdown(state, console)
    return 0 if saved else 1


def main() -> None:
    settings = get_settings()

    level_name = str(getattr(settings, "log_level", "WARNING")).upper()
    console_level = getattr(logging, level_name, logging.WARNING)
    setup_logging(log_dir=settings.data_dir, console_level=console_level)

    logger.info("Starting %s...", settings.app_name)

    try:
        state = create_initial_state(settings=settings)
    except ParseError as e:
        logger.error("Startup aborted: %s", e)
        print(
            f"Error: {e}\nFix or move the file away, then start again.",
            file=sys.stderr,
        )
        raise SystemExit(1) from e

    code = run_app(state, TerminalConsole(clear_screen=settings.clear_screen))
    logger.info("Bye.")
    if code:
        raise SystemExit(code)


if __name__ == "__main__":
    main()
