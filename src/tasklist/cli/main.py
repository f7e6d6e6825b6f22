# src/tasklist/cli/main.py

"""
CLI entrypoint.

Initializes logging, builds AppState, then runs the console REPL in the main thread.
"""

from __future__ import annotations

import logging

from ..cli.bootstrap import create_initial_state
from ..config import get_settings
from ..connectors.console_connector import run_console_loop
from ..logging_setup import setup_logging

logger = logging.getLogger(__name__)


def main() -> None:
    settings = get_settings()

    # choose console log level from settings.log_level
    console_level = getattr(logging, settings.log_level, logging.WARNING)
    if not isinstance(console_level, int):
        console_level = logging.WARNING

    log_dir = settings.data_dir if settings.log_file_enabled else None
    setup_logging(
        console_level=console_level,
        log_dir=log_dir,
        log_file_name=settings.log_file_path.name,
    )

    logger.info("Starting %s...", settings.app_name)

    state = create_initial_state(settings=settings)
    try:
        run_console_loop(state)
    finally:
        logger.info("Bye. tasks=%s", state.task_store.count_tasks())


if __name__ == "__main__":
    main()
