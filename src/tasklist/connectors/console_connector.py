# src/tasklist/connectors/console_connector.py

from __future__ import annotations

import logging
from collections.abc import Callable

from ..cli.commands import QUIT_COMMANDS
from ..cli.commands import registry as command_registry
from ..core.state import AppState

logger = logging.getLogger(__name__)

ReadLine = Callable[[str], str]
WriteText = Callable[[str], None]


def run_console_loop(
    state: AppState,
    *,
    read_line: ReadLine = input,
    write: WriteText = print,
) -> None:
    """
    Line-oriented REPL: read a command, run it, print the reply.

    Stops on `quit`, EOF or Ctrl+C. A crashing command is reported and the loop goes on.
    """
    settings = state.settings
    prompt = str(getattr(settings, "prompt", "> "))
    logger.info("Console connector started (app=%s).", getattr(settings, "app_name", "tasklist"))

    if getattr(settings, "console_banner", True):
        write("Type 'help' for commands, 'quit' to exit.")

    while True:
        try:
            line = read_line(prompt)
        except EOFError:
            logger.info("Console EOF received, exiting.")
            break
        except KeyboardInterrupt:
            logger.info("Console KeyboardInterrupt, exiting.")
            write("")
            break

        if line.strip().lower() in QUIT_COMMANDS:
            logger.info("Console quit command received.")
            break

        try:
            with state.lock:
                reply = command_registry.handle(state, line)
        except Exception:
            logger.exception("Command handler crashed line=%r", line)
            reply = "Internal error while handling a command."

        if reply:
            write(reply)

    logger.info("Console connector finished.")
