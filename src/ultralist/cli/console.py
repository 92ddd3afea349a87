# src/ultralist/cli/console.py

from __future__ import annotations

import logging
from collections.abc import Callable

from ..core.state import AppState
from .commands import registry as command_registry

logger = logging.getLogger(__name__)


def run_console_loop(
    state: AppState,
    *,
    read_line: Callable[[str], str] = input,
    write: Callable[[str], None] = print,
) -> None:
    """
    Read lines until EOF or /exit.

    Plain text (no leading slash) is treated as /add <text>.
    """
    logger.info("Console started db=%s", getattr(state.settings, "db_path", "?"))
    write("Type a task to add it, or /help for commands. /exit to quit.")

    while True:
        try:
            line = read_line("> ").strip()
        except EOFError:
            logger.info("Console EOF received, exiting.")
            break
        except KeyboardInterrupt:
            logger.info("Console KeyboardInterrupt, exiting.")
            write("")
            break

        if not line:
            continue

        if line.lower() in ("/exit", "/quit"):
            logger.info("Console exit command received.")
            break

        if not line.startswith("/"):
            line = f"/add {line}"

        try:
            reply = command_registry.handle(state, line)
        except Exception:
            logger.exception("Command handler crashed.")
            reply = "Internal error while handling a command."

        if reply is not None:
            write(reply)

    logger.info("Console finished.")
