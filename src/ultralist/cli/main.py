# src/ultralist/cli/main.py

"""
CLI entrypoint.

Initializes logging, builds AppState, then runs the console loop.
`ultralist <text>` adds one task and exits; `ultralist` with no arguments starts the REPL.
"""

from __future__ import annotations

import logging
import sys

from ..config import get_settings
from ..logging_setup import setup_logging
from ..store.errors import StoreError
from .bootstrap import create_initial_state
from .commands import registry as command_registry
from .console import run_console_loop

logger = logging.getLogger(__name__)


def main(argv: list[str] | None = None) -> int:
    argv = sys.argv[1:] if argv is None else argv
    settings = get_settings()

    console_level = getattr(logging, settings.log_level, logging.INFO)
    setup_logging(log_dir=settings.log_dir, console_level=max(console_level, logging.WARNING))

    logger.info("Starting %s...", settings.app_name)

    try:
        state = create_initial_state(settings=settings)
    except StoreError as e:
        logger.error("Failed to open store: %s", e)
        print(f"Failed to initialize database: {e}", file=sys.stderr)
        return 1

    try:
        if argv:
            line = " ".join(argv)
            if not line.startswith("/"):
                line = f"/add {line}"
            reply = command_registry.handle(state, line)
            if reply is not None:
                print(reply)
        else:
            run_console_loop(state)
    finally:
        try:
            state.close()
        except StoreError:
            logger.debug("Store close failed.", exc_info=True)
        logger.info("Bye.")
    return 0


if __name__ == "__main__":
    sys.exit(main())
