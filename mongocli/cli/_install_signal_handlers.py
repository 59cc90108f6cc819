"""Release the database connection on SIGINT/SIGTERM."""

import signal
import sys

from ..api.CommandContext import CommandContext
from ..utils.get_logger import get_logger

logger = get_logger("cli")

EXIT_CODES = {signal.SIGINT: 130, signal.SIGTERM: 143}


def _shutdown(signum, frame) -> None:  # noqa: ARG001
    logger.info("Received %s, shutting down", signal.Signals(signum).name)
    sys.stderr.write("\nShutting down gracefully...\n")
    CommandContext.release_active()
    sys.exit(EXIT_CODES.get(signum, 1))


def _install_signal_handlers() -> None:
    for signum in EXIT_CODES:
        signal.signal(signum, _shutdown)
