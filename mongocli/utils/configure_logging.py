import logging
import os
import sys
from logging.handlers import RotatingFileHandler
from pathlib import Path

# Prevent multiple configurations
_CONFIGURED = False

_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def is_configured() -> bool:
    return _CONFIGURED


def configure_logging(
    home: Path | None = None,
    level: str = "INFO",
    verbose: bool = False,
    max_bytes: int = 5 * 1024 * 1024,
    backup_count: int = 3,
) -> None:
    """Configure unified mongocli logging.

    Args:
        home: Path to the mongocli home directory. If None, derived from environment.
        level: Level for the file handler.
        verbose: Also log DEBUG and above to stderr.
        max_bytes: Rotation size of the log file.
        backup_count: Number of rotated files kept.
    """
    global _CONFIGURED
    if _CONFIGURED:
        return

    if home is None:
        env_home = os.environ.get("MONGOCLI_HOME")
        home = Path(env_home).expanduser().resolve() if env_home else Path.home() / ".mongocli"

    root_logger = logging.getLogger("mongocli")
    root_logger.setLevel(logging.DEBUG if verbose else getattr(logging, level, logging.INFO))
    formatter = logging.Formatter(_FORMAT)

    try:
        home.mkdir(parents=True, exist_ok=True)
        file_handler = RotatingFileHandler(home / "mongocli.log", maxBytes=max_bytes, backupCount=backup_count)
    except OSError as e:
        # Read-only home: keep going without a log file
        sys.stderr.write(f"mongocli: file logging disabled ({e})\n")
    else:
        file_handler.setFormatter(formatter)
        root_logger.addHandler(file_handler)

    if verbose:
        stream_handler = logging.StreamHandler(sys.stderr)
        stream_handler.setLevel(logging.DEBUG)
        stream_handler.setFormatter(formatter)
        root_logger.addHandler(stream_handler)

    # Suppress noisy third-party loggers
    logging.getLogger("pymongo").setLevel(logging.WARNING)

    _CONFIGURED = True


def reset_logging() -> None:
    """Drop mongocli handlers so the next call reconfigures (used by tests)."""
    global _CONFIGURED
    root_logger = logging.getLogger("mongocli")
    for handler in list(root_logger.handlers):
        root_logger.removeHandler(handler)
        handler.close()
    _CONFIGURED = False
