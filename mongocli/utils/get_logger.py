import logging


def get_logger(name: str) -> logging.Logger:
    """Get a logger instance for the given name.

    Handlers are attached once by configure_logging at the CLI entry point.
    """
    return logging.getLogger(f"mongocli.{name}")
