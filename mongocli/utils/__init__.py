"""mongocli utility functions.

Each file in this package exports exactly one function, following
the single file == function/class rule.
"""

from .configure_logging import configure_logging
from .get_logger import get_logger
from .now_iso import now_iso

__all__ = [
    "configure_logging",
    "get_logger",
    "now_iso",
]
