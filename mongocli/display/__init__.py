"""Display layer for mongocli terminal output."""

from .CLIDisplay import CLIDisplay
from .Display import Display

__all__ = ["CLIDisplay", "Display"]
