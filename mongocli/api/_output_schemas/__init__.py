"""Output schemas for every command; importing this package registers them all."""

from . import config, database, document, stats

__all__ = ["config", "database", "document", "stats"]
