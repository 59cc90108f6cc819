"""mongocli - ad-hoc MongoDB document operations from the command line."""

__version__ = "1.0.0"
