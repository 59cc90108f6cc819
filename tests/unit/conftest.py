"""Unit test fixtures.

Most configuration helpers are in tests/conftest.py.
"""

from tests.conftest import mongomock_config_dict, read_stats, run_cmd

__all__ = [
    "mongomock_config_dict",
    "read_stats",
    "run_cmd",
]
