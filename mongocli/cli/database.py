"""Database commands: collections, test."""

from ..api.database.cmd_collections import cmd_collections
from ..api.database.cmd_test import cmd_test
from ._handle_stage_result import _handle_stage_result


def collections_command() -> None:
    """List all collections in the database."""
    _handle_stage_result(cmd_collections)()


def connection_test_command() -> None:
    """Test database connection."""
    _handle_stage_result(cmd_test)()
