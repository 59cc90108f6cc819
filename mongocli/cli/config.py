"""Setup command."""

from ..api.config.cmd_init import cmd_init
from ._handle_stage_result import _handle_stage_result


def init_command() -> None:
    """Create the mongocli home directory with default configuration files."""
    _handle_stage_result(cmd_init)()
