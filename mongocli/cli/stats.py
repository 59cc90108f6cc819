"""Statistics command."""

from ..api.stats.cmd_stats import cmd_stats
from ._handle_stage_result import _handle_stage_result


def stats_command() -> None:
    """Show CLI usage statistics and database info."""
    _handle_stage_result(cmd_stats)()
