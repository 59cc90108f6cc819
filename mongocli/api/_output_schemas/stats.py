"""Output schemas for stats commands."""

from typing import Any

from pydantic import Field

from ._base import BaseOutputSchema
from ._registry import register_output_schema


class StatsStatsOutput(BaseOutputSchema):
    """Output schema for stats command."""
    path: str = Field(..., description="Statistics file location")
    stats: dict[str, Any] = Field(..., description="Statistics record as stored")
    connection: dict[str, Any] = Field(..., description="Connection test result")


register_output_schema("stats", "stats", StatsStatsOutput)
