"""Output schemas for config commands."""

from pydantic import Field

from ._base import BaseOutputSchema
from ._registry import register_output_schema


class ConfigInitOutput(BaseOutputSchema):
    """Output schema for init command."""
    home: str = Field(..., description="mongocli home directory")
    created: list[str] = Field(..., description="Files created by this run")
    existing: list[str] = Field(..., description="Files that were already present and left untouched")


register_output_schema("config", "init", ConfigInitOutput)
