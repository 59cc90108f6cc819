"""Output schemas for database commands."""

from typing import Any

from pydantic import Field

from ._base import BaseOutputSchema
from ._registry import register_output_schema


class DatabaseCollectionsOutput(BaseOutputSchema):
    """Output schema for collections command."""
    database: str = Field(..., description="Database name")
    collections: list[str] = Field(..., description="Collection names, sorted")
    count: int = Field(..., description="Number of collections")


class DatabaseTestOutput(BaseOutputSchema):
    """Output schema for test command."""
    connected: bool = Field(..., description="True when the ping succeeded")
    message: str = Field(..., description="Summary of the connection test")
    details: dict[str, Any] = Field(..., description="Database, backend and ping response, empty on failure")


register_output_schema("database", "collections", DatabaseCollectionsOutput)
register_output_schema("database", "test", DatabaseTestOutput)
