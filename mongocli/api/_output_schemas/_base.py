"""Fields shared by every command output."""

from pydantic import BaseModel, Field


class BaseOutputSchema(BaseModel):
    """Every command reports problems in ``errors`` and notices in ``warnings``.

    A cancelled or empty operation is a warning; only failures go in ``errors``.
    """

    errors: list[str] = Field(default_factory=list, description="Failures that made the command unsuccessful")
    warnings: list[str] = Field(default_factory=list, description="Notices such as nothing matched or cancelled")
