"""Output schemas for document commands."""

from typing import Any

from pydantic import Field

from ._base import BaseOutputSchema
from ._registry import register_output_schema


class DocumentAddOutput(BaseOutputSchema):
    """Output schema for add command."""
    collection: str = Field(..., description="Target collection")
    dry_run: bool = Field(..., description="True when nothing was written")
    count: int = Field(..., description="Number of documents inserted (or that would be inserted)")
    inserted_ids: list[str] = Field(..., description="Identifiers assigned by the store, empty on dry run or failure")
    documents: list[dict[str, Any]] = Field(..., description="Documents as submitted")


class DocumentUpdateOutput(BaseOutputSchema):
    """Output schema for update command."""
    collection: str = Field(..., description="Target collection")
    query: dict[str, Any] = Field(..., description="Filter used for preview and update")
    update: dict[str, Any] = Field(..., description="Operator-style update applied")
    outcome: str = Field(..., description="Confirmation outcome: executed, cancelled, dry_run, nothing_to_do or error")
    match_count: int = Field(..., description="Documents matched at preview")
    matched_count: int = Field(..., description="Documents matched by the update, 0 if not executed")
    modified_count: int = Field(..., description="Documents modified by the update, 0 if not executed")
    documents: list[dict[str, Any]] = Field(..., description="Matched documents after the update")


class DocumentDeleteOutput(BaseOutputSchema):
    """Output schema for delete command."""
    collection: str = Field(..., description="Target collection")
    query: dict[str, Any] = Field(..., description="Filter used for preview and delete")
    outcome: str = Field(..., description="Confirmation outcome: executed, cancelled, dry_run, nothing_to_do or error")
    match_count: int = Field(..., description="Documents matched at preview")
    deleted_count: int = Field(..., description="Documents deleted, 0 if not executed")


class DocumentFindOutput(BaseOutputSchema):
    """Output schema for find command."""
    collection: str = Field(..., description="Queried collection")
    query: dict[str, Any] = Field(..., description="Query filter, empty dict if no filter")
    sort: dict[str, int] = Field(..., description="Sort specification, empty dict if unsorted")
    limit: int = Field(..., description="Result limit")
    skip: int = Field(..., description="Documents skipped")
    count: int = Field(..., description="Number of documents returned")
    results: list[dict[str, Any]] = Field(..., description="Query results")


class DocumentCountOutput(BaseOutputSchema):
    """Output schema for count command."""
    collection: str = Field(..., description="Queried collection")
    query: dict[str, Any] = Field(..., description="Query filter, empty dict if no filter")
    count: int = Field(..., description="Number of matching documents, -1 on failure")


register_output_schema("document", "add", DocumentAddOutput)
register_output_schema("document", "update", DocumentUpdateOutput)
register_output_schema("document", "delete", DocumentDeleteOutput)
register_output_schema("document", "find", DocumentFindOutput)
register_output_schema("document", "count", DocumentCountOutput)
