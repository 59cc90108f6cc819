"""Persisted statistics record."""

from pydantic import BaseModel, ConfigDict, Field

from ..config._constants import DEFAULT_COLLECTION
from .OperationCounters import OperationCounters


class StatsRecord(BaseModel):
    """Contents of ``stats.json``.

    Serialized with camelCase keys (``lastUsedCollection``, ``lastConnection``).
    Unknown keys already present in the file are preserved.
    """

    model_config = ConfigDict(populate_by_name=True, extra="allow")

    last_used_collection: str = Field(DEFAULT_COLLECTION, alias="lastUsedCollection")
    operations: OperationCounters = Field(default_factory=OperationCounters)
    last_connection: str | None = Field(None, alias="lastConnection")

    def to_dict(self) -> dict:
        return self.model_dump(mode="json", by_alias=True)
