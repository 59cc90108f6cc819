from pydantic import BaseModel, ConfigDict, Field


class OperationCounters(BaseModel):
    """Successful mutating operations per kind."""

    model_config = ConfigDict(extra="forbid")

    add: int = Field(0, ge=0)
    update: int = Field(0, ge=0)
    delete: int = Field(0, ge=0)
