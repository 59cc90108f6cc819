"""MongoDB-specific configuration data."""

from pydantic import BaseModel, Field, field_validator


class _Data(BaseModel):
    uri: str = Field(..., description="MongoDB connection URI (required).")
    server_selection_timeout_ms: int = Field(
        default=5000,
        gt=0,
        description="How long the driver waits for a reachable server before failing.",
    )

    model_config = {"extra": "forbid"}

    @field_validator("uri")
    @classmethod
    def validate_uri(cls, v: str) -> str:
        if not v:
            raise ValueError("database.data.uri is required when database.type is 'mongo'")
        if not (v.startswith("mongodb://") or v.startswith("mongodb+srv://")):
            raise ValueError(f"database.data.uri must start with 'mongodb://' or 'mongodb+srv://' (found: {v!r})")
        return v
