"""Result of a connection liveness probe."""

from typing import Any

from pydantic import BaseModel, Field


class ConnectionTestResult(BaseModel):
    success: bool = Field(..., description="Whether the ping succeeded")
    message: str = Field(..., description="Human readable summary")
    details: dict[str, Any] | None = Field(None, description="Ping response when successful")
    error: str | None = Field(None, description="Error text when the probe failed")
