"""Settings for the rotating ``mongocli.log`` file."""

from typing import Literal

from pydantic import BaseModel, ConfigDict, Field

LogLevel = Literal["DEBUG", "INFO", "WARNING", "ERROR"]


class LogConfig(BaseModel):
    """The ``log`` section of ``config.json``. ``--verbose`` overrides ``level``."""

    model_config = ConfigDict(extra="forbid")

    level: LogLevel = Field("INFO", description="Lowest level written to mongocli.log")
    max_bytes: int = Field(5 * 1024 * 1024, gt=0, description="Size at which mongocli.log is rotated")
    backup_count: int = Field(3, ge=0, description="Rotated files kept beside mongocli.log")
