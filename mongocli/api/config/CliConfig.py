"""Top-level mongocli configuration."""

import json
import os
from contextlib import suppress
from pathlib import Path
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, PrivateAttr, ValidationError

from ...utils.get_logger import get_logger
from ..database.DatabaseConfig import DatabaseConfig
from ._constants import COLLECTION_ENV, DEFAULT_COLLECTION, DEFAULT_DATABASE, DEFAULT_URI, HOME_ENV, URI_ENV
from .LogConfig import LogConfig

logger = get_logger("config")


class CliConfig(BaseModel):
    """Connection and logging configuration, stored as ``config.json`` in the home directory."""

    model_config = ConfigDict(extra="forbid")

    database: DatabaseConfig
    log: LogConfig = Field(default_factory=LogConfig)

    _warnings: list[str] = PrivateAttr(default_factory=list)

    @property
    def warnings(self) -> list[str]:
        """Warnings raised while loading (e.g. fallback to the default URI)."""
        return self._warnings

    @classmethod
    def get_home_dir(cls) -> Path:
        """Get mongocli home directory based on MONGOCLI_HOME or default to ~/.mongocli."""
        home_env = os.environ.get(HOME_ENV)
        if home_env:
            return Path(home_env).expanduser().resolve()
        return Path.home() / ".mongocli"

    @classmethod
    def get_config_path(cls) -> Path:
        return cls.get_home_dir() / "config.json"

    @classmethod
    def default_dict(cls) -> dict[str, Any]:
        """Contents written on first run."""
        return {
            "database": {
                "type": "mongo",
                "database": DEFAULT_DATABASE,
                "default_collection": DEFAULT_COLLECTION,
                "data": {"uri": DEFAULT_URI},
            },
            "log": LogConfig().model_dump(),
        }

    @classmethod
    def from_dict(cls, raw: dict[str, Any]) -> "CliConfig":
        try:
            # Pydantic validates required fields and constructs nested models automatically
            return cls(**raw)
        except ValidationError as e:
            error_list = e.errors() or [{"msg": str(e), "loc": (), "type": "value_error", "input": None}]
            first = error_list[0]
            error_msg = first.get("msg", str(e))
            loc = first.get("loc", ())
            field = ".".join(str(x) for x in loc) if isinstance(loc, (list, tuple)) else ""
            detail = f"{field}: {error_msg}" if field else error_msg
            raise ValueError(f"Configuration validation error: {detail}") from e

    @classmethod
    def load(cls, apply_env: bool = True) -> "CliConfig":
        """Load and validate config from file, creating the default file when absent.

        Raises:
            ValueError: If the file holds invalid JSON or fails validation
        """
        path = cls.get_config_path()

        if not path.exists():
            config = cls.from_dict(cls.default_dict())
            config.save()
            logger.info("Created default configuration at %s", path)
        else:
            try:
                with path.open() as fh:
                    raw = json.load(fh)
            except json.JSONDecodeError as e:
                raise ValueError(f"Invalid JSON in config file {path}: {e}") from e
            config = cls.from_dict(raw)

        if apply_env:
            config.apply_environment(os.environ)
        return config

    def apply_environment(self, environ: Any) -> None:
        """Apply MONGODB_URI and DEFAULT_COLLECTION overrides."""
        uri = environ.get(URI_ENV)
        if uri:
            if self.database.type != "mongo":
                self._warnings.append(f"{URI_ENV} is ignored for database type {self.database.type!r}")
            else:
                self.database = DatabaseConfig(**{**self.database.model_dump(), "data": {**self.database.data.model_dump(), "uri": uri}})
        elif self.database.type == "mongo" and getattr(self.database.data, "uri", None) == DEFAULT_URI:
            self._warnings.append(f"No {URI_ENV} found in environment, using default: {DEFAULT_URI}")

        collection = environ.get(COLLECTION_ENV)
        if collection:
            self.database.default_collection = collection

        for warning in self._warnings:
            logger.warning(warning)

    def to_dict(self) -> dict[str, Any]:
        return {
            "database": self.database.model_dump(),
            "log": self.log.model_dump(),
        }

    def save(self) -> None:
        """Save the current configuration to a JSON file.

        Uses atomic write (write to temp file, then rename) to prevent corruption.
        """
        path = self.get_config_path()
        path.parent.mkdir(parents=True, exist_ok=True)
        temp_path = path.with_suffix(path.suffix + ".tmp")
        try:
            with temp_path.open("w") as fh:
                json.dump(self.to_dict(), fh, indent=4)
            temp_path.replace(path)
        except Exception as e:
            with suppress(Exception):
                if temp_path.exists():
                    temp_path.unlink()
            raise RuntimeError(f"Failed to save config: {e}") from e
