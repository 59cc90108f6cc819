"""The ``database`` section of ``config.json``."""

from typing import Any
from urllib.parse import unquote, urlsplit

from pydantic import BaseModel, Field, model_validator

from ..config._constants import DEFAULT_COLLECTION, DEFAULT_DATABASE
from ._mongo._Data import _Data as _MongoData
from ._mongomock._Data import _Data as _MongomockData

# Backend name -> model of its ``data`` block; Gateway loads _<name>._Impl
_BACKEND_REGISTRY: dict[str, type[BaseModel]] = {
    "mongo": _MongoData,
    "mongomock": _MongomockData,
}


class DatabaseConfig(BaseModel):
    """Which backend to use, the database and default collection, and backend settings."""

    type: str = Field(..., description="Backend name: mongo or mongomock")
    database: str = Field(DEFAULT_DATABASE, description="Database name used when the URI names none")
    default_collection: str = Field(DEFAULT_COLLECTION, description="Collection used when a command names none")
    data: BaseModel = Field(..., description="Settings of the selected backend")

    @model_validator(mode="before")
    @classmethod
    def _build_backend_data(cls, values: Any) -> dict[str, Any]:
        if not isinstance(values, dict):
            raise ValueError(f"database config must be a dict, got {type(values).__name__}")
        backend = values.get("type")
        if not backend:
            raise ValueError("database.type is required")
        data_model = _BACKEND_REGISTRY.get(backend)
        if data_model is None:
            raise ValueError(f"Unknown backend type: {backend!r} (supported: {sorted(_BACKEND_REGISTRY)})")
        data = values.get("data")
        if data is None:
            raise ValueError("database.data is required")
        if isinstance(data, BaseModel):
            data = data.model_dump()
        return {**values, "data": data_model(**data)}

    def resolve_database_name(self) -> str:
        """Database named in the URI path, falling back to ``database``."""
        uri = getattr(self.data, "uri", None)
        if uri:
            name = unquote(urlsplit(uri).path.lstrip("/"))
            if name:
                return name
        return self.database

    def model_dump(self, **kwargs) -> dict[str, Any]:
        result = super().model_dump(**kwargs)
        # ``data`` is declared as BaseModel, so pydantic would dump it as {}
        result["data"] = self.data.model_dump(**kwargs)
        return result
