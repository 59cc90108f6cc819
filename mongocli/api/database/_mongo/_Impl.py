"""MongoDB client backend."""

from typing import Any

from pymongo import MongoClient

from .._AbstractBackend import _AbstractBackend
from ..DatabaseConfig import DatabaseConfig
from ._Data import _Data as _DatabaseConfigData


class _Impl(_AbstractBackend):
    def __init__(self, database_config: DatabaseConfig):
        if not isinstance(database_config.data, _DatabaseConfigData):
            raise ValueError("MongoDB config data is required")
        self.uri = database_config.data.uri
        self.server_selection_timeout_ms = database_config.data.server_selection_timeout_ms
        self._client: MongoClient[Any] | None = None

    def open(self) -> MongoClient[Any]:
        client: MongoClient[Any] = MongoClient(self.uri, serverSelectionTimeoutMS=self.server_selection_timeout_ms)
        try:
            client.server_info()  # Test connection
        except Exception:
            client.close()
            raise
        self._client = client
        return client

    def close(self) -> None:
        if self._client is not None:
            self._client.close()
            self._client = None
