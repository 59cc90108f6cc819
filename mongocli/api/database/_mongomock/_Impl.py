"""In-memory backend built on mongomock."""

import mongomock

from .._AbstractBackend import _AbstractBackend
from ..DatabaseConfig import DatabaseConfig
from ._client import _get_mongomock_client
from ._Data import _Data


class _Impl(_AbstractBackend):
    """Hands out the process-wide mongomock client; data survives disconnects."""

    def __init__(self, database_config: DatabaseConfig):
        if not isinstance(database_config.data, _Data):
            raise ValueError("mongomock backend needs mongomock settings in database.data")
        self._client: mongomock.MongoClient | None = None

    def open(self) -> mongomock.MongoClient:
        self._client = _get_mongomock_client()
        return self._client

    def close(self) -> None:
        # The shared client stays open for the next gateway
        self._client = None
