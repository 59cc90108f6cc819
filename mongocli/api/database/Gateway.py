"""Database gateway: owns the single client of a process."""

from typing import TYPE_CHECKING, Any

from ...utils.get_logger import get_logger
from ._AbstractBackend import _AbstractBackend
from .ConnectionTestResult import ConnectionTestResult
from .DatabaseConfig import _BACKEND_REGISTRY, DatabaseConfig
from .DatabaseConnectionError import DatabaseConnectionError
from .DocumentCollection import DocumentCollection

if TYPE_CHECKING:
    from ..stats.StatsStore import StatsStore

logger = get_logger("database")


class Gateway:
    """Lazy, idempotent access to the configured database.

    At most one client is open at a time. Collection accessors are cached by name
    for as long as the gateway stays connected.
    """

    def __init__(self, database_config: DatabaseConfig, stats: "StatsStore | None" = None):
        self.database_config = database_config
        self.database_name = database_config.resolve_database_name()
        self._stats = stats
        self._backend: _AbstractBackend | None = None
        self._client: Any = None
        self._collections: dict[str, DocumentCollection] = {}

    @property
    def is_connected(self) -> bool:
        return self._client is not None

    def _create_backend(self) -> _AbstractBackend:
        backend_type = self.database_config.type
        if backend_type not in _BACKEND_REGISTRY:
            raise ValueError(f"Unsupported backend type: {backend_type!r} (supported: {list(_BACKEND_REGISTRY.keys())})")
        module = __import__(f"mongocli.api.database._{backend_type}._Impl", fromlist=[""])
        return module._Impl(self.database_config)

    def connect(self) -> bool:
        """Open the connection if needed.

        Returns:
            True when connected. Failures are logged and reported as False, never raised.
        """
        if self.is_connected:
            return True

        logger.info("Connecting to %s database %r", self.database_config.type, self.database_name)
        try:
            backend = self._create_backend()
            self._client = backend.open()
            self._backend = backend
        except Exception as e:
            logger.error("Failed to connect to MongoDB: %s", e)
            self._client = None
            self._backend = None
            return False

        logger.info("Connected to MongoDB successfully")
        if self._stats is not None:
            self._stats.record_connection()
        return True

    def require_connection(self) -> None:
        """Connect or raise DatabaseConnectionError."""
        if not self.connect():
            raise DatabaseConnectionError(f"Could not connect to database {self.database_name!r}")

    def get_collection(self, name: str) -> DocumentCollection:
        """Return the cached accessor for ``name``, creating it on first use."""
        if not self.is_connected:
            raise RuntimeError("Gateway not connected. Call connect() first.")
        if not name:
            raise ValueError("Collection name is required")
        collection = self._collections.get(name)
        if collection is None:
            collection = DocumentCollection(self._client[self.database_name][name])
            self._collections[name] = collection
        return collection

    def list_collection_names(self) -> list[str]:
        if not self.is_connected:
            raise RuntimeError("Gateway not connected. Call connect() first.")
        return sorted(self._client[self.database_name].list_collection_names())

    def disconnect(self) -> None:
        """Close the connection. Safe to call when not connected."""
        if not self.is_connected:
            return
        try:
            if self._backend is not None:
                self._backend.close()
            logger.info("Disconnected from MongoDB")
        except Exception as e:
            logger.error("Error disconnecting from MongoDB: %s", e)
        finally:
            self._client = None
            self._backend = None
            self._collections.clear()

    def test_connection(self) -> ConnectionTestResult:
        """Connect if needed and ping the server."""
        if not self.connect():
            return ConnectionTestResult(
                success=False,
                message="Database connection test failed",
                error=f"Could not connect to database {self.database_name!r}",
            )
        try:
            response = self._client.admin.command("ping")
        except Exception as e:
            logger.error("Ping failed: %s", e)
            return ConnectionTestResult(success=False, message="Database connection test failed", error=str(e))
        return ConnectionTestResult(
            success=True,
            message="Database connection test successful",
            details={"database": self.database_name, "backend": self.database_config.type, "ping": dict(response)},
        )
