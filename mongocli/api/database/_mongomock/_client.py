"""Process-wide mongomock client."""

import mongomock

_shared_client: mongomock.MongoClient | None = None


def _get_mongomock_client() -> mongomock.MongoClient:
    """Return the shared client, creating an empty store on first use."""
    global _shared_client
    if _shared_client is None:
        _shared_client = mongomock.MongoClient()
    return _shared_client


def _reset_mongomock_client() -> None:
    """Drop the shared store; the next call starts empty."""
    global _shared_client
    _shared_client = None
