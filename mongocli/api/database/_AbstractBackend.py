"""Contract every client backend implements."""

from abc import ABC, abstractmethod
from typing import Any


class _AbstractBackend(ABC):
    """Opens and closes one client for the gateway."""

    @abstractmethod
    def open(self) -> Any:
        """Return a client that has already answered the server; raise if it cannot."""
        pass

    @abstractmethod
    def close(self) -> None:
        """Release the client opened by ``open``. Called at most once per ``open``."""
        pass
