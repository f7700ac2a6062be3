"""Cache interface used by the request client."""

from abc import ABC, abstractmethod
from typing import Any


class CacheClient(ABC):
    """Interface for key/value caches consulted by the request client.

    Implementations own their consistency guarantees; the client calls them
    from whichever thread issued the request.
    """

    @abstractmethod
    def get(self, key: str) -> Any | None:
        """Return the cached value, or None if missing or expired."""
        pass

    @abstractmethod
    def set(self, key: str, value: Any, ttl: float | None = None) -> None:
        """Store a value, optionally expiring after ``ttl`` seconds."""
        pass

    @abstractmethod
    def delete(self, key: str) -> None:
        """Remove a value if present."""
        pass

    @abstractmethod
    def clear(self) -> None:
        """Remove all values."""
        pass
