"""In-memory cache implementation."""

import threading
import time
from dataclasses import dataclass
from typing import Any

from ghin.cache.base import CacheClient


@dataclass
class CacheEntry:
    value: Any
    expires_at: float | None = None

    def is_expired(self, now: float | None = None) -> bool:
        if self.expires_at is None:
            return False
        return (now if now is not None else time.monotonic()) >= self.expires_at


class InMemoryCacheClient(CacheClient):
    """Process-local cache backed by a dict."""

    def __init__(self, default_ttl: float | None = None) -> None:
        """Initialize cache.

        Args:
            default_ttl: Lifetime in seconds for entries stored without a ttl.
                None keeps them until deleted.
        """
        self._default_ttl = default_ttl
        self._lock = threading.Lock()
        self._entries: dict[str, CacheEntry] = {}

    def __len__(self) -> int:
        with self._lock:
            return len(self._entries)

    def get(self, key: str) -> Any | None:
        with self._lock:
            entry = self._entries.get(key)
            if entry is None:
                return None
            if entry.is_expired():
                del self._entries[key]
                return None
            return entry.value

    def set(self, key: str, value: Any, ttl: float | None = None) -> None:
        if ttl is None:
            ttl = self._default_ttl
        expires_at = time.monotonic() + ttl if ttl is not None else None
        with self._lock:
            self._entries[key] = CacheEntry(value=value, expires_at=expires_at)

    def delete(self, key: str) -> None:
        with self._lock:
            self._entries.pop(key, None)

    def clear(self) -> None:
        with self._lock:
            self._entries.clear()

    def cleanup(self) -> None:
        """Remove expired entries."""
        now = time.monotonic()
        with self._lock:
            expired = [key for key, entry in self._entries.items() if entry.is_expired(now)]
            for key in expired:
                del self._entries[key]
