"""In-process implementation of CacheStore.

Used by the test suite and for running the API without a Redis server
(``CACHE_BACKEND=memory``).
"""

import threading
import time
from collections.abc import Callable

from product_cache.config import settings
from product_cache.exceptions import NullValueNotAllowedError


class InMemoryCacheRepository:
    """Thread-safe dict-backed cache with per-entry expiry.

    Expired entries are dropped lazily when read or counted.
    """

    def __init__(
        self,
        allow_null_values: bool | None = None,
        clock: Callable[[], float] = time.monotonic,
    ) -> None:
        """Initialize the in-memory cache.

        Args:
            allow_null_values: Whether put() accepts None. Defaults to settings.
            clock: Monotonic time source in seconds (injectable for tests).
        """
        self._allow_null_values = (
            settings.cache_allow_null_values if allow_null_values is None else allow_null_values
        )
        self._clock = clock
        self._entries: dict[tuple[str, str], tuple[bytes, float]] = {}
        self._lock = threading.Lock()

    def get(self, namespace: str, key: str) -> bytes | None:
        with self._lock:
            entry = self._entries.get((namespace, key))
            if entry is None:
                return None
            value, expires_at = entry
            if self._clock() >= expires_at:
                del self._entries[(namespace, key)]
                return None
            return value

    def put(self, namespace: str, key: str, value: bytes, ttl: int) -> None:
        if value is None:
            if not self._allow_null_values:
                raise NullValueNotAllowedError(key=f"{namespace}::{key}")
            value = b""

        with self._lock:
            self._entries[(namespace, key)] = (value, self._clock() + ttl)

    def evict(self, namespace: str, key: str) -> bool:
        with self._lock:
            return self._entries.pop((namespace, key), None) is not None

    def health_check(self) -> bool:
        return True

    def count_all(self, namespace: str | None = None) -> int:
        """Count live entries, optionally within one namespace."""
        with self._lock:
            now = self._clock()
            expired = [k for k, (_, expires_at) in self._entries.items() if now >= expires_at]
            for k in expired:
                del self._entries[k]
            return sum(1 for ns, _ in self._entries if namespace is None or ns == namespace)

    def clear_all(self) -> int:
        """Remove every entry.

        Returns:
            Number of entries removed
        """
        with self._lock:
            count = len(self._entries)
            self._entries.clear()
            return count
