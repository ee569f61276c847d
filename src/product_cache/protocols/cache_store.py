"""Cache storage protocol.

Defines the interface for any key-value cache backend with per-entry
time-to-live that the product service can populate and evict.

Implementations can include:
- Redis (default)
- In-process memory (tests, local runs)
- Memcached or any other TTL-capable key-value store
"""

from typing import Protocol, runtime_checkable


@runtime_checkable
class CacheStore(Protocol):
    """Protocol for cache storage backends.

    Similar to Go's interface pattern - any type that implements these
    methods satisfies the protocol, no explicit inheritance needed.

    Keys are partitioned by namespace. Values are opaque bytes produced by
    the transfer codec. A miss is always represented by ``None`` from
    ``get``; a stored entry is never ``None``.

    Example:
        ```python
        from product_cache.protocols import CacheStore

        cache: CacheStore = RedisCacheRepository.create()
        cache: CacheStore = InMemoryCacheRepository()
        ```
    """

    def get(self, namespace: str, key: str) -> bytes | None:
        """Get a cached value.

        Args:
            namespace: Logical partition of the key space
            key: Entry key within the namespace

        Returns:
            The stored bytes, or None if absent or expired

        Raises:
            CacheUnavailableError: If the backend cannot be reached
        """
        ...

    def put(self, namespace: str, key: str, value: bytes, ttl: int) -> None:
        """Store a value, replacing any existing entry and resetting its TTL.

        Args:
            namespace: Logical partition of the key space
            key: Entry key within the namespace
            value: Serialized value
            ttl: Time-to-live in seconds

        Raises:
            NullValueNotAllowedError: If value is None and nulls are disabled
            CacheUnavailableError: If the backend cannot be reached
        """
        ...

    def evict(self, namespace: str, key: str) -> bool:
        """Remove an entry.

        Args:
            namespace: Logical partition of the key space
            key: Entry key within the namespace

        Returns:
            True if an entry was removed, False if none existed

        Raises:
            CacheUnavailableError: If the backend cannot be reached
        """
        ...

    def health_check(self) -> bool:
        """Check if the cache backend is accessible.

        Returns:
            True if healthy, False otherwise
        """
        ...
