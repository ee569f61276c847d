"""Redis implementation of CacheStore.

Entries are plain string keys of the form ``<namespace>::<key>`` with a
Redis-side expiry, so TTL is enforced by the server.
"""

import logging

import redis

from product_cache.config import get_redis_client, settings
from product_cache.exceptions import CacheUnavailableError, NullValueNotAllowedError

logger = logging.getLogger(__name__)

KEY_SEPARATOR = "::"


class RedisCacheRepository:
    """Redis implementation of the CacheStore protocol.

    This class satisfies the CacheStore protocol through structural
    typing - no explicit inheritance needed.

    Every Redis error (including socket timeouts) is raised as
    CacheUnavailableError; the service decides whether to degrade.
    """

    def __init__(
        self,
        redis_client: redis.Redis | None = None,
        allow_null_values: bool | None = None,
    ) -> None:
        """Initialize the Redis cache repository.

        Args:
            redis_client: Redis client instance. If None, creates default.
            allow_null_values: Whether put() accepts None. Defaults to settings.
        """
        self._client = redis_client or get_redis_client()
        self._allow_null_values = (
            settings.cache_allow_null_values if allow_null_values is None else allow_null_values
        )

    @classmethod
    def create(cls, allow_null_values: bool | None = None) -> "RedisCacheRepository":
        """Factory method to create RedisCacheRepository with defaults.

        Args:
            allow_null_values: Null policy. If None, uses settings.

        Returns:
            Configured RedisCacheRepository
        """
        return cls(allow_null_values=allow_null_values)

    @staticmethod
    def build_key(namespace: str, key: str) -> str:
        """Render the Redis key for a namespaced entry."""
        return f"{namespace}{KEY_SEPARATOR}{key}"

    def get(self, namespace: str, key: str) -> bytes | None:
        """Get a cached value.

        Args:
            namespace: Cache namespace
            key: Entry key

        Returns:
            Stored bytes, or None if absent or expired
        """
        redis_key = self.build_key(namespace, key)
        try:
            value = self._client.get(redis_key)
        except redis.RedisError as e:
            raise CacheUnavailableError("get", key=redis_key, original_error=e) from e

        if value is None:
            logger.debug("Cache MISS: %s", redis_key)
            return None

        logger.debug("Cache HIT: %s", redis_key)
        return value if isinstance(value, bytes) else str(value).encode("utf-8")

    def put(self, namespace: str, key: str, value: bytes, ttl: int) -> None:
        """Store a value with a TTL, replacing any existing entry.

        Args:
            namespace: Cache namespace
            key: Entry key
            value: Serialized value
            ttl: Time-to-live in seconds
        """
        redis_key = self.build_key(namespace, key)
        if value is None:
            if not self._allow_null_values:
                raise NullValueNotAllowedError(key=redis_key)
            # Nulls allowed: an explicit empty marker, never a Redis nil
            value = b""

        try:
            self._client.set(redis_key, value, ex=ttl)
        except redis.RedisError as e:
            raise CacheUnavailableError("put", key=redis_key, original_error=e) from e

        logger.debug("Cache PUT: %s (ttl=%ss)", redis_key, ttl)

    def evict(self, namespace: str, key: str) -> bool:
        """Delete an entry.

        Args:
            namespace: Cache namespace
            key: Entry key

        Returns:
            True if deleted, False if there was nothing to delete
        """
        redis_key = self.build_key(namespace, key)
        try:
            result: int = self._client.delete(redis_key)  # type: ignore[assignment]
        except redis.RedisError as e:
            raise CacheUnavailableError("evict", key=redis_key, original_error=e) from e

        logger.debug("Cache EVICT: %s (removed=%s)", redis_key, result > 0)
        return result > 0

    def health_check(self) -> bool:
        """Check if Redis is accessible.

        Returns:
            True if healthy, False otherwise
        """
        try:
            return bool(self._client.ping())
        except redis.RedisError as e:
            logger.warning("Redis health check failed: %s", e)
            return False
