"""Product cache service for core business logic.

This service implements the cache-aside protocol for products by
coordinating the cache store, the persistent product store and the
transfer codec.
"""

import logging

from product_cache.codec import TransferCodec
from product_cache.config import settings
from product_cache.dto import ProductDto
from product_cache.exceptions import CacheUnavailableError, CodecError, ProductNotFoundError
from product_cache.protocols import CacheStore, ProductStore

logger = logging.getLogger(__name__)


class ProductCacheService:
    """Cache-aside orchestration for products.

    Rules:
    - read: cache first; on a miss load from the store and populate the cache
    - create/update: write the store, then cache the store's returned value
    - delete: delete from the store, then evict unconditionally

    The store is always mutated before the cache. Store errors (including
    ProductNotFoundError) propagate before any cache mutation happens.

    With ``fail_open`` a cache outage degrades instead of failing: reads
    fall back to the store and cache writes are logged and skipped. The
    store stays the source of truth either way.

    There is no single-flight protection for concurrent misses and no
    lock around update; under concurrent updates of one id the last cache
    put to finish wins, even if it carries the older value.

    Example:
        ```python
        from product_cache.repositories import InMemoryProductRepository, RedisCacheRepository
        from product_cache.services import ProductCacheService

        service = ProductCacheService.create(
            cache=RedisCacheRepository.create(),
            store=InMemoryProductRepository(),
        )
        created = service.create_product(ProductDto(name="Laptop", price=Decimal("1200")))
        ```
    """

    def __init__(
        self,
        cache: CacheStore,
        store: ProductStore,
        codec: TransferCodec,
        namespace: str | None = None,
        ttl: int | None = None,
        fail_open: bool | None = None,
    ) -> None:
        """Initialize the product cache service.

        Args:
            cache: Cache storage backend (required).
            store: Authoritative product store (required).
            codec: Codec for values crossing the cache boundary (required).
            namespace: Cache namespace. Defaults to settings.
            ttl: Entry time-to-live in seconds. Defaults to settings.
            fail_open: Degrade on cache errors instead of raising. Defaults to settings.

        Raises:
            ValueError: If ttl is not positive
        """
        ttl = settings.cache_ttl if ttl is None else ttl
        if ttl <= 0:
            raise ValueError(f"ttl must be positive, got {ttl}")

        self._cache = cache
        self._store = store
        self._codec = codec
        self._namespace = namespace or settings.cache_namespace
        self._ttl = ttl
        self._fail_open = settings.cache_fail_open if fail_open is None else fail_open

    @classmethod
    def create(
        cls,
        cache: CacheStore,
        store: ProductStore,
        codec: TransferCodec | None = None,
        fail_open: bool | None = None,
    ) -> "ProductCacheService":
        """Factory method to create ProductCacheService with sensible defaults.

        Args:
            cache: Cache storage backend (required).
            store: Authoritative product store (required).
            codec: Transfer codec. If None, uses TransferCodec.create().
            fail_open: Cache outage policy. If None, uses settings.

        Returns:
            Configured ProductCacheService instance
        """
        return cls(
            cache=cache,
            store=store,
            codec=codec or TransferCodec.create(),
            fail_open=fail_open,
        )

    def create_product(self, dto: ProductDto) -> ProductDto:
        """Insert a product and cache the stored result.

        Args:
            dto: Product to create (its id is ignored)

        Returns:
            The created product with its store-assigned id
        """
        stored = self._store.insert(dto.model_copy(update={"id": None}).to_entity())
        created = ProductDto.from_entity(stored)

        self._cache_put(created)
        logger.info("Created product %s", created.id)
        return created

    def get_product(self, product_id: int) -> ProductDto:
        """Get a product, from cache when possible.

        Args:
            product_id: Product id

        Returns:
            The product

        Raises:
            ProductNotFoundError: If the product is neither cached nor stored
        """
        cached = self._cache_get(product_id)
        if cached is not None:
            return cached

        product = self._store.find_by_id(product_id)
        if product is None:
            raise ProductNotFoundError(product_id)

        dto = ProductDto.from_entity(product)
        self._cache_put(dto)
        return dto

    def update_product(self, dto: ProductDto) -> ProductDto:
        """Update a stored product and overwrite its cache entry.

        Args:
            dto: New product state; dto.id selects the product

        Returns:
            The updated product as returned by the store

        Raises:
            ProductNotFoundError: If no product has dto.id
        """
        if dto.id is None:
            raise ProductNotFoundError(None)

        stored = self._store.update(dto.to_entity())
        updated = ProductDto.from_entity(stored)

        self._cache_put(updated)
        logger.info("Updated product %s", updated.id)
        return updated

    def delete_product(self, product_id: int) -> None:
        """Delete a stored product and evict its cache entry.

        Args:
            product_id: Product id

        Raises:
            ProductNotFoundError: If no product has this id
        """
        self._store.delete_by_id(product_id)
        self._cache_evict(product_id)
        logger.info("Deleted product %s", product_id)

    def is_healthy(self) -> bool:
        """Check if the cache backend is reachable."""
        return self._cache.health_check()

    def _cache_get(self, product_id: int) -> ProductDto | None:
        key = str(product_id)
        try:
            data = self._cache.get(self._namespace, key)
        except CacheUnavailableError as e:
            if not self._fail_open:
                raise
            logger.warning("Cache get failed for %s::%s, reading from store: %s", self._namespace, key, e)
            return None

        if data is None:
            return None

        try:
            return self._codec.decode_as(data, ProductDto)
        except CodecError as e:
            # Overwritten by the read-through put that follows
            logger.warning("Discarding undecodable cache entry %s::%s: %s", self._namespace, key, e)
            return None

    def _cache_put(self, dto: ProductDto) -> None:
        key = str(dto.id)
        data = self._codec.encode(dto)
        try:
            self._cache.put(self._namespace, key, data, self._ttl)
        except CacheUnavailableError as e:
            if not self._fail_open:
                raise
            logger.warning("Cache put skipped for %s::%s: %s", self._namespace, key, e)

    def _cache_evict(self, product_id: int) -> None:
        key = str(product_id)
        try:
            self._cache.evict(self._namespace, key)
        except CacheUnavailableError as e:
            if not self._fail_open:
                raise
            # Entry may outlive the product until its TTL elapses
            logger.error("Cache evict failed for %s::%s: %s", self._namespace, key, e)

    @property
    def namespace(self) -> str:
        """Get the cache namespace."""
        return self._namespace

    @property
    def ttl(self) -> int:
        """Get the entry time-to-live in seconds."""
        return self._ttl

    @property
    def cache(self) -> CacheStore:
        """Get the underlying cache store (for testing)."""
        return self._cache

    @property
    def store(self) -> ProductStore:
        """Get the underlying product store (for testing)."""
        return self._store
