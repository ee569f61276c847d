"""Product Cache - cache-aside layer keeping Redis consistent with a product store.

This package provides a layered architecture for product caching:

Layers:
    - protocols: Interface contracts (CacheStore, ProductStore)
    - repositories: Data access implementations
    - codec: Tagged transfer codec for cache values
    - services: Cache-aside business logic
    - handlers: HTTP endpoint handlers
    - dto: Data transfer objects (cache value and API contracts)
    - entities: Domain models (persistence)

Usage:
    ```python
    from product_cache import ProductCacheService, RedisCacheRepository

    service = ProductCacheService.create(
        cache=RedisCacheRepository.create(),
        store=my_product_store,
    )
    ```

For HTTP API:
    ```python
    from product_cache.api.app import app
    ```
"""

from product_cache.codec import TransferCodec
from product_cache.config import get_redis_client, settings
from product_cache.dto import ProductDto
from product_cache.entities import Product
from product_cache.exceptions import (
    CacheUnavailableError,
    CodecError,
    NullValueNotAllowedError,
    ProductCacheError,
    ProductNotFoundError,
    StoreUnavailableError,
)
from product_cache.handlers import ProductHandler
from product_cache.protocols import CacheStore, ProductStore
from product_cache.repositories import (
    InMemoryCacheRepository,
    InMemoryProductRepository,
    RedisCacheRepository,
)
from product_cache.services import ProductCacheService

__all__ = [
    # Configuration
    "settings",
    "get_redis_client",
    # Protocols (interfaces)
    "CacheStore",
    "ProductStore",
    # Services (business logic)
    "ProductCacheService",
    # Handlers (HTTP)
    "ProductHandler",
    # Repositories (data access)
    "RedisCacheRepository",
    "InMemoryCacheRepository",
    "InMemoryProductRepository",
    # Codec
    "TransferCodec",
    # Entities and DTOs
    "Product",
    "ProductDto",
    # Errors
    "ProductCacheError",
    "ProductNotFoundError",
    "StoreUnavailableError",
    "CacheUnavailableError",
    "CodecError",
    "NullValueNotAllowedError",
]
