"""Repository layer for data access.

This layer puts external dependencies (Redis, the product database)
behind protocol-based interfaces. This enables:
- Easy swapping of implementations (Redis → memory, etc.)
- Unit testing without a running Redis
- Clear separation of concerns

The repositories are protocol-based (structural typing), not inheritance-based.
Any class implementing the required methods will satisfy the protocol.
"""

from product_cache.protocols import CacheStore, ProductStore

from .memory_cache_repository import InMemoryCacheRepository
from .memory_product_repository import InMemoryProductRepository
from .redis_cache_repository import RedisCacheRepository

__all__ = [
    "CacheStore",
    "ProductStore",
    "InMemoryCacheRepository",
    "InMemoryProductRepository",
    "RedisCacheRepository",
]
