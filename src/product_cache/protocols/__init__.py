"""Protocol interfaces for swappable implementations.

This package contains protocol definitions using structural typing.
Protocols enable:
- Easy swapping of implementations (Redis → memory, SQL → document store, etc.)
- Unit testing with fake implementations
- Clear separation of concerns

Usage:
    ```python
    from product_cache.protocols import CacheStore, ProductStore

    cache: CacheStore = RedisCacheRepository.create()
    store: ProductStore = InMemoryProductRepository()
    ```
"""

from .cache_store import CacheStore
from .product_store import ProductStore

__all__ = [
    "CacheStore",
    "ProductStore",
]
