"""Service layer for business logic.

This layer contains the cache-aside protocol for products.
Services depend on protocols (interfaces), not concrete implementations,
making them testable and flexible.

Architecture:
    Handler -> Service -> Repository
    (HTTP)  -> (Business) -> (Data Access)

Usage:
    ```python
    from product_cache.services import ProductCacheService

    # Using factory method (recommended)
    service = ProductCacheService.create(cache=cache, store=store)

    # Or manual creation
    service = ProductCacheService(cache=cache, store=store, codec=TransferCodec.create())
    ```
"""

from .product_service import ProductCacheService

__all__ = [
    "ProductCacheService",
]
