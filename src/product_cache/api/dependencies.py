"""Dependency injection configuration for FastAPI app.

Uses FastAPI's app.state pattern for storing service instances.

Pattern:
    - Services stored in app.state during lifespan
    - Dependency functions retrieve from request.app.state
    - Clean separation, no global mutable state
"""

import logging
from collections.abc import AsyncIterator, Callable
from contextlib import AbstractAsyncContextManager, asynccontextmanager
from typing import Annotated

from fastapi import Depends, FastAPI, Request

from product_cache.config import settings
from product_cache.handlers import ProductHandler
from product_cache.protocols import CacheStore, ProductStore
from product_cache.repositories import (
    InMemoryCacheRepository,
    InMemoryProductRepository,
    RedisCacheRepository,
)
from product_cache.services import ProductCacheService

logger = logging.getLogger(__name__)


def get_handler(request: Request) -> ProductHandler:
    """Dependency injection for ProductHandler from app.state.

    Raises:
        RuntimeError: If handler is not initialized
    """
    handler = getattr(request.app.state, "product_handler", None)
    if handler is None:
        raise RuntimeError("ProductHandler not initialized. Check lifespan setup.")
    return handler


def build_cache_store() -> CacheStore:
    """Create the cache backend selected by CACHE_BACKEND."""
    if settings.cache_backend == "memory":
        return InMemoryCacheRepository()
    return RedisCacheRepository.create()


def make_lifespan(
    cache: CacheStore | None = None,
    store: ProductStore | None = None,
) -> Callable[[FastAPI], AbstractAsyncContextManager[None]]:
    """Build the lifespan context manager for the app.

    Args:
        cache: Cache backend. If None, built from settings at startup.
        store: Product store. If None, an in-memory store is used.
    """

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncIterator[None]:
        """Initialize all layers and store them in app.state.

        1. Repositories (data access) - created explicitly
        2. Service (business logic) - stored in app.state.product_service
        3. Handler (HTTP endpoints) - stored in app.state.product_handler
        """
        cache_store = cache if cache is not None else build_cache_store()
        product_store = store if store is not None else InMemoryProductRepository()

        product_service = ProductCacheService.create(cache=cache_store, store=product_store)
        product_handler = ProductHandler(product_service=product_service)

        app.state.product_service = product_service
        app.state.product_handler = product_handler

        logger.info(
            "Product cache service initialized (namespace=%s, ttl=%ss, cache healthy=%s)",
            product_service.namespace,
            product_service.ttl,
            product_service.is_healthy(),
        )

        yield

        del app.state.product_handler
        del app.state.product_service
        logger.info("Product cache service shut down")

    return lifespan


# Type alias for cleaner dependency injection
HandlerDep = Annotated[ProductHandler, Depends(get_handler)]
