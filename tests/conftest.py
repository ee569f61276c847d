"""
Shared fixtures for the product cache tests.
"""

from collections import Counter

import pytest

from product_cache.codec import TransferCodec
from product_cache.entities import Product
from product_cache.exceptions import StoreUnavailableError
from product_cache.repositories import InMemoryCacheRepository, InMemoryProductRepository
from product_cache.services import ProductCacheService


class FakeClock:
    """Manually advanced monotonic clock."""

    def __init__(self, start: float = 1000.0) -> None:
        self.now = start

    def __call__(self) -> float:
        return self.now

    def advance(self, seconds: float) -> None:
        self.now += seconds


class CountingProductStore:
    """Product store wrapper that counts calls per method."""

    def __init__(self, inner: InMemoryProductRepository) -> None:
        self.inner = inner
        self.calls: Counter[str] = Counter()

    def insert(self, product: Product) -> Product:
        self.calls["insert"] += 1
        return self.inner.insert(product)

    def find_by_id(self, product_id: int) -> Product | None:
        self.calls["find_by_id"] += 1
        return self.inner.find_by_id(product_id)

    def update(self, product: Product) -> Product:
        self.calls["update"] += 1
        return self.inner.update(product)

    def delete_by_id(self, product_id: int) -> None:
        self.calls["delete_by_id"] += 1
        self.inner.delete_by_id(product_id)

    def reset_calls(self) -> None:
        self.calls.clear()


class UnavailableProductStore(InMemoryProductRepository):
    """Product store whose updates and deletes fail like an unreachable database."""

    def update(self, product: Product) -> Product:
        raise StoreUnavailableError(original_error=ConnectionError("connection refused"))

    def delete_by_id(self, product_id: int) -> None:
        raise StoreUnavailableError(original_error=ConnectionError("connection refused"))


@pytest.fixture
def clock():
    """Create a controllable clock."""
    return FakeClock()


@pytest.fixture
def cache(clock):
    """Create an empty in-memory cache that rejects null values."""
    return InMemoryCacheRepository(allow_null_values=False, clock=clock)


@pytest.fixture
def store():
    """Create a call-counting in-memory product store."""
    return CountingProductStore(InMemoryProductRepository())


@pytest.fixture
def codec():
    """Create the default transfer codec."""
    return TransferCodec.create()


@pytest.fixture
def service(cache, store, codec):
    """Create a product cache service over the in-memory backends."""
    return ProductCacheService(
        cache=cache,
        store=store,
        codec=codec,
        namespace="product",
        ttl=600,
        fail_open=True,
    )


@pytest.fixture
def unavailable_store():
    """Create a product store that accepts inserts but fails updates and deletes."""
    return UnavailableProductStore()
