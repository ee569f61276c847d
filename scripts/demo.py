#!/usr/bin/env python3
"""
Demo script for the product cache.

This script walks through the cache-aside lifecycle of a product: create,
read from cache, update, delete. It uses Redis from REDIS_URL, or an
in-process cache when run with --memory.
"""

import sys
from decimal import Decimal

from product_cache import (
    InMemoryCacheRepository,
    InMemoryProductRepository,
    ProductCacheService,
    ProductDto,
    ProductNotFoundError,
    RedisCacheRepository,
)


def print_section(title: str) -> None:
    """Print a section header."""
    print("\n" + "=" * 70)
    print(f"  {title}")
    print("=" * 70)


def show_cache_entry(service: ProductCacheService, product_id: int) -> None:
    """Print the raw cache entry for a product."""
    data = service.cache.get(service.namespace, str(product_id))
    if data is None:
        print(f"  cache[{service.namespace}::{product_id}] = <absent>")
    else:
        print(f"  cache[{service.namespace}::{product_id}] = {data.decode()}")


def demo_lifecycle(service: ProductCacheService) -> None:
    """Demonstrate create, read, update and delete."""
    print_section("Cache-Aside Lifecycle")

    created = service.create_product(ProductDto(name="Laptop", price=Decimal("1200")))
    print(f"\n📝 Created: {created}")
    show_cache_entry(service, created.id)

    fetched = service.get_product(created.id)
    print(f"\n🔍 Read (served from cache): {fetched}")

    updated = service.update_product(
        ProductDto(id=created.id, name="Updated Laptop", price=Decimal("1150"))
    )
    print(f"\n✏️  Updated: {updated}")
    show_cache_entry(service, created.id)

    service.delete_product(created.id)
    print(f"\n🗑️  Deleted product {created.id}")
    show_cache_entry(service, created.id)

    try:
        service.get_product(created.id)
    except ProductNotFoundError as e:
        print(f"  ✓ {e.message}")


def main() -> None:
    """Run the demo."""
    print("\n🚀 Product Cache Demo")

    use_memory = "--memory" in sys.argv[1:]
    cache = InMemoryCacheRepository() if use_memory else RedisCacheRepository.create()

    if not cache.health_check():
        print("\n❌ Redis is not reachable.")
        print("  Start it with: docker run -p 6379:6379 redis")
        print("  Or rerun with --memory")
        return

    service = ProductCacheService.create(cache=cache, store=InMemoryProductRepository())
    demo_lifecycle(service)

    print("\n" + "=" * 70)
    print("✅ Demo completed successfully!")
    print("=" * 70)


if __name__ == "__main__":
    main()
