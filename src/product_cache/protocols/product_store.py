"""Persistent product store protocol.

The system of record for products. Implementations own durability; the
cache service only relies on CRUD by identifier.
"""

from typing import Protocol, runtime_checkable

from product_cache.entities import Product


@runtime_checkable
class ProductStore(Protocol):
    """Protocol for the authoritative product store."""

    def insert(self, product: Product) -> Product:
        """Insert a new product and return it with its assigned id."""
        ...

    def find_by_id(self, product_id: int) -> Product | None:
        """Return the product with this id, or None if absent."""
        ...

    def update(self, product: Product) -> Product:
        """Replace an existing product by id.

        Raises:
            ProductNotFoundError: If no product has this id
        """
        ...

    def delete_by_id(self, product_id: int) -> None:
        """Delete a product by id.

        Raises:
            ProductNotFoundError: If no product has this id
        """
        ...
