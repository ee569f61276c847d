"""In-process implementation of ProductStore.

Stands in for the relational store the service is deployed against. Ids
are assigned sequentially from 1, like a database identity column.
"""

import itertools
import threading
from dataclasses import replace

from product_cache.entities import Product
from product_cache.exceptions import ProductNotFoundError


class InMemoryProductRepository:
    """Thread-safe dict-backed product store."""

    def __init__(self) -> None:
        self._rows: dict[int, Product] = {}
        self._ids = itertools.count(1)
        self._lock = threading.Lock()

    def insert(self, product: Product) -> Product:
        with self._lock:
            stored = replace(product, id=next(self._ids))
            self._rows[stored.id] = stored
            return stored

    def find_by_id(self, product_id: int) -> Product | None:
        with self._lock:
            return self._rows.get(product_id)

    def update(self, product: Product) -> Product:
        with self._lock:
            if product.id is None or product.id not in self._rows:
                raise ProductNotFoundError(product.id)
            self._rows[product.id] = product
            return product

    def delete_by_id(self, product_id: int) -> None:
        with self._lock:
            if self._rows.pop(product_id, None) is None:
                raise ProductNotFoundError(product_id)

    def clear(self) -> None:
        """Delete every product (ids keep increasing)."""
        with self._lock:
            self._rows.clear()
