"""
Tests for the in-memory product store.
"""

from decimal import Decimal

import pytest

from product_cache.entities import Product
from product_cache.exceptions import ProductNotFoundError
from product_cache.protocols import ProductStore
from product_cache.repositories import InMemoryProductRepository


@pytest.fixture
def repository():
    return InMemoryProductRepository()


def test_satisfies_protocol(repository):
    assert isinstance(repository, ProductStore)


def test_insert_assigns_sequential_ids(repository):
    first = repository.insert(Product(id=None, name="Laptop", price=Decimal("1200")))
    second = repository.insert(Product(id=None, name="Phone", price=Decimal("800")))

    assert (first.id, second.id) == (1, 2)
    assert repository.find_by_id(1) == first


def test_update_and_delete(repository):
    product = repository.insert(Product(id=None, name="Tablet", price=Decimal("500")))

    updated = repository.update(Product(id=product.id, name="Tablet", price=Decimal("550")))
    assert repository.find_by_id(product.id) == updated

    repository.delete_by_id(product.id)
    assert repository.find_by_id(product.id) is None


def test_missing_ids_raise_not_found(repository):
    with pytest.raises(ProductNotFoundError):
        repository.update(Product(id=5, name="Ghost", price=Decimal("1")))
    with pytest.raises(ProductNotFoundError):
        repository.update(Product(id=None, name="Ghost", price=Decimal("1")))
    with pytest.raises(ProductNotFoundError):
        repository.delete_by_id(5)


def test_clear_keeps_id_sequence(repository):
    repository.insert(Product(id=None, name="Laptop", price=Decimal("1200")))
    repository.clear()

    product = repository.insert(Product(id=None, name="Phone", price=Decimal("800")))

    assert product.id == 2
    assert repository.find_by_id(1) is None
