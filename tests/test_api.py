"""
Tests for the product cache API.
"""

from decimal import Decimal

import pytest
from fastapi.testclient import TestClient

from product_cache.api.app import create_app
from product_cache.codec import TransferCodec
from product_cache.dto import ProductDto
from product_cache.entities import Product


@pytest.fixture
def client(cache, store):
    """Create a test client over in-memory backends."""
    with TestClient(create_app(cache=cache, store=store)) as test_client:
        yield test_client


def test_root(client):
    """Test root endpoint."""
    response = client.get("/")
    assert response.status_code == 200
    assert response.json()["name"] == "Product Cache API"


def test_health(client):
    """Test health check endpoint."""
    response = client.get("/health")
    assert response.status_code == 200
    assert response.json() == {"status": "healthy", "cache_healthy": True}


def test_create_product(client, store, cache):
    """Created product is stored and cached."""
    response = client.post("/api/product", json={"name": "Laptop", "price": 1200})

    assert response.status_code == 201
    data = response.json()
    assert data["name"] == "Laptop"
    assert data["price"] == 1200

    assert store.inner.find_by_id(data["id"]) is not None
    cached = TransferCodec.create().decode_as(cache.get("product", str(data["id"])), ProductDto)
    assert cached.name == "Laptop"
    assert cached.price == Decimal("1200")


def test_get_product_and_verify_cache(client, store):
    """Second GET is served without touching the store."""
    product = store.inner.insert(Product(id=None, name="Phone", price=Decimal("800")))

    response = client.get(f"/api/product/{product.id}")
    assert response.status_code == 200
    assert response.json()["name"] == "Phone"
    assert response.json()["price"] == 800
    assert store.calls["find_by_id"] == 1

    store.reset_calls()
    response = client.get(f"/api/product/{product.id}")
    assert response.status_code == 200
    assert response.json()["name"] == "Phone"
    assert store.calls["find_by_id"] == 0


def test_update_product_and_verify_cache(client, store, cache):
    """PUT refreshes the cached entry."""
    product = store.inner.insert(Product(id=None, name="Tablet", price=Decimal("500")))

    response = client.put(
        "/api/product",
        json={"id": product.id, "name": "Updated Tablet", "price": 550},
    )

    assert response.status_code == 200
    assert response.json()["name"] == "Updated Tablet"
    assert response.json()["price"] == 550

    cached = TransferCodec.create().decode_as(cache.get("product", str(product.id)), ProductDto)
    assert cached.name == "Updated Tablet"


def test_delete_product_and_evict_cache(client, store, cache):
    """DELETE removes the product from store and cache."""
    product = store.inner.insert(Product(id=None, name="Smartwatch", price=Decimal("250")))
    client.get(f"/api/product/{product.id}")

    response = client.delete(f"/api/product/{product.id}")

    assert response.status_code == 204
    assert store.inner.find_by_id(product.id) is None
    assert cache.get("product", str(product.id)) is None


def test_unknown_product_returns_404(client):
    assert client.get("/api/product/999").status_code == 404
    assert client.delete("/api/product/999").status_code == 404

    response = client.put("/api/product", json={"id": 999, "name": "Ghost", "price": 1})
    assert response.status_code == 404


def test_invalid_request_returns_422(client):
    response = client.post("/api/product", json={"name": "", "price": 10})
    assert response.status_code == 422


def test_fractional_price_is_a_json_number(client):
    response = client.post("/api/product", json={"name": "Cable", "price": 9.99})

    assert response.status_code == 201
    assert response.json()["price"] == 9.99


def test_store_outage_returns_503(cache, unavailable_store):
    """Failed store writes map to 503 and keep the cached entry."""
    product = unavailable_store.insert(Product(id=None, name="Laptop", price=Decimal("1200")))

    with TestClient(create_app(cache=cache, store=unavailable_store)) as client:
        assert client.get(f"/api/product/{product.id}").status_code == 200
        before = cache.get("product", str(product.id))

        response = client.put(
            "/api/product",
            json={"id": product.id, "name": "Laptop Pro", "price": 1500},
        )
        assert response.status_code == 503

        response = client.delete(f"/api/product/{product.id}")
        assert response.status_code == 503

    assert cache.get("product", str(product.id)) == before
