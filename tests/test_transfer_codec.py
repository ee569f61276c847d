"""
Tests for the tagged transfer codec.
"""

import json
from decimal import Decimal

import pytest
from pydantic import BaseModel

from product_cache.codec import TransferCodec
from product_cache.dto import ProductDto
from product_cache.exceptions import CodecError, NullValueNotAllowedError


class CategoryDto(BaseModel):
    """A second cacheable model sharing the namespace."""

    id: int
    title: str


def test_encode_produces_tagged_envelope(codec):
    data = codec.encode(ProductDto(id=5, name="Phone", price=Decimal("800")))

    envelope = json.loads(data)
    assert envelope["@type"] == "product"
    assert envelope["payload"] == {"id": 5, "name": "Phone", "price": "800"}


def test_decode_reproduces_value_field_for_field(codec):
    original = ProductDto(id=7, name="Updated Tablet", price=Decimal("550.25"))

    decoded = codec.decode(codec.encode(original))

    assert isinstance(decoded, ProductDto)
    assert decoded == original
    assert decoded.price == Decimal("550.25")


def test_multiple_models_share_one_codec(codec):
    """Values of different types decode from bytes alone."""
    codec.register("category", CategoryDto)

    product_bytes = codec.encode(ProductDto(id=1, name="Laptop", price=Decimal("1200")))
    category_bytes = codec.encode(CategoryDto(id=1, title="Computers"))

    assert isinstance(codec.decode(product_bytes), ProductDto)
    assert codec.decode(category_bytes) == CategoryDto(id=1, title="Computers")
    assert codec.tags == ["category", "product"]


def test_encode_none_is_rejected(codec):
    with pytest.raises(NullValueNotAllowedError):
        codec.encode(None)


def test_encode_unregistered_type_fails(codec):
    with pytest.raises(CodecError):
        codec.encode(CategoryDto(id=1, title="Computers"))


@pytest.mark.parametrize(
    "data",
    [
        b"not json",
        b"\xff\xfe",
        b"[1, 2]",
        b'{"payload": {"id": 1}}',
        b'{"@type": "unknown", "payload": {}}',
        b'{"@type": "product", "payload": {"id": 1}}',
    ],
)
def test_decode_rejects_bad_input(codec, data):
    with pytest.raises(CodecError):
        codec.decode(data)


def test_decode_as_checks_type(codec):
    codec.register("category", CategoryDto)
    data = codec.encode(CategoryDto(id=1, title="Computers"))

    with pytest.raises(CodecError):
        codec.decode_as(data, ProductDto)


def test_register_conflicts_fail():
    codec = TransferCodec()
    codec.register("product", ProductDto)
    codec.register("product", ProductDto)  # idempotent

    with pytest.raises(CodecError):
        codec.register("product", CategoryDto)
    with pytest.raises(CodecError):
        codec.register("item", ProductDto)
