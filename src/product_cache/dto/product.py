"""Product transfer object stored in the cache."""

from decimal import Decimal

from pydantic import BaseModel, ConfigDict, Field

from product_cache.entities import Product


class ProductDto(BaseModel):
    """Immutable product value crossing the cache boundary.

    Structurally identical to the Product entity but decoupled from it, so
    the cache never holds persistence-layer types.
    """

    model_config = ConfigDict(frozen=True)

    id: int | None = Field(None, description="Store-assigned product id")
    name: str = Field(..., description="Product name")
    price: Decimal = Field(..., description="Unit price")

    @classmethod
    def from_entity(cls, product: Product) -> "ProductDto":
        """Build a transfer object from a persistent entity."""
        return cls(id=product.id, name=product.name, price=product.price)

    def to_entity(self) -> Product:
        """Build a persistent entity from this transfer object."""
        return Product(id=self.id, name=self.name, price=self.price)
