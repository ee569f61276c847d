"""Request DTOs for API endpoints."""

from decimal import Decimal

from pydantic import BaseModel, Field


class CreateProductRequest(BaseModel):
    """Request DTO for creating a product.

    The id is assigned by the store; any id sent by the client is ignored.
    """

    id: int | None = Field(None, description="Ignored on create")
    name: str = Field(..., description="Product name", min_length=1)
    price: Decimal = Field(..., description="Unit price")


class UpdateProductRequest(BaseModel):
    """Request DTO for updating an existing product."""

    id: int = Field(..., description="Id of the product to update")
    name: str = Field(..., description="New product name", min_length=1)
    price: Decimal = Field(..., description="New unit price")
