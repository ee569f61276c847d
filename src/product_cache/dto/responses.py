"""Response DTOs for API endpoints."""

from decimal import Decimal

from pydantic import BaseModel, Field, field_serializer


class ProductResponse(BaseModel):
    """Response DTO for a single product.

    The price is sent as a JSON number; whole amounts come out as integers.
    """

    id: int = Field(..., description="Store-assigned product id")
    name: str = Field(..., description="Product name")
    price: Decimal = Field(..., description="Unit price")

    @field_serializer("price")
    def serialize_price(self, price: Decimal) -> int | float:
        if price == price.to_integral_value():
            return int(price)
        return float(price)


class HealthCheckResponse(BaseModel):
    """Response DTO for health check."""

    status: str = Field(..., description="Health status: 'healthy' or 'degraded'")
    cache_healthy: bool = Field(..., description="Whether the cache backend is reachable")
