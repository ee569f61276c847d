"""Data Transfer Objects.

ProductDto is the value cached under the product namespace. The request
and response models define the external HTTP contract.

Persistence code should use entities from the entities package.
"""

from .product import ProductDto
from .requests import CreateProductRequest, UpdateProductRequest
from .responses import HealthCheckResponse, ProductResponse

__all__ = [
    "ProductDto",
    "CreateProductRequest",
    "UpdateProductRequest",
    "ProductResponse",
    "HealthCheckResponse",
]
