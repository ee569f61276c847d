"""HTTP handlers for product operations.

Handlers convert between DTOs (API contracts) and service calls.
They handle HTTP concerns like status codes and error mapping.
"""

import logging

from fastapi import HTTPException, status

from product_cache.dto import (
    CreateProductRequest,
    HealthCheckResponse,
    ProductDto,
    ProductResponse,
    UpdateProductRequest,
)
from product_cache.exceptions import (
    CacheUnavailableError,
    ProductNotFoundError,
    StoreUnavailableError,
)
from product_cache.services import ProductCacheService

logger = logging.getLogger(__name__)


class ProductHandler:
    """HTTP handlers for product operations.

    This handler delegates business logic to ProductCacheService
    and handles HTTP-specific concerns like:
    - Converting request DTOs to transfer objects and back
    - Mapping ProductNotFoundError to 404 and backend outages to 503

    Example:
        ```python
        handler = ProductHandler(product_service=service)

        @app.get("/api/product/{product_id}", response_model=ProductResponse)
        def get_product(product_id: int):
            return handler.get_product(product_id)
        ```
    """

    def __init__(self, product_service: ProductCacheService) -> None:
        """Initialize the product handler.

        Args:
            product_service: The service for business logic (required).
        """
        self._products = product_service

    def create_product(self, request: CreateProductRequest) -> ProductResponse:
        """Handle POST /api/product requests."""
        try:
            created = self._products.create_product(
                ProductDto(name=request.name, price=request.price)
            )
            return self._to_response(created)
        except Exception as e:
            raise self._to_http_error(e, "create product") from e

    def get_product(self, product_id: int) -> ProductResponse:
        """Handle GET /api/product/{product_id} requests."""
        try:
            return self._to_response(self._products.get_product(product_id))
        except Exception as e:
            raise self._to_http_error(e, "get product") from e

    def update_product(self, request: UpdateProductRequest) -> ProductResponse:
        """Handle PUT /api/product requests."""
        try:
            updated = self._products.update_product(
                ProductDto(id=request.id, name=request.name, price=request.price)
            )
            return self._to_response(updated)
        except Exception as e:
            raise self._to_http_error(e, "update product") from e

    def delete_product(self, product_id: int) -> None:
        """Handle DELETE /api/product/{product_id} requests."""
        try:
            self._products.delete_product(product_id)
        except Exception as e:
            raise self._to_http_error(e, "delete product") from e

    def health_check(self) -> HealthCheckResponse:
        """Handle GET /health requests.

        The API keeps serving from the store while the cache is down, so a
        failed cache check reports "degraded" rather than an error.
        """
        cache_healthy = self._products.is_healthy()
        return HealthCheckResponse(
            status="healthy" if cache_healthy else "degraded",
            cache_healthy=cache_healthy,
        )

    @staticmethod
    def _to_response(dto: ProductDto) -> ProductResponse:
        return ProductResponse(id=dto.id, name=dto.name, price=dto.price)

    @staticmethod
    def _to_http_error(error: Exception, action: str) -> HTTPException:
        if isinstance(error, ProductNotFoundError):
            return HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=error.message)

        if isinstance(error, (StoreUnavailableError, CacheUnavailableError)):
            logger.error("Failed to %s: %s", action, error)
            return HTTPException(
                status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
                detail=f"Failed to {action}: {error.message}",
            )

        logger.exception("Failed to %s", action)
        return HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail=f"Failed to {action}: {error}",
        )
