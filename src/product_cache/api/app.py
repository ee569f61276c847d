from typing import Any

from fastapi import FastAPI, Response, status

from product_cache.api.dependencies import HandlerDep, make_lifespan
from product_cache.config import configure_logging, settings
from product_cache.dto import (
    CreateProductRequest,
    HealthCheckResponse,
    ProductResponse,
    UpdateProductRequest,
)
from product_cache.protocols import CacheStore, ProductStore


def create_app(
    cache: CacheStore | None = None,
    store: ProductStore | None = None,
) -> FastAPI:
    """Create the Product Cache API.

    Args:
        cache: Cache backend. If None, selected from settings at startup.
        store: Product store. If None, an in-memory store is used.
    """
    app = FastAPI(
        title="Product Cache API",
        description="Product CRUD with a Redis cache-aside layer",
        version="0.1.0",
        lifespan=make_lifespan(cache=cache, store=store),
    )

    @app.get("/")
    async def root() -> dict[str, Any]:
        """Root endpoint with API information."""
        return {
            "name": "Product Cache API",
            "version": "0.1.0",
            "endpoints": {
                "product": "/api/product",
                "health": "/health",
                "docs": "/docs",
            },
        }

    @app.get("/health", response_model=HealthCheckResponse)
    def health(handler: HandlerDep) -> HealthCheckResponse:
        """Health check endpoint."""
        return handler.health_check()

    @app.post(
        "/api/product",
        response_model=ProductResponse,
        status_code=status.HTTP_201_CREATED,
    )
    def create_product(
        request: CreateProductRequest, handler: HandlerDep
    ) -> ProductResponse:
        """Create a product and cache it."""
        return handler.create_product(request)

    @app.get("/api/product/{product_id}", response_model=ProductResponse)
    def get_product(product_id: int, handler: HandlerDep) -> ProductResponse:
        """Get a product, served from cache when possible."""
        return handler.get_product(product_id)

    @app.put("/api/product", response_model=ProductResponse)
    def update_product(
        request: UpdateProductRequest, handler: HandlerDep
    ) -> ProductResponse:
        """Update a product and refresh its cache entry."""
        return handler.update_product(request)

    @app.delete("/api/product/{product_id}", status_code=status.HTTP_204_NO_CONTENT)
    def delete_product(product_id: int, handler: HandlerDep) -> Response:
        """Delete a product and evict its cache entry."""
        handler.delete_product(product_id)
        return Response(status_code=status.HTTP_204_NO_CONTENT)

    return app


app = create_app()


if __name__ == "__main__":
    import uvicorn

    configure_logging()
    uvicorn.run(
        "product_cache.api.app:app",
        host=settings.api_host,
        port=settings.api_port,
        reload=settings.api_reload,
    )
