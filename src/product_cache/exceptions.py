"""Exceptions for the product cache.

Store and cache failures are raised as these types so the service and the
HTTP layer can tell "product does not exist" apart from "a backend is down".
"""

from typing import Any


class ProductCacheError(Exception):
    """Base exception for product cache errors."""

    def __init__(
        self,
        message: str,
        error_code: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        self.message = message
        self.error_code = error_code
        self.details = details or {}
        super().__init__(self.message)


class ProductNotFoundError(ProductCacheError):
    """Raised when an operation targets an id absent from the persistent store."""

    def __init__(self, product_id: int | None) -> None:
        super().__init__(
            message=f"Product not found: {product_id}",
            error_code="PRODUCT_NOT_FOUND",
            details={"product_id": product_id},
        )
        self.product_id = product_id


class StoreUnavailableError(ProductCacheError):
    """Raised when the persistent store cannot be reached."""

    def __init__(
        self,
        message: str = "Persistent store unavailable",
        original_error: Exception | None = None,
    ) -> None:
        details = {}
        if original_error:
            details["original_error"] = str(original_error)
            details["original_error_type"] = type(original_error).__name__

        super().__init__(message=message, error_code="STORE_UNAVAILABLE", details=details)
        if original_error:
            self.__cause__ = original_error


class CacheUnavailableError(ProductCacheError):
    """Raised when a cache operation fails or times out."""

    def __init__(
        self,
        operation: str,
        key: str | None = None,
        original_error: Exception | None = None,
    ) -> None:
        details: dict[str, Any] = {"operation": operation}
        if key:
            details["key"] = key
        if original_error:
            details["original_error"] = str(original_error)
            details["original_error_type"] = type(original_error).__name__

        super().__init__(
            message=f"Cache {operation} failed",
            error_code="CACHE_UNAVAILABLE",
            details=details,
        )
        self.operation = operation
        if original_error:
            self.__cause__ = original_error


class CodecError(ProductCacheError):
    """Raised when a value cannot be encoded or decoded."""

    def __init__(self, message: str, tag: str | None = None) -> None:
        details = {"tag": tag} if tag else {}
        super().__init__(message=message, error_code="CODEC_ERROR", details=details)


class NullValueNotAllowedError(ProductCacheError):
    """Raised when a null value is offered to a cache that rejects nulls."""

    def __init__(self, key: str | None = None) -> None:
        super().__init__(
            message="Cache does not allow null values",
            error_code="NULL_VALUE_NOT_ALLOWED",
            details={"key": key} if key else {},
        )
