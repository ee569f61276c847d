"""Domain entities for internal representation.

These are pure dataclasses (frozen) used by the persistent store. They
never cross the cache boundary - use ProductDto from the dto package for
that.
"""

from .product import Product

__all__ = ["Product"]
