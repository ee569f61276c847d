"""Product domain entity."""

from dataclasses import dataclass
from decimal import Decimal


@dataclass(frozen=True)
class Product:
    """Persistent product entity.

    Owned by the persistent store. The id is None until the store assigns
    one on insert and never changes afterwards.

    Attributes:
        id: Store-assigned identifier
        name: Product name
        price: Unit price (non-negative by convention, not enforced)
    """

    id: int | None
    name: str
    price: Decimal
