"""Product aggregate.

Products live independently of the sales ledger. Removing a product
never rewrites historical sales; those keep a dangling ``product_id``.
"""

from __future__ import annotations

from dataclasses import dataclass, replace

from bizpulse.domain.exceptions import InsufficientStockError, ValidationError
from bizpulse.domain.model.value_objects import Money

DEFAULT_CATEGORY = "General"


@dataclass(frozen=True)
class Product:
    """A product in the catalog.

    Frozen: stock changes produce a new instance so that a list of
    products handed out by the store is never modified behind its back.
    ``id`` is ``None`` until the store assigns one.

    Invariants:
    - ``name`` is non-empty
    - ``stock`` is never negative
    """

    id: str | None
    name: str
    cost: Money
    price: Money
    stock: int
    category: str = DEFAULT_CATEGORY

    def __post_init__(self) -> None:
        if not self.name or not self.name.strip():
            raise ValidationError("Product name is required")
        if isinstance(self.stock, bool) or not isinstance(self.stock, int):
            raise ValidationError(
                f"Stock must be an integer, got {type(self.stock).__name__}"
            )
        if self.stock < 0:
            raise ValidationError(f"Stock cannot be negative, got {self.stock}")

    def is_low_stock(self, threshold: int) -> bool:
        return self.stock < threshold

    def with_stock_deducted(self, quantity: int) -> Product:
        """Return a copy with ``quantity`` units removed from stock.

        Raises InsufficientStockError rather than letting stock go negative.
        """
        if quantity <= 0:
            raise ValidationError("Deduction quantity must be positive")
        if quantity > self.stock:
            raise InsufficientStockError(self.name, quantity, self.stock)
        return replace(self, stock=self.stock - quantity)
