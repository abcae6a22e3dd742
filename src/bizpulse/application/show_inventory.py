"""Application service: Show Inventory use case (query)."""

from __future__ import annotations

from bizpulse.application.dto import ProductLineDTO
from bizpulse.domain.model.product import Product
from bizpulse.domain.repository.store import Collection
from bizpulse.domain.service.metrics import DEFAULT_LOW_STOCK_THRESHOLD


def to_product_line(product: Product, threshold: int) -> ProductLineDTO:
    return ProductLineDTO(
        id=product.id or "",
        name=product.name,
        category=product.category,
        cost=str(product.cost),
        price=str(product.price),
        stock=product.stock,
        low_stock=product.is_low_stock(threshold),
    )


class ShowInventoryHandler:

    def __init__(
        self,
        products: Collection[Product],
        low_stock_threshold: int = DEFAULT_LOW_STOCK_THRESHOLD,
    ) -> None:
        self._products = products
        self._threshold = low_stock_threshold

    def handle(self, low_stock_only: bool = False) -> list[ProductLineDTO]:
        products = self._products.list_all()
        if low_stock_only:
            products = [p for p in products if p.is_low_stock(self._threshold)]
        return [to_product_line(p, self._threshold) for p in products]
