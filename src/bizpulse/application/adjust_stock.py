"""Application service: Adjust Stock use case.

Explicit stock corrections (deliveries, stocktakes). Sales go through
RecordSaleHandler instead.
"""

from __future__ import annotations

import logging

from bizpulse.domain.exceptions import EntityNotFoundError, ValidationError
from bizpulse.domain.model.product import Product
from bizpulse.domain.repository.store import Collection

logger = logging.getLogger(__name__)


class AdjustStockHandler:

    def __init__(self, products: Collection[Product]) -> None:
        self._products = products

    def handle(self, product_id: str, stock: int) -> None:
        """Set the on-hand count for a product."""
        product = self._products.get_by_id(product_id)
        if product is None:
            raise EntityNotFoundError(f"Product with ID '{product_id}' not found")
        if stock < 0:
            raise ValidationError(f"Stock cannot be negative, got {stock}")

        self._products.update_fields(product_id, {"stock": stock})
        logger.info(
            "Stock for %s adjusted from %d to %d", product.name, product.stock, stock
        )
