"""Application service: Remove Product use case.

Historical sales that reference the product are left untouched; they
keep their frozen revenue and stop contributing cost of goods.
"""

from __future__ import annotations

import logging

from bizpulse.domain.exceptions import EntityNotFoundError
from bizpulse.domain.model.product import Product
from bizpulse.domain.repository.store import Collection

logger = logging.getLogger(__name__)


class RemoveProductHandler:

    def __init__(self, products: Collection[Product]) -> None:
        self._products = products

    def handle(self, product_id: str) -> Product:
        product = self._products.get_by_id(product_id)
        if product is None:
            raise EntityNotFoundError(f"Product with ID '{product_id}' not found")

        self._products.delete(product_id)
        logger.info("Removed product %s (%s)", product_id, product.name)
        return product
