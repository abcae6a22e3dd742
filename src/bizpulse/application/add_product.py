"""Application service: Add Product use case."""

from __future__ import annotations

import logging
from dataclasses import replace

from bizpulse.domain.exceptions import ValidationError
from bizpulse.domain.model.product import DEFAULT_CATEGORY, Product
from bizpulse.domain.model.value_objects import Money
from bizpulse.domain.repository.store import Collection

logger = logging.getLogger(__name__)


class AddProductHandler:

    def __init__(self, products: Collection[Product]) -> None:
        self._products = products

    def handle(
        self,
        name: str,
        cost: str,
        price: str,
        stock: int,
        category: str = DEFAULT_CATEGORY,
    ) -> Product:
        """Add a new product to the catalog and return it with its id."""
        if not name or not name.strip():
            raise ValidationError("Product name is required")

        product = Product(
            id=None,
            name=name.strip(),
            cost=Money.of(cost),
            price=Money.of(price),
            stock=stock,
            category=(category or DEFAULT_CATEGORY).strip() or DEFAULT_CATEGORY,
        )
        product_id = self._products.create(product)
        logger.info("Added product %s (%s)", product_id, product.name)
        return replace(product, id=product_id)
