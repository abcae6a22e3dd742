"""Application service: Record Sale use case.

Runs the domain rule against the store's current product list, then
writes the sale and the new stock count through the store. Local copies
are never touched; listeners see the change via the store's
notifications.

The two writes are not transactional. Two sessions selling the same
product at once may both pass the stock check.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import replace
from datetime import date

from bizpulse.domain.model.product import Product
from bizpulse.domain.model.sale import Sale, SaleDraft
from bizpulse.domain.model.value_objects import Quantity
from bizpulse.domain.repository.store import Collection
from bizpulse.domain.service.sale_recording import record_sale

logger = logging.getLogger(__name__)


class RecordSaleHandler:

    def __init__(
        self,
        products: Collection[Product],
        sales: Collection[Sale],
        today: Callable[[], date] = date.today,
    ) -> None:
        self._products = products
        self._sales = sales
        self._today = today

    def handle(
        self,
        product_id: str,
        quantity: int,
        sale_date: date | None = None,
    ) -> Sale:
        """Record a sale and return it with its id and locked revenue.

        Raises ProductNotFoundError or InsufficientStockError before any
        write happens.
        """
        draft = SaleDraft(
            product_id=product_id,
            quantity=Quantity(quantity),
            date=sale_date or self._today(),
        )

        updated_products, sale = record_sale(self._products.list_all(), draft)
        new_stock = next(p.stock for p in updated_products if p.id == product_id)

        sale_id = self._sales.create(sale)
        self._products.update_fields(product_id, {"stock": new_stock})

        logger.info(
            "Recorded sale %s: %d x %s for %s",
            sale_id, quantity, product_id, sale.revenue,
        )
        return replace(sale, id=sale_id)
