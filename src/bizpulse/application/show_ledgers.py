"""Application services: Sales and Ad-Spend ledger queries.

Sales are listed newest first; ad spend is listed in the order it was
recorded.
"""

from __future__ import annotations

from bizpulse.application.dto import UNKNOWN_ITEM, AdLineDTO, SaleLineDTO
from bizpulse.domain.model.ad_spend import AdSpend
from bizpulse.domain.model.product import Product
from bizpulse.domain.model.sale import Sale
from bizpulse.domain.repository.store import Collection


class ListSalesHandler:

    def __init__(
        self,
        sales: Collection[Sale],
        products: Collection[Product],
    ) -> None:
        self._sales = sales
        self._products = products

    def handle(self) -> list[SaleLineDTO]:
        names = {p.id: p.name for p in self._products.list_all()}
        return [
            SaleLineDTO(
                id=sale.id or "",
                # Removed products keep their sales on the books
                product_name=names.get(sale.product_id, UNKNOWN_ITEM),
                quantity=sale.quantity.value,
                date=sale.date.isoformat(),
                revenue=str(sale.revenue),
            )
            for sale in reversed(self._sales.list_all())
        ]


class ListAdsHandler:

    def __init__(self, ads: Collection[AdSpend]) -> None:
        self._ads = ads

    def handle(self) -> list[AdLineDTO]:
        return [
            AdLineDTO(
                id=ad.id or "",
                platform=ad.platform,
                amount=str(ad.amount),
                date=ad.date.isoformat(),
                reach=ad.reach,
            )
            for ad in self._ads.list_all()
        ]
