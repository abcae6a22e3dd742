"""Domain service: derived metrics.

Pure functions over the current products, sales and ad-spend lists.
Nothing here performs I/O or raises: a sale whose product has been
removed simply contributes zero cost of goods.
"""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from datetime import date, timedelta
from decimal import Decimal

from bizpulse.domain.model.ad_spend import AdSpend
from bizpulse.domain.model.metrics import ZERO, DailyTotals, MetricsSnapshot
from bizpulse.domain.model.product import Product
from bizpulse.domain.model.sale import Sale

DEFAULT_LOW_STOCK_THRESHOLD = 10
DEFAULT_SERIES_DAYS = 7

_HUNDRED = Decimal("100")


def compute_metrics(
    products: Sequence[Product],
    sales: Sequence[Sale],
    ads: Sequence[AdSpend],
    low_stock_threshold: int = DEFAULT_LOW_STOCK_THRESHOLD,
) -> MetricsSnapshot:
    """Summarise revenue, cost of goods, ad spend and profitability."""
    total_revenue = sum((s.revenue.amount for s in sales), ZERO)
    total_ad_spend = sum((a.amount.amount for a in ads), ZERO)
    total_cost_of_goods = cost_of_goods(products, sales)

    net_profit = total_revenue - total_cost_of_goods - total_ad_spend
    margin = net_profit / total_revenue * _HUNDRED if total_revenue else ZERO
    roas = total_revenue / total_ad_spend if total_ad_spend else ZERO

    return MetricsSnapshot(
        total_revenue=total_revenue,
        total_ad_spend=total_ad_spend,
        total_cost_of_goods=total_cost_of_goods,
        net_profit=net_profit,
        margin=margin,
        roas=roas,
        low_stock_products=compute_low_stock(products, low_stock_threshold),
    )


def cost_of_goods(products: Iterable[Product], sales: Iterable[Sale]) -> Decimal:
    """Sum of ``cost * quantity`` per sale, using the product's current cost."""
    cost_by_id = {p.id: p.cost.amount for p in products}
    return sum(
        (cost_by_id.get(s.product_id, ZERO) * s.quantity.value for s in sales),
        ZERO,
    )


def compute_low_stock(
    products: Iterable[Product],
    threshold: int = DEFAULT_LOW_STOCK_THRESHOLD,
) -> list[Product]:
    """Products with fewer than ``threshold`` units, in input order."""
    return [p for p in products if p.is_low_stock(threshold)]


def build_weekly_series(
    sales: Iterable[Sale],
    ads: Iterable[AdSpend],
    end_date: date,
    days: int = DEFAULT_SERIES_DAYS,
) -> list[DailyTotals]:
    """One bucket per day ending on ``end_date``, oldest first.

    Days without records are present with zero totals, so the result
    always has exactly ``days`` entries.
    """
    if days <= 0:
        return []

    start = end_date - timedelta(days=days - 1)
    revenue: dict[date, Decimal] = {}
    ad_spend: dict[date, Decimal] = {}

    for sale in sales:
        if start <= sale.date <= end_date:
            revenue[sale.date] = revenue.get(sale.date, ZERO) + sale.revenue.amount
    for ad in ads:
        if start <= ad.date <= end_date:
            ad_spend[ad.date] = ad_spend.get(ad.date, ZERO) + ad.amount.amount

    series: list[DailyTotals] = []
    for offset in range(days):
        day = start + timedelta(days=offset)
        series.append(
            DailyTotals(
                date=day,
                revenue=revenue.get(day, ZERO),
                ad_spend=ad_spend.get(day, ZERO),
            )
        )
    return series
