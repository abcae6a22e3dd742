"""Derived, never-persisted views over the three collections."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date
from decimal import Decimal

from bizpulse.domain.model.product import Product

ZERO = Decimal("0")


@dataclass(frozen=True)
class MetricsSnapshot:
    """Financial summary of the current products, sales and ads.

    Totals are plain Decimals rather than Money because ``net_profit``
    may be negative. ``margin`` is a percentage.
    """

    total_revenue: Decimal = ZERO
    total_ad_spend: Decimal = ZERO
    total_cost_of_goods: Decimal = ZERO
    net_profit: Decimal = ZERO
    margin: Decimal = ZERO
    roas: Decimal = ZERO
    low_stock_products: list[Product] = field(default_factory=list)


@dataclass(frozen=True)
class DailyTotals:
    """One calendar-day bucket of the revenue / ad-spend series."""

    date: date
    revenue: Decimal = ZERO
    ad_spend: Decimal = ZERO
