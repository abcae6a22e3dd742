"""Data Transfer Objects: plain containers that cross layer boundaries.

DTOs carry data between the CLI and application layers without
exposing domain internals to the outside world. Amounts are
pre-formatted for display.
"""

from __future__ import annotations

from dataclasses import dataclass

UNKNOWN_ITEM = "Unknown item"


@dataclass(frozen=True)
class ProductLineDTO:
    id: str
    name: str
    category: str
    cost: str  # formatted, e.g. "$12.50"
    price: str
    stock: int
    low_stock: bool


@dataclass(frozen=True)
class SaleLineDTO:
    id: str
    product_name: str  # UNKNOWN_ITEM when the product was removed
    quantity: int
    date: str  # ISO-8601
    revenue: str


@dataclass(frozen=True)
class AdLineDTO:
    id: str
    platform: str
    amount: str
    date: str
    reach: int


@dataclass(frozen=True)
class DailyTotalsDTO:
    date: str
    label: str  # short "MM/DD" form for charts
    revenue: str
    ad_spend: str


@dataclass(frozen=True)
class DashboardDTO:
    """Output: everything the dashboard screen shows."""

    total_revenue: str
    total_ad_spend: str
    total_cost_of_goods: str
    net_profit: str
    margin: str  # e.g. "12.5%"
    roas: str  # e.g. "2.35x"
    low_stock: list[ProductLineDTO]
    series: list[DailyTotalsDTO]
