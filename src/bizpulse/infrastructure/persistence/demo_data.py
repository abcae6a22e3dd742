"""Sample catalog and ledgers for trying the dashboard out."""

from __future__ import annotations

from datetime import date

from bizpulse.domain.model.ad_spend import AdSpend
from bizpulse.domain.model.product import Product
from bizpulse.domain.model.sale import Sale
from bizpulse.domain.model.value_objects import Money, Quantity


def demo_products() -> list[Product]:
    return [
        Product("1", "Premium Coffee Beans", Money.of("12.50"), Money.of("29.99"), 45, "Food"),
        Product("2", "Eco-friendly Mug", Money.of("4.20"), Money.of("15.00"), 120, "Apparel"),
        Product("3", "Stainless Straw Set", Money.of("1.50"), Money.of("8.99"), 8, "Accessories"),
    ]


def demo_sales() -> list[Sale]:
    return [
        Sale("s1", "1", Quantity(2), date(2024, 5, 15), Money.of("59.98")),
        Sale("s2", "2", Quantity(10), date(2024, 5, 16), Money.of("150.00")),
        Sale("s3", "1", Quantity(1), date(2024, 5, 17), Money.of("29.99")),
    ]


def demo_ads() -> list[AdSpend]:
    return [
        AdSpend("a1", "Instagram", Money.of("50.00"), date(2024, 5, 10), 5000),
        AdSpend("a2", "Google", Money.of("120.00"), date(2024, 5, 12), 12000),
    ]
