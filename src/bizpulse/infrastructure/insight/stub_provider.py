"""
Offline insight provider.

Builds a short report from the computed metrics without calling any
external service. Used when no API key is configured.
"""

from __future__ import annotations

import logging

from bizpulse.domain.model.value_objects import format_amount
from bizpulse.domain.service.insight_provider import BusinessSnapshot, InsightProvider
from bizpulse.domain.service.metrics import DEFAULT_LOW_STOCK_THRESHOLD, compute_metrics

logger = logging.getLogger(__name__)


class StubInsightProvider(InsightProvider):

    def __init__(self, low_stock_threshold: int = DEFAULT_LOW_STOCK_THRESHOLD) -> None:
        self.low_stock_threshold = low_stock_threshold

    def generate_insight(self, snapshot: BusinessSnapshot) -> str:
        m = compute_metrics(
            snapshot.products, snapshot.sales, snapshot.ads, self.low_stock_threshold
        )
        logger.info("[STUB] Generated offline insight")

        lines = [
            "## Business Snapshot",
            "",
            f"- Revenue: {format_amount(m.total_revenue)}",
            f"- Cost of goods: {format_amount(m.total_cost_of_goods)}",
            f"- Ad spend: {format_amount(m.total_ad_spend)}",
            f"- Net profit: {format_amount(m.net_profit)} ({m.margin:.1f}% margin)",
            f"- ROAS: {m.roas:.2f}x",
            "",
            "## Action Plan",
            "",
        ]
        actions: list[str] = []
        if m.low_stock_products:
            names = ", ".join(p.name for p in m.low_stock_products)
            actions.append(f"Restock before you run out: {names}.")
        if m.total_ad_spend and m.roas < 1:
            actions.append("Ad spend exceeds the revenue it brings in; pause the weakest campaign.")
        if m.net_profit < 0:
            actions.append("You are losing money overall; review pricing against unit cost.")
        if not actions:
            actions.append("Keep logging sales and ad spend so trends become visible.")
        lines.extend(f"{i}. {action}" for i, action in enumerate(actions, start=1))
        return "\n".join(lines)
