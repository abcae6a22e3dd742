"""Application service: Show Dashboard use case (query)."""

from __future__ import annotations

from collections.abc import Callable
from datetime import date

from bizpulse.application.dashboard_state import DashboardState
from bizpulse.application.dto import DailyTotalsDTO, DashboardDTO
from bizpulse.application.show_inventory import to_product_line
from bizpulse.domain.model.value_objects import format_amount
from bizpulse.domain.service.metrics import DEFAULT_SERIES_DAYS, build_weekly_series


class ShowDashboardHandler:

    def __init__(
        self,
        state: DashboardState,
        today: Callable[[], date] = date.today,
    ) -> None:
        self._state = state
        self._today = today

    def handle(
        self,
        end_date: date | None = None,
        days: int = DEFAULT_SERIES_DAYS,
    ) -> DashboardDTO:
        metrics = self._state.metrics()
        series = build_weekly_series(
            self._state.sales, self._state.ads, end_date or self._today(), days
        )
        threshold = self._state.low_stock_threshold

        return DashboardDTO(
            total_revenue=format_amount(metrics.total_revenue),
            total_ad_spend=format_amount(metrics.total_ad_spend),
            total_cost_of_goods=format_amount(metrics.total_cost_of_goods),
            net_profit=format_amount(metrics.net_profit),
            margin=f"{metrics.margin:.1f}%",
            roas=f"{metrics.roas:.2f}x",
            low_stock=[to_product_line(p, threshold) for p in metrics.low_stock_products],
            series=[
                DailyTotalsDTO(
                    date=bucket.date.isoformat(),
                    label=bucket.date.strftime("%m/%d"),
                    revenue=format_amount(bucket.revenue),
                    ad_spend=format_amount(bucket.ad_spend),
                )
                for bucket in series
            ],
        )
