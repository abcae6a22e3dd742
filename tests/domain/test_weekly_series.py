"""Unit tests for the daily revenue / ad-spend series."""

from datetime import date, timedelta
from decimal import Decimal

import pytest

from bizpulse.domain.service.metrics import build_weekly_series
from tests.fakes import ad, sale

END = date(2024, 5, 17)


class TestBuildWeeklySeries:

    def test_empty_ledgers_give_seven_zero_buckets(self):
        series = build_weekly_series([], [], END)
        assert len(series) == 7
        assert all(b.revenue == 0 and b.ad_spend == 0 for b in series)

    def test_range_ends_on_end_date_ascending(self):
        series = build_weekly_series([], [], END)
        assert series[0].date == date(2024, 5, 11)
        assert series[-1].date == END
        assert [b.date for b in series] == sorted(b.date for b in series)

    @pytest.mark.parametrize("days", [1, 3, 7, 30])
    def test_always_exactly_days_entries(self, days):
        sales = [sale(id=f"s{i}", on=END - timedelta(days=i)) for i in range(40)]
        assert len(build_weekly_series(sales, [], END, days=days)) == days

    def test_sums_per_day(self):
        sales = [
            sale(id="s1", revenue="10", on=END),
            sale(id="s2", revenue="5.50", on=END),
            sale(id="s3", revenue="7", on=END - timedelta(days=2)),
        ]
        ads = [ad(id="a1", amount="3", on=END), ad(id="a2", amount="4", on=END - timedelta(days=6))]

        series = build_weekly_series(sales, ads, END)
        by_date = {b.date: b for b in series}

        assert by_date[END].revenue == Decimal("15.50")
        assert by_date[END].ad_spend == Decimal("3")
        assert by_date[END - timedelta(days=2)].revenue == Decimal("7")
        assert by_date[END - timedelta(days=6)].ad_spend == Decimal("4")
        assert by_date[END - timedelta(days=1)].revenue == 0

    def test_records_outside_the_window_ignored(self):
        sales = [
            sale(id="s1", revenue="10", on=END + timedelta(days=1)),
            sale(id="s2", revenue="10", on=END - timedelta(days=7)),
        ]
        series = build_weekly_series(sales, [], END)
        assert sum(b.revenue for b in series) == 0

    def test_zero_days_gives_empty_series(self):
        assert build_weekly_series([sale()], [ad()], END, days=0) == []
