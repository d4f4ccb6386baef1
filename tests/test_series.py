"""Tests for chart series and categorical breakdowns."""

from __future__ import annotations

from datetime import date

import pytest

from analytics.series import count_by_origin, daily_frame, daily_series, monthly_breakdown, revenue_by_package
from analytics.summary import summarize
from core.models import Origin, Package
from tests.conftest import make_ad_cost, make_sale


def test_daily_series_unions_dates_and_zero_fills(sample_sales, sample_ad_costs):
    series = daily_series(sample_sales, sample_ad_costs)

    assert series.dates == (
        date(2024, 1, 10),
        date(2024, 1, 11),
        date(2024, 1, 12),
        date(2024, 2, 2),
        date(2024, 2, 20),
    )
    assert series.revenue == pytest.approx((100.0, 0.0, 75.5, 80.0, 0.0))
    assert series.ad_cost == pytest.approx((40.0, 15.0, 0.0, 0.0, 30.0))


def test_daily_series_dates_strictly_ascending_and_sum_matches(sample_sales, sample_ad_costs):
    series = daily_series(sample_sales, sample_ad_costs)
    summary = summarize(sample_sales, sample_ad_costs)

    assert all(earlier < later for earlier, later in zip(series.dates, series.dates[1:]))
    assert sum(series.revenue) == pytest.approx(summary.revenue)
    assert sum(series.ad_cost) == pytest.approx(summary.ad_cost)


def test_daily_series_handles_empty_inputs():
    assert len(daily_series([], [])) == 0
    only_costs = daily_series([], [make_ad_cost("2024-01-01", 3.0)])
    assert only_costs.revenue == (0.0,)


def test_daily_frame_columns(sample_sales, sample_ad_costs):
    frame = daily_frame(daily_series(sample_sales, sample_ad_costs))

    assert list(frame.columns) == ["Day", "Revenue", "AdCost"]
    assert len(frame) == 5


def test_revenue_by_package_keeps_first_seen_order(sample_sales):
    totals = revenue_by_package(sample_sales)

    assert list(totals) == [Package.OURO, Package.VIP, Package.BRONZE]
    assert totals[Package.OURO] == pytest.approx(125.5)
    assert Package.SIMPLES not in totals


def test_count_by_origin_scenario():
    sales = [
        make_sale("2024-01-01", 1.0, origin=Origin.BR),
        make_sale("2024-01-02", 1.0, origin=Origin.BR),
        make_sale("2024-01-03", 1.0, origin=Origin.USA),
    ]

    counts = count_by_origin(sales)

    assert counts == {Origin.BR: 2, Origin.USA: 1}
    assert list(counts) == [Origin.BR, Origin.USA]


def test_count_by_origin_order_follows_first_appearance():
    sales = [make_sale("2024-01-01", 1.0, origin=Origin.USA), make_sale("2024-01-02", 1.0, origin=Origin.BR)]

    assert list(count_by_origin(sales)) == [Origin.USA, Origin.BR]


def test_monthly_breakdown(sample_sales, sample_ad_costs):
    breakdown = monthly_breakdown(sample_sales, sample_ad_costs)

    assert breakdown["Month"].tolist() == ["2024-01", "2024-02"]
    assert breakdown["Revenue"].tolist() == pytest.approx([175.5, 80.0])
    assert breakdown["Profit"].tolist() == pytest.approx([120.5, 50.0])
    assert breakdown["ROI"].tolist() == [3.19, 2.67]


def test_monthly_breakdown_without_cost_has_no_roi():
    breakdown = monthly_breakdown([make_sale("2024-03-05", 10.0)], [])

    assert breakdown["ROI"].tolist() == [None]
