"""Core logic for assembling SalesDash dashboard data."""

from __future__ import annotations

from datetime import date, datetime
from typing import Optional, Sequence

from analytics.filtering import filter_by_range
from analytics.series import count_by_origin, daily_frame, daily_series, revenue_by_package
from analytics.summary import monthly_summary, summarize
from core.models import AdCost, DashboardData, DateRange, Sale

__all__ = ["prepare_dashboard_data"]


def prepare_dashboard_data(
    sales: Sequence[Sale],
    ad_costs: Sequence[AdCost],
    date_range: Optional[DateRange] = None,
    reference_instant: Optional[date | datetime] = None,
) -> DashboardData:
    """Recompute every derived value from the current snapshots.

    The monthly summary uses the unfiltered collections; everything else is
    computed over the records inside ``date_range``.
    """

    date_range = date_range or DateRange()
    reference_instant = reference_instant or datetime.now()

    filtered_sales = filter_by_range(sales, date_range)
    filtered_costs = filter_by_range(ad_costs, date_range)
    series = daily_series(filtered_sales, filtered_costs)

    return {
        "sales": filtered_sales,
        "ad_costs": filtered_costs,
        "period_summary": summarize(filtered_sales, filtered_costs),
        "monthly_summary": monthly_summary(sales, ad_costs, reference_instant),
        "daily_series": series,
        "daily_df": daily_frame(series),
        "package_revenue": revenue_by_package(filtered_sales),
        "origin_counts": count_by_origin(filtered_sales),
    }
