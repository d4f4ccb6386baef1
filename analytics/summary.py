"""Scalar revenue, cost, profit and ROI totals."""

from __future__ import annotations

from datetime import date, datetime
from typing import Optional, Sequence

from analytics.filtering import filter_by_month
from core.models import AdCost, MonthlySummary, PeriodSummary, Sale

__all__ = [
    "compute_roi",
    "summarize",
    "monthly_summary",
]


def compute_roi(revenue: float, ad_cost: float) -> Optional[float]:
    """Return revenue over ad cost to two decimals, or ``None`` without cost."""

    if ad_cost <= 0:
        return None
    return round(revenue / ad_cost, 2)


def summarize(sales: Sequence[Sale], ad_costs: Sequence[AdCost]) -> PeriodSummary:
    revenue = float(sum(sale.amount for sale in sales))
    ad_cost = float(sum(cost.amount for cost in ad_costs))
    return PeriodSummary(
        revenue=revenue,
        ad_cost=ad_cost,
        profit=revenue - ad_cost,
        roi=compute_roi(revenue, ad_cost),
    )


def monthly_summary(
    all_sales: Sequence[Sale],
    all_ad_costs: Sequence[AdCost],
    reference_instant: date | datetime,
) -> MonthlySummary:
    """Totals for the calendar month of ``reference_instant``.

    Works on the unfiltered collections so the user's date range never
    changes the month-to-date cards.
    """

    month_sales = filter_by_month(all_sales, reference_instant)
    month_costs = filter_by_month(all_ad_costs, reference_instant)

    revenue = float(sum(sale.amount for sale in month_sales))
    ads_cost = float(sum(cost.amount for cost in month_costs))
    return {
        "monthly_revenue": revenue,
        "monthly_ads_cost": ads_cost,
        "monthly_profit": revenue - ads_cost,
        "month_label": reference_instant.strftime("%m/%Y"),
    }
