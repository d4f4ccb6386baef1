"""Analytics helpers shared across SalesDash services."""

from analytics.filtering import filter_by_month, filter_by_range
from analytics.series import (
    count_by_origin,
    daily_frame,
    daily_series,
    monthly_breakdown,
    revenue_by_package,
)
from analytics.summary import compute_roi, monthly_summary, summarize

__all__ = [
    "filter_by_month",
    "filter_by_range",
    "count_by_origin",
    "daily_frame",
    "daily_series",
    "monthly_breakdown",
    "revenue_by_package",
    "compute_roi",
    "monthly_summary",
    "summarize",
]
