"""Chart-ready series: daily revenue vs ad cost and categorical breakdowns."""

from __future__ import annotations

from typing import Callable, Hashable, Iterable, Sequence, TypeVar

import pandas as pd

from analytics.summary import compute_roi
from core.models import AdCost, DailySeries, Origin, Package, Sale

__all__ = [
    "daily_series",
    "daily_frame",
    "monthly_breakdown",
    "revenue_by_package",
    "count_by_origin",
]

K = TypeVar("K", bound=Hashable)
T = TypeVar("T")


def _amount_frame(records: Sequence[Sale] | Sequence[AdCost]) -> pd.DataFrame:
    return pd.DataFrame(
        {
            "date": pd.Series([record.date for record in records], dtype=object),
            "amount": pd.Series([record.amount for record in records], dtype=float),
        }
    )


def _totals_by(frame: pd.DataFrame, key: pd.Series | str) -> pd.Series:
    if frame.empty:
        return pd.Series(dtype=float)
    return frame.groupby(key)["amount"].sum().astype(float)


def daily_series(sales: Sequence[Sale], ad_costs: Sequence[AdCost]) -> DailySeries:
    """Align daily revenue and ad cost on the sorted union of their dates.

    A date present in only one collection still appears, with the other
    series valued ``0.0``.
    """

    revenue = _totals_by(_amount_frame(sales), "date")
    cost = _totals_by(_amount_frame(ad_costs), "date")
    dates = sorted(set(revenue.index) | set(cost.index))

    revenue = revenue.reindex(dates, fill_value=0.0)
    cost = cost.reindex(dates, fill_value=0.0)
    return DailySeries(
        dates=tuple(dates),
        revenue=tuple(float(value) for value in revenue),
        ad_cost=tuple(float(value) for value in cost),
    )


def daily_frame(series: DailySeries) -> pd.DataFrame:
    return pd.DataFrame(
        {
            "Day": pd.to_datetime(list(series.dates)),
            "Revenue": list(series.revenue),
            "AdCost": list(series.ad_cost),
        },
        columns=["Day", "Revenue", "AdCost"],
    )


def monthly_breakdown(sales: Sequence[Sale], ad_costs: Sequence[AdCost]) -> pd.DataFrame:
    """Per ``YYYY-MM`` revenue, ad cost, profit and ROI, months ascending."""

    sales_frame = _amount_frame(sales)
    costs_frame = _amount_frame(ad_costs)
    revenue = _totals_by(sales_frame, sales_frame["date"].map(lambda day: day.strftime("%Y-%m")))
    cost = _totals_by(costs_frame, costs_frame["date"].map(lambda day: day.strftime("%Y-%m")))
    months = sorted(set(revenue.index) | set(cost.index))

    breakdown = pd.DataFrame(
        {
            "Month": months,
            "Revenue": revenue.reindex(months, fill_value=0.0).to_numpy(dtype=float),
            "AdCost": cost.reindex(months, fill_value=0.0).to_numpy(dtype=float),
        },
        columns=["Month", "Revenue", "AdCost"],
    )
    breakdown["Profit"] = breakdown["Revenue"] - breakdown["AdCost"]
    breakdown["ROI"] = pd.Series(
        [
            compute_roi(float(rev), float(ads))
            for rev, ads in zip(breakdown["Revenue"], breakdown["AdCost"])
        ],
        index=breakdown.index,
        dtype=object,
    )
    return breakdown


def _fold_ordered(
    items: Iterable[T],
    key: Callable[[T], K],
    value: Callable[[T], float],
) -> dict[K, float]:
    # dict keeps first-seen key order; callers rely on it for chart labels.
    totals: dict[K, float] = {}
    for item in items:
        group = key(item)
        totals[group] = totals.get(group, 0) + value(item)
    return totals


def revenue_by_package(sales: Sequence[Sale]) -> dict[Package, float]:
    """Summed revenue per package present, in order of first appearance."""

    return _fold_ordered(sales, key=lambda sale: sale.package, value=lambda sale: sale.amount)


def count_by_origin(sales: Sequence[Sale]) -> dict[Origin, int]:
    """Number of sales (leads) per origin present, in order of first appearance."""

    counts = _fold_ordered(sales, key=lambda sale: sale.origin, value=lambda _: 1)
    return {origin: int(count) for origin, count in counts.items()}
