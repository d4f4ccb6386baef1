"""Visualization utilities for SalesDash dashboards."""

from .charts import (
    build_daily_chart,
    build_origin_chart,
    build_package_chart,
)
from .theme import theme_tokens

__all__ = [
    "build_daily_chart",
    "build_origin_chart",
    "build_package_chart",
    "theme_tokens",
]
