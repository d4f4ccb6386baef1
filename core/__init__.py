"""Core domain package for the SalesDash application."""

from .errors import NoDataToExportError, RecordStoreError, RecordValidationError
from .models import (
    NOT_APPLICABLE,
    USD_TO_BRL_RATE,
    AdCost,
    Currency,
    DailySeries,
    DashboardData,
    DateRange,
    MonthlySummary,
    Origin,
    Package,
    PeriodSummary,
    Sale,
)

__all__ = [
    "NOT_APPLICABLE",
    "USD_TO_BRL_RATE",
    "AdCost",
    "Currency",
    "DailySeries",
    "DashboardData",
    "DateRange",
    "MonthlySummary",
    "NoDataToExportError",
    "Origin",
    "Package",
    "PeriodSummary",
    "RecordStoreError",
    "RecordValidationError",
    "Sale",
]
