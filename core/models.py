"""Shared data model definitions for the SalesDash dashboard."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from enum import Enum
from typing import TYPE_CHECKING, Optional, TypedDict

if TYPE_CHECKING:  # pragma: no cover - import for typing only
    import pandas as pd

USD_TO_BRL_RATE = 5.0
NOT_APPLICABLE = "N/A"


class Package(str, Enum):
    SIMPLES = "Simples"
    BRONZE = "Bronze"
    PRATA = "Prata"
    OURO = "Ouro"
    VIP = "VIP"
    UPSELL = "Upsell"


class Origin(str, Enum):
    BR = "BR"
    USA = "USA"

    @property
    def display_name(self) -> str:
        return {"BR": "Brasil", "USA": "EUA"}[self.value]


class Currency(str, Enum):
    REAL = "Real"
    DOLAR = "Dólar"

    @property
    def symbol(self) -> str:
        return "$" if self is Currency.DOLAR else "R$"


@dataclass(frozen=True)
class Sale:
    """A single sale, with ``amount`` always held in Real."""

    date: date
    time: str
    amount: float
    package: Package
    origin: Origin
    currency: Currency
    client_name: str
    timestamp: str
    id: Optional[str] = None


@dataclass(frozen=True)
class AdCost:
    date: date
    amount: float
    timestamp: str
    id: Optional[str] = None


@dataclass(frozen=True)
class DateRange:
    """Inclusive date window; an unset bound is open on that side."""

    start_date: Optional[date] = None
    end_date: Optional[date] = None

    @property
    def is_unbounded(self) -> bool:
        return self.start_date is None and self.end_date is None

    def contains(self, value: date) -> bool:
        if self.start_date is not None and value < self.start_date:
            return False
        if self.end_date is not None and value > self.end_date:
            return False
        return True


@dataclass(frozen=True)
class PeriodSummary:
    revenue: float
    ad_cost: float
    profit: float
    roi: Optional[float]

    @property
    def roi_label(self) -> str:
        return NOT_APPLICABLE if self.roi is None else f"{self.roi:.2f}"


class MonthlySummary(TypedDict):
    monthly_revenue: float
    monthly_ads_cost: float
    monthly_profit: float
    month_label: str


@dataclass(frozen=True)
class DailySeries:
    """Revenue and ad cost per day, aligned by index to ``dates``."""

    dates: tuple[date, ...]
    revenue: tuple[float, ...]
    ad_cost: tuple[float, ...]

    def __len__(self) -> int:
        return len(self.dates)


class DashboardData(TypedDict):
    sales: list[Sale]
    ad_costs: list[AdCost]
    period_summary: PeriodSummary
    monthly_summary: MonthlySummary
    daily_series: DailySeries
    daily_df: "pd.DataFrame"
    package_revenue: dict[Package, float]
    origin_counts: dict[Origin, int]


__all__ = [
    "USD_TO_BRL_RATE",
    "NOT_APPLICABLE",
    "Package",
    "Origin",
    "Currency",
    "Sale",
    "AdCost",
    "DateRange",
    "PeriodSummary",
    "MonthlySummary",
    "DailySeries",
    "DashboardData",
]
