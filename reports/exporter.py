"""Semicolon-delimited CSV exports of the filtered records and period totals."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Callable, Optional, Sequence

import pandas as pd

from analytics.series import daily_series, monthly_breakdown
from core.errors import NoDataToExportError
from core.models import NOT_APPLICABLE, AdCost, Sale

__all__ = [
    "CLIENTS_FILENAME",
    "AD_COSTS_FILENAME",
    "PERIOD_SUMMARY_FILENAME",
    "CLIENT_COLUMNS",
    "AD_COST_COLUMNS",
    "DAILY_COLUMNS",
    "MONTHLY_COLUMNS",
    "ExportDocument",
    "ExportOutcome",
    "export_clients",
    "export_ad_costs",
    "export_period_summary",
    "try_export",
]

logger = logging.getLogger(__name__)

CLIENTS_FILENAME = "clientes.csv"
AD_COSTS_FILENAME = "historico_ads.csv"
PERIOD_SUMMARY_FILENAME = "resumo_periodo.csv"

CLIENT_COLUMNS = (
    "Nome do Cliente",
    "Pacote",
    "Origem",
    "Moeda",
    "Valor (R$)",
    "Data da Compra",
    "Hora da Compra",
)
AD_COST_COLUMNS = ("Valor (R$)", "Data")
DAILY_COLUMNS = ("Data", "Faturamento (R$)", "Custo Ads (R$)")
MONTHLY_COLUMNS = ("Mês", "Faturamento (R$)", "Custo Ads (R$)", "Lucro (R$)", "ROI")

_DELIMITER = ";"
_CSV_MIME = "text/csv;charset=utf-8"


@dataclass(frozen=True)
class ExportDocument:
    filename: str
    content: str
    mime: str = _CSV_MIME

    @property
    def data(self) -> bytes:
        return self.content.encode("utf-8")


@dataclass(frozen=True)
class ExportOutcome:
    """Result of an export request as seen by the presentation layer."""

    document: Optional[ExportDocument] = None
    message: Optional[str] = None

    @property
    def ok(self) -> bool:
        return self.document is not None


def _money(value: float) -> str:
    return f"{float(value):.2f}"


def _to_csv(rows: list[list[str]], columns: Sequence[str]) -> str:
    frame = pd.DataFrame(rows, columns=list(columns), dtype=str)
    return frame.to_csv(sep=_DELIMITER, index=False, lineterminator="\n").rstrip("\n")


def export_clients(sales: Sequence[Sale]) -> ExportDocument:
    """One row per filtered sale; raises :class:`NoDataToExportError` when empty."""

    if not sales:
        raise NoDataToExportError("Nenhum cliente para exportar.")

    rows = [
        [
            sale.client_name,
            sale.package.value,
            sale.origin.value,
            sale.currency.value,
            _money(sale.amount),
            sale.date.isoformat(),
            sale.time,
        ]
        for sale in sales
    ]
    return ExportDocument(CLIENTS_FILENAME, _to_csv(rows, CLIENT_COLUMNS))


def export_ad_costs(ad_costs: Sequence[AdCost]) -> ExportDocument:
    if not ad_costs:
        raise NoDataToExportError("Nenhum custo de Ads para exportar.")

    rows = [[_money(cost.amount), cost.date.isoformat()] for cost in ad_costs]
    return ExportDocument(AD_COSTS_FILENAME, _to_csv(rows, AD_COST_COLUMNS))


def export_period_summary(sales: Sequence[Sale], ad_costs: Sequence[AdCost]) -> ExportDocument:
    """Daily table followed by a monthly table for the selected period."""

    if not sales and not ad_costs:
        raise NoDataToExportError("Nenhum dado para exportar no período selecionado.")

    series = daily_series(sales, ad_costs)
    daily_rows = [
        [day.isoformat(), _money(revenue), _money(cost)]
        for day, revenue, cost in zip(series.dates, series.revenue, series.ad_cost)
    ]

    monthly_rows = [
        [
            str(record["Month"]),
            _money(record["Revenue"]),
            _money(record["AdCost"]),
            _money(record["Profit"]),
            NOT_APPLICABLE if pd.isna(record["ROI"]) else _money(record["ROI"]),
        ]
        for record in monthly_breakdown(sales, ad_costs).to_dict(orient="records")
    ]

    content = (
        "Resumo Diário\n"
        + _to_csv(daily_rows, DAILY_COLUMNS)
        + "\n\nResumo Mensal\n"
        + _to_csv(monthly_rows, MONTHLY_COLUMNS)
    )
    return ExportDocument(PERIOD_SUMMARY_FILENAME, content)


def try_export(builder: Callable[..., ExportDocument], *args: Any) -> ExportOutcome:
    """Run an export builder, turning an empty selection into a message."""

    try:
        document = builder(*args)
    except NoDataToExportError as exc:
        logger.info("Export skipped: %s", exc)
        return ExportOutcome(message=str(exc))
    return ExportOutcome(document=document)
