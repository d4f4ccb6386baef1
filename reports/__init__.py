"""CSV report exports for SalesDash."""

from .exporter import (
    AD_COSTS_FILENAME,
    CLIENTS_FILENAME,
    PERIOD_SUMMARY_FILENAME,
    ExportDocument,
    ExportOutcome,
    export_ad_costs,
    export_clients,
    export_period_summary,
    try_export,
)

__all__ = [
    "AD_COSTS_FILENAME",
    "CLIENTS_FILENAME",
    "PERIOD_SUMMARY_FILENAME",
    "ExportDocument",
    "ExportOutcome",
    "export_ad_costs",
    "export_clients",
    "export_period_summary",
    "try_export",
]
