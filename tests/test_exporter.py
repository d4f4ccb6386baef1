"""Tests for the semicolon-delimited report exports."""

from __future__ import annotations

import pytest

from core.errors import NoDataToExportError
from core.models import Currency, Origin, Package
from reports.exporter import (
    AD_COSTS_FILENAME,
    CLIENTS_FILENAME,
    PERIOD_SUMMARY_FILENAME,
    export_ad_costs,
    export_clients,
    export_period_summary,
    try_export,
)
from tests.conftest import make_ad_cost, make_sale


def test_client_export_renders_two_decimals():
    sale = make_sale("2024-01-10", 123.4, Package.OURO, Origin.BR, Currency.REAL, client_name="Ana")

    document = export_clients([sale])

    assert document.filename == CLIENTS_FILENAME
    assert document.content.splitlines() == [
        "Nome do Cliente;Pacote;Origem;Moeda;Valor (R$);Data da Compra;Hora da Compra",
        "Ana;Ouro;BR;Real;123.40;2024-01-10;10:30",
    ]
    assert document.data == document.content.encode("utf-8")


def test_client_export_keeps_delimiter_inside_names_quoted():
    document = export_clients([make_sale("2024-01-10", 1.0, client_name="Silva; Jr")])

    assert '"Silva; Jr"' in document.content


def test_ad_cost_export_rows():
    document = export_ad_costs([make_ad_cost("2024-01-10", 40.0), make_ad_cost("2024-01-11", 7.1)])

    assert document.filename == AD_COSTS_FILENAME
    assert document.content.splitlines() == ["Valor (R$);Data", "40.00;2024-01-10", "7.10;2024-01-11"]


@pytest.mark.parametrize(
    "builder, args",
    [
        (export_clients, ([],)),
        (export_ad_costs, ([],)),
        (export_period_summary, ([], [])),
    ],
)
def test_exports_refuse_empty_selection(builder, args):
    with pytest.raises(NoDataToExportError):
        builder(*args)


def test_period_summary_stacks_daily_and_monthly_tables():
    sales = [make_sale("2024-01-10", 100.0)]
    costs = [make_ad_cost("2024-01-10", 40.0), make_ad_cost("2024-02-01", 10.0)]

    document = export_period_summary(sales, costs)

    assert document.filename == PERIOD_SUMMARY_FILENAME
    assert document.content.split("\n") == [
        "Resumo Diário",
        "Data;Faturamento (R$);Custo Ads (R$)",
        "2024-01-10;100.00;40.00",
        "2024-02-01;0.00;10.00",
        "",
        "Resumo Mensal",
        "Mês;Faturamento (R$);Custo Ads (R$);Lucro (R$);ROI",
        "2024-01;100.00;40.00;60.00;2.50",
        "2024-02;0.00;10.00;-10.00;0.00",
    ]


def test_period_summary_marks_roi_not_applicable_without_cost():
    document = export_period_summary([make_sale("2024-03-05", 10.0)], [])

    assert document.content.split("\n")[-1] == "2024-03;10.00;0.00;10.00;N/A"


def test_try_export_turns_empty_selection_into_message():
    outcome = try_export(export_period_summary, [], [])

    assert not outcome.ok
    assert outcome.document is None
    assert outcome.message == "Nenhum dado para exportar no período selecionado."


def test_try_export_passes_document_through():
    outcome = try_export(export_ad_costs, [make_ad_cost("2024-01-10", 1.0)])

    assert outcome.ok
    assert outcome.document.filename == AD_COSTS_FILENAME
