"""Overview page: period metrics, monthly metrics, charts and exports."""

from __future__ import annotations

import streamlit as st

from app.layout import card
from core import DashboardData, MonthlySummary, PeriodSummary
from reports import export_ad_costs, export_clients, export_period_summary, try_export
from visualization import build_daily_chart, build_origin_chart, build_package_chart


def _brl(value: float) -> str:
    return f"R$ {value:.2f}"


def _render_period_metrics(summary: PeriodSummary) -> None:
    cols = st.columns(4)
    cols[0].metric("Faturamento", _brl(summary.revenue))
    cols[1].metric("Custo com Ads", _brl(summary.ad_cost))
    cols[2].metric("Lucro", _brl(summary.profit))
    cols[3].metric("ROI", f"{summary.roi_label}x")


def _render_monthly_metrics(summary: MonthlySummary) -> None:
    cols = st.columns(3)
    cols[0].metric("Faturamento do mês", _brl(summary["monthly_revenue"]))
    cols[1].metric("Custo com Ads do mês", _brl(summary["monthly_ads_cost"]))
    cols[2].metric("Lucro do mês", _brl(summary["monthly_profit"]))


def _render_charts(data: DashboardData) -> None:
    with card("Faturamento vs. Custo com Ads"):
        st.plotly_chart(build_daily_chart(data["daily_df"]), use_container_width=True, key="daily-line")

    left, right = st.columns(2, gap="medium")
    with left:
        with card("Faturamento por Pacote"):
            st.plotly_chart(
                build_package_chart(data["package_revenue"]), use_container_width=True, key="package-bar"
            )
    with right:
        with card("Leads por Origem"):
            st.plotly_chart(
                build_origin_chart(data["origin_counts"]), use_container_width=True, key="origin-pie"
            )


def _render_exports(data: DashboardData) -> None:
    exports = (
        ("Exportar Clientes (CSV)", try_export(export_clients, data["sales"])),
        (
            "Exportar Resumo do Período (CSV)",
            try_export(export_period_summary, data["sales"], data["ad_costs"]),
        ),
        ("Exportar Ads (CSV)", try_export(export_ad_costs, data["ad_costs"])),
    )

    cols = st.columns(len(exports))
    for col, (label, outcome) in zip(cols, exports):
        with col:
            if outcome.ok:
                document = outcome.document
                st.download_button(
                    label,
                    data=document.data,
                    file_name=document.filename,
                    mime=document.mime,
                    use_container_width=True,
                )
            else:
                st.button(label, disabled=True, use_container_width=True, key=f"export-{label}")
                st.caption(outcome.message)


def render_page(data: DashboardData) -> None:
    """Render the overview section for the selected period."""

    with card("Métricas do Período", suffix="Período selecionado"):
        _render_period_metrics(data["period_summary"])

    with card("Métricas do Mês", suffix=data["monthly_summary"]["month_label"]):
        _render_monthly_metrics(data["monthly_summary"])

    _render_charts(data)

    with card("Exportar Dados"):
        _render_exports(data)


__all__ = ["render_page"]
