"""Plotly chart builders for the SalesDash dashboard."""

from __future__ import annotations

from typing import Mapping

import pandas as pd
import plotly.graph_objects as go

from core.models import Origin, Package

from .theme import theme_tokens

TOKENS = theme_tokens()

__all__ = [
    "build_daily_chart",
    "build_package_chart",
    "build_origin_chart",
]


def _empty_plotly_figure(message: str) -> go.Figure:
    fig = go.Figure()
    fig.update_layout(
        annotations=[
            dict(
                text=message,
                x=0.5,
                y=0.5,
                xref="paper",
                yref="paper",
                showarrow=False,
                font=dict(color=TOKENS.neutral_grey, size=14, family=TOKENS.label_font),
            )
        ],
        xaxis=dict(visible=False),
        yaxis=dict(visible=False),
        margin=dict(l=0, r=0, t=20, b=0),
        plot_bgcolor="rgba(0,0,0,0)",
        paper_bgcolor="rgba(0,0,0,0)",
    )
    return fig


def _base_layout(fig: go.Figure) -> go.Figure:
    fig.update_layout(
        margin=dict(l=0, r=0, t=20, b=0),
        legend=dict(orientation="h", yanchor="bottom", y=1.02, xanchor="right", x=1.0),
        font=dict(color=TOKENS.label_color, family=TOKENS.label_font, size=TOKENS.label_size),
        plot_bgcolor="rgba(0,0,0,0)",
        paper_bgcolor="rgba(0,0,0,0)",
    )
    return fig


def build_daily_chart(daily_df: pd.DataFrame, currency_symbol: str = "R$") -> go.Figure:
    """Render revenue against ad cost per day."""

    if daily_df.empty:
        return _empty_plotly_figure("Nenhum dado no período selecionado.")

    hover_template = f"%{{x|{TOKENS.time_format}}}<br>{currency_symbol} %{{y:,.2f}}<extra></extra>"
    fig = go.Figure()
    for column, label, color, soft in (
        ("Revenue", "Faturamento", TOKENS.revenue_color, TOKENS.revenue_soft),
        ("AdCost", "Custo com Ads", TOKENS.ad_cost_color, TOKENS.ad_cost_soft),
    ):
        fig.add_trace(
            go.Scatter(
                x=daily_df["Day"],
                y=daily_df[column],
                mode="lines+markers",
                name=label,
                line=dict(color=color, width=3, shape="spline", smoothing=0.4),
                marker=dict(size=7, color=color, line=dict(color=TOKENS.border_color, width=1)),
                fillcolor=soft,
                hovertemplate=hover_template,
            )
        )

    _base_layout(fig)
    fig.update_layout(
        hovermode="x unified",
        xaxis=dict(showgrid=False, tickformat=TOKENS.time_format),
        yaxis=dict(showgrid=True, gridcolor=TOKENS.grid_color, zeroline=False),
    )
    return fig


def build_package_chart(package_revenue: Mapping[Package, float]) -> go.Figure:
    if not package_revenue:
        return _empty_plotly_figure("Nenhuma venda no período selecionado.")

    labels = [package.value for package in package_revenue]
    fig = go.Figure(
        go.Bar(
            x=labels,
            y=list(package_revenue.values()),
            name="Faturamento por Pacote (R$)",
            marker=dict(
                color=[TOKENS.package_colors.get(label, TOKENS.neutral_grey) for label in labels],
                line=dict(color=TOKENS.border_color, width=1),
            ),
            hovertemplate="%{x}<br>R$ %{y:,.2f}<extra></extra>",
        )
    )
    _base_layout(fig)
    fig.update_layout(
        showlegend=False,
        yaxis=dict(showgrid=True, gridcolor=TOKENS.grid_color, zeroline=False),
    )
    return fig


def build_origin_chart(origin_counts: Mapping[Origin, int]) -> go.Figure:
    if not origin_counts:
        return _empty_plotly_figure("Nenhum lead no período selecionado.")

    origins = list(origin_counts)
    fig = go.Figure(
        go.Pie(
            labels=[origin.display_name for origin in origins],
            values=list(origin_counts.values()),
            sort=False,
            marker=dict(
                colors=[TOKENS.origin_colors.get(origin.value, TOKENS.neutral_grey) for origin in origins],
                line=dict(color=TOKENS.border_color, width=1),
            ),
            hovertemplate="%{label}: %{value} leads<extra></extra>",
        )
    )
    return _base_layout(fig)
