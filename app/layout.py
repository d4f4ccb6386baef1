"""Shared layout primitives for the SalesDash Streamlit app."""

from __future__ import annotations

from contextlib import contextmanager
from datetime import date

import streamlit as st

from core.models import DateRange


def inject_css() -> None:
    """Inject global CSS tokens and card styling into the Streamlit app."""

    st.markdown(
        """
        <style>
          :root {
            --gap: 16px;
            --radius: 12px;
            --card-bg: #2C2C2E;
            --border: #3A3A3C;
          }

          body, [data-testid="stAppViewContainer"] > .main {
            background: #1C1C1E;
            font-family: 'Inter', sans-serif;
          }

          .block-container {
            max-width: 1200px;
            padding-top: 2.5rem;
            padding-bottom: 4rem;
          }

          .sd-header__title {
            font-size: 2rem;
            font-weight: 800;
            color: #F5F5F7;
            margin-bottom: 0.25rem;
          }

          .sd-header__subtitle {
            color: #A1A1AA;
          }

          .sd-card-anchor {
            display: none;
          }

          [data-testid="stVerticalBlock"]:has(> .sd-card-anchor) {
            background: var(--card-bg);
            border: 1px solid var(--border);
            border-radius: var(--radius);
            padding: 16px;
            margin-bottom: var(--gap);
            display: flex;
            flex-direction: column;
            gap: 12px;
          }

          .sd-card__head {
            display: flex;
            align-items: center;
            justify-content: space-between;
            gap: 12px;
            font-weight: 600;
            color: #F5F5F7;
            margin-bottom: 4px;
            flex-wrap: wrap;
          }

          .sd-card__title {
            font-size: 1.05rem;
          }

          .sd-chip {
            font-size: 12px;
            padding: 2px 8px;
            border-radius: 999px;
            border: 1px solid #3B82F6;
            color: #93C5FD;
            white-space: nowrap;
          }

          @media (min-width: 1200px) {
            [data-testid="stVerticalBlock"]:has(> .sd-card-anchor) {
              padding: 24px;
            }
            :root {
              --gap: 24px;
            }
          }
        </style>
        """,
        unsafe_allow_html=True,
    )


@contextmanager
def card(title: str, suffix: str | None = None):
    """Render content inside a reusable SalesDash card."""

    chip_html = f'<span class="sd-chip">{suffix}</span>' if suffix else ""
    container = st.container()
    with container:
        st.markdown('<div class="sd-card-anchor"></div>', unsafe_allow_html=True)
        st.markdown(
            f'<div class="sd-card__head"><span class="sd-card__title">{title}</span>'
            f'{chip_html}</div>',
            unsafe_allow_html=True,
        )
        yield


def render_header() -> None:
    st.markdown(
        """
        <header>
          <div class="sd-header__title">Seu Dashboard Financeiro</div>
          <div class="sd-header__subtitle">
            Gerencie suas vendas, custos e clientes de forma simples e visual.
          </div>
        </header>
        """,
        unsafe_allow_html=True,
    )


def range_from_inputs(
    start: object,
    end: object,
    *,
    open_start: bool = False,
    open_end: bool = False,
) -> DateRange:
    """Build the selected range; an open or cleared input leaves that bound unset."""

    return DateRange(
        start_date=None if open_start or not isinstance(start, date) else start,
        end_date=None if open_end or not isinstance(end, date) else end,
    )


def render_date_range_filter(today: date | None = None) -> DateRange:
    """Render the period inputs and return the selected range.

    Both inputs default to today. Each bound can be left open on its own;
    ticking "Todo o período" opens both.
    """

    today = today or date.today()
    with card("Filtrar por período"):
        whole_period = st.checkbox("Todo o período", key="range_all")
        cols = st.columns(2)
        open_start = cols[0].checkbox("Sem data inicial", key="range_open_start", disabled=whole_period)
        open_end = cols[1].checkbox("Sem data final", key="range_open_end", disabled=whole_period)
        start = cols[0].date_input(
            "Data inicial",
            value=today,
            key="range_start",
            disabled=whole_period or open_start,
            format="YYYY-MM-DD",
        )
        end = cols[1].date_input(
            "Data final",
            value=today,
            key="range_end",
            disabled=whole_period or open_end,
            format="YYYY-MM-DD",
        )

    return range_from_inputs(
        start,
        end,
        open_start=whole_period or open_start,
        open_end=whole_period or open_end,
    )


__all__ = [
    "card",
    "inject_css",
    "range_from_inputs",
    "render_date_range_filter",
    "render_header",
]
