"""Records page: sale and ad-cost forms plus the filtered tables."""

from __future__ import annotations

import logging
from datetime import date
from typing import Callable

import streamlit as st

from app.layout import card
from core import AdCost, Currency, DashboardData, Origin, Package, RecordStoreError, RecordValidationError, Sale
from core.state import UserCollections, remove_record, submit_ad_cost, submit_sale
from store import BaseRecordStore

logger = logging.getLogger(__name__)


def _run_intent(action: Callable[[], object], success: str) -> None:
    try:
        action()
    except RecordValidationError as exc:
        for problem in exc.problems:
            st.error(problem)
    except RecordStoreError as exc:
        logger.warning("Record store write failed: %s", exc)
        st.warning("Não foi possível salvar no momento. Tente novamente.")
    else:
        st.toast(success)
        st.rerun()


def _render_sale_form(store: BaseRecordStore, collections: UserCollections) -> None:
    with st.form("new-sale", clear_on_submit=True):
        client_name = st.text_input("Nome do Cliente", placeholder="Ex: João Silva")
        amount = st.text_input("Valor", placeholder="0.00")
        currency = st.selectbox(
            "Moeda",
            [member.value for member in Currency],
            format_func=lambda value: f"{value} ({Currency(value).symbol})",
        )
        package = st.selectbox("Pacote", [member.value for member in Package])
        origin = st.selectbox(
            "Origem",
            [member.value for member in Origin],
            format_func=lambda value: Origin(value).display_name,
        )
        sale_date = st.date_input("Data da Venda", value=date.today(), format="YYYY-MM-DD")
        submitted = st.form_submit_button("Salvar Venda", use_container_width=True)

    if submitted:
        form = {
            "clientName": client_name,
            "amount": amount,
            "currency": currency,
            "package": package,
            "origin": origin,
            "date": sale_date,
        }
        _run_intent(lambda: submit_sale(store, collections, form), "Venda salva.")


def _render_ad_cost_form(store: BaseRecordStore, collections: UserCollections) -> None:
    with st.form("new-ad-cost", clear_on_submit=True):
        amount = st.text_input("Valor (R$)", placeholder="0.00")
        cost_date = st.date_input("Data do Gasto", value=date.today(), format="YYYY-MM-DD")
        submitted = st.form_submit_button("Salvar Custo", use_container_width=True)

    if submitted:
        form = {"amount": amount, "date": cost_date}
        _run_intent(lambda: submit_ad_cost(store, collections, form), "Custo salvo.")


def _render_sales_table(sales: list[Sale], store: BaseRecordStore, collections: UserCollections) -> None:
    if not sales:
        st.info("Nenhuma venda no período selecionado.")
        return

    widths = (3, 1.2, 1, 1, 1.4, 1.4, 1, 1)
    header = st.columns(widths)
    for col, label in zip(header, ("Nome", "Pacote", "Origem", "Moeda", "Valor (R$)", "Data", "Hora", "")):
        col.caption(label)

    for sale in sales:
        cols = st.columns(widths)
        cols[0].write(sale.client_name)
        cols[1].write(sale.package.value)
        cols[2].write(sale.origin.value)
        cols[3].write(sale.currency.value)
        cols[4].write(f"{sale.amount:.2f}")
        cols[5].write(sale.date.isoformat())
        cols[6].write(sale.time)
        if sale.id and cols[7].button("Excluir", key=f"delete-sale-{sale.id}"):
            _run_intent(lambda sale_id=sale.id: remove_record(store, collections.sales, sale_id), "Venda excluída.")


def _render_ad_costs_table(
    ad_costs: list[AdCost], store: BaseRecordStore, collections: UserCollections
) -> None:
    if not ad_costs:
        st.info("Nenhum custo de Ads no período selecionado.")
        return

    widths = (2, 2, 1)
    header = st.columns(widths)
    for col, label in zip(header, ("Valor (R$)", "Data", "")):
        col.caption(label)

    for cost in ad_costs:
        cols = st.columns(widths)
        cols[0].write(f"{cost.amount:.2f}")
        cols[1].write(cost.date.isoformat())
        if cost.id and cols[2].button("Excluir", key=f"delete-ad-{cost.id}"):
            _run_intent(
                lambda cost_id=cost.id: remove_record(store, collections.ad_costs, cost_id),
                "Custo excluído.",
            )


def render_page(data: DashboardData, store: BaseRecordStore, collections: UserCollections) -> None:
    """Render the entry forms and record tables."""

    left, right = st.columns(2, gap="medium")
    with left:
        with card("Nova Venda"):
            _render_sale_form(store, collections)
    with right:
        with card("Novo Custo com Ads"):
            _render_ad_cost_form(store, collections)

    with card("Vendas", suffix=f"{len(data['sales'])} registros"):
        _render_sales_table(data["sales"], store, collections)

    with card("Custos com Ads", suffix=f"{len(data['ad_costs'])} registros"):
        _render_ad_costs_table(data["ad_costs"], store, collections)


__all__ = ["render_page"]
