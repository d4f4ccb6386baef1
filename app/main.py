"""SalesDash dashboard entrypoint (``streamlit run app/main.py``)."""

from __future__ import annotations

import logging
import sys
from pathlib import Path

import streamlit as st

if __package__ in (None, ""):
    sys.path.insert(0, str(Path(__file__).resolve().parent.parent))

from app.layout import inject_css, render_date_range_filter, render_header
from app.pages import render_overview_page, render_records_page
from config import configure_logging, get_settings
from core.dashboard import prepare_dashboard_data
from core.state import DashboardState, UserCollections
from store import BaseRecordStore, build_record_store

logger = logging.getLogger(__name__)

_STATE_KEY = "dashboard_state"


@st.cache_resource(show_spinner=False)
def _get_record_store() -> BaseRecordStore:
    """Return the process-wide record store chosen by the settings."""

    settings = get_settings()
    logger.info("Using %s record store", settings.store_backend)
    return build_record_store(settings)


def _get_dashboard_state(store: BaseRecordStore, collections: UserCollections) -> DashboardState:
    state = st.session_state.get(_STATE_KEY)
    if state is None:
        state = DashboardState()
        state.bind(store, collections)
        st.session_state[_STATE_KEY] = state
    return state


def main() -> None:
    """Application entrypoint for the SalesDash dashboard."""

    st.set_page_config(
        page_title="SalesDash | Dashboard Financeiro",
        page_icon="📈",
        layout="wide",
    )

    settings = get_settings()
    configure_logging(settings)

    store = _get_record_store()
    collections = UserCollections(settings.app_id, settings.user_id)
    state = _get_dashboard_state(store, collections)

    inject_css()
    render_header()
    state.date_range = render_date_range_filter()

    data = prepare_dashboard_data(state.sales, state.ad_costs, state.date_range)
    render_overview_page(data)
    render_records_page(data, store, collections)


if __name__ == "__main__":
    main()
