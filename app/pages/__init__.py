"""Page modules for the SalesDash Streamlit application."""

from .overview import render_page as render_overview_page
from .records import render_page as render_records_page

__all__ = [
    "render_overview_page",
    "render_records_page",
]
