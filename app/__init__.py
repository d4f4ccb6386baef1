"""Streamlit presentation layer for SalesDash."""

from .main import main

__all__ = ["main"]
