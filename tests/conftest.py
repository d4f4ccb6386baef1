"""Shared fixtures for the SalesDash test-suite."""

from __future__ import annotations

import sys
from datetime import date, datetime
from pathlib import Path

import pytest
import streamlit as st

ROOT = Path(__file__).resolve().parent.parent
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from core.models import AdCost, Currency, Origin, Package, Sale  # noqa: E402


@pytest.fixture(autouse=True)
def clear_streamlit_secrets(monkeypatch):
    """Provide an empty secrets mapping so tests don't rely on Streamlit runtime."""

    monkeypatch.setattr(st, "secrets", {}, raising=False)


def make_sale(
    day: str,
    amount: float,
    package: Package = Package.SIMPLES,
    origin: Origin = Origin.BR,
    currency: Currency = Currency.REAL,
    client_name: str = "Cliente",
    sale_id: str | None = None,
) -> Sale:
    return Sale(
        id=sale_id,
        date=date.fromisoformat(day),
        time="10:30",
        amount=amount,
        package=package,
        origin=origin,
        currency=currency,
        client_name=client_name,
        timestamp=f"{day}T10:30:00",
    )


def make_ad_cost(day: str, amount: float, cost_id: str | None = None) -> AdCost:
    return AdCost(id=cost_id, date=date.fromisoformat(day), amount=amount, timestamp=f"{day}T09:00:00")


@pytest.fixture()
def fixed_now() -> datetime:
    return datetime(2024, 1, 15, 14, 7, 30)


@pytest.fixture()
def sample_sales() -> list[Sale]:
    return [
        make_sale("2024-01-10", 100.0, Package.OURO, Origin.BR, client_name="Ana"),
        make_sale("2024-01-12", 50.0, Package.VIP, Origin.USA, Currency.DOLAR, client_name="Bob"),
        make_sale("2024-01-12", 25.5, Package.OURO, Origin.BR, client_name="Caio"),
        make_sale("2024-02-02", 80.0, Package.BRONZE, Origin.BR, client_name="Duda"),
    ]


@pytest.fixture()
def sample_ad_costs() -> list[AdCost]:
    return [
        make_ad_cost("2024-01-10", 40.0),
        make_ad_cost("2024-01-11", 15.0),
        make_ad_cost("2024-02-20", 30.0),
    ]
