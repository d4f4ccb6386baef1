import importlib
import logging
from datetime import date

import plotly.graph_objects as go

from analytics.series import count_by_origin, daily_frame, daily_series, revenue_by_package
from app.layout import range_from_inputs
from config import Settings, configure_logging, get_settings
from core.models import DateRange
from tests.conftest import make_ad_cost, make_sale
from visualization import build_daily_chart, build_origin_chart, build_package_chart


def test_app_package_exports_main():
    module = importlib.import_module("app")

    assert hasattr(module, "main"), "app package should expose main entrypoint"


def test_settings_defaults(monkeypatch):
    monkeypatch.delenv("SALESDASH_STORE_BACKEND", raising=False)
    settings = Settings()

    assert settings.app_id == "default-app-id"
    assert settings.store_backend == "memory"


def test_settings_read_environment(monkeypatch):
    monkeypatch.setenv("SALESDASH_USER_ID", "seller-42")
    monkeypatch.setenv("SALESDASH_STORE_BACKEND", "csv")
    get_settings.cache_clear()
    try:
        settings = get_settings()
    finally:
        get_settings.cache_clear()

    assert settings.user_id == "seller-42"
    assert settings.store_backend == "csv"


def test_chart_builders_return_figures():
    sales = [make_sale("2024-01-10", 100.0), make_sale("2024-01-11", 20.0)]
    costs = [make_ad_cost("2024-01-10", 40.0)]

    daily = build_daily_chart(daily_frame(daily_series(sales, costs)))
    packages = build_package_chart(revenue_by_package(sales))
    origins = build_origin_chart(count_by_origin(sales))

    assert isinstance(daily, go.Figure)
    assert [trace.name for trace in daily.data] == ["Faturamento", "Custo com Ads"]
    assert list(packages.data[0].x) == ["Simples"]
    assert list(origins.data[0].labels) == ["Brasil"]


def test_chart_builders_handle_empty_selection():
    assert len(build_daily_chart(daily_frame(daily_series([], []))).data) == 0
    assert len(build_package_chart({}).data) == 0
    assert len(build_origin_chart({}).data) == 0


def test_configure_logging_applies_level():
    root = logging.getLogger()
    previous = root.level
    try:
        configure_logging(Settings(log_level="debug"))
        assert root.level == logging.DEBUG
        configure_logging(Settings(log_level="bogus"))
        assert root.level == logging.INFO
    finally:
        root.setLevel(previous)


def test_range_inputs_open_each_bound_independently():
    start, end = date(2024, 1, 1), date(2024, 1, 31)

    assert range_from_inputs(start, end) == DateRange(start, end)
    assert range_from_inputs(start, end, open_start=True) == DateRange(end_date=end)
    assert range_from_inputs(start, end, open_end=True) == DateRange(start_date=start)
    assert range_from_inputs(None, end) == DateRange(end_date=end)
    assert range_from_inputs(start, end, open_start=True, open_end=True).is_unbounded
