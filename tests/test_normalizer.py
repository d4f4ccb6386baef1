"""Tests for turning raw form and store values into records."""

from __future__ import annotations

from datetime import date

import pytest

from core.errors import RecordValidationError
from core.models import Currency, Origin, Package
from core.normalizer import (
    ad_cost_from_document,
    normalize_ad_cost,
    normalize_sale,
    parse_amount,
    sale_from_document,
    sale_to_document,
    validate_sale_form,
)


def _sale_form(**overrides):
    form = {
        "clientName": "João Silva",
        "amount": "10",
        "currency": "Real",
        "package": "Ouro",
        "origin": "BR",
        "date": "2024-01-10",
    }
    form.update(overrides)
    return form


@pytest.mark.parametrize(
    "raw, expected",
    [
        ("12.5", 12.5),
        ("12,50", 12.5),
        (" 7 ", 7.0),
        ("", 0.0),
        (None, 0.0),
        ("abc", 0.0),
        ("-3", 0.0),
        ("nan", 0.0),
        (4, 4.0),
    ],
)
def test_parse_amount_is_permissive(raw, expected):
    assert parse_amount(raw) == pytest.approx(expected)


def test_dollar_sale_is_converted_once(fixed_now):
    sale = normalize_sale(_sale_form(amount="10", currency="Dólar"), fixed_now)

    assert sale.amount == pytest.approx(50.0)
    assert sale.currency is Currency.DOLAR


def test_real_sale_keeps_amount_and_takes_time_from_clock(fixed_now):
    sale = normalize_sale(_sale_form(amount="99.9", time="23:59"), fixed_now)

    assert sale.amount == pytest.approx(99.9)
    assert sale.time == "14:07"
    assert sale.timestamp == fixed_now.isoformat()
    assert sale.date == date(2024, 1, 10)
    assert sale.package is Package.OURO
    assert sale.origin is Origin.BR
    assert sale.id is None


def test_invalid_amount_saves_as_zero(fixed_now):
    sale = normalize_sale(_sale_form(amount="not a number"), fixed_now)
    cost = normalize_ad_cost({"amount": "", "date": "2024-01-10"}, fixed_now)

    assert sale.amount == 0.0
    assert cost.amount == 0.0


def test_ad_cost_is_never_converted(fixed_now):
    cost = normalize_ad_cost({"amount": "10", "date": date(2024, 1, 3), "currency": "Dólar"}, fixed_now)

    assert cost.amount == pytest.approx(10.0)
    assert cost.date == date(2024, 1, 3)


def test_validate_sale_form_reports_every_problem():
    with pytest.raises(RecordValidationError) as excinfo:
        validate_sale_form(_sale_form(clientName="  ", package="Platina", origin="MX"))

    problems = excinfo.value.problems
    assert problems[0] == "Client name is required."
    assert any("package" in problem for problem in problems)
    assert any("origin" in problem for problem in problems)


def test_validate_sale_form_accepts_complete_form():
    validate_sale_form(_sale_form())


def test_sale_document_round_trip_keeps_stored_amount(fixed_now):
    sale = normalize_sale(_sale_form(amount="10", currency="Dólar"), fixed_now)
    document = sale_to_document(sale)

    assert document["clientName"] == "João Silva"
    assert document["date"] == "2024-01-10"

    restored = sale_from_document("abc", {**document, "amount": str(document["amount"])})
    assert restored.id == "abc"
    assert restored.amount == pytest.approx(50.0)
    assert restored.currency is Currency.DOLAR


def test_ad_cost_from_document_parses_strings():
    cost = ad_cost_from_document("x1", {"date": "2024-03-01", "amount": "12.30", "timestamp": "t"})

    assert cost.id == "x1"
    assert cost.amount == pytest.approx(12.3)
    assert cost.date == date(2024, 3, 1)
