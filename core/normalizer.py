"""Coercion of raw form and store values into typed sale/ad-cost records."""

from __future__ import annotations

import logging
import math
from datetime import date, datetime
from enum import Enum
from typing import Any, Mapping, Optional, TypeVar

from core.errors import RecordValidationError
from core.models import USD_TO_BRL_RATE, AdCost, Currency, Origin, Package, Sale

__all__ = [
    "parse_amount",
    "parse_date",
    "convert_to_base_currency",
    "validate_sale_form",
    "validate_ad_cost_form",
    "normalize_sale",
    "normalize_ad_cost",
    "sale_to_document",
    "sale_from_document",
    "ad_cost_to_document",
    "ad_cost_from_document",
]

logger = logging.getLogger(__name__)

E = TypeVar("E", bound=Enum)


def parse_amount(raw: Any) -> float:
    """Parse a user or store supplied amount, falling back to ``0.0``.

    Malformed, empty, non-finite and negative values all become zero rather
    than raising, so a bad keystroke never blocks a save.
    """

    if raw is None or isinstance(raw, bool):
        return 0.0
    if isinstance(raw, (int, float)):
        value = float(raw)
    else:
        text = str(raw).strip().replace(",", ".")
        if not text:
            return 0.0
        try:
            value = float(text)
        except ValueError:
            logger.debug("Treating unparseable amount %r as zero", raw)
            return 0.0
    if not math.isfinite(value) or value < 0:
        return 0.0
    return value


def parse_date(raw: Any) -> date:
    if isinstance(raw, datetime):
        return raw.date()
    if isinstance(raw, date):
        return raw
    text = str(raw or "").strip()
    try:
        return date.fromisoformat(text[:10])
    except ValueError as exc:
        raise RecordValidationError([f"Invalid date: {raw!r}"]) from exc


def convert_to_base_currency(amount: float, currency: Currency) -> float:
    if currency is Currency.DOLAR:
        return amount * USD_TO_BRL_RATE
    return amount


def _coerce_enum(enum_cls: type[E], raw: Any, field: str) -> E:
    if isinstance(raw, enum_cls):
        return raw
    try:
        return enum_cls(str(raw).strip())
    except ValueError as exc:
        allowed = ", ".join(member.value for member in enum_cls)
        raise RecordValidationError([f"{field} must be one of {allowed}; got {raw!r}"]) from exc


def _client_name(form: Mapping[str, Any]) -> str:
    raw = form.get("clientName", form.get("client_name", ""))
    return str(raw or "").strip()


def _collect_problems(checks: list[tuple[Any, ...]]) -> list[str]:
    problems: list[str] = []
    for func, *args in checks:
        try:
            func(*args)
        except RecordValidationError as exc:
            problems.extend(exc.problems)
    return problems


def validate_sale_form(form: Mapping[str, Any]) -> None:
    """Reject a sale form with an empty client or out-of-set categories."""

    problems = _collect_problems(
        [
            (_coerce_enum, Package, form.get("package"), "package"),
            (_coerce_enum, Origin, form.get("origin"), "origin"),
            (_coerce_enum, Currency, form.get("currency", Currency.REAL.value), "currency"),
            (parse_date, form.get("date")),
        ]
    )
    if not _client_name(form):
        problems.insert(0, "Client name is required.")
    if problems:
        logger.warning("Rejected sale form: %s", "; ".join(problems))
        raise RecordValidationError(problems)


def validate_ad_cost_form(form: Mapping[str, Any]) -> None:
    problems = _collect_problems([(parse_date, form.get("date"))])
    if problems:
        logger.warning("Rejected ad cost form: %s", "; ".join(problems))
        raise RecordValidationError(problems)


def normalize_sale(form: Mapping[str, Any], current_time: datetime) -> Sale:
    """Build a :class:`Sale` from raw form values.

    The amount is converted to Real exactly once here when the form was filled
    in dollars. ``time`` and ``timestamp`` always come from ``current_time``.
    """

    currency = _coerce_enum(Currency, form.get("currency", Currency.REAL.value), "currency")
    entered = parse_amount(form.get("amount"))
    return Sale(
        date=parse_date(form.get("date")),
        time=current_time.strftime("%H:%M"),
        amount=convert_to_base_currency(entered, currency),
        package=_coerce_enum(Package, form.get("package"), "package"),
        origin=_coerce_enum(Origin, form.get("origin"), "origin"),
        currency=currency,
        client_name=_client_name(form),
        timestamp=current_time.isoformat(),
    )


def normalize_ad_cost(form: Mapping[str, Any], current_time: datetime) -> AdCost:
    return AdCost(
        date=parse_date(form.get("date")),
        amount=parse_amount(form.get("amount")),
        timestamp=current_time.isoformat(),
    )


def sale_to_document(sale: Sale) -> dict[str, Any]:
    return {
        "date": sale.date.isoformat(),
        "time": sale.time,
        "amount": sale.amount,
        "package": sale.package.value,
        "origin": sale.origin.value,
        "currency": sale.currency.value,
        "clientName": sale.client_name,
        "timestamp": sale.timestamp,
    }


def sale_from_document(doc_id: Optional[str], document: Mapping[str, Any]) -> Sale:
    """Rebuild a stored sale. The stored amount is already in Real."""

    return Sale(
        id=doc_id,
        date=parse_date(document.get("date")),
        time=str(document.get("time") or ""),
        amount=parse_amount(document.get("amount")),
        package=_coerce_enum(Package, document.get("package"), "package"),
        origin=_coerce_enum(Origin, document.get("origin"), "origin"),
        currency=_coerce_enum(Currency, document.get("currency", Currency.REAL.value), "currency"),
        client_name=_client_name(document),
        timestamp=str(document.get("timestamp") or ""),
    )


def ad_cost_to_document(cost: AdCost) -> dict[str, Any]:
    return {
        "date": cost.date.isoformat(),
        "amount": cost.amount,
        "timestamp": cost.timestamp,
    }


def ad_cost_from_document(doc_id: Optional[str], document: Mapping[str, Any]) -> AdCost:
    return AdCost(
        id=doc_id,
        date=parse_date(document.get("date")),
        amount=parse_amount(document.get("amount")),
        timestamp=str(document.get("timestamp") or ""),
    )
