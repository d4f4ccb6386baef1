"""Date window selection over sale and ad-cost collections."""

from __future__ import annotations

from datetime import date, datetime
from typing import Protocol, Sequence, TypeVar

from core.models import DateRange

__all__ = [
    "DatedRecord",
    "filter_by_range",
    "filter_by_month",
]


class DatedRecord(Protocol):
    @property
    def date(self) -> date: ...


R = TypeVar("R", bound=DatedRecord)


def filter_by_range(records: Sequence[R], date_range: DateRange) -> list[R]:
    """Return the records whose date falls inside ``date_range``.

    Bounds are inclusive and compared as calendar dates. A range with neither
    bound set passes every record through.
    """

    if date_range.is_unbounded:
        return list(records)
    return [record for record in records if date_range.contains(record.date)]


def filter_by_month(records: Sequence[R], reference: date | datetime) -> list[R]:
    year, month = reference.year, reference.month
    return [
        record for record in records if record.date.year == year and record.date.month == month
    ]

