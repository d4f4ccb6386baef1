"""Exception types shared across SalesDash packages."""

from __future__ import annotations

from typing import Iterable

__all__ = [
    "RecordValidationError",
    "NoDataToExportError",
    "RecordStoreError",
]


class RecordValidationError(ValueError):
    """Raised when form input cannot become a record."""

    def __init__(self, problems: Iterable[str]):
        self.problems = list(problems)
        super().__init__("; ".join(self.problems) or "Invalid record.")


class NoDataToExportError(ValueError):
    """Raised when an export is requested over an empty selection."""


class RecordStoreError(RuntimeError):
    """Raised when the record store cannot read or write a collection."""
