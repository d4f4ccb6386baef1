"""Record store implementations for SalesDash collections."""

from __future__ import annotations

from config import Settings

from .base import (
    AD_COSTS_COLLECTION,
    SALES_COLLECTION,
    BaseRecordStore,
    CollectionKey,
    Snapshot,
    SnapshotCallback,
)
from .csv_store import CsvRecordStore
from .memory import InMemoryRecordStore


def build_record_store(settings: Settings) -> BaseRecordStore:
    """Return the store selected by ``settings.store_backend``."""

    if settings.store_backend == "csv":
        return CsvRecordStore(settings.data_dir)
    return InMemoryRecordStore()


__all__ = [
    "AD_COSTS_COLLECTION",
    "SALES_COLLECTION",
    "BaseRecordStore",
    "CollectionKey",
    "CsvRecordStore",
    "InMemoryRecordStore",
    "Snapshot",
    "SnapshotCallback",
    "build_record_store",
]
