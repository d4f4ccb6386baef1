"""CSV-file backed record store, one file per user collection."""

from __future__ import annotations

from pathlib import Path
from typing import Callable

import pandas as pd

from core.errors import RecordStoreError
from store.base import BaseRecordStore, CollectionKey, Document

__all__ = ["CsvRecordStore"]


class CsvRecordStore(BaseRecordStore):
    """Stores documents under ``<data_dir>/<app_id>/<user_id>/<name>.csv``.

    Values are read back as strings; record decoding re-parses amounts and
    dates.
    """

    def __init__(self, data_dir: str | Path, id_factory: Callable[[], str] | None = None):
        super().__init__(id_factory)
        self._data_dir = Path(data_dir)

    def path_for(self, key: CollectionKey) -> Path:
        return self._data_dir / key.app_id / key.user_id / f"{key.name}.csv"

    def _read(self, key: CollectionKey) -> dict[str, Document]:
        path = self.path_for(key)
        if not path.exists():
            return {}

        try:
            df = pd.read_csv(path, dtype=str, keep_default_na=False)
        except pd.errors.EmptyDataError:
            return {}
        except (OSError, pd.errors.ParserError) as exc:
            raise RecordStoreError(f"Could not read {path}: {exc}") from exc

        if "id" not in df.columns:
            raise RecordStoreError(f"Collection file {path} has no id column")

        documents: dict[str, Document] = {}
        for record in df.to_dict(orient="records"):
            doc_id = str(record.pop("id"))
            documents[doc_id] = record
        return documents

    def _write(self, key: CollectionKey, documents: dict[str, Document]) -> None:
        path = self.path_for(key)
        rows = [{"id": doc_id, **document} for doc_id, document in documents.items()]
        df = pd.DataFrame(rows) if rows else pd.DataFrame(columns=["id"])
        try:
            path.parent.mkdir(parents=True, exist_ok=True)
            df.to_csv(path, index=False)
        except OSError as exc:
            raise RecordStoreError(f"Could not write {path}: {exc}") from exc
