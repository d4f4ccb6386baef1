"""Process-local record store used for demos and tests."""

from __future__ import annotations

from typing import Callable

from store.base import BaseRecordStore, CollectionKey, Document

__all__ = ["InMemoryRecordStore"]


class InMemoryRecordStore(BaseRecordStore):
    def __init__(self, id_factory: Callable[[], str] | None = None):
        super().__init__(id_factory)
        self._collections: dict[CollectionKey, dict[str, Document]] = {}

    def _read(self, key: CollectionKey) -> dict[str, Document]:
        return {doc_id: dict(doc) for doc_id, doc in self._collections.get(key, {}).items()}

    def _write(self, key: CollectionKey, documents: dict[str, Document]) -> None:
        self._collections[key] = {doc_id: dict(doc) for doc_id, doc in documents.items()}
