"""Record store contract and the shared subscription plumbing."""

from __future__ import annotations

import inspect
import logging
import uuid
import weakref
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Any, Callable, Mapping, Optional

from core.errors import RecordStoreError

__all__ = [
    "SALES_COLLECTION",
    "AD_COSTS_COLLECTION",
    "CollectionKey",
    "Document",
    "Snapshot",
    "SnapshotCallback",
    "BaseRecordStore",
]

logger = logging.getLogger(__name__)

SALES_COLLECTION = "sales"
AD_COSTS_COLLECTION = "adCosts"

Document = dict[str, Any]
Snapshot = list[Document]
SnapshotCallback = Callable[[Snapshot], None]
_CallbackRef = Callable[[], Optional[SnapshotCallback]]


def _callback_ref(callback: SnapshotCallback) -> _CallbackRef:
    if inspect.ismethod(callback):
        return weakref.WeakMethod(callback)
    return lambda: callback


@dataclass(frozen=True)
class CollectionKey:
    """Identifies one user's collection inside an app namespace."""

    app_id: str
    user_id: str
    name: str

    @property
    def path(self) -> str:
        return f"artifacts/{self.app_id}/users/{self.user_id}/{self.name}"


class BaseRecordStore(ABC):
    """Keeps documents per collection and pushes full snapshots on change.

    Every subscriber receives the complete collection after each write and
    once on subscription, never a delta. Documents carry their id under
    ``"id"`` in snapshots only.
    """

    def __init__(self, id_factory: Callable[[], str] | None = None):
        self._id_factory = id_factory or (lambda: uuid.uuid4().hex)
        self._subscribers: dict[CollectionKey, list[_CallbackRef]] = {}

    @abstractmethod
    def _read(self, key: CollectionKey) -> dict[str, Document]:
        """Return the stored documents for ``key`` keyed by id."""

    @abstractmethod
    def _write(self, key: CollectionKey, documents: dict[str, Document]) -> None:
        """Persist the full document mapping for ``key``."""

    def snapshot(self, key: CollectionKey) -> Snapshot:
        return [{**document, "id": doc_id} for doc_id, document in self._read(key).items()]

    def subscribe(self, key: CollectionKey, callback: SnapshotCallback) -> Callable[[], None]:
        """Register ``callback`` for ``key`` and push the current snapshot.

        Bound methods are held weakly, so a subscriber whose owner has been
        garbage collected drops out on the next publish. Subscribing a callback
        that is already registered keeps a single registration.
        """

        refs = self._subscribers.setdefault(key, [])
        if callback not in self._live_callbacks(key):
            refs.append(_callback_ref(callback))
        callback(self.snapshot(key))

        def unsubscribe() -> None:
            refs[:] = [ref for ref in refs if ref() not in (None, callback)]

        return unsubscribe

    def subscriber_count(self, key: CollectionKey) -> int:
        return len(self._live_callbacks(key))

    def add(self, key: CollectionKey, document: Mapping[str, Any]) -> str:
        documents = dict(self._read(key))
        doc_id = self._id_factory()
        if doc_id in documents:
            raise RecordStoreError(f"Duplicate id {doc_id!r} in {key.path}")
        documents[doc_id] = {k: v for k, v in document.items() if k != "id"}
        self._write(key, documents)
        logger.info("Added %s to %s", doc_id, key.path)
        self._publish(key)
        return doc_id

    def delete(self, key: CollectionKey, doc_id: str) -> None:
        documents = dict(self._read(key))
        if documents.pop(doc_id, None) is None:
            logger.debug("Delete of missing %s in %s ignored", doc_id, key.path)
            return
        self._write(key, documents)
        logger.info("Deleted %s from %s", doc_id, key.path)
        self._publish(key)

    def _live_callbacks(self, key: CollectionKey) -> list[SnapshotCallback]:
        refs = self._subscribers.get(key)
        if not refs:
            return []
        resolved = [(ref, ref()) for ref in refs]
        refs[:] = [ref for ref, callback in resolved if callback is not None]
        return [callback for _, callback in resolved if callback is not None]

    def _publish(self, key: CollectionKey) -> None:
        callbacks = self._live_callbacks(key)
        if not callbacks:
            return
        snapshot = self.snapshot(key)
        for callback in callbacks:
            callback(list(snapshot))
