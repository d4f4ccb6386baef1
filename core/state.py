"""Live collection snapshots and the add/delete intents sent to the store."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from datetime import datetime
from typing import Any, Callable, Mapping, Optional, TypeVar

from core.errors import RecordValidationError
from core.models import AdCost, DateRange, Sale
from core.normalizer import (
    ad_cost_from_document,
    ad_cost_to_document,
    normalize_ad_cost,
    normalize_sale,
    sale_from_document,
    sale_to_document,
    validate_ad_cost_form,
    validate_sale_form,
)
from store.base import AD_COSTS_COLLECTION, SALES_COLLECTION, BaseRecordStore, CollectionKey, Snapshot

__all__ = [
    "DashboardState",
    "UserCollections",
    "submit_sale",
    "submit_ad_cost",
    "remove_record",
]

logger = logging.getLogger(__name__)

T = TypeVar("T")


@dataclass(frozen=True)
class UserCollections:
    """The two collection keys owned by a signed-in user."""

    app_id: str
    user_id: str

    @property
    def sales(self) -> CollectionKey:
        return CollectionKey(self.app_id, self.user_id, SALES_COLLECTION)

    @property
    def ad_costs(self) -> CollectionKey:
        return CollectionKey(self.app_id, self.user_id, AD_COSTS_COLLECTION)


def _decode_snapshot(
    snapshot: Snapshot, decoder: Callable[[Optional[str], Mapping[str, Any]], T]
) -> tuple[T, ...]:
    records: list[T] = []
    for document in snapshot:
        doc_id = document.get("id")
        try:
            records.append(decoder(None if doc_id is None else str(doc_id), document))
        except RecordValidationError as exc:
            logger.warning("Skipping unreadable document %s: %s", doc_id, exc)
    return tuple(records)


@dataclass
class DashboardState:
    """Holds the last confirmed snapshot of each collection.

    Snapshots are only ever replaced whole through :meth:`replace_collection`;
    add and delete intents never touch them directly.
    """

    date_range: DateRange = field(default_factory=DateRange)
    sales: tuple[Sale, ...] = ()
    ad_costs: tuple[AdCost, ...] = ()

    def replace_collection(self, name: str, snapshot: Snapshot) -> None:
        if name == SALES_COLLECTION:
            self.sales = _decode_snapshot(snapshot, sale_from_document)
        elif name == AD_COSTS_COLLECTION:
            self.ad_costs = _decode_snapshot(snapshot, ad_cost_from_document)
        else:
            raise KeyError(f"Unknown collection: {name}")

    def _replace_sales(self, snapshot: Snapshot) -> None:
        self.replace_collection(SALES_COLLECTION, snapshot)

    def _replace_ad_costs(self, snapshot: Snapshot) -> None:
        self.replace_collection(AD_COSTS_COLLECTION, snapshot)

    def bind(self, store: BaseRecordStore, collections: UserCollections) -> Callable[[], None]:
        """Subscribe to both collections; returns a function that unsubscribes.

        The store only holds the state weakly, so a discarded state stops
        receiving snapshots without an explicit unbind. Binding the same state
        twice keeps one subscription per collection.
        """

        unsubscribers = [
            store.subscribe(collections.sales, self._replace_sales),
            store.subscribe(collections.ad_costs, self._replace_ad_costs),
        ]

        def unbind() -> None:
            for unsubscribe in unsubscribers:
                unsubscribe()

        return unbind


def submit_sale(
    store: BaseRecordStore,
    collections: UserCollections,
    form: Mapping[str, Any],
    now: datetime | None = None,
) -> str:
    validate_sale_form(form)
    sale = normalize_sale(form, now or datetime.now())
    return store.add(collections.sales, sale_to_document(sale))


def submit_ad_cost(
    store: BaseRecordStore,
    collections: UserCollections,
    form: Mapping[str, Any],
    now: datetime | None = None,
) -> str:
    validate_ad_cost_form(form)
    cost = normalize_ad_cost(form, now or datetime.now())
    return store.add(collections.ad_costs, ad_cost_to_document(cost))


def remove_record(store: BaseRecordStore, key: CollectionKey, record_id: str) -> None:
    store.delete(key, record_id)
