"""Abstract store for the three record collections.

Defined in the domain layer so the domain never depends on
infrastructure. Concrete implementations (in-memory, JSON documents,
cached-then-live) live in the infrastructure layer.

Callers never mutate their own copies of the records: they write through
a collection and learn about the result from its change notifications.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Callable, Mapping
from dataclasses import dataclass
from typing import Any, Generic, TypeVar

from bizpulse.domain.model.ad_spend import AdSpend
from bizpulse.domain.model.product import Product
from bizpulse.domain.model.sale import Sale

T = TypeVar("T")

ChangeListener = Callable[[list[T]], None]
Unsubscribe = Callable[[], None]


class Collection(ABC, Generic[T]):

    @abstractmethod
    def create(self, record: T) -> str:
        """Assign a fresh unique id, persist the record and return the id.

        Any ``id`` already set on ``record`` is ignored.
        """

    @abstractmethod
    def delete(self, record_id: str) -> None:
        """Remove a record. Deleting an unknown id is a no-op."""

    @abstractmethod
    def update_fields(self, record_id: str, fields: Mapping[str, Any]) -> None:
        """Merge the named fields into an existing record."""

    @abstractmethod
    def get_by_id(self, record_id: str) -> T | None:
        """Return a record by id, or None if not found."""

    @abstractmethod
    def list_all(self) -> list[T]:
        """Return the full current contents, in insertion order."""

    @abstractmethod
    def subscribe(
        self,
        on_change: ChangeListener[T],
        *,
        on_prefill: ChangeListener[T] | None = None,
    ) -> Unsubscribe:
        """Deliver the full list now and again after every change.

        The immediate delivery happens even when the collection is empty.
        A collection that can serve a locally cached list before the live
        one hands it to ``on_prefill``, or to ``on_change`` when no
        ``on_prefill`` is given. Returns a callable that stops further
        deliveries.
        """


@dataclass(frozen=True)
class Store:
    """The three named collections that make up a business."""

    products: Collection[Product]
    sales: Collection[Sale]
    ads: Collection[AdSpend]
