"""In-process store. Nothing survives the process."""

from __future__ import annotations

from collections.abc import Iterable
from typing import TypeVar

from bizpulse.domain.model.ad_spend import AdSpend
from bizpulse.domain.model.product import Product
from bizpulse.domain.model.sale import Sale
from bizpulse.domain.repository.store import Store
from bizpulse.infrastructure.persistence.base import ObservableCollection

T = TypeVar("T")


class InMemoryCollection(ObservableCollection[T]):

    def __init__(self, name: str, records: Iterable[T] | None = None) -> None:
        super().__init__(name)
        self._records: dict[str, T] = {}
        for record in records or []:
            self._records[record.id] = record  # type: ignore[attr-defined]

    def _load(self) -> dict[str, T]:
        return dict(self._records)

    def _persist(self, records: dict[str, T]) -> None:
        self._records = dict(records)


def in_memory_store(
    products: Iterable[Product] | None = None,
    sales: Iterable[Sale] | None = None,
    ads: Iterable[AdSpend] | None = None,
) -> Store:
    return Store(
        products=InMemoryCollection("product", products),
        sales=InMemoryCollection("sale", sales),
        ads=InMemoryCollection("ad", ads),
    )
