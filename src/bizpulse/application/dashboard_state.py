"""Live view of the three collections.

Holds whatever each collection last delivered through ``subscribe`` and
nothing else. Metrics are recomputed from those lists on demand; no
derived value is cached.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from typing import Any

from bizpulse.domain.model.ad_spend import AdSpend
from bizpulse.domain.model.metrics import MetricsSnapshot
from bizpulse.domain.model.product import Product
from bizpulse.domain.model.sale import Sale
from bizpulse.domain.repository.store import ChangeListener, Store, Unsubscribe
from bizpulse.domain.service.insight_provider import BusinessSnapshot
from bizpulse.domain.service.metrics import (
    DEFAULT_LOW_STOCK_THRESHOLD,
    compute_metrics,
)

logger = logging.getLogger(__name__)

_COLLECTIONS = ("products", "sales", "ads")


class DashboardState:
    """Subscribes to every collection of a store.

    ``is_loaded`` turns true once each collection has delivered its
    first live list; a cached list served ahead of it fills the view but
    does not count. ``on_change`` (if given) is called after every delivery.
    Call ``close()`` to stop listening.
    """

    def __init__(
        self,
        store: Store,
        low_stock_threshold: int = DEFAULT_LOW_STOCK_THRESHOLD,
        on_change: Callable[[DashboardState], None] | None = None,
    ) -> None:
        self.low_stock_threshold = low_stock_threshold
        self._on_change = on_change
        self._products: list[Product] = []
        self._sales: list[Sale] = []
        self._ads: list[AdSpend] = []
        self._loaded: set[str] = set()
        self._unsubscribes: list[Unsubscribe] = [
            getattr(store, name).subscribe(
                self._receiver(name, live=True),
                on_prefill=self._receiver(name, live=False),
            )
            for name in _COLLECTIONS
        ]

    # --- Views ------------------------------------------------------------------

    @property
    def is_loaded(self) -> bool:
        return all(name in self._loaded for name in _COLLECTIONS)

    @property
    def products(self) -> list[Product]:
        return list(self._products)

    @property
    def sales(self) -> list[Sale]:
        return list(self._sales)

    @property
    def ads(self) -> list[AdSpend]:
        return list(self._ads)

    def metrics(self) -> MetricsSnapshot:
        return compute_metrics(
            self._products, self._sales, self._ads, self.low_stock_threshold
        )

    def snapshot(self) -> BusinessSnapshot:
        return BusinessSnapshot(
            products=self.products, sales=self.sales, ads=self.ads
        )

    def close(self) -> None:
        for unsubscribe in self._unsubscribes:
            unsubscribe()
        self._unsubscribes.clear()

    # --- Store callbacks ------------------------------------------------------

    def _receiver(self, name: str, live: bool) -> ChangeListener[Any]:
        def receive(records: list[Any]) -> None:
            setattr(self, f"_{name}", list(records))
            was_loaded = self.is_loaded
            if live:
                self._loaded.add(name)
            logger.debug(
                "Received %d %s%s", len(records), name, "" if live else " from cache"
            )
            if self.is_loaded and not was_loaded:
                logger.debug("Initial load complete")
            if self._on_change is not None:
                self._on_change(self)

        return receive
