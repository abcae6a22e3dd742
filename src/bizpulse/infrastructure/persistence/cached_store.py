"""Cached-then-live store.

A small local cache file (one key per collection) lets subscribers
render something before the live store answers. The cache is advisory:
every live delivery overwrites it, and an unreadable cache is ignored.
"""

from __future__ import annotations

import json
import logging
from collections.abc import Mapping
from pathlib import Path
from typing import Any, TypeVar

from bizpulse.domain.exceptions import StorePersistenceError
from bizpulse.domain.repository.store import ChangeListener, Collection, Store, Unsubscribe
from bizpulse.infrastructure.persistence.serialization import (
    AD_CODEC,
    PRODUCT_CODEC,
    SALE_CODEC,
    RecordCodec,
)

logger = logging.getLogger(__name__)

T = TypeVar("T")


class LocalCache:
    """Persisted key -> JSON blob map kept in a single file."""

    def __init__(self, file_path: Path) -> None:
        self._file_path = file_path

    def get(self, key: str) -> list[dict[str, Any]] | None:
        blobs = self._read()
        value = blobs.get(key)
        return value if isinstance(value, list) else None

    def put(self, key: str, value: list[dict[str, Any]]) -> None:
        blobs = self._read()
        blobs[key] = value
        try:
            self._file_path.parent.mkdir(parents=True, exist_ok=True)
            self._file_path.write_text(json.dumps(blobs, indent=2) + "\n", encoding="utf-8")
        except OSError as exc:
            logger.warning("Could not update cache %s: %s", self._file_path, exc)

    def _read(self) -> dict[str, Any]:
        if not self._file_path.exists():
            return {}
        try:
            blobs = json.loads(self._file_path.read_text(encoding="utf-8"))
        except (OSError, json.JSONDecodeError) as exc:
            logger.warning("Ignoring unreadable cache %s: %s", self._file_path, exc)
            return {}
        return blobs if isinstance(blobs, dict) else {}


class CachedCollection(Collection[T]):
    """Serves the cached list first, then defers to the live collection."""

    def __init__(
        self,
        live: Collection[T],
        cache: LocalCache,
        key: str,
        codec: RecordCodec[T],
    ) -> None:
        self._live = live
        self._cache = cache
        self._key = key
        self._codec = codec

    def create(self, record: T) -> str:
        return self._live.create(record)

    def delete(self, record_id: str) -> None:
        self._live.delete(record_id)

    def update_fields(self, record_id: str, fields: Mapping[str, Any]) -> None:
        self._live.update_fields(record_id, fields)

    def get_by_id(self, record_id: str) -> T | None:
        return self._live.get_by_id(record_id)

    def list_all(self) -> list[T]:
        return self._live.list_all()

    def subscribe(
        self,
        on_change: ChangeListener[T],
        *,
        on_prefill: ChangeListener[T] | None = None,
    ) -> Unsubscribe:
        cached = self.cached()
        if cached is not None:
            logger.debug("Pre-populating %s from cache (%d)", self._key, len(cached))
            (on_prefill or on_change)(cached)

        def forward(records: list[T]) -> None:
            self._cache.put(self._key, [self._codec.to_raw(r) for r in records])
            on_change(records)

        return self._live.subscribe(forward)

    def cached(self) -> list[T] | None:
        """Last list seen by any subscriber, or None if nothing usable."""
        raw = self._cache.get(self._key)
        if raw is None:
            return None
        try:
            return [self._codec.decode(item) for item in raw]
        except StorePersistenceError as exc:
            logger.warning("Ignoring stale %s cache: %s", self._key, exc)
            return None


def cached_store(live: Store, cache_file: Path) -> Store:
    cache = LocalCache(cache_file)
    return Store(
        products=CachedCollection(live.products, cache, "products", PRODUCT_CODEC),
        sales=CachedCollection(live.sales, cache, "sales", SALE_CODEC),
        ads=CachedCollection(live.ads, cache, "ads", AD_CODEC),
    )
