"""JSON-file-backed document store, one file per collection."""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import TypeVar

from bizpulse.domain.exceptions import StorePersistenceError
from bizpulse.domain.repository.store import Store
from bizpulse.infrastructure.persistence.base import ObservableCollection
from bizpulse.infrastructure.persistence.serialization import (
    AD_CODEC,
    PRODUCT_CODEC,
    SALE_CODEC,
    RecordCodec,
)

logger = logging.getLogger(__name__)

T = TypeVar("T")


class JsonCollection(ObservableCollection[T]):

    def __init__(self, file_path: Path, codec: RecordCodec[T]) -> None:
        super().__init__(codec.name)
        self._file_path = file_path
        self._codec = codec
        self._ensure_file()

    # --- Serialization helpers ------------------------------------------------

    def _load(self) -> dict[str, T]:
        try:
            raw = json.loads(self._file_path.read_text(encoding="utf-8"))
        except (OSError, json.JSONDecodeError) as exc:
            raise StorePersistenceError(
                f"Cannot read {self._file_path}: {exc}"
            ) from exc
        if not isinstance(raw, list):
            raise StorePersistenceError(f"{self._file_path} must hold a JSON list")

        records: dict[str, T] = {}
        for item in raw:
            record = self._codec.decode(item)
            records[record.id] = record  # type: ignore[attr-defined]
        return records

    def _persist(self, records: dict[str, T]) -> None:
        raw = [self._codec.to_raw(r) for r in records.values()]
        try:
            self._file_path.write_text(
                json.dumps(raw, indent=2) + "\n", encoding="utf-8"
            )
        except OSError as exc:
            logger.error("Write to %s failed: %s", self._file_path, exc)
            raise StorePersistenceError(
                f"Cannot write {self._file_path}: {exc}"
            ) from exc

    # --- File helpers ---------------------------------------------------------

    def _ensure_file(self) -> None:
        if self._file_path.exists():
            return
        try:
            self._file_path.parent.mkdir(parents=True, exist_ok=True)
            self._file_path.write_text("[]", encoding="utf-8")
        except OSError as exc:
            raise StorePersistenceError(
                f"Cannot create {self._file_path}: {exc}"
            ) from exc


def json_store(data_dir: Path) -> Store:
    return Store(
        products=JsonCollection(data_dir / "products.json", PRODUCT_CODEC),
        sales=JsonCollection(data_dir / "sales.json", SALE_CODEC),
        ads=JsonCollection(data_dir / "ads.json", AD_CODEC),
    )
