"""Shared behaviour for collections that live in this process.

Subclasses only say how to load and persist the whole collection; id
assignment, field merging and change notification happen here.
"""

from __future__ import annotations

import logging
import uuid
from abc import abstractmethod
from collections.abc import Mapping
from dataclasses import fields as dataclass_fields
from dataclasses import replace
from typing import Any, TypeVar

from bizpulse.domain.exceptions import EntityNotFoundError, ValidationError
from bizpulse.domain.repository.store import ChangeListener, Collection, Unsubscribe

logger = logging.getLogger(__name__)

T = TypeVar("T")


class ObservableCollection(Collection[T]):

    def __init__(self, name: str) -> None:
        self.name = name
        self._listeners: list[ChangeListener[T]] = []

    # --- Collection interface -------------------------------------------------

    def create(self, record: T) -> str:
        records = self._load()
        record_id = self._new_id(records)
        records[record_id] = replace(record, id=record_id)  # type: ignore[type-var]
        self._persist(records)
        logger.debug("Created %s %s", self.name, record_id)
        self._notify(records)
        return record_id

    def delete(self, record_id: str) -> None:
        records = self._load()
        if records.pop(record_id, None) is None:
            return
        self._persist(records)
        logger.debug("Deleted %s %s", self.name, record_id)
        self._notify(records)

    def update_fields(self, record_id: str, fields: Mapping[str, Any]) -> None:
        records = self._load()
        current = records.get(record_id)
        if current is None:
            raise EntityNotFoundError(f"No {self.name} with ID '{record_id}'")

        allowed = {f.name for f in dataclass_fields(current)} - {"id"}  # type: ignore[arg-type]
        unknown = set(fields) - allowed
        if unknown:
            raise ValidationError(
                f"Unknown {self.name} field(s): {', '.join(sorted(unknown))}"
            )

        records[record_id] = replace(current, **fields)  # type: ignore[type-var]
        self._persist(records)
        logger.debug("Updated %s %s: %s", self.name, record_id, sorted(fields))
        self._notify(records)

    def get_by_id(self, record_id: str) -> T | None:
        return self._load().get(record_id)

    def list_all(self) -> list[T]:
        return list(self._load().values())

    def subscribe(
        self,
        on_change: ChangeListener[T],
        *,
        on_prefill: ChangeListener[T] | None = None,
    ) -> Unsubscribe:
        # Nothing to prefill: the first delivery is already the live list.
        self._listeners.append(on_change)
        on_change(self.list_all())

        def unsubscribe() -> None:
            if on_change in self._listeners:
                self._listeners.remove(on_change)

        return unsubscribe

    # --- Storage hooks --------------------------------------------------------

    @abstractmethod
    def _load(self) -> dict[str, T]:
        """Return the whole collection keyed by id, in insertion order."""

    @abstractmethod
    def _persist(self, records: dict[str, T]) -> None:
        """Replace the stored collection with ``records``."""

    # --- Internal helpers -----------------------------------------------------

    @staticmethod
    def _new_id(records: Mapping[str, Any]) -> str:
        record_id = uuid.uuid4().hex
        while record_id in records:
            record_id = uuid.uuid4().hex
        return record_id

    def _notify(self, records: dict[str, T]) -> None:
        snapshot = list(records.values())
        for listener in list(self._listeners):
            listener(list(snapshot))
