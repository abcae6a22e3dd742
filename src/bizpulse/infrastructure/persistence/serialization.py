"""Mapping between domain records and their JSON-document form.

Amounts are stored as strings so Decimal precision survives a round
trip; dates as ISO-8601 ``YYYY-MM-DD``.
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from datetime import date
from decimal import Decimal, InvalidOperation
from typing import Any, Generic, TypeVar

from bizpulse.domain.exceptions import StorePersistenceError, ValidationError
from bizpulse.domain.model.ad_spend import DEFAULT_PLATFORM, AdSpend
from bizpulse.domain.model.product import DEFAULT_CATEGORY, Product
from bizpulse.domain.model.sale import Sale
from bizpulse.domain.model.value_objects import Money, Quantity

T = TypeVar("T")


@dataclass(frozen=True)
class RecordCodec(Generic[T]):
    name: str
    to_raw: Callable[[T], dict[str, Any]]
    to_domain: Callable[[dict[str, Any]], T]

    def decode(self, raw: dict[str, Any]) -> T:
        try:
            return self.to_domain(raw)
        except (
            KeyError, TypeError, ValueError, AttributeError,
            InvalidOperation, ValidationError,
        ) as exc:
            record_id = raw.get("id") if isinstance(raw, dict) else None
            raise StorePersistenceError(
                f"Malformed {self.name} record {record_id!r}: {exc}"
            ) from exc


def _money(raw: dict[str, Any], key: str) -> Money:
    return Money(Decimal(str(raw[key])), raw.get("currency", "USD"))


# --- Product ------------------------------------------------------------------


def _product_to_raw(p: Product) -> dict[str, Any]:
    return {
        "id": p.id,
        "name": p.name,
        "cost": str(p.cost.amount),
        "price": str(p.price.amount),
        "currency": p.price.currency,
        "stock": p.stock,
        "category": p.category,
    }


def _product_to_domain(raw: dict[str, Any]) -> Product:
    return Product(
        id=raw["id"],
        name=raw["name"],
        cost=_money(raw, "cost"),
        price=_money(raw, "price"),
        stock=int(raw["stock"]),
        category=raw.get("category") or DEFAULT_CATEGORY,
    )


# --- Sale ---------------------------------------------------------------------


def _sale_to_raw(s: Sale) -> dict[str, Any]:
    return {
        "id": s.id,
        "productId": s.product_id,
        "quantity": s.quantity.value,
        "date": s.date.isoformat(),
        "revenue": str(s.revenue.amount),
        "currency": s.revenue.currency,
    }


def _sale_to_domain(raw: dict[str, Any]) -> Sale:
    return Sale(
        id=raw["id"],
        product_id=raw["productId"],
        quantity=Quantity(int(raw["quantity"])),
        date=date.fromisoformat(raw["date"]),
        revenue=_money(raw, "revenue"),
    )


# --- AdSpend ------------------------------------------------------------------


def _ad_to_raw(a: AdSpend) -> dict[str, Any]:
    return {
        "id": a.id,
        "platform": a.platform,
        "amount": str(a.amount.amount),
        "currency": a.amount.currency,
        "date": a.date.isoformat(),
        "reach": a.reach,
    }


def _ad_to_domain(raw: dict[str, Any]) -> AdSpend:
    return AdSpend(
        id=raw["id"],
        platform=raw.get("platform") or DEFAULT_PLATFORM,
        amount=_money(raw, "amount"),
        date=date.fromisoformat(raw["date"]),
        reach=int(raw.get("reach") or 0),
    )


PRODUCT_CODEC: RecordCodec[Product] = RecordCodec("product", _product_to_raw, _product_to_domain)
SALE_CODEC: RecordCodec[Sale] = RecordCodec("sale", _sale_to_raw, _sale_to_domain)
AD_CODEC: RecordCodec[AdSpend] = RecordCodec("ad", _ad_to_raw, _ad_to_domain)
