"""Sale ledger entries.

Sales are append-only. ``revenue`` is captured when the sale is
recorded and is never recomputed, so later price changes or product
removal do not rewrite history.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date

from bizpulse.domain.model.value_objects import Money, Quantity


@dataclass(frozen=True)
class SaleDraft:
    """What the user asked to sell, before price lookup."""

    product_id: str
    quantity: Quantity
    date: date


@dataclass(frozen=True)
class Sale:
    id: str | None
    product_id: str  # weak reference, may dangle after product removal
    quantity: Quantity
    date: date
    revenue: Money  # locked at recording time
