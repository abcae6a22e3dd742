"""Domain service: recording a sale against the catalog.

Validates the stock rule and prices the sale in one step. Works on a
snapshot of the product list and returns new values instead of
mutating anything, so the caller decides how to persist the result.
"""

from __future__ import annotations

from collections.abc import Sequence

from bizpulse.domain.exceptions import ProductNotFoundError
from bizpulse.domain.model.product import Product
from bizpulse.domain.model.sale import Sale, SaleDraft


def record_sale(
    products: Sequence[Product],
    draft: SaleDraft,
) -> tuple[list[Product], Sale]:
    """Apply a sale to the catalog.

    Returns the product list with the sold product's stock decremented
    and the priced Sale (``id`` unset). Raises ProductNotFoundError for
    an unknown product and InsufficientStockError when stock would go
    negative; in both cases nothing is applied.
    """
    product = next((p for p in products if p.id == draft.product_id), None)
    if product is None:
        raise ProductNotFoundError(draft.product_id)

    updated = product.with_stock_deducted(draft.quantity.value)
    sale = Sale(
        id=None,
        product_id=draft.product_id,
        quantity=draft.quantity,
        date=draft.date,
        revenue=product.price * draft.quantity.value,  # <-- price snapshot
    )

    updated_products = [updated if p.id == product.id else p for p in products]
    return updated_products, sale
