"""The fixed report request sent to the text-generation model."""

from __future__ import annotations

import json

from bizpulse.domain.service.insight_provider import BusinessSnapshot
from bizpulse.infrastructure.persistence.serialization import (
    AD_CODEC,
    PRODUCT_CODEC,
    SALE_CODEC,
)

PROMPT_TEMPLATE = """\
Act as a world-class CFO and Business Strategy Consultant. Analyze the following business performance data:

Current Inventory: {products}
Historical Sales: {sales}
Ad Spending Logs: {ads}

Provide a comprehensive analysis covering:
1. **Profitability Deep Dive**: Identify which products have the best margins vs. volume.
2. **Burn Rate & ROI**: Evaluate ad spend effectiveness (ROAS). Are we spending too much relative to revenue?
3. **Inventory Efficiency**: Flag "dead stock" (low sales/high inventory) and "stockout risks" (high sales/low inventory).
4. **30-Day Growth Plan**: Provide 3 specific, data-driven actions to increase Net Profit.

Format the response in clean Markdown with professional headers and clear sections.
"""


def build_prompt(snapshot: BusinessSnapshot) -> str:
    return PROMPT_TEMPLATE.format(
        products=json.dumps([PRODUCT_CODEC.to_raw(p) for p in snapshot.products]),
        sales=json.dumps([SALE_CODEC.to_raw(s) for s in snapshot.sales]),
        ads=json.dumps([AD_CODEC.to_raw(a) for a in snapshot.ads]),
    )
