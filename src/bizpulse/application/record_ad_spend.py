"""Application service: Record Ad Spend use case."""

from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import replace
from datetime import date

from bizpulse.domain.model.ad_spend import DEFAULT_PLATFORM, AdSpend
from bizpulse.domain.model.value_objects import Money
from bizpulse.domain.repository.store import Collection

logger = logging.getLogger(__name__)


class RecordAdSpendHandler:

    def __init__(
        self,
        ads: Collection[AdSpend],
        today: Callable[[], date] = date.today,
    ) -> None:
        self._ads = ads
        self._today = today

    def handle(
        self,
        amount: str,
        platform: str = DEFAULT_PLATFORM,
        reach: int = 0,
        spend_date: date | None = None,
    ) -> AdSpend:
        ad = AdSpend(
            id=None,
            platform=(platform or "").strip(),
            amount=Money.of(amount),
            date=spend_date or self._today(),
            reach=reach,
        )
        ad_id = self._ads.create(ad)
        logger.info("Recorded %s ad spend on %s", ad.amount, ad.platform)
        return replace(ad, id=ad_id)
