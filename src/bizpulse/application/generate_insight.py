"""Application service: Generate Insight use case.

Hands the current collections to the insight provider. A provider
failure never reaches the caller; it is logged and replaced by a fixed,
non-technical message.
"""

from __future__ import annotations

import logging

from bizpulse.domain.exceptions import ExternalServiceError
from bizpulse.domain.service.insight_provider import BusinessSnapshot, InsightProvider

logger = logging.getLogger(__name__)

FALLBACK_MESSAGE = (
    "The financial strategist is currently processing complex market "
    "variables. Please ensure your data is populated and try again shortly."
)


class GenerateInsightHandler:

    def __init__(self, provider: InsightProvider) -> None:
        self._provider = provider

    def handle(self, snapshot: BusinessSnapshot) -> str:
        """Return the provider's report verbatim, or FALLBACK_MESSAGE."""
        try:
            return self._provider.generate_insight(snapshot)
        except ExternalServiceError as exc:
            logger.error("Insight generation failed: %s", exc)
            return FALLBACK_MESSAGE
