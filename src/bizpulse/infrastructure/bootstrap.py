"""Composition root: wires concrete implementations to domain interfaces.

This is the only place in the codebase that knows about *all* layers.
Every other module depends only on abstractions. Collaborators are built
once per ``Container`` and released by ``Container.close()``.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass

from bizpulse.domain.repository.store import Store
from bizpulse.domain.service.insight_provider import InsightProvider
from bizpulse.infrastructure.config import Settings
from bizpulse.infrastructure.insight.gemini_provider import GeminiInsightProvider
from bizpulse.infrastructure.insight.stub_provider import StubInsightProvider
from bizpulse.infrastructure.persistence.cached_store import cached_store
from bizpulse.infrastructure.persistence.demo_data import (
    demo_ads,
    demo_products,
    demo_sales,
)
from bizpulse.infrastructure.persistence.json_store import json_store
from bizpulse.infrastructure.persistence.memory_store import in_memory_store

logger = logging.getLogger(__name__)


@dataclass
class Container:
    settings: Settings
    store: Store
    insight_provider: InsightProvider

    def close(self) -> None:
        self.insight_provider.close()


def build_store(settings: Settings) -> Store:
    if settings.store_backend == "memory":
        if settings.demo_data:
            return in_memory_store(demo_products(), demo_sales(), demo_ads())
        return in_memory_store()

    live = json_store(settings.data_dir)
    if settings.store_backend == "cached":
        return cached_store(live, settings.cache_file)
    return live


def build_insight_provider(settings: Settings) -> InsightProvider:
    if settings.insight_provider == "gemini":
        return GeminiInsightProvider(
            api_key=settings.gemini_api_key or "",
            model=settings.gemini_model,
            timeout=settings.insight_timeout,
        )
    return StubInsightProvider(settings.low_stock_threshold)


def build_container(settings: Settings) -> Container:
    logger.debug(
        "Using %s store at %s, %s insights",
        settings.store_backend, settings.data_dir, settings.insight_provider,
    )
    return Container(
        settings=settings,
        store=build_store(settings),
        insight_provider=build_insight_provider(settings),
    )
