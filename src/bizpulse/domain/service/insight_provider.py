"""Abstract narrative-report generator.

Implementations call out to a text-generation service. Any failure must
surface as ExternalServiceError so the application layer can fall back
to a fixed message.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass, field

from bizpulse.domain.model.ad_spend import AdSpend
from bizpulse.domain.model.product import Product
from bizpulse.domain.model.sale import Sale


@dataclass(frozen=True)
class BusinessSnapshot:
    """The three collections as they stood when a report was requested."""

    products: list[Product] = field(default_factory=list)
    sales: list[Sale] = field(default_factory=list)
    ads: list[AdSpend] = field(default_factory=list)


class InsightProvider(ABC):

    @abstractmethod
    def generate_insight(self, snapshot: BusinessSnapshot) -> str:
        """Return a Markdown report; raise ExternalServiceError on failure."""

    def close(self) -> None:
        """Release any network resources. Default: nothing to release."""
