"""Ad-spend ledger entries (append-only)."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date

from bizpulse.domain.exceptions import ValidationError
from bizpulse.domain.model.value_objects import Money

DEFAULT_PLATFORM = "Instagram"


@dataclass(frozen=True)
class AdSpend:
    """A single ad campaign spend.

    ``reach`` is an optional audience estimate; 0 means unknown.
    """

    id: str | None
    platform: str
    amount: Money
    date: date
    reach: int = 0

    def __post_init__(self) -> None:
        if not self.platform or not self.platform.strip():
            raise ValidationError("Ad platform is required")
        if isinstance(self.reach, bool) or not isinstance(self.reach, int):
            raise ValidationError(
                f"Reach must be an integer, got {type(self.reach).__name__}"
            )
        if self.reach < 0:
            raise ValidationError(f"Reach cannot be negative, got {self.reach}")
