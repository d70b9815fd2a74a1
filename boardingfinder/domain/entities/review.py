"""Domain entity representing a tenant review of a property."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime

from boardingfinder.domain.errors import ValidationError

from ._validation import require_bool, require_text

MIN_RATING = 1
MAX_RATING = 5


@dataclass
class Review:
    id: str | None
    property_id: str
    tenant_id: str
    rating: int
    comment: str | None = None
    is_approved: bool = False
    moderated_at: datetime | None = None
    created_at: datetime | None = None

    def __post_init__(self) -> None:
        require_text(self.property_id, "property_id")
        require_text(self.tenant_id, "tenant_id")
        if isinstance(self.rating, bool) or not isinstance(self.rating, int):
            raise ValidationError("rating must be an integer")
        if not MIN_RATING <= self.rating <= MAX_RATING:
            raise ValidationError(f"rating must be between {MIN_RATING} and {MAX_RATING}")
        self.is_approved = require_bool(self.is_approved, "is_approved")

    def is_pending(self) -> bool:
        return self.moderated_at is None


__all__ = ["MAX_RATING", "MIN_RATING", "Review"]
