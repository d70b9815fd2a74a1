"""Review schemas."""

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field

from boardingfinder.domain.entities import MAX_RATING, MIN_RATING


class ReviewCreate(BaseModel):
    property_id: str
    rating: int = Field(..., ge=MIN_RATING, le=MAX_RATING)
    comment: str | None = None


class ReviewModeration(BaseModel):
    approved: bool


class ReviewRead(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: str
    property_id: str
    tenant_id: str
    rating: int
    comment: str | None = None
    is_approved: bool
    moderated_at: datetime | None = None
    created_at: datetime | None = None
