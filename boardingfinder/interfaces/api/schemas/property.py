"""Pydantic models describing property listings."""

from __future__ import annotations

from datetime import datetime
from decimal import Decimal

from pydantic import BaseModel, ConfigDict, Field

from boardingfinder.domain.entities import PropertyStatus

from .profile import UserSummaryRead
from .review import ReviewRead


class PropertyCreate(BaseModel):
    model_config = ConfigDict(extra="forbid")

    title: str = Field(..., min_length=1, max_length=200)
    address: str = Field(..., min_length=1)
    city: str = Field(..., min_length=1, max_length=100)
    rent: Decimal = Field(..., ge=0)
    description: str | None = None
    deposit: Decimal | None = Field(default=None, ge=0)
    bedrooms: int | None = Field(default=None, ge=0)
    bathrooms: int | None = Field(default=None, ge=0)
    area_sqm: Decimal | None = Field(default=None, ge=0)
    facilities: list[str] = Field(default_factory=list)
    images: list[str] = Field(default_factory=list)
    featured: bool = False


class PropertyStatusUpdate(BaseModel):
    status: PropertyStatus


class PropertyRead(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: str
    landlord_id: str
    title: str
    description: str | None = None
    address: str
    city: str
    rent: Decimal
    deposit: Decimal | None = None
    bedrooms: int | None = None
    bathrooms: int | None = None
    area_sqm: Decimal | None = None
    facilities: list[str] = Field(default_factory=list)
    images: list[str] = Field(default_factory=list)
    featured: bool
    status: PropertyStatus
    created_at: datetime | None = None
    updated_at: datetime | None = None


class PropertyDetailRead(BaseModel):
    """Listing with its landlord and the reviews visible to everyone."""

    listing: PropertyRead
    landlord: UserSummaryRead
    reviews: list[ReviewRead]
