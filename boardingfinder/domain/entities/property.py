"""Domain entity representing a boarding house listing."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from decimal import Decimal
from enum import Enum

from boardingfinder.domain.errors import ValidationError

from ._validation import coerce_enum, require_bool, require_text


class PropertyStatus(str, Enum):
    AVAILABLE = "available"
    OCCUPIED = "occupied"
    MAINTENANCE = "maintenance"


@dataclass
class Property:
    id: str | None
    landlord_id: str
    title: str
    address: str
    city: str
    rent: Decimal
    description: str | None = None
    deposit: Decimal | None = None
    bedrooms: int | None = None
    bathrooms: int | None = None
    area_sqm: Decimal | None = None
    facilities: list[str] = field(default_factory=list)
    images: list[str] = field(default_factory=list)
    featured: bool = False
    status: PropertyStatus = PropertyStatus.AVAILABLE
    created_at: datetime | None = None
    updated_at: datetime | None = None

    def __post_init__(self) -> None:
        require_text(self.landlord_id, "landlord_id")
        require_text(self.title, "title")
        require_text(self.address, "address")
        require_text(self.city, "city")
        self.rent = Decimal(str(self.rent))
        if self.rent < 0:
            raise ValidationError("rent cannot be negative")
        if self.deposit is not None:
            self.deposit = Decimal(str(self.deposit))
        self.facilities = list(self.facilities or [])
        self.images = list(self.images or [])
        self.featured = require_bool(self.featured, "featured")
        self.status = coerce_enum(PropertyStatus, self.status or PropertyStatus.AVAILABLE, "property status")


__all__ = ["Property", "PropertyStatus"]
