"""Domain entity representing a booking request."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date, datetime
from enum import Enum

from boardingfinder.domain.errors import ValidationError

from ._validation import coerce_enum, require_text


class ReservationStatus(str, Enum):
    PENDING = "pending"
    APPROVED = "approved"
    DECLINED = "declined"
    CANCELLED = "cancelled"
    COMPLETED = "completed"


@dataclass
class Reservation:
    id: str | None
    property_id: str
    tenant_id: str
    check_in: date
    check_out: date | None = None
    notes: str | None = None
    status: ReservationStatus = ReservationStatus.PENDING
    created_at: datetime | None = None
    updated_at: datetime | None = None

    def __post_init__(self) -> None:
        require_text(self.property_id, "property_id")
        require_text(self.tenant_id, "tenant_id")
        if not isinstance(self.check_in, date):
            raise ValidationError("check_in must be a date")
        if self.check_out is not None and self.check_out < self.check_in:
            raise ValidationError("check_out cannot be before check_in")
        self.status = coerce_enum(
            ReservationStatus, self.status or ReservationStatus.PENDING, "reservation status"
        )

    def is_pending(self) -> bool:
        return self.status is ReservationStatus.PENDING


__all__ = ["Reservation", "ReservationStatus"]
