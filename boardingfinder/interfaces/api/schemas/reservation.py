"""Schemas for reservations and the payments made against them."""

from datetime import date, datetime
from decimal import Decimal

from pydantic import BaseModel, ConfigDict, Field

from boardingfinder.domain.entities import PaymentMethod, PaymentStatus, ReservationStatus


class ReservationCreate(BaseModel):
    property_id: str
    check_in: date
    check_out: date | None = None
    notes: str | None = None


class ReservationStatusUpdate(BaseModel):
    status: ReservationStatus


class ReservationRead(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: str
    property_id: str
    tenant_id: str
    check_in: date
    check_out: date | None = None
    notes: str | None = None
    status: ReservationStatus
    created_at: datetime | None = None
    updated_at: datetime | None = None


class PaymentCreate(BaseModel):
    reservation_id: str
    amount: Decimal = Field(..., gt=0)
    method: PaymentMethod
    reference_number: str | None = None
    receipt_url: str | None = None
    notes: str | None = None


class PaymentVerification(BaseModel):
    status: PaymentStatus


class PaymentRead(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: str
    reservation_id: str
    amount: Decimal
    method: PaymentMethod
    reference_number: str | None = None
    receipt_url: str | None = None
    notes: str | None = None
    status: PaymentStatus
    verified_at: datetime | None = None
    verified_by: str | None = None
    created_at: datetime | None = None
