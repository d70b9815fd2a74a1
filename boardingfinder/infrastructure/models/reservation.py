"""SQLAlchemy models for reservations and their payments."""

from sqlalchemy import Column, Date, DateTime, ForeignKey, Numeric, String, Text

from boardingfinder.infrastructure.database import Base

from ._columns import new_id, utc_now


class ReservationModel(Base):
    __tablename__ = "reservations"

    id = Column(String(36), primary_key=True, default=new_id)
    property_id = Column(String(36), ForeignKey("properties.id"), nullable=False, index=True)
    tenant_id = Column(String(36), ForeignKey("profiles.id"), nullable=False, index=True)
    check_in = Column(Date, nullable=False)
    check_out = Column(Date, nullable=True)
    notes = Column(Text, nullable=True)
    status = Column(String(20), nullable=False, default="pending")
    created_at = Column(DateTime(timezone=True), nullable=False, default=utc_now)
    updated_at = Column(DateTime(timezone=True), nullable=True, onupdate=utc_now)


class PaymentModel(Base):
    __tablename__ = "payments"

    id = Column(String(36), primary_key=True, default=new_id)
    reservation_id = Column(String(36), ForeignKey("reservations.id"), nullable=False, index=True)
    amount = Column(Numeric(12, 2), nullable=False)
    method = Column(String(20), nullable=False)
    reference_number = Column(String(120), nullable=True)
    receipt_url = Column(String(500), nullable=True)
    notes = Column(Text, nullable=True)
    status = Column(String(20), nullable=False, default="pending")
    verified_at = Column(DateTime(timezone=True), nullable=True)
    verified_by = Column(String(36), ForeignKey("profiles.id"), nullable=True)
    created_at = Column(DateTime(timezone=True), nullable=False, default=utc_now)


__all__ = ["PaymentModel", "ReservationModel"]
