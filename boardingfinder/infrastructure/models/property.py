"""SQLAlchemy model for property listings."""

from sqlalchemy import JSON, Boolean, Column, DateTime, ForeignKey, Integer, Numeric, String, Text
from sqlalchemy.sql import expression

from boardingfinder.infrastructure.database import Base

from ._columns import new_id, utc_now


class PropertyModel(Base):
    __tablename__ = "properties"

    id = Column(String(36), primary_key=True, default=new_id)
    landlord_id = Column(String(36), ForeignKey("profiles.id"), nullable=False, index=True)
    title = Column(String(200), nullable=False)
    description = Column(Text, nullable=True)
    address = Column(String(255), nullable=False)
    city = Column(String(120), nullable=False, index=True)
    rent = Column(Numeric(12, 2), nullable=False)
    deposit = Column(Numeric(12, 2), nullable=True)
    bedrooms = Column(Integer, nullable=True)
    bathrooms = Column(Integer, nullable=True)
    area_sqm = Column(Numeric(10, 2), nullable=True)
    facilities = Column(JSON, nullable=False, default=list)
    images = Column(JSON, nullable=False, default=list)
    featured = Column(Boolean, nullable=False, default=False, server_default=expression.false())
    status = Column(String(20), nullable=False, default="available")
    created_at = Column(DateTime(timezone=True), nullable=False, default=utc_now)
    updated_at = Column(DateTime(timezone=True), nullable=True, onupdate=utc_now)


__all__ = ["PropertyModel"]
