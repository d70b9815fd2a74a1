"""SQLAlchemy model for property reviews."""

from sqlalchemy import Boolean, Column, DateTime, ForeignKey, Integer, String, Text
from sqlalchemy.sql import expression

from boardingfinder.infrastructure.database import Base

from ._columns import new_id, utc_now


class ReviewModel(Base):
    __tablename__ = "reviews"

    id = Column(String(36), primary_key=True, default=new_id)
    property_id = Column(String(36), ForeignKey("properties.id"), nullable=False, index=True)
    tenant_id = Column(String(36), ForeignKey("profiles.id"), nullable=False, index=True)
    rating = Column(Integer, nullable=False)
    comment = Column(Text, nullable=True)
    is_approved = Column(Boolean, nullable=False, default=False, server_default=expression.false())
    moderated_at = Column(DateTime(timezone=True), nullable=True)
    created_at = Column(DateTime(timezone=True), nullable=False, default=utc_now)


__all__ = ["ReviewModel"]
