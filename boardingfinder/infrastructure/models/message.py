"""SQLAlchemy model for direct messages."""

from sqlalchemy import Boolean, Column, DateTime, ForeignKey, Index, String, Text
from sqlalchemy.sql import expression

from boardingfinder.infrastructure.database import Base

from ._columns import new_id, utc_now


class MessageModel(Base):
    __tablename__ = "messages"
    __table_args__ = (
        Index("ix_messages_pair_created", "sender_id", "receiver_id", "created_at"),
    )

    id = Column(String(36), primary_key=True, default=new_id)
    sender_id = Column(String(36), ForeignKey("profiles.id"), nullable=False, index=True)
    receiver_id = Column(String(36), ForeignKey("profiles.id"), nullable=False, index=True)
    content = Column(Text, nullable=False)
    property_id = Column(String(36), ForeignKey("properties.id"), nullable=True)
    is_read = Column(Boolean, nullable=False, default=False, server_default=expression.false())
    created_at = Column(DateTime(timezone=True), nullable=False, default=utc_now, index=True)


__all__ = ["MessageModel"]
