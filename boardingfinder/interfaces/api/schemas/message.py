"""Schemas for direct messages and conversations."""

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field

from .profile import UserSummaryRead


class MessageCreate(BaseModel):
    receiver_id: str
    content: str = Field(..., max_length=4000)
    property_id: str | None = None


class MessageRead(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: str
    sender_id: str
    receiver_id: str
    content: str
    property_id: str | None = None
    is_read: bool
    created_at: datetime


class ConversationRead(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    counterpart: UserSummaryRead
    last_message: MessageRead
    has_unread: bool
