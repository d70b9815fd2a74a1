"""Pydantic models describing notification payloads."""

from datetime import datetime

from pydantic import BaseModel, ConfigDict

from boardingfinder.domain.entities import NotificationType


class NotificationRead(BaseModel):
    """Representation of a notification delivered to the client."""

    model_config = ConfigDict(from_attributes=True)

    id: str
    user_id: str
    type: NotificationType
    title: str
    message: str
    link: str | None = None
    is_read: bool
    created_at: datetime | None = None
