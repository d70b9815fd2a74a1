"""Domain entity representing a user notification."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from enum import Enum

from ._validation import coerce_enum, optional_text, require_bool, require_text


class NotificationType(str, Enum):
    BOOKING = "booking"
    PAYMENT = "payment"
    MESSAGE = "message"
    REVIEW = "review"
    SYSTEM = "system"


@dataclass
class Notification:
    """Information message delivered to a specific user."""

    id: str | None
    user_id: str
    type: NotificationType
    title: str
    message: str
    link: str | None = None
    is_read: bool = False
    created_at: datetime | None = None

    def __post_init__(self) -> None:
        require_text(self.user_id, "user_id")
        require_text(self.title, "title")
        require_text(self.message, "message")
        optional_text(self.link, "link")
        self.type = coerce_enum(NotificationType, self.type, "notification type")
        self.is_read = require_bool(self.is_read, "is_read")


__all__ = ["Notification", "NotificationType"]
