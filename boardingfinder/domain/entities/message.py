"""Domain entity representing a direct message between two users."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime

from boardingfinder.domain.errors import ValidationError

from ._validation import optional_text, require_bool, require_text


@dataclass(frozen=True)
class Message:
    """A message as stored; the read flag is flipped by the repository."""

    id: str
    sender_id: str
    receiver_id: str
    content: str
    created_at: datetime
    is_read: bool = False
    property_id: str | None = None

    def __post_init__(self) -> None:
        require_text(self.id, "message id")
        require_text(self.sender_id, "sender_id")
        require_text(self.receiver_id, "receiver_id")
        if not isinstance(self.content, str):
            raise ValidationError("content must be a string")
        if not isinstance(self.created_at, datetime):
            raise ValidationError("created_at must be a datetime")
        optional_text(self.property_id, "property_id")
        object.__setattr__(self, "is_read", require_bool(self.is_read, "is_read"))

    def involves(self, user_id: str) -> bool:
        return user_id in (self.sender_id, self.receiver_id)

    def counterpart_of(self, user_id: str) -> str:
        """Return the participant that is not ``user_id``."""

        return self.receiver_id if self.sender_id == user_id else self.sender_id

    def is_unread_for(self, user_id: str) -> bool:
        return self.receiver_id == user_id and not self.is_read


__all__ = ["Message"]
