"""Domain entities describing user profiles."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime

from ._validation import optional_text, require_text


@dataclass
class Profile:
    """Public profile attached to every registered user."""

    id: str
    email: str
    full_name: str | None = None
    phone: str | None = None
    bio: str | None = None
    avatar_url: str | None = None
    created_at: datetime | None = None
    updated_at: datetime | None = None

    def __post_init__(self) -> None:
        require_text(self.id, "profile id")
        require_text(self.email, "profile email")
        optional_text(self.full_name, "full_name")

    def summary(self) -> "UserSummary":
        return UserSummary(id=self.id, full_name=self.full_name, email=self.email)


@dataclass(frozen=True)
class UserSummary:
    """Minimal description of another participant shown in listings."""

    id: str
    full_name: str | None = None
    email: str | None = None

    @property
    def display_name(self) -> str:
        return self.full_name or self.email or "Unknown user"


__all__ = ["Profile", "UserSummary"]
