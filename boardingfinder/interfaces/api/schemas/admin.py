"""Admin dashboard schemas."""

from datetime import datetime

from pydantic import BaseModel, ConfigDict

from boardingfinder.domain.entities import UserRole


class PlatformStatsRead(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    users: int
    properties: int
    reservations: int
    payments: int
    pending_reviews: int


class AdminUserRead(BaseModel):
    id: str
    email: str
    full_name: str | None = None
    role: UserRole
    created_at: datetime | None = None
