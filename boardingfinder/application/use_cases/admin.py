"""Platform-wide counters and the user list for the admin dashboard."""

from __future__ import annotations

from dataclasses import dataclass

from boardingfinder.domain.entities import DEFAULT_ROLE, Profile, SessionContext, UserRole
from boardingfinder.infrastructure.data_service import DataService, eq
from boardingfinder.infrastructure.repositories import ProfileRepository, UserRoleRepository

from ._access import require_role

DEFAULT_USER_LIST_LIMIT = 10


@dataclass(frozen=True)
class PlatformStats:
    users: int
    properties: int
    reservations: int
    payments: int
    pending_reviews: int


@dataclass(frozen=True)
class UserWithRole:
    profile: Profile
    role: UserRole


async def get_platform_stats(context: SessionContext, data: DataService) -> PlatformStats:
    require_role(context, UserRole.ADMIN)
    return PlatformStats(
        users=await data.count("profiles"),
        properties=await data.count("properties"),
        reservations=await data.count("reservations"),
        payments=await data.count("payments"),
        pending_reviews=await data.count("reviews", eq("moderated_at", None)),
    )


async def list_users(
    context: SessionContext, data: DataService, *, limit: int | None = DEFAULT_USER_LIST_LIMIT
) -> list[UserWithRole]:
    """Return the newest profiles with their role, tenants where none is stored."""

    require_role(context, UserRole.ADMIN)
    profiles = await ProfileRepository(data).list_recent(limit)
    roles = await UserRoleRepository(data).get_map(profile.id for profile in profiles)
    return [
        UserWithRole(profile=profile, role=roles.get(profile.id, DEFAULT_ROLE))
        for profile in profiles
    ]


__all__ = [
    "DEFAULT_USER_LIST_LIMIT",
    "PlatformStats",
    "UserWithRole",
    "get_platform_stats",
    "list_users",
]
