"""Use cases for reading and editing the caller's own profile."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from boardingfinder.domain.entities import Profile, SessionContext
from boardingfinder.domain.errors import NotFoundError
from boardingfinder.infrastructure.data_service import DataService
from boardingfinder.infrastructure.repositories import ProfileRepository


async def get_own_profile(context: SessionContext, data: DataService) -> Profile:
    profile = await ProfileRepository(data).get(context.user_id)
    if profile is None:
        raise NotFoundError("Profile not found")
    return profile


async def update_own_profile(
    context: SessionContext, data: DataService, changes: Mapping[str, Any]
) -> Profile:
    """Apply the editable fields in ``changes``; others are ignored."""

    profile = await ProfileRepository(data).update(context.user_id, changes)
    if profile is None:
        raise NotFoundError("Profile not found")
    return profile


__all__ = ["get_own_profile", "update_own_profile"]
