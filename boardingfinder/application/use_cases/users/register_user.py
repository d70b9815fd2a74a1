"""Use cases for creating accounts."""

from __future__ import annotations

import logging

from boardingfinder.domain.entities import Profile, UserRole
from boardingfinder.domain.entities._validation import coerce_enum
from boardingfinder.domain.errors import ValidationError
from boardingfinder.infrastructure.data_service import DataService
from boardingfinder.infrastructure.repositories import (
    CredentialRepository,
    ProfileRepository,
    UserRoleRepository,
)
from boardingfinder.infrastructure.security import get_password_hash

from .validators import normalize_email, validate_password

logger = logging.getLogger(__name__)

SELF_ASSIGNABLE_ROLES = frozenset({UserRole.TENANT, UserRole.LANDLORD})


async def register_user(
    data: DataService,
    *,
    email: str,
    password: str,
    full_name: str | None = None,
    role: UserRole | str = UserRole.TENANT,
) -> tuple[Profile, UserRole]:
    """Self-service sign up; administrators cannot be created this way."""

    role = coerce_enum(UserRole, role, "role")
    if role not in SELF_ASSIGNABLE_ROLES:
        raise ValidationError("That role cannot be chosen at sign up")
    return await _create_account(
        data, email=email, password=password, full_name=full_name, role=role
    )


async def create_admin_user(
    data: DataService, *, email: str, password: str, full_name: str | None = None
) -> tuple[Profile, UserRole]:
    """Create an administrator; only reachable from operator tooling."""

    return await _create_account(
        data, email=email, password=password, full_name=full_name, role=UserRole.ADMIN
    )


async def _create_account(
    data: DataService,
    *,
    email: str,
    password: str,
    full_name: str | None,
    role: UserRole,
) -> tuple[Profile, UserRole]:
    email = normalize_email(email)
    validate_password(password)

    profiles = ProfileRepository(data)
    if await profiles.get_by_email(email):
        raise ValidationError("The email address is already registered")

    profile = await profiles.create(email=email, full_name=(full_name or "").strip() or None)
    await CredentialRepository(data).create(profile.id, get_password_hash(password))
    await UserRoleRepository(data).assign(profile.id, role)
    logger.info("Registered %s as %s", profile.id, role.value)
    return profile, role
