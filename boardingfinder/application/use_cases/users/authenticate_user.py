"""Use case for authenticating a user."""

from __future__ import annotations

from enum import Enum, auto

from boardingfinder.domain.entities import Profile
from boardingfinder.infrastructure.data_service import DataService
from boardingfinder.infrastructure.repositories import CredentialRepository, ProfileRepository
from boardingfinder.infrastructure.security import verify_password


class AuthenticationStatus(Enum):
    """Possible outcomes when attempting to authenticate a user."""

    SUCCESS = auto()
    INVALID_CREDENTIALS = auto()


async def authenticate_user(
    data: DataService, email: str, password: str
) -> tuple[Profile | None, AuthenticationStatus]:
    """Return the authentication result along with the profile when possible."""

    profile = await ProfileRepository(data).get_by_email((email or "").strip().lower())
    if profile is None:
        return None, AuthenticationStatus.INVALID_CREDENTIALS

    password_hash = await CredentialRepository(data).get_password_hash(profile.id)
    if not password_hash or not verify_password(password, password_hash):
        return None, AuthenticationStatus.INVALID_CREDENTIALS

    return profile, AuthenticationStatus.SUCCESS
