"""Resolve the acting user from an access token."""

from __future__ import annotations

from boardingfinder.domain.entities import Identity, Profile, SessionContext
from boardingfinder.domain.errors import AuthorizationError
from boardingfinder.infrastructure.data_service import DataService
from boardingfinder.infrastructure.repositories import ProfileRepository, UserRoleRepository
from boardingfinder.infrastructure.security import create_access_token, decode_access_token


def issue_access_token(profile: Profile) -> str:
    return create_access_token({"sub": profile.id, "email": profile.email})


async def resolve_session_context(data: DataService, token: str) -> SessionContext:
    """Decode ``token`` and build the :class:`SessionContext` it stands for.

    The role is read from ``user_roles`` on every call, so a role change
    applies to the next request without re-issuing tokens.
    """

    try:
        payload = decode_access_token(token)
    except ValueError as exc:
        raise AuthorizationError("Invalid credentials") from exc

    user_id = payload.get("sub")
    if not isinstance(user_id, str) or not user_id:
        raise AuthorizationError("Invalid credentials")

    profile = await ProfileRepository(data).get(user_id)
    if profile is None:
        raise AuthorizationError("User not found")

    role = await UserRoleRepository(data).get_role(user_id)
    return SessionContext(identity=Identity(id=profile.id, email=profile.email), role=role)
