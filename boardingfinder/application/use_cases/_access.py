"""Role checks shared by the workflow use cases."""

from __future__ import annotations

from boardingfinder.domain.entities import SessionContext, UserRole
from boardingfinder.domain.errors import AuthorizationError


def require_role(context: SessionContext, *roles: UserRole) -> None:
    if context.role not in roles:
        allowed = " or ".join(role.value for role in roles)
        raise AuthorizationError(f"Only a {allowed} can perform this action")
