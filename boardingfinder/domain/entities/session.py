"""Explicit session context threaded into every component."""

from __future__ import annotations

from dataclasses import dataclass

from ._validation import coerce_enum, require_text
from .role import UserRole


@dataclass(frozen=True)
class Identity:
    """Authenticated identity as resolved from an access token."""

    id: str
    email: str

    def __post_init__(self) -> None:
        require_text(self.id, "identity id")
        require_text(self.email, "identity email")


@dataclass(frozen=True)
class SessionContext:
    """Capability object describing who is acting and with which role.

    Created when a request or websocket connection is authenticated and
    discarded when it ends; components receive it through their constructor
    instead of reading ambient state.
    """

    identity: Identity
    role: UserRole

    def __post_init__(self) -> None:
        object.__setattr__(self, "role", coerce_enum(UserRole, self.role, "role"))

    @property
    def user_id(self) -> str:
        return self.identity.id

    def has_role(self, role: UserRole) -> bool:
        return self.role is role

    def is_admin(self) -> bool:
        return self.has_role(UserRole.ADMIN)


__all__ = ["Identity", "SessionContext"]
