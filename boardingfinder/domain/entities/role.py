"""Application roles a user can hold."""

from __future__ import annotations

from enum import Enum


class UserRole(str, Enum):
    TENANT = "tenant"
    LANDLORD = "landlord"
    ADMIN = "admin"


DEFAULT_ROLE = UserRole.TENANT

__all__ = ["DEFAULT_ROLE", "UserRole"]
