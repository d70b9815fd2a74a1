"""Persistence layer for profiles, roles and credentials."""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from typing import Any

from boardingfinder.domain.entities import DEFAULT_ROLE, Profile, UserRole
from boardingfinder.domain.entities._validation import coerce_enum
from boardingfinder.infrastructure.data_service import DataService, Row, descending, eq, is_in

_EDITABLE_FIELDS = frozenset({"full_name", "phone", "bio", "avatar_url"})


class ProfileRepository:
    """Provide CRUD operations for user profiles."""

    TABLE = "profiles"

    def __init__(self, data: DataService) -> None:
        self.data = data

    async def get(self, user_id: str) -> Profile | None:
        rows = await self.data.query(self.TABLE, eq("id", user_id), limit=1)
        return self._to_entity(rows[0]) if rows else None

    async def get_by_email(self, email: str) -> Profile | None:
        rows = await self.data.query(self.TABLE, eq("email", email), limit=1)
        return self._to_entity(rows[0]) if rows else None

    async def get_map_by_ids(self, user_ids: Iterable[str]) -> dict[str, Profile]:
        unique_ids = sorted({user_id for user_id in user_ids if user_id})
        if not unique_ids:
            return {}
        rows = await self.data.query(self.TABLE, is_in("id", unique_ids))
        return {row["id"]: self._to_entity(row) for row in rows}

    async def list_recent(self, limit: int | None = None) -> list[Profile]:
        rows = await self.data.query(self.TABLE, order=descending("created_at"), limit=limit)
        return [self._to_entity(row) for row in rows]

    async def create(self, *, email: str, full_name: str | None) -> Profile:
        row = await self.data.insert(self.TABLE, {"email": email, "full_name": full_name})
        return self._to_entity(row)

    async def update(self, user_id: str, changes: Mapping[str, Any]) -> Profile | None:
        patch = {key: value for key, value in changes.items() if key in _EDITABLE_FIELDS}
        if patch:
            await self.data.update(self.TABLE, eq("id", user_id), patch)
        return await self.get(user_id)

    @staticmethod
    def _to_entity(row: Row) -> Profile:
        return Profile(
            id=row["id"],
            email=row["email"],
            full_name=row.get("full_name"),
            phone=row.get("phone"),
            bio=row.get("bio"),
            avatar_url=row.get("avatar_url"),
            created_at=row.get("created_at"),
            updated_at=row.get("updated_at"),
        )


class UserRoleRepository:
    TABLE = "user_roles"

    def __init__(self, data: DataService) -> None:
        self.data = data

    async def get_role(self, user_id: str) -> UserRole:
        """Return the stored role, treating users without one as tenants."""

        rows = await self.data.query(self.TABLE, eq("user_id", user_id), limit=1)
        if not rows:
            return DEFAULT_ROLE
        return coerce_enum(UserRole, rows[0]["role"], "role")

    async def get_map(self, user_ids: Iterable[str]) -> dict[str, UserRole]:
        """Map each user to its role; users without a role row are left out."""

        unique_ids = sorted(set(user_ids))
        if not unique_ids:
            return {}
        rows = await self.data.query(self.TABLE, is_in("user_id", unique_ids))
        return {row["user_id"]: coerce_enum(UserRole, row["role"], "role") for row in rows}

    async def assign(self, user_id: str, role: UserRole) -> None:
        await self.data.insert(self.TABLE, {"user_id": user_id, "role": role.value})


class CredentialRepository:
    TABLE = "credentials"

    def __init__(self, data: DataService) -> None:
        self.data = data

    async def get_password_hash(self, user_id: str) -> str | None:
        rows = await self.data.query(self.TABLE, eq("user_id", user_id), limit=1)
        return rows[0]["password_hash"] if rows else None

    async def create(self, user_id: str, password_hash: str) -> None:
        await self.data.insert(self.TABLE, {"user_id": user_id, "password_hash": password_hash})


__all__ = ["CredentialRepository", "ProfileRepository", "UserRoleRepository"]
