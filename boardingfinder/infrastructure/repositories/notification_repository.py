"""Persistence helpers for notification entities."""

from __future__ import annotations

from collections.abc import Sequence

from boardingfinder.domain.entities import Notification
from boardingfinder.infrastructure.data_service import DataService, Row, all_of, descending, eq


class NotificationRepository:
    """Provide read, create and mark-read operations for notifications."""

    TABLE = "notifications"

    def __init__(self, data: DataService) -> None:
        self.data = data

    async def list_for_user(self, user_id: str, *, limit: int | None = 50) -> Sequence[Notification]:
        rows = await self.data.query(
            self.TABLE, eq("user_id", user_id), order=descending("created_at"), limit=limit
        )
        return [self.to_entity(row) for row in rows]

    async def list_unread_for_user(
        self, user_id: str, *, limit: int | None = 50
    ) -> Sequence[Notification]:
        rows = await self.data.query(
            self.TABLE,
            all_of(eq("user_id", user_id), eq("is_read", False)),
            order=descending("created_at"),
            limit=limit,
        )
        return [self.to_entity(row) for row in rows]

    async def create(self, notification: Notification) -> Notification:
        row = await self.data.insert(
            self.TABLE,
            {
                "user_id": notification.user_id,
                "type": notification.type.value,
                "title": notification.title,
                "message": notification.message,
                "link": notification.link,
                "is_read": notification.is_read,
            },
        )
        return self.to_entity(row)

    async def mark_read(self, notification_id: str, *, user_id: str) -> int:
        """Set ``is_read``; rows owned by someone else are simply not matched."""

        return await self.data.update(
            self.TABLE,
            all_of(eq("id", notification_id), eq("user_id", user_id)),
            {"is_read": True},
        )

    @staticmethod
    def to_entity(row: Row) -> Notification:
        return Notification(
            id=row["id"],
            user_id=row["user_id"],
            type=row["type"],
            title=row["title"],
            message=row["message"],
            link=row.get("link"),
            is_read=row.get("is_read"),
            created_at=row.get("created_at"),
        )


__all__ = ["NotificationRepository"]
