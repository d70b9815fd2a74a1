"""Persistence helpers for direct messages."""

from __future__ import annotations

from collections.abc import Sequence

from boardingfinder.domain.entities import Message
from boardingfinder.infrastructure.data_service import (
    DataService,
    Row,
    all_of,
    any_of,
    ascending,
    descending,
    eq,
)


class MessageRepository:
    """Read and append messages visible to a participant."""

    TABLE = "messages"

    def __init__(self, data: DataService) -> None:
        self.data = data

    async def list_involving(self, user_id: str) -> Sequence[Message]:
        """Every message ``user_id`` sent or received, newest first."""

        rows = await self.data.query(
            self.TABLE,
            any_of(eq("sender_id", user_id), eq("receiver_id", user_id)),
            order=descending("created_at"),
        )
        return [self._to_entity(row) for row in rows]

    async def list_between(self, user_id: str, counterpart_id: str) -> Sequence[Message]:
        """The thread between two users in chronological order."""

        rows = await self.data.query(
            self.TABLE,
            any_of(
                all_of(eq("sender_id", user_id), eq("receiver_id", counterpart_id)),
                all_of(eq("sender_id", counterpart_id), eq("receiver_id", user_id)),
            ),
            order=ascending("created_at"),
        )
        return [self._to_entity(row) for row in rows]

    async def mark_read_from(self, *, receiver_id: str, sender_id: str) -> int:
        """Flip every unread message from ``sender_id`` to ``receiver_id``.

        Already-read rows are not matched, so repeating the sweep writes
        nothing.
        """

        return await self.data.update(
            self.TABLE,
            all_of(
                eq("receiver_id", receiver_id),
                eq("sender_id", sender_id),
                eq("is_read", False),
            ),
            {"is_read": True},
        )

    async def create(
        self,
        *,
        sender_id: str,
        receiver_id: str,
        content: str,
        property_id: str | None = None,
    ) -> Message:
        row = await self.data.insert(
            self.TABLE,
            {
                "sender_id": sender_id,
                "receiver_id": receiver_id,
                "content": content,
                "property_id": property_id,
                "is_read": False,
            },
        )
        return self._to_entity(row)

    @staticmethod
    def _to_entity(row: Row) -> Message:
        return Message(
            id=row["id"],
            sender_id=row["sender_id"],
            receiver_id=row["receiver_id"],
            content=row["content"],
            property_id=row.get("property_id"),
            is_read=row.get("is_read"),
            created_at=row["created_at"],
        )


__all__ = ["MessageRepository"]
