"""Persistence helpers for property reviews."""

from __future__ import annotations

from collections.abc import Sequence

from boardingfinder.domain.entities import Review
from boardingfinder.infrastructure.data_service import DataService, Row, all_of, descending, eq
from boardingfinder.utils import now_utc


class ReviewRepository:
    TABLE = "reviews"

    def __init__(self, data: DataService) -> None:
        self.data = data

    async def get(self, review_id: str) -> Review | None:
        rows = await self.data.query(self.TABLE, eq("id", review_id), limit=1)
        return self._to_entity(rows[0]) if rows else None

    async def list_approved_for_property(self, property_id: str) -> Sequence[Review]:
        rows = await self.data.query(
            self.TABLE,
            all_of(eq("property_id", property_id), eq("is_approved", True)),
            order=descending("created_at"),
        )
        return [self._to_entity(row) for row in rows]

    async def list_pending(self) -> Sequence[Review]:
        rows = await self.data.query(
            self.TABLE, eq("moderated_at", None), order=descending("created_at")
        )
        return [self._to_entity(row) for row in rows]

    async def create(self, review: Review) -> Review:
        row = await self.data.insert(
            self.TABLE,
            {
                "property_id": review.property_id,
                "tenant_id": review.tenant_id,
                "rating": review.rating,
                "comment": review.comment,
                "is_approved": False,
            },
        )
        return self._to_entity(row)

    async def moderate(self, review_id: str, *, approved: bool) -> None:
        await self.data.update(
            self.TABLE,
            eq("id", review_id),
            {"is_approved": approved, "moderated_at": now_utc()},
        )

    @staticmethod
    def _to_entity(row: Row) -> Review:
        return Review(
            id=row["id"],
            property_id=row["property_id"],
            tenant_id=row["tenant_id"],
            rating=row["rating"],
            comment=row.get("comment"),
            is_approved=row.get("is_approved"),
            moderated_at=row.get("moderated_at"),
            created_at=row.get("created_at"),
        )


__all__ = ["ReviewRepository"]
