"""Persistence helpers for property listings."""

from __future__ import annotations

from collections.abc import Sequence

from boardingfinder.domain.entities import Property, PropertyStatus
from boardingfinder.infrastructure.data_service import (
    DataService,
    Filter,
    Row,
    all_of,
    descending,
    eq,
)


class PropertyRepository:
    TABLE = "properties"

    def __init__(self, data: DataService) -> None:
        self.data = data

    async def list(
        self,
        *,
        featured: bool | None = None,
        status: PropertyStatus | None = None,
        city: str | None = None,
        landlord_id: str | None = None,
        limit: int | None = 100,
    ) -> Sequence[Property]:
        clauses: list[Filter] = []
        if featured is not None:
            clauses.append(eq("featured", featured))
        if status is not None:
            clauses.append(eq("status", status.value))
        if city:
            clauses.append(eq("city", city))
        if landlord_id:
            clauses.append(eq("landlord_id", landlord_id))
        rows = await self.data.query(
            self.TABLE,
            all_of(*clauses) if clauses else None,
            order=descending("created_at"),
            limit=limit,
        )
        return [self._to_entity(row) for row in rows]

    async def get(self, property_id: str) -> Property | None:
        rows = await self.data.query(self.TABLE, eq("id", property_id), limit=1)
        return self._to_entity(rows[0]) if rows else None

    async def create(self, listing: Property) -> Property:
        row = await self.data.insert(
            self.TABLE,
            {
                "landlord_id": listing.landlord_id,
                "title": listing.title,
                "description": listing.description,
                "address": listing.address,
                "city": listing.city,
                "rent": listing.rent,
                "deposit": listing.deposit,
                "bedrooms": listing.bedrooms,
                "bathrooms": listing.bathrooms,
                "area_sqm": listing.area_sqm,
                "facilities": list(listing.facilities),
                "images": list(listing.images),
                "featured": listing.featured,
                "status": listing.status.value,
            },
        )
        return self._to_entity(row)

    async def update_status(self, property_id: str, status: PropertyStatus) -> None:
        await self.data.update(self.TABLE, eq("id", property_id), {"status": status.value})

    @staticmethod
    def _to_entity(row: Row) -> Property:
        return Property(
            id=row["id"],
            landlord_id=row["landlord_id"],
            title=row["title"],
            description=row.get("description"),
            address=row["address"],
            city=row["city"],
            rent=row["rent"],
            deposit=row.get("deposit"),
            bedrooms=row.get("bedrooms"),
            bathrooms=row.get("bathrooms"),
            area_sqm=row.get("area_sqm"),
            facilities=row.get("facilities") or [],
            images=row.get("images") or [],
            featured=row.get("featured"),
            status=row.get("status"),
            created_at=row.get("created_at"),
            updated_at=row.get("updated_at"),
        )


__all__ = ["PropertyRepository"]
