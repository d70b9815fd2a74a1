"""Use cases for browsing and managing property listings."""

from __future__ import annotations

import logging
from collections.abc import Mapping, Sequence
from dataclasses import dataclass
from typing import Any

from boardingfinder.domain.entities import (
    Property,
    PropertyStatus,
    Review,
    SessionContext,
    UserRole,
    UserSummary,
)
from boardingfinder.domain.entities._validation import coerce_enum
from boardingfinder.domain.errors import AuthorizationError, NotFoundError
from boardingfinder.infrastructure.data_service import DataService
from boardingfinder.infrastructure.repositories import (
    ProfileRepository,
    PropertyRepository,
    ReviewRepository,
)

from ._access import require_role

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class PropertyDetail:
    listing: Property
    landlord: UserSummary
    reviews: tuple[Review, ...]


async def list_properties(
    data: DataService,
    *,
    featured: bool | None = None,
    status: PropertyStatus | str | None = None,
    city: str | None = None,
    landlord_id: str | None = None,
    limit: int | None = 100,
) -> Sequence[Property]:
    if status is not None:
        status = coerce_enum(PropertyStatus, status, "property status")
    return await PropertyRepository(data).list(
        featured=featured,
        status=status,
        city=(city or "").strip() or None,
        landlord_id=landlord_id,
        limit=limit,
    )


async def get_property(data: DataService, property_id: str) -> Property:
    listing = await PropertyRepository(data).get(property_id)
    if listing is None:
        raise NotFoundError("Property not found")
    return listing


async def get_property_detail(data: DataService, property_id: str) -> PropertyDetail:
    """Return the listing with its landlord summary and approved reviews, newest first."""

    listing = await get_property(data, property_id)
    landlord = await ProfileRepository(data).get(listing.landlord_id)
    reviews = await ReviewRepository(data).list_approved_for_property(property_id)
    return PropertyDetail(
        listing=listing,
        landlord=landlord.summary() if landlord else UserSummary(id=listing.landlord_id),
        reviews=tuple(reviews),
    )


async def create_property(
    context: SessionContext, data: DataService, values: Mapping[str, Any]
) -> Property:
    require_role(context, UserRole.LANDLORD)
    listing = Property(id=None, landlord_id=context.user_id, **dict(values))
    created = await PropertyRepository(data).create(listing)
    logger.info("Landlord %s listed property %s", context.user_id, created.id)
    return created


async def update_property_status(
    context: SessionContext,
    data: DataService,
    property_id: str,
    status: PropertyStatus | str,
) -> Property:
    status = coerce_enum(PropertyStatus, status, "property status")
    repository = PropertyRepository(data)
    listing = await get_property(data, property_id)
    if listing.landlord_id != context.user_id:
        raise AuthorizationError("Only the owning landlord can change this listing")
    await repository.update_status(property_id, status)
    return await get_property(data, property_id)


__all__ = [
    "PropertyDetail",
    "create_property",
    "get_property",
    "get_property_detail",
    "list_properties",
    "update_property_status",
]
