"""Use cases for booking requests and the landlord's decision on them."""

from __future__ import annotations

import logging
from collections.abc import Sequence
from datetime import date

from boardingfinder.domain.entities import (
    Reservation,
    ReservationStatus,
    SessionContext,
    UserRole,
)
from boardingfinder.domain.entities._validation import coerce_enum
from boardingfinder.domain.errors import AuthorizationError, NotFoundError, ValidationError
from boardingfinder.infrastructure.data_service import DataService
from boardingfinder.infrastructure.repositories import PropertyRepository, ReservationRepository

from ._access import require_role
from .notifications import notify_booking_requested, notify_reservation_decided
from .properties import get_property

logger = logging.getLogger(__name__)

LANDLORD_DECISIONS = frozenset({ReservationStatus.APPROVED, ReservationStatus.DECLINED})


async def create_reservation(
    context: SessionContext,
    data: DataService,
    *,
    property_id: str | None,
    check_in: date | None,
    check_out: date | None = None,
    notes: str | None = None,
) -> Reservation:
    """Submit a pending booking request and tell the landlord about it."""

    require_role(context, UserRole.TENANT)
    if not property_id:
        raise ValidationError("A property is required")
    if check_in is None:
        raise ValidationError("A check-in date is required")
    reservation = Reservation(
        id=None,
        property_id=property_id,
        tenant_id=context.user_id,
        check_in=check_in,
        check_out=check_out,
        notes=(notes or "").strip() or None,
    )
    listing = await get_property(data, property_id)

    created = await ReservationRepository(data).create(reservation)
    logger.info("Tenant %s requested booking %s", context.user_id, created.id)
    await notify_booking_requested(data, reservation=created, listing=listing)
    return created


async def list_reservations(context: SessionContext, data: DataService) -> Sequence[Reservation]:
    """Tenants see their own bookings, landlords those on their listings."""

    repository = ReservationRepository(data)
    if context.has_role(UserRole.LANDLORD):
        listings = await PropertyRepository(data).list(landlord_id=context.user_id, limit=None)
        return await repository.list_for_properties(listing.id for listing in listings)
    return await repository.list_for_tenant(context.user_id)


async def get_reservation(data: DataService, reservation_id: str) -> Reservation:
    reservation = await ReservationRepository(data).get(reservation_id)
    if reservation is None:
        raise NotFoundError("Reservation not found")
    return reservation


async def update_reservation_status(
    context: SessionContext,
    data: DataService,
    reservation_id: str,
    status: ReservationStatus | str,
) -> Reservation:
    """Approve, decline or cancel a pending reservation.

    The landlord owning the listing decides; the tenant may only cancel its
    own request.
    """

    status = coerce_enum(ReservationStatus, status, "reservation status")
    reservation = await get_reservation(data, reservation_id)
    if not reservation.is_pending():
        raise ValidationError(f"The reservation is already {reservation.status.value}")

    listing = await get_property(data, reservation.property_id)
    if status in LANDLORD_DECISIONS:
        if listing.landlord_id != context.user_id:
            raise AuthorizationError("Only the landlord of this property can decide")
    elif status is ReservationStatus.CANCELLED:
        if reservation.tenant_id != context.user_id:
            raise AuthorizationError("Only the tenant can cancel this reservation")
    else:
        raise ValidationError(f"Cannot move a reservation to {status.value}")

    await ReservationRepository(data).update_status(reservation_id, status)
    updated = await get_reservation(data, reservation_id)
    logger.info("Reservation %s is now %s", reservation_id, status.value)
    if status in LANDLORD_DECISIONS:
        await notify_reservation_decided(data, reservation=updated, listing=listing)
    return updated


__all__ = [
    "create_reservation",
    "get_reservation",
    "list_reservations",
    "update_reservation_status",
]
