"""Utility helpers to generate domain notifications for workflow actions."""

from __future__ import annotations

import logging

from boardingfinder.domain.entities import (
    Notification,
    NotificationType,
    Payment,
    PaymentStatus,
    Property,
    Reservation,
    ReservationStatus,
    Review,
)
from boardingfinder.domain.errors import TransientFetchError
from boardingfinder.infrastructure.data_service import DataService
from boardingfinder.infrastructure.repositories import NotificationRepository

logger = logging.getLogger(__name__)

LANDLORD_DASHBOARD_LINK = "/dashboard/landlord"
TENANT_DASHBOARD_LINK = "/dashboard/tenant"


async def _persist_notification(
    data: DataService,
    *,
    user_id: str,
    type: NotificationType,
    title: str,
    message: str,
    link: str | None = None,
) -> Notification | None:
    """Store a notification; a failure is logged and never undoes the action."""

    notification = Notification(
        id=None,
        user_id=user_id,
        type=type,
        title=title,
        message=message,
        link=link,
    )
    try:
        return await NotificationRepository(data).create(notification)
    except TransientFetchError:
        logger.warning("Could not store %s notification for user %s", type.value, user_id)
        return None


async def notify_booking_requested(
    data: DataService, *, reservation: Reservation, listing: Property
) -> Notification | None:
    """Tell the landlord a tenant asked to book ``listing``."""

    return await _persist_notification(
        data,
        user_id=listing.landlord_id,
        type=NotificationType.BOOKING,
        title="New Booking Request",
        message=f"You have a new booking request for {listing.title}",
        link=LANDLORD_DASHBOARD_LINK,
    )


async def notify_reservation_decided(
    data: DataService, *, reservation: Reservation, listing: Property
) -> Notification | None:
    if reservation.status is ReservationStatus.APPROVED:
        title = "Booking Approved"
        message = f"Your booking request for {listing.title} was approved"
    elif reservation.status is ReservationStatus.DECLINED:
        title = "Booking Declined"
        message = f"Your booking request for {listing.title} was declined"
    else:
        return None
    return await _persist_notification(
        data,
        user_id=reservation.tenant_id,
        type=NotificationType.BOOKING,
        title=title,
        message=message,
        link=TENANT_DASHBOARD_LINK,
    )


async def notify_payment_submitted(
    data: DataService, *, payment: Payment, listing: Property
) -> Notification | None:
    return await _persist_notification(
        data,
        user_id=listing.landlord_id,
        type=NotificationType.PAYMENT,
        title="Payment Submitted",
        message=f"A payment of {payment.amount} was submitted for {listing.title}",
        link=LANDLORD_DASHBOARD_LINK,
    )


async def notify_payment_reviewed(
    data: DataService, *, payment: Payment, reservation: Reservation, listing: Property
) -> Notification | None:
    verified = payment.status is PaymentStatus.VERIFIED
    return await _persist_notification(
        data,
        user_id=reservation.tenant_id,
        type=NotificationType.PAYMENT,
        title="Payment Verified" if verified else "Payment Declined",
        message=(
            f"Your payment of {payment.amount} for {listing.title} was "
            f"{'verified' if verified else 'declined'}"
        ),
        link=TENANT_DASHBOARD_LINK,
    )


async def notify_review_approved(
    data: DataService, *, review: Review, listing: Property
) -> Notification | None:
    return await _persist_notification(
        data,
        user_id=review.tenant_id,
        type=NotificationType.REVIEW,
        title="Review Published",
        message=f"Your review of {listing.title} is now visible",
        link=f"/properties/{listing.id}",
    )


__all__ = [
    "notify_booking_requested",
    "notify_payment_reviewed",
    "notify_payment_submitted",
    "notify_reservation_decided",
    "notify_review_approved",
]
