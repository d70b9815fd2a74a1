"""Use cases for rent payments and their verification."""

from __future__ import annotations

import logging
from collections.abc import Sequence
from decimal import Decimal

from boardingfinder.domain.entities import (
    Payment,
    PaymentMethod,
    PaymentStatus,
    SessionContext,
    UserRole,
)
from boardingfinder.domain.entities._validation import coerce_enum
from boardingfinder.domain.errors import AuthorizationError, NotFoundError, ValidationError
from boardingfinder.infrastructure.data_service import DataService
from boardingfinder.infrastructure.repositories import PaymentRepository
from boardingfinder.utils import now_utc

from ._access import require_role
from .bookings import get_reservation, list_reservations
from .notifications import notify_payment_reviewed, notify_payment_submitted
from .properties import get_property

logger = logging.getLogger(__name__)

REVIEW_OUTCOMES = frozenset({PaymentStatus.VERIFIED, PaymentStatus.DECLINED})


async def submit_payment(
    context: SessionContext,
    data: DataService,
    *,
    reservation_id: str,
    amount: Decimal,
    method: PaymentMethod | str,
    reference_number: str | None = None,
    receipt_url: str | None = None,
    notes: str | None = None,
) -> Payment:
    require_role(context, UserRole.TENANT)
    payment = Payment(
        id=None,
        reservation_id=reservation_id,
        amount=amount,
        method=method,
        reference_number=reference_number,
        receipt_url=receipt_url,
        notes=notes,
    )
    reservation = await get_reservation(data, reservation_id)
    if reservation.tenant_id != context.user_id:
        raise AuthorizationError("You can only pay for your own reservations")
    listing = await get_property(data, reservation.property_id)

    created = await PaymentRepository(data).create(payment)
    logger.info("Payment %s submitted for reservation %s", created.id, reservation_id)
    await notify_payment_submitted(data, payment=created, listing=listing)
    return created


async def list_payments(context: SessionContext, data: DataService) -> Sequence[Payment]:
    reservations = await list_reservations(context, data)
    return await PaymentRepository(data).list_for_reservations(
        reservation.id for reservation in reservations
    )


async def review_payment(
    context: SessionContext,
    data: DataService,
    payment_id: str,
    status: PaymentStatus | str,
) -> Payment:
    """Verify or decline a payment on one of the landlord's listings."""

    status = coerce_enum(PaymentStatus, status, "payment status")
    if status not in REVIEW_OUTCOMES:
        raise ValidationError("A payment can only be verified or declined")

    repository = PaymentRepository(data)
    payment = await repository.get(payment_id)
    if payment is None:
        raise NotFoundError("Payment not found")
    reservation = await get_reservation(data, payment.reservation_id)
    listing = await get_property(data, reservation.property_id)
    if listing.landlord_id != context.user_id:
        raise AuthorizationError("Only the landlord of this property can review payments")

    await repository.record_review(
        payment_id,
        status=status,
        verified_by=context.user_id,
        verified_at=now_utc() if status is PaymentStatus.VERIFIED else None,
    )
    updated = await repository.get(payment_id)
    await notify_payment_reviewed(
        data, payment=updated, reservation=reservation, listing=listing
    )
    return updated


__all__ = ["list_payments", "review_payment", "submit_payment"]
