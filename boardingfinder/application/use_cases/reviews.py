"""Use cases for tenant reviews and their moderation."""

from __future__ import annotations

import logging
from collections.abc import Sequence

from boardingfinder.domain.entities import Review, SessionContext, UserRole
from boardingfinder.domain.errors import NotFoundError, ValidationError
from boardingfinder.infrastructure.data_service import DataService
from boardingfinder.infrastructure.repositories import ReviewRepository

from ._access import require_role
from .notifications import notify_review_approved
from .properties import get_property

logger = logging.getLogger(__name__)


async def submit_review(
    context: SessionContext,
    data: DataService,
    *,
    property_id: str,
    rating: int,
    comment: str | None = None,
) -> Review:
    require_role(context, UserRole.TENANT)
    review = Review(
        id=None,
        property_id=property_id,
        tenant_id=context.user_id,
        rating=rating,
        comment=(comment or "").strip() or None,
    )
    await get_property(data, property_id)
    return await ReviewRepository(data).create(review)


async def list_pending_reviews(context: SessionContext, data: DataService) -> Sequence[Review]:
    require_role(context, UserRole.ADMIN)
    return await ReviewRepository(data).list_pending()


async def moderate_review(
    context: SessionContext, data: DataService, review_id: str, *, approved: bool
) -> Review:
    """Approve or reject a pending review; either way it leaves the queue."""

    require_role(context, UserRole.ADMIN)
    repository = ReviewRepository(data)
    review = await repository.get(review_id)
    if review is None:
        raise NotFoundError("Review not found")
    if not review.is_pending():
        raise ValidationError("The review has already been moderated")

    await repository.moderate(review_id, approved=approved)
    moderated = await repository.get(review_id)
    logger.info("Review %s %s", review_id, "approved" if approved else "rejected")
    if approved:
        listing = await get_property(data, moderated.property_id)
        await notify_review_approved(data, review=moderated, listing=listing)
    return moderated


__all__ = ["list_pending_reviews", "moderate_review", "submit_review"]
