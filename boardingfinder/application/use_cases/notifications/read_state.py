"""Notification list and read-state operations for the current user."""

from __future__ import annotations

from collections.abc import Sequence

from boardingfinder.domain.entities import Notification, SessionContext
from boardingfinder.domain.errors import ValidationError
from boardingfinder.infrastructure.data_service import DataService
from boardingfinder.infrastructure.repositories import NotificationRepository


async def list_notifications(
    context: SessionContext, data: DataService, *, unread_only: bool = False
) -> Sequence[Notification]:
    repository = NotificationRepository(data)
    if unread_only:
        return await repository.list_unread_for_user(context.user_id)
    return await repository.list_for_user(context.user_id)


async def mark_notification_read(
    context: SessionContext, data: DataService, notification_id: str
) -> Sequence[Notification]:
    """Set ``is_read`` and return the refreshed list.

    Updating a notification that belongs to someone else matches no row and
    leaves the list unchanged.
    """

    if not notification_id:
        raise ValidationError("A notification id is required")
    repository = NotificationRepository(data)
    await repository.mark_read(notification_id, user_id=context.user_id)
    return await repository.list_for_user(context.user_id)
