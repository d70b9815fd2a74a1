"""Public helpers for emitting and reading notifications."""

from .events import (
    notify_booking_requested,
    notify_payment_reviewed,
    notify_payment_submitted,
    notify_reservation_decided,
    notify_review_approved,
)
from .read_state import list_notifications, mark_notification_read

__all__ = [
    "list_notifications",
    "mark_notification_read",
    "notify_booking_requested",
    "notify_payment_reviewed",
    "notify_payment_submitted",
    "notify_reservation_decided",
    "notify_review_approved",
]
