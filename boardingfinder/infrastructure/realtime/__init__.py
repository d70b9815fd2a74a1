"""Realtime change-feed helpers for the infrastructure layer."""

from .change_feed import ChangeFeed, InsertEvent, InsertListener, SubscriptionHandle, change_feed
from .serializers import (
    serialize_conversation,
    serialize_message,
    serialize_notification,
    serialize_user_summary,
)

__all__ = [
    "ChangeFeed",
    "InsertEvent",
    "InsertListener",
    "SubscriptionHandle",
    "change_feed",
    "serialize_conversation",
    "serialize_message",
    "serialize_notification",
    "serialize_user_summary",
]
