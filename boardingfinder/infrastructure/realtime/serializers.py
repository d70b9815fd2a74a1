"""JSON payload builders for realtime frames."""

from __future__ import annotations

from typing import Any

from boardingfinder.domain.entities import Conversation, Message, Notification, UserSummary
from boardingfinder.utils import isoformat_or_none


def serialize_user_summary(summary: UserSummary) -> dict[str, Any]:
    return {
        "id": summary.id,
        "full_name": summary.full_name,
        "email": summary.email,
        "display_name": summary.display_name,
    }


def serialize_message(message: Message) -> dict[str, Any]:
    return {
        "id": message.id,
        "sender_id": message.sender_id,
        "receiver_id": message.receiver_id,
        "content": message.content,
        "property_id": message.property_id,
        "is_read": message.is_read,
        "created_at": isoformat_or_none(message.created_at),
    }


def serialize_conversation(conversation: Conversation) -> dict[str, Any]:
    return {
        "counterpart": serialize_user_summary(conversation.counterpart),
        "last_message": serialize_message(conversation.last_message),
        "has_unread": conversation.has_unread,
    }


def serialize_notification(notification: Notification) -> dict[str, Any]:
    return {
        "id": notification.id,
        "user_id": notification.user_id,
        "type": notification.type.value,
        "title": notification.title,
        "message": notification.message,
        "link": notification.link,
        "is_read": notification.is_read,
        "created_at": isoformat_or_none(notification.created_at),
    }


__all__ = [
    "serialize_conversation",
    "serialize_message",
    "serialize_notification",
    "serialize_user_summary",
]
