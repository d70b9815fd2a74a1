"""Derived conversation summary, one per counterpart."""

from __future__ import annotations

from dataclasses import dataclass

from .message import Message
from .profile import UserSummary


@dataclass(frozen=True)
class Conversation:
    """Newest message exchanged with ``counterpart`` and its unread state.

    ``has_unread`` only reflects the newest message; older unread messages in
    the same thread do not set it.
    """

    counterpart: UserSummary
    last_message: Message
    has_unread: bool


__all__ = ["Conversation"]
