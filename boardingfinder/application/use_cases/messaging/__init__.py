"""Messaging use cases: conversation aggregation, threads and push reconciliation."""

from .conversations import ConversationList, aggregate_conversations
from .sequencing import RequestSequencer
from .session import MessagingSession, RefreshTarget, error_frame, plan_refresh
from .thread import (
    ThreadController,
    ThreadSnapshot,
    ThreadState,
    load_thread,
    mark_thread_read,
    normalize_message_body,
    send_message,
)

__all__ = [
    "ConversationList",
    "MessagingSession",
    "RefreshTarget",
    "RequestSequencer",
    "ThreadController",
    "ThreadSnapshot",
    "ThreadState",
    "aggregate_conversations",
    "error_frame",
    "load_thread",
    "mark_thread_read",
    "normalize_message_body",
    "plan_refresh",
    "send_message",
]
