"""Per-connection messaging view: conversation list, open thread and push reconciliation."""

from __future__ import annotations

import logging
import math
from collections.abc import AsyncIterable, Awaitable, Callable
from enum import Enum
from typing import Any

import anyio
from anyio.abc import TaskGroup

from boardingfinder.domain.entities import SessionContext
from boardingfinder.domain.errors import (
    AuthorizationError,
    BoardingFinderError,
    NotFoundError,
    TransientFetchError,
    ValidationError,
)
from boardingfinder.infrastructure.data_service import DataService
from boardingfinder.infrastructure.realtime import (
    InsertEvent,
    serialize_conversation,
    serialize_message,
)
from boardingfinder.infrastructure.repositories import MessageRepository, ProfileRepository

from .conversations import ConversationList
from .thread import ThreadController

logger = logging.getLogger(__name__)

Frame = dict[str, Any]
Publisher = Callable[[Frame], Awaitable[None]]

MESSAGES_TABLE = MessageRepository.TABLE


class RefreshTarget(str, Enum):
    CONVERSATIONS = "conversations"
    THREAD = "thread"


def plan_refresh(event: InsertEvent, *, thread_open: bool) -> tuple[RefreshTarget, ...]:
    """Decide what to re-fetch after a message insert.

    The event's sender and receiver are not inspected: every insert refreshes
    the conversation list and, when one is open, the thread, both in full.
    """

    if event.table != MESSAGES_TABLE:
        return ()
    if thread_open:
        return (RefreshTarget.THREAD, RefreshTarget.CONVERSATIONS)
    return (RefreshTarget.CONVERSATIONS,)


def error_frame(exc: BoardingFinderError) -> Frame:
    if isinstance(exc, ValidationError):
        kind = "validation"
    elif isinstance(exc, AuthorizationError):
        kind = "authorization"
    elif isinstance(exc, NotFoundError):
        kind = "not_found"
    elif isinstance(exc, TransientFetchError):
        kind = "transient"
    else:
        kind = "error"
    return {"type": "error", "data": {"kind": kind, "detail": str(exc)}}


class MessagingSession:
    """State of one mounted messaging view.

    Insert events reach the view through a memory object stream; the
    listener registered on the change feed only enqueues. :meth:`run` holds
    the subscription for the lifetime of the connection and spawns one
    refresh task per planned target per event, without coalescing.
    """

    def __init__(
        self,
        context: SessionContext,
        data: DataService,
        publish: Publisher,
        *,
        messages: MessageRepository | None = None,
        profiles: ProfileRepository | None = None,
    ) -> None:
        self.context = context
        self._data = data
        self._publish = publish
        messages = messages or MessageRepository(data)
        profiles = profiles or ProfileRepository(data)
        self.conversations = ConversationList(context, messages, profiles)
        self.thread = ThreadController(context, messages)
        self._event_sender, self._event_receiver = anyio.create_memory_object_stream(
            max_buffer_size=math.inf
        )

    def on_insert(self, event: InsertEvent) -> None:
        """Change-feed listener; must not block."""

        self._event_sender.send_nowait(event)

    async def run(self, commands: AsyncIterable[Frame]) -> None:
        """Serve ``commands`` until the client goes away."""

        try:
            with self._data.change_feed.subscription(MESSAGES_TABLE, self.on_insert):
                async with anyio.create_task_group() as task_group:
                    task_group.start_soon(self._consume_events, task_group)
                    await self.refresh(RefreshTarget.CONVERSATIONS)
                    async for command in commands:
                        await self.handle_command(command)
                    task_group.cancel_scope.cancel()
        finally:
            self._event_sender.close()
            self._event_receiver.close()
            logger.debug("Messaging session for %s torn down", self.context.user_id)

    async def apply_event(self, event: InsertEvent) -> None:
        """Run the refreshes planned for ``event`` one after the other."""

        for target in plan_refresh(event, thread_open=self.thread.is_open):
            await self.refresh(target)

    async def refresh(self, target: RefreshTarget) -> None:
        try:
            if target is RefreshTarget.THREAD:
                if await self.thread.refresh():
                    await self._publish_thread()
            elif await self.conversations.refresh():
                await self._publish_conversations()
        except BoardingFinderError as exc:
            logger.info("Refresh of %s failed for %s: %s", target.value, self.context.user_id, exc)
            await self._publish(error_frame(exc))

    async def handle_command(self, command: Frame) -> None:
        try:
            await self._dispatch(command)
        except BoardingFinderError as exc:
            await self._publish(error_frame(exc))

    async def _dispatch(self, command: Frame) -> None:
        if not isinstance(command, dict):
            raise ValidationError("Commands must be JSON objects")
        command_type = command.get("type")
        if command_type == "ping":
            await self._publish({"type": "pong"})
        elif command_type == "open":
            await self.thread.open(command.get("counterpart_id"), command.get("property_id"))
            await self._publish_thread()
        elif command_type == "send":
            await self.thread.send(command.get("content"))
            await self._publish_thread()
        elif command_type == "close":
            self.thread.close()
            await self._publish_thread()
        elif command_type == "refresh":
            await self.refresh(RefreshTarget.CONVERSATIONS)
            await self.refresh(RefreshTarget.THREAD)
        else:
            raise ValidationError(f"Unsupported command type: {command_type!r}")

    async def _consume_events(self, task_group: TaskGroup) -> None:
        async for event in self._event_receiver:
            for target in plan_refresh(event, thread_open=self.thread.is_open):
                task_group.start_soon(self.refresh, target)

    async def _publish_conversations(self) -> None:
        await self._publish(
            {
                "type": "conversations",
                "data": [serialize_conversation(item) for item in self.conversations.conversations],
            }
        )

    async def _publish_thread(self) -> None:
        snapshot = self.thread.snapshot()
        await self._publish(
            {
                "type": "thread",
                "data": {
                    "state": snapshot.state.value,
                    "counterpart_id": snapshot.counterpart_id,
                    "property_id": snapshot.property_id,
                    "messages": [serialize_message(message) for message in snapshot.messages],
                },
            }
        )


__all__ = [
    "MessagingSession",
    "RefreshTarget",
    "error_frame",
    "plan_refresh",
]
