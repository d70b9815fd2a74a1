"""Load, read-mark and append to the thread with one counterpart."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum

from boardingfinder.domain.entities import Message, SessionContext
from boardingfinder.domain.errors import TransientFetchError, ValidationError
from boardingfinder.infrastructure.repositories import MessageRepository

from .sequencing import RequestSequencer

logger = logging.getLogger(__name__)


class ThreadState(str, Enum):
    CLOSED = "closed"
    LOADING = "loading"
    LOADED = "loaded"
    SENDING = "sending"


@dataclass(frozen=True)
class ThreadSnapshot:
    state: ThreadState
    counterpart_id: str | None
    property_id: str | None
    messages: tuple[Message, ...]


def normalize_message_body(body: str | None) -> str:
    """Return the trimmed body or raise when nothing is left."""

    if body is not None and not isinstance(body, str):
        raise ValidationError("Message body must be a string")
    content = (body or "").strip()
    if not content:
        raise ValidationError("Message body cannot be empty")
    return content


async def send_message(
    context: SessionContext,
    messages: MessageRepository,
    *,
    receiver_id: str | None,
    body: str | None,
    property_id: str | None = None,
) -> Message:
    """Append a message from the current user to ``receiver_id``.

    Validation happens before the insert is attempted.
    """

    content = normalize_message_body(body)
    if not receiver_id:
        raise ValidationError("A recipient is required")
    if receiver_id == context.user_id:
        raise ValidationError("Cannot send a message to yourself")
    return await messages.create(
        sender_id=context.user_id,
        receiver_id=receiver_id,
        content=content,
        property_id=property_id or None,
    )


async def load_thread(
    context: SessionContext, messages: MessageRepository, counterpart_id: str
) -> list[Message]:
    """Fetch the thread in chronological order, then mark incoming messages read.

    The returned messages reflect the read state before the sweep.
    """

    thread = list(await messages.list_between(context.user_id, counterpart_id))
    await mark_thread_read(context, messages, counterpart_id)
    return thread


async def mark_thread_read(
    context: SessionContext, messages: MessageRepository, counterpart_id: str
) -> int:
    try:
        updated = await messages.mark_read_from(
            receiver_id=context.user_id, sender_id=counterpart_id
        )
    except TransientFetchError:
        logger.warning(
            "Could not mark messages from %s to %s as read", counterpart_id, context.user_id
        )
        return 0
    if updated:
        logger.debug("Marked %s message(s) from %s as read", updated, counterpart_id)
    return updated


class ThreadController:
    """State machine for the thread currently open in a messaging session.

    ``CLOSED -> LOADING -> LOADED <-> SENDING``. A failed fetch or append
    restores the previous stable state and re-raises
    :class:`TransientFetchError`; nothing is retried.
    """

    def __init__(self, context: SessionContext, messages: MessageRepository) -> None:
        self._context = context
        self._messages = messages
        self._sequencer = RequestSequencer()
        self.state = ThreadState.CLOSED
        self.counterpart_id: str | None = None
        self.property_id: str | None = None
        self.messages: tuple[Message, ...] = ()

    @property
    def is_open(self) -> bool:
        return self.counterpart_id is not None and self.state is not ThreadState.CLOSED

    def snapshot(self) -> ThreadSnapshot:
        return ThreadSnapshot(
            state=self.state,
            counterpart_id=self.counterpart_id,
            property_id=self.property_id,
            messages=self.messages,
        )

    async def open(self, counterpart_id: str | None, property_id: str | None = None) -> ThreadSnapshot:
        if not counterpart_id:
            raise ValidationError("A counterpart is required to open a conversation")
        if not isinstance(counterpart_id, str):
            raise ValidationError("counterpart_id must be a string")
        if property_id is not None and not isinstance(property_id, str):
            raise ValidationError("property_id must be a string")
        if counterpart_id == self._context.user_id:
            raise ValidationError("Cannot open a conversation with yourself")

        previous = self.snapshot()
        applied_before = self._sequencer.last_applied
        self.state = ThreadState.LOADING
        if counterpart_id != previous.counterpart_id:
            self.messages = ()
        self.counterpart_id = counterpart_id
        self.property_id = property_id or None
        try:
            await self._load()
        except TransientFetchError:
            # A concurrent refresh may already have applied this thread.
            if self._sequencer.last_applied == applied_before:
                self._restore(previous)
            raise
        return self.snapshot()

    async def refresh(self) -> bool:
        """Re-fetch the open thread; return ``False`` if nothing was applied."""

        if not self.is_open:
            return False
        return await self._load()

    async def send(self, body: str | None) -> Message:
        normalize_message_body(body)
        if not self.is_open:
            raise ValidationError("No conversation is open")
        if self.state is not ThreadState.LOADED:
            raise ValidationError("The conversation is not ready for sending")

        self.state = ThreadState.SENDING
        try:
            message = await send_message(
                self._context,
                self._messages,
                receiver_id=self.counterpart_id,
                body=body,
                property_id=self.property_id,
            )
        finally:
            self.state = ThreadState.LOADED
        await self._load()
        return message

    def close(self) -> ThreadSnapshot:
        self.state = ThreadState.CLOSED
        self.counterpart_id = None
        self.property_id = None
        self.messages = ()
        return self.snapshot()

    async def _load(self) -> bool:
        ticket = self._sequencer.issue()
        counterpart_id = self.counterpart_id
        thread = await self._messages.list_between(self._context.user_id, counterpart_id)

        if counterpart_id != self.counterpart_id or not self._sequencer.accept(ticket):
            logger.debug("Discarding stale thread response %s for %s", ticket, counterpart_id)
            return False
        self.messages = tuple(thread)
        if self.state is ThreadState.LOADING:
            self.state = ThreadState.LOADED
        await mark_thread_read(self._context, self._messages, counterpart_id)
        return True

    def _restore(self, snapshot: ThreadSnapshot) -> None:
        self.state = ThreadState.LOADED if snapshot.counterpart_id else ThreadState.CLOSED
        self.counterpart_id = snapshot.counterpart_id
        self.property_id = snapshot.property_id
        self.messages = snapshot.messages


__all__ = [
    "ThreadController",
    "ThreadSnapshot",
    "ThreadState",
    "load_thread",
    "mark_thread_read",
    "normalize_message_body",
    "send_message",
]
