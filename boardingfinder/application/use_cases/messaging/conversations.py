"""Derive one conversation per counterpart from the flat message store."""

from __future__ import annotations

import logging
from collections.abc import Iterable, Mapping

from boardingfinder.domain.entities import Conversation, Message, SessionContext, UserSummary
from boardingfinder.infrastructure.repositories import MessageRepository, ProfileRepository

from .sequencing import RequestSequencer

logger = logging.getLogger(__name__)


def aggregate_conversations(
    current_user_id: str,
    messages: Iterable[Message],
    counterparts: Mapping[str, UserSummary] | None = None,
) -> dict[str, Conversation]:
    """Return conversations keyed by counterpart id, most recent first.

    ``messages`` must be ordered by ``created_at`` descending: the first
    message seen for a counterpart is then its newest one, and only that
    message decides ``has_unread``. Messages the current user is not part of
    are skipped.
    """

    counterparts = counterparts or {}
    conversations: dict[str, Conversation] = {}
    for message in messages:
        if not message.involves(current_user_id):
            continue
        counterpart_id = message.counterpart_of(current_user_id)
        if counterpart_id in conversations:
            continue
        conversations[counterpart_id] = Conversation(
            counterpart=counterparts.get(counterpart_id) or UserSummary(id=counterpart_id),
            last_message=message,
            has_unread=message.is_unread_for(current_user_id),
        )
    return conversations


class ConversationList:
    """Conversation list of one messaging session.

    Each refresh replaces the whole list. A failed refresh raises
    :class:`~boardingfinder.domain.errors.TransientFetchError` and keeps the
    last successful aggregation.
    """

    def __init__(
        self,
        context: SessionContext,
        messages: MessageRepository,
        profiles: ProfileRepository,
    ) -> None:
        self._context = context
        self._messages = messages
        self._profiles = profiles
        self._sequencer = RequestSequencer()
        self._conversations: dict[str, Conversation] = {}

    @property
    def conversations(self) -> list[Conversation]:
        return list(self._conversations.values())

    def get(self, counterpart_id: str) -> Conversation | None:
        return self._conversations.get(counterpart_id)

    async def refresh(self) -> bool:
        """Re-fetch and re-aggregate; return ``False`` when the response was stale."""

        ticket = self._sequencer.issue()
        user_id = self._context.user_id
        messages = await self._messages.list_involving(user_id)
        counterpart_ids = {message.counterpart_of(user_id) for message in messages}
        profiles = await self._profiles.get_map_by_ids(counterpart_ids)
        summaries = {profile_id: profile.summary() for profile_id, profile in profiles.items()}
        aggregated = aggregate_conversations(user_id, messages, summaries)

        if not self._sequencer.accept(ticket):
            logger.debug("Discarding stale conversation list response %s", ticket)
            return False
        self._conversations = aggregated
        return True


__all__ = ["ConversationList", "aggregate_conversations"]
