"""Tests for deriving conversations from the flat message store."""

from __future__ import annotations

from datetime import datetime, timedelta, timezone

import pytest

from boardingfinder.application.use_cases.messaging import ConversationList, aggregate_conversations
from boardingfinder.domain.entities import Message, UserSummary
from boardingfinder.domain.errors import TransientFetchError
from boardingfinder.infrastructure.repositories import MessageRepository, ProfileRepository

EPOCH = datetime(2024, 1, 1, tzinfo=timezone.utc)


def _message(id_, sender, receiver, minute, *, is_read=False):
    return Message(
        id=id_,
        sender_id=sender,
        receiver_id=receiver,
        content=f"message {id_}",
        created_at=EPOCH + timedelta(minutes=minute),
        is_read=is_read,
    )


def _newest_first(*messages):
    return sorted(messages, key=lambda message: message.created_at, reverse=True)


def test_one_entry_per_counterpart_with_the_newest_message():
    messages = _newest_first(
        _message("m1", "a", "b", 1),
        _message("m2", "b", "a", 2),
        _message("m3", "a", "c", 3),
        _message("m4", "c", "a", 4),
        _message("m5", "a", "b", 5),
    )

    conversations = aggregate_conversations("a", messages)

    assert list(conversations) == ["b", "c"]
    assert conversations["b"].last_message.id == "m5"
    assert conversations["c"].last_message.id == "m4"
    for counterpart_id, conversation in conversations.items():
        pair = [m for m in messages if m.counterpart_of("a") == counterpart_id]
        assert conversation.last_message.created_at == max(m.created_at for m in pair)


def test_scenario_a_two_counterparts():
    messages = _newest_first(
        _message("t1", "A", "B", 1),
        _message("t2", "B", "A", 2),
        _message("t3", "A", "C", 3),
    )

    conversations = aggregate_conversations("A", messages)

    assert set(conversations) == {"B", "C"}
    assert conversations["B"].last_message.id == "t2"
    assert conversations["B"].has_unread is True
    assert conversations["C"].last_message.id == "t3"
    assert conversations["C"].has_unread is False


def test_only_the_newest_message_decides_unread():
    messages = _newest_first(
        _message("old", "b", "a", 1, is_read=False),
        _message("new", "b", "a", 2, is_read=True),
    )

    conversations = aggregate_conversations("a", messages)

    assert conversations["b"].has_unread is False


def test_unread_requires_the_current_user_to_be_the_receiver():
    messages = [_message("m1", "a", "b", 1, is_read=False)]

    assert aggregate_conversations("a", messages)["b"].has_unread is False


def test_foreign_messages_are_skipped_and_summaries_fall_back():
    messages = _newest_first(_message("x", "c", "d", 2), _message("m", "b", "a", 1))

    conversations = aggregate_conversations(
        "a", messages, {"z": UserSummary(id="z", full_name="Zed")}
    )

    assert list(conversations) == ["b"]
    assert conversations["b"].counterpart == UserSummary(id="b")
    assert conversations["b"].counterpart.display_name == "Unknown user"


@pytest.mark.anyio
async def test_conversation_list_refresh_uses_profiles(data, seed):
    alice = await seed.profile("alice")
    bob = await seed.profile("bob")
    carol = await seed.profile("carol")
    await seed.message(alice, bob, "hi bob", minute=1)
    await seed.message(bob, alice, "hi alice", minute=2)
    await seed.message(alice, carol, "hi carol", minute=3)

    conversations = ConversationList(
        seed.context(alice), MessageRepository(data), ProfileRepository(data)
    )
    assert await conversations.refresh() is True

    entries = conversations.conversations
    assert [entry.counterpart.id for entry in entries] == [carol, bob]
    assert entries[0].counterpart.display_name == "Carol"
    assert conversations.get(bob).last_message.content == "hi alice"
    assert conversations.get(bob).has_unread is True


class _FailingMessages:
    def __init__(self, rows):
        self.rows = rows
        self.fail = False

    async def list_involving(self, user_id):
        if self.fail:
            raise TransientFetchError("query", "messages", "offline")
        return self.rows


class _NoProfiles:
    async def get_map_by_ids(self, ids):
        return {}


@pytest.mark.anyio
async def test_failed_refresh_keeps_the_last_list(seed):
    messages = _FailingMessages([_message("m1", "b", "a", 1)])
    conversations = ConversationList(seed.context("a"), messages, _NoProfiles())
    await conversations.refresh()

    messages.fail = True
    with pytest.raises(TransientFetchError):
        await conversations.refresh()

    assert [entry.last_message.id for entry in conversations.conversations] == ["m1"]
