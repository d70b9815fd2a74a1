"""Tests for push reconciliation in the messaging session."""

from __future__ import annotations

import anyio
import pytest

from boardingfinder.application.use_cases.messaging import (
    MessagingSession,
    RefreshTarget,
    error_frame,
    plan_refresh,
)
from boardingfinder.domain.errors import AuthorizationError, TransientFetchError, ValidationError
from boardingfinder.infrastructure.realtime import InsertEvent
from boardingfinder.infrastructure.repositories import MessageRepository


class CountingMessages(MessageRepository):
    def __init__(self, data):
        super().__init__(data)
        self.list_between_calls = 0
        self.list_involving_calls = 0

    async def list_between(self, user_id, counterpart_id):
        self.list_between_calls += 1
        return await super().list_between(user_id, counterpart_id)

    async def list_involving(self, user_id):
        self.list_involving_calls += 1
        return await super().list_involving(user_id)


class FrameRecorder:
    def __init__(self):
        self.frames = []

    async def __call__(self, frame):
        self.frames.append(frame)

    def of_type(self, frame_type):
        return [frame for frame in self.frames if frame["type"] == frame_type]


def test_plan_refresh_ignores_the_pair_of_the_event():
    unrelated = InsertEvent("messages", {"sender_id": "c", "receiver_id": "d"})

    assert plan_refresh(unrelated, thread_open=True) == (
        RefreshTarget.THREAD,
        RefreshTarget.CONVERSATIONS,
    )
    assert plan_refresh(unrelated, thread_open=False) == (RefreshTarget.CONVERSATIONS,)
    assert plan_refresh(InsertEvent("notifications", {}), thread_open=True) == ()


def test_error_frames_carry_the_failure_kind():
    assert error_frame(ValidationError("empty"))["data"] == {"kind": "validation", "detail": "empty"}
    assert error_frame(AuthorizationError("no"))["data"]["kind"] == "authorization"
    assert error_frame(TransientFetchError("query", "messages"))["data"]["kind"] == "transient"


@pytest.mark.anyio
async def test_scenario_c_unrelated_insert_still_refreshes_the_open_thread(data, seed):
    alice = await seed.profile("alice")
    bob = await seed.profile("bob")
    carol = await seed.profile("carol")
    dave = await seed.profile("dave")
    await seed.message(bob, alice, "hi alice", minute=1)
    messages = CountingMessages(data)
    publish = FrameRecorder()
    session = MessagingSession(seed.context(alice), data, publish, messages=messages)
    await session.handle_command({"type": "open", "counterpart_id": bob})
    before = publish.of_type("thread")[-1]["data"]["messages"]
    calls_before = messages.list_between_calls

    row = await seed.message(carol, dave, "unrelated", minute=2)
    await session.apply_event(InsertEvent("messages", row))

    assert messages.list_between_calls == calls_before + 1
    assert messages.list_involving_calls == 1
    after = publish.of_type("thread")[-1]["data"]["messages"]
    assert [m["id"] for m in after] == [m["id"] for m in before]


@pytest.mark.anyio
async def test_insert_without_open_thread_refreshes_only_conversations(data, seed):
    alice = await seed.profile("alice")
    bob = await seed.profile("bob")
    messages = CountingMessages(data)
    publish = FrameRecorder()
    session = MessagingSession(seed.context(alice), data, publish, messages=messages)

    row = await seed.message(bob, alice, "knock knock", minute=1)
    await session.apply_event(InsertEvent("messages", row))

    assert messages.list_between_calls == 0
    [frame] = publish.of_type("conversations")
    assert frame["data"][0]["counterpart"]["id"] == bob
    assert frame["data"][0]["has_unread"] is True


@pytest.mark.anyio
async def test_commands_report_errors_without_ending_the_session(data, seed):
    alice = await seed.profile("alice")
    publish = FrameRecorder()
    session = MessagingSession(seed.context(alice), data, publish)

    await session.handle_command({"type": "send", "content": "nobody is listening"})
    await session.handle_command({"type": "dance"})
    await session.handle_command({"type": "ping"})

    kinds = [frame["data"]["kind"] for frame in publish.of_type("error")]
    assert kinds == ["validation", "validation"]
    assert publish.frames[-1] == {"type": "pong"}


@pytest.mark.anyio
async def test_malformed_send_is_reported_as_a_validation_error(data, seed):
    alice = await seed.profile("alice")
    bob = await seed.profile("bob")
    publish = FrameRecorder()
    session = MessagingSession(seed.context(alice), data, publish)
    await session.handle_command({"type": "open", "counterpart_id": bob})

    await session.handle_command({"type": "send", "content": 123})
    await session.handle_command({"type": "open", "counterpart_id": {"id": bob}})
    await session.handle_command({"type": "ping"})

    kinds = [frame["data"]["kind"] for frame in publish.of_type("error")]
    assert kinds == ["validation", "validation"]
    assert publish.frames[-1] == {"type": "pong"}
    assert session.thread.counterpart_id == bob


@pytest.mark.anyio
async def test_run_pushes_inserts_and_releases_the_subscription(data, seed, change_feed):
    alice = await seed.profile("alice")
    bob = await seed.profile("bob")
    publish = FrameRecorder()
    session = MessagingSession(seed.context(alice), data, publish)
    command_sender, command_receiver = anyio.create_memory_object_stream(10)

    async def wait_for(predicate):
        with anyio.fail_after(5):
            while not predicate():
                await anyio.sleep(0.01)

    async with anyio.create_task_group() as task_group:
        task_group.start_soon(session.run, command_receiver)
        await command_sender.send({"type": "ping"})
        await wait_for(lambda: {"type": "pong"} in publish.frames)
        assert change_feed.listener_count("messages") == 1

        await seed.message(bob, alice, "are you there?", minute=1)
        await wait_for(lambda: any(frame["data"] for frame in publish.of_type("conversations")))
        await command_sender.aclose()

    assert change_feed.listener_count("messages") == 0
    latest = publish.of_type("conversations")[-1]["data"]
    assert latest[0]["last_message"]["content"] == "are you there?"
