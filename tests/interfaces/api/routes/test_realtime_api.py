"""Integration tests for the messaging and notification websockets."""

from __future__ import annotations

import pytest
from fastapi import WebSocketDisconnect


def receive_until(websocket, predicate, limit=25):
    for _ in range(limit):
        frame = websocket.receive_json()
        if predicate(frame):
            return frame
    raise AssertionError("Expected frame never arrived")


def is_thread_with(count):
    return lambda frame: frame["type"] == "thread" and len(frame["data"]["messages"]) == count


def test_rest_messaging_flow(client, sign_up):
    alice = sign_up("alice")
    bob = sign_up("bob", "landlord")

    blank = client.post("/messages/", json={"receiver_id": bob.id, "content": "   "}, headers=alice.headers)
    assert blank.status_code == 400

    sent = client.post(
        "/messages/", json={"receiver_id": bob.id, "content": "Is the room free?"}, headers=alice.headers
    )
    assert sent.status_code == 201
    assert sent.json()["is_read"] is False

    [conversation] = client.get("/messages/conversations", headers=bob.headers).json()
    assert conversation["counterpart"]["id"] == alice.id
    assert conversation["counterpart"]["display_name"] == "Alice"
    assert conversation["has_unread"] is True

    thread = client.get(f"/messages/{alice.id}", headers=bob.headers).json()
    assert [message["content"] for message in thread] == ["Is the room free?"]

    [conversation] = client.get("/messages/conversations", headers=bob.headers).json()
    assert conversation["has_unread"] is False


def test_messaging_websocket_session(client, sign_up):
    alice = sign_up("alice")
    bob = sign_up("bob", "landlord")

    with client.websocket_connect(f"/messages/ws?token={alice.token}") as websocket:
        initial = websocket.receive_json()
        assert initial == {"type": "conversations", "data": []}

        websocket.send_json({"type": "send", "content": "too early"})
        error = receive_until(websocket, lambda frame: frame["type"] == "error")
        assert error["data"]["kind"] == "validation"

        websocket.send_json({"type": "open", "counterpart_id": bob.id})
        opened = receive_until(websocket, lambda frame: frame["type"] == "thread")
        assert opened["data"]["state"] == "loaded"
        assert opened["data"]["counterpart_id"] == bob.id

        websocket.send_json({"type": "send", "content": "Hello landlord"})
        sent = receive_until(websocket, is_thread_with(1))
        assert sent["data"]["messages"][-1]["content"] == "Hello landlord"

        reply = client.post(
            "/messages/", json={"receiver_id": alice.id, "content": "Hi Alice"}, headers=bob.headers
        )
        assert reply.status_code == 201
        pushed = receive_until(websocket, is_thread_with(2))
        assert [m["content"] for m in pushed["data"]["messages"]] == ["Hello landlord", "Hi Alice"]

        websocket.send_json({"type": "ping"})
        receive_until(websocket, lambda frame: frame == {"type": "pong"})

        websocket.send_json({"type": "close"})
        closed = receive_until(
            websocket, lambda frame: frame["type"] == "thread" and frame["data"]["state"] == "closed"
        )
        assert closed["data"]["messages"] == []


def test_websockets_require_a_valid_token(client):
    with pytest.raises(WebSocketDisconnect):
        with client.websocket_connect("/messages/ws?token=not-a-token"):
            pass
    with pytest.raises(WebSocketDisconnect):
        with client.websocket_connect("/notifications/ws"):
            pass


def test_notification_websocket_streams_new_notifications(client, sign_up, listing):
    landlord, created = listing
    tenant = sign_up("tina")

    with client.websocket_connect(f"/notifications/ws?token={landlord.token}") as websocket:
        assert websocket.receive_json() == {"type": "init", "data": []}

        booking = client.post(
            "/reservations/",
            json={"property_id": created["id"], "check_in": "2024-06-01"},
            headers=tenant.headers,
        )
        assert booking.status_code == 201

        frame = websocket.receive_json()
        assert frame["type"] == "notification"
        assert frame["data"]["title"] == "New Booking Request"
        assert frame["data"]["user_id"] == landlord.id

        websocket.send_json({"type": "ping"})
        assert websocket.receive_json() == {"type": "pong"}

    with client.websocket_connect(f"/notifications/ws?token={landlord.token}") as websocket:
        init = websocket.receive_json()
        assert [item["title"] for item in init["data"]] == ["New Booking Request"]
