"""Endpoints and websocket handler for realtime notifications."""

from __future__ import annotations

import logging
import math

import anyio
from anyio.abc import TaskGroup
from fastapi import APIRouter, Depends, WebSocket, WebSocketDisconnect

from boardingfinder.application.use_cases.notifications import (
    list_notifications,
    mark_notification_read,
)
from boardingfinder.domain.entities import SessionContext
from boardingfinder.domain.errors import BoardingFinderError
from boardingfinder.infrastructure.data_service import DataService
from boardingfinder.infrastructure.realtime import InsertEvent, serialize_notification
from boardingfinder.infrastructure.repositories import NotificationRepository
from boardingfinder.interfaces.api.dependencies import get_data_service, get_session_context
from boardingfinder.interfaces.api.routes_helpers import authenticate_websocket, to_http_exception
from boardingfinder.interfaces.api.schemas import NotificationRead

router = APIRouter(prefix="/notifications", tags=["notifications"])
logger = logging.getLogger(__name__)


@router.get("/", response_model=list[NotificationRead])
async def read_notifications(
    unread_only: bool = False,
    context: SessionContext = Depends(get_session_context),
    data: DataService = Depends(get_data_service),
):
    """Return the most recent notifications for the authenticated user."""

    try:
        return await list_notifications(context, data, unread_only=unread_only)
    except BoardingFinderError as exc:
        raise to_http_exception(exc) from exc


@router.post("/{notification_id}/read", response_model=list[NotificationRead])
async def mark_read(
    notification_id: str,
    context: SessionContext = Depends(get_session_context),
    data: DataService = Depends(get_data_service),
):
    """Mark one notification as read and return the refreshed list."""

    try:
        return await mark_notification_read(context, data, notification_id)
    except BoardingFinderError as exc:
        raise to_http_exception(exc) from exc


@router.websocket("/ws")
async def notifications_websocket(
    websocket: WebSocket, data: DataService = Depends(get_data_service)
) -> None:
    """Websocket endpoint that streams notifications to the authenticated user."""

    context = await authenticate_websocket(websocket, data)
    if context is None:
        return

    await websocket.accept()
    try:
        pending = await list_notifications(context, data, unread_only=True)
    except BoardingFinderError as exc:
        logger.warning("Could not load pending notifications for %s: %s", context.user_id, exc)
        pending = []
    await websocket.send_json(
        {"type": "init", "data": [serialize_notification(item) for item in pending]}
    )

    sender, receiver = anyio.create_memory_object_stream(max_buffer_size=math.inf)

    def on_insert(event: InsertEvent) -> None:
        if event.row.get("user_id") == context.user_id:
            sender.send_nowait(event)

    async def forward_events() -> None:
        async for event in receiver:
            notification = NotificationRepository.to_entity(event.row)
            await websocket.send_json(
                {"type": "notification", "data": serialize_notification(notification)}
            )

    async def receive_commands(task_group: TaskGroup) -> None:
        try:
            while True:
                try:
                    message = await websocket.receive_json()
                except ValueError:
                    continue
                if isinstance(message, dict) and message.get("type") == "ping":
                    await websocket.send_json({"type": "pong"})
        except WebSocketDisconnect:
            logger.debug("Notification socket closed for %s", context.user_id)
        task_group.cancel_scope.cancel()

    try:
        with data.change_feed.subscription(NotificationRepository.TABLE, on_insert):
            async with anyio.create_task_group() as task_group:
                task_group.start_soon(forward_events)
                task_group.start_soon(receive_commands, task_group)
    finally:
        sender.close()
        receiver.close()
