"""Endpoints and websocket session for direct messaging."""

from __future__ import annotations

import logging
from collections.abc import AsyncIterator
from typing import Any

from fastapi import APIRouter, Depends, WebSocket, WebSocketDisconnect, status

from boardingfinder.application.use_cases.messaging import (
    ConversationList,
    MessagingSession,
    error_frame,
    load_thread,
    send_message,
)
from boardingfinder.domain.entities import SessionContext
from boardingfinder.domain.errors import BoardingFinderError, ValidationError
from boardingfinder.infrastructure.data_service import DataService
from boardingfinder.infrastructure.repositories import MessageRepository, ProfileRepository
from boardingfinder.interfaces.api.dependencies import get_data_service, get_session_context
from boardingfinder.interfaces.api.routes_helpers import authenticate_websocket, to_http_exception
from boardingfinder.interfaces.api.schemas import ConversationRead, MessageCreate, MessageRead

router = APIRouter(prefix="/messages", tags=["messages"])
logger = logging.getLogger(__name__)


@router.get("/conversations", response_model=list[ConversationRead])
async def read_conversations(
    context: SessionContext = Depends(get_session_context),
    data: DataService = Depends(get_data_service),
) -> list[ConversationRead]:
    """Return one entry per counterpart, most recent first."""

    conversations = ConversationList(context, MessageRepository(data), ProfileRepository(data))
    try:
        await conversations.refresh()
    except BoardingFinderError as exc:
        raise to_http_exception(exc) from exc
    return [ConversationRead.model_validate(item) for item in conversations.conversations]


@router.post("/", response_model=MessageRead, status_code=status.HTTP_201_CREATED)
async def create_message(
    payload: MessageCreate,
    context: SessionContext = Depends(get_session_context),
    data: DataService = Depends(get_data_service),
):
    try:
        return await send_message(
            context,
            MessageRepository(data),
            receiver_id=payload.receiver_id,
            body=payload.content,
            property_id=payload.property_id,
        )
    except BoardingFinderError as exc:
        raise to_http_exception(exc) from exc


@router.websocket("/ws")
async def messaging_websocket(
    websocket: WebSocket, data: DataService = Depends(get_data_service)
) -> None:
    """Serve one messaging view over a websocket.

    The conversation list is pushed on connect and after every message
    insert; the open thread is pushed after ``open``, ``send`` and inserts.
    """

    context = await authenticate_websocket(websocket, data)
    if context is None:
        return
    await websocket.accept()

    async def publish(frame: dict[str, Any]) -> None:
        try:
            await websocket.send_json(frame)
        except (WebSocketDisconnect, RuntimeError):
            logger.debug("Dropping %s frame for closed socket of %s", frame.get("type"), context.user_id)

    async def commands() -> AsyncIterator[dict[str, Any]]:
        while True:
            try:
                message = await websocket.receive_json()
            except WebSocketDisconnect:
                return
            except ValueError:
                await publish(error_frame(ValidationError("Frames must be valid JSON")))
                continue
            yield message

    await MessagingSession(context, data, publish).run(commands())
    logger.debug("Messaging socket closed for %s", context.user_id)


# Registered last so the literal paths above take precedence.
@router.get("/{counterpart_id}", response_model=list[MessageRead])
async def read_thread(
    counterpart_id: str,
    context: SessionContext = Depends(get_session_context),
    data: DataService = Depends(get_data_service),
):
    """Return the thread in chronological order and mark incoming messages read."""

    try:
        return await load_thread(context, MessageRepository(data), counterpart_id)
    except BoardingFinderError as exc:
        raise to_http_exception(exc) from exc
