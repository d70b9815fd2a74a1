"""Helper utilities shared across API route handlers."""

from __future__ import annotations

from fastapi import HTTPException, WebSocket, status

from boardingfinder.application.use_cases.users import resolve_session_context
from boardingfinder.domain.entities import SessionContext
from boardingfinder.domain.errors import (
    AuthorizationError,
    BoardingFinderError,
    NotFoundError,
    TransientFetchError,
    ValidationError,
)
from boardingfinder.infrastructure.data_service import DataService

POLICY_VIOLATION = 1008
INTERNAL_ERROR = 1011


def to_http_exception(exc: BoardingFinderError) -> HTTPException:
    """Translate a domain failure into the HTTP error returned to clients."""

    if isinstance(exc, ValidationError):
        code = status.HTTP_400_BAD_REQUEST
    elif isinstance(exc, AuthorizationError):
        code = status.HTTP_403_FORBIDDEN
    elif isinstance(exc, NotFoundError):
        code = status.HTTP_404_NOT_FOUND
    elif isinstance(exc, TransientFetchError):
        code = status.HTTP_503_SERVICE_UNAVAILABLE
    else:
        code = status.HTTP_500_INTERNAL_SERVER_ERROR
    return HTTPException(status_code=code, detail=str(exc))


async def authenticate_websocket(
    websocket: WebSocket, data: DataService
) -> SessionContext | None:
    """Resolve the ``token`` query parameter or close the socket.

    Returns ``None`` once the socket has been closed.
    """

    token = websocket.query_params.get("token")
    if not token:
        await websocket.close(code=POLICY_VIOLATION)
        return None
    try:
        return await resolve_session_context(data, token)
    except AuthorizationError:
        await websocket.close(code=POLICY_VIOLATION)
    except TransientFetchError:
        await websocket.close(code=INTERNAL_ERROR)
    return None
