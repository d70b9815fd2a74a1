"""FastAPI dependency utilities."""

from __future__ import annotations

from functools import lru_cache

from fastapi import Depends, HTTPException, status
from fastapi.security import OAuth2PasswordBearer

from boardingfinder.application.use_cases.users import resolve_session_context
from boardingfinder.domain.entities import SessionContext, UserRole
from boardingfinder.domain.errors import AuthorizationError, TransientFetchError
from boardingfinder.infrastructure.data_service import DataService
from boardingfinder.infrastructure.database import SessionLocal
from boardingfinder.infrastructure.realtime import change_feed

oauth2_scheme = OAuth2PasswordBearer(tokenUrl="auth/token")


@lru_cache
def get_data_service() -> DataService:
    """Return the process-wide data service bound to the configured database."""

    return DataService(SessionLocal, change_feed)


async def get_session_context(
    token: str = Depends(oauth2_scheme),
    data: DataService = Depends(get_data_service),
) -> SessionContext:
    """Return the session context for the bearer token."""

    try:
        return await resolve_session_context(data, token)
    except AuthorizationError as exc:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail=str(exc),
            headers={"WWW-Authenticate": "Bearer"},
        ) from exc
    except TransientFetchError as exc:
        raise HTTPException(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE, detail=str(exc)
        ) from exc


def _require(role: UserRole):
    def dependency(context: SessionContext = Depends(get_session_context)) -> SessionContext:
        if not context.has_role(role):
            raise HTTPException(
                status_code=status.HTTP_403_FORBIDDEN,
                detail=f"Only a {role.value} can perform this action",
            )
        return context

    return dependency


require_admin = _require(UserRole.ADMIN)
require_landlord = _require(UserRole.LANDLORD)
require_tenant = _require(UserRole.TENANT)
