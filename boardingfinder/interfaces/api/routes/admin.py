"""Admin dashboard endpoints."""

from fastapi import APIRouter, Depends, Query

from boardingfinder.application.use_cases.admin import (
    DEFAULT_USER_LIST_LIMIT,
    get_platform_stats,
    list_users,
)
from boardingfinder.domain.entities import SessionContext
from boardingfinder.domain.errors import BoardingFinderError
from boardingfinder.infrastructure.data_service import DataService
from boardingfinder.interfaces.api.dependencies import get_data_service, require_admin
from boardingfinder.interfaces.api.routes_helpers import to_http_exception
from boardingfinder.interfaces.api.schemas import AdminUserRead, PlatformStatsRead

router = APIRouter(prefix="/admin", tags=["admin"])


@router.get("/stats", response_model=PlatformStatsRead)
async def read_stats(
    context: SessionContext = Depends(require_admin),
    data: DataService = Depends(get_data_service),
):
    try:
        return await get_platform_stats(context, data)
    except BoardingFinderError as exc:
        raise to_http_exception(exc) from exc


@router.get("/users", response_model=list[AdminUserRead])
async def read_users(
    limit: int = Query(DEFAULT_USER_LIST_LIMIT, ge=1, le=100),
    context: SessionContext = Depends(require_admin),
    data: DataService = Depends(get_data_service),
):
    try:
        users = await list_users(context, data, limit=limit)
    except BoardingFinderError as exc:
        raise to_http_exception(exc) from exc
    return [
        AdminUserRead(
            id=user.profile.id,
            email=user.profile.email,
            full_name=user.profile.full_name,
            role=user.role,
            created_at=user.profile.created_at,
        )
        for user in users
    ]
