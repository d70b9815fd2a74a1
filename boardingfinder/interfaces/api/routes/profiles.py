"""Endpoints for the caller's own profile."""

from fastapi import APIRouter, Depends

from boardingfinder.application.use_cases.profiles import get_own_profile, update_own_profile
from boardingfinder.domain.entities import SessionContext
from boardingfinder.domain.errors import BoardingFinderError
from boardingfinder.infrastructure.data_service import DataService
from boardingfinder.interfaces.api.dependencies import get_data_service, get_session_context
from boardingfinder.interfaces.api.routes_helpers import to_http_exception
from boardingfinder.interfaces.api.schemas import ProfileRead, ProfileUpdate

router = APIRouter(prefix="/profiles", tags=["profiles"])


@router.get("/me", response_model=ProfileRead)
async def read_own_profile(
    context: SessionContext = Depends(get_session_context),
    data: DataService = Depends(get_data_service),
):
    try:
        return await get_own_profile(context, data)
    except BoardingFinderError as exc:
        raise to_http_exception(exc) from exc


@router.put("/me", response_model=ProfileRead)
async def update_profile(
    payload: ProfileUpdate,
    context: SessionContext = Depends(get_session_context),
    data: DataService = Depends(get_data_service),
):
    try:
        return await update_own_profile(context, data, payload.model_dump(exclude_unset=True))
    except BoardingFinderError as exc:
        raise to_http_exception(exc) from exc
