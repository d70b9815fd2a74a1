"""Endpoints for browsing and managing listings."""

from __future__ import annotations

from fastapi import APIRouter, Depends, Query, status

from boardingfinder.application.use_cases.properties import (
    create_property,
    get_property_detail,
    list_properties,
    update_property_status,
)
from boardingfinder.domain.entities import PropertyStatus, SessionContext
from boardingfinder.domain.errors import BoardingFinderError
from boardingfinder.infrastructure.data_service import DataService
from boardingfinder.interfaces.api.dependencies import get_data_service, require_landlord
from boardingfinder.interfaces.api.routes_helpers import to_http_exception
from boardingfinder.interfaces.api.schemas import (
    PropertyCreate,
    PropertyDetailRead,
    PropertyRead,
    PropertyStatusUpdate,
    ReviewRead,
    UserSummaryRead,
)

router = APIRouter(prefix="/properties", tags=["properties"])


@router.get("/", response_model=list[PropertyRead])
async def browse_properties(
    featured: bool | None = Query(default=None),
    status_filter: PropertyStatus | None = Query(default=None, alias="status"),
    city: str | None = Query(default=None),
    landlord_id: str | None = Query(default=None),
    limit: int = Query(default=100, ge=1, le=500),
    data: DataService = Depends(get_data_service),
):
    try:
        return await list_properties(
            data,
            featured=featured,
            status=status_filter,
            city=city,
            landlord_id=landlord_id,
            limit=limit,
        )
    except BoardingFinderError as exc:
        raise to_http_exception(exc) from exc


@router.post("/", response_model=PropertyRead, status_code=status.HTTP_201_CREATED)
async def create_listing(
    payload: PropertyCreate,
    context: SessionContext = Depends(require_landlord),
    data: DataService = Depends(get_data_service),
):
    try:
        return await create_property(context, data, payload.model_dump())
    except BoardingFinderError as exc:
        raise to_http_exception(exc) from exc


@router.get("/{property_id}", response_model=PropertyDetailRead)
async def read_property(property_id: str, data: DataService = Depends(get_data_service)):
    """Return the listing with its landlord and approved reviews."""

    try:
        detail = await get_property_detail(data, property_id)
    except BoardingFinderError as exc:
        raise to_http_exception(exc) from exc
    return PropertyDetailRead(
        listing=PropertyRead.model_validate(detail.listing),
        landlord=UserSummaryRead.model_validate(detail.landlord),
        reviews=[ReviewRead.model_validate(review) for review in detail.reviews],
    )


@router.patch("/{property_id}/status", response_model=PropertyRead)
async def change_listing_status(
    property_id: str,
    payload: PropertyStatusUpdate,
    context: SessionContext = Depends(require_landlord),
    data: DataService = Depends(get_data_service),
):
    try:
        return await update_property_status(context, data, property_id, payload.status)
    except BoardingFinderError as exc:
        raise to_http_exception(exc) from exc
