"""Endpoints for booking requests."""

from fastapi import APIRouter, Depends, status

from boardingfinder.application.use_cases.bookings import (
    create_reservation,
    list_reservations,
    update_reservation_status,
)
from boardingfinder.domain.entities import SessionContext
from boardingfinder.domain.errors import BoardingFinderError
from boardingfinder.infrastructure.data_service import DataService
from boardingfinder.interfaces.api.dependencies import (
    get_data_service,
    get_session_context,
    require_tenant,
)
from boardingfinder.interfaces.api.routes_helpers import to_http_exception
from boardingfinder.interfaces.api.schemas import (
    ReservationCreate,
    ReservationRead,
    ReservationStatusUpdate,
)

router = APIRouter(prefix="/reservations", tags=["reservations"])


@router.post("/", response_model=ReservationRead, status_code=status.HTTP_201_CREATED)
async def request_booking(
    payload: ReservationCreate,
    context: SessionContext = Depends(require_tenant),
    data: DataService = Depends(get_data_service),
):
    """Submit a booking request; the landlord is notified."""

    try:
        return await create_reservation(
            context,
            data,
            property_id=payload.property_id,
            check_in=payload.check_in,
            check_out=payload.check_out,
            notes=payload.notes,
        )
    except BoardingFinderError as exc:
        raise to_http_exception(exc) from exc


@router.get("/", response_model=list[ReservationRead])
async def read_reservations(
    context: SessionContext = Depends(get_session_context),
    data: DataService = Depends(get_data_service),
):
    try:
        return await list_reservations(context, data)
    except BoardingFinderError as exc:
        raise to_http_exception(exc) from exc


@router.patch("/{reservation_id}/status", response_model=ReservationRead)
async def change_reservation_status(
    reservation_id: str,
    payload: ReservationStatusUpdate,
    context: SessionContext = Depends(get_session_context),
    data: DataService = Depends(get_data_service),
):
    try:
        return await update_reservation_status(context, data, reservation_id, payload.status)
    except BoardingFinderError as exc:
        raise to_http_exception(exc) from exc
