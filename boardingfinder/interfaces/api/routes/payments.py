"""Endpoints for rent payments."""

from fastapi import APIRouter, Depends, status

from boardingfinder.application.use_cases.payments import (
    list_payments,
    review_payment,
    submit_payment,
)
from boardingfinder.domain.entities import SessionContext
from boardingfinder.domain.errors import BoardingFinderError
from boardingfinder.infrastructure.data_service import DataService
from boardingfinder.interfaces.api.dependencies import (
    get_data_service,
    get_session_context,
    require_landlord,
    require_tenant,
)
from boardingfinder.interfaces.api.routes_helpers import to_http_exception
from boardingfinder.interfaces.api.schemas import PaymentCreate, PaymentRead, PaymentVerification

router = APIRouter(prefix="/payments", tags=["payments"])


@router.post("/", response_model=PaymentRead, status_code=status.HTTP_201_CREATED)
async def create_payment(
    payload: PaymentCreate,
    context: SessionContext = Depends(require_tenant),
    data: DataService = Depends(get_data_service),
):
    try:
        return await submit_payment(context, data, **payload.model_dump())
    except BoardingFinderError as exc:
        raise to_http_exception(exc) from exc


@router.get("/", response_model=list[PaymentRead])
async def read_payments(
    context: SessionContext = Depends(get_session_context),
    data: DataService = Depends(get_data_service),
):
    try:
        return await list_payments(context, data)
    except BoardingFinderError as exc:
        raise to_http_exception(exc) from exc


@router.patch("/{payment_id}/verification", response_model=PaymentRead)
async def verify_payment(
    payment_id: str,
    payload: PaymentVerification,
    context: SessionContext = Depends(require_landlord),
    data: DataService = Depends(get_data_service),
):
    try:
        return await review_payment(context, data, payment_id, payload.status)
    except BoardingFinderError as exc:
        raise to_http_exception(exc) from exc
