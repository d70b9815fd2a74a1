"""Endpoints for property reviews and their moderation queue."""

from fastapi import APIRouter, Depends, status

from boardingfinder.application.use_cases.reviews import (
    list_pending_reviews,
    moderate_review,
    submit_review,
)
from boardingfinder.domain.entities import SessionContext
from boardingfinder.domain.errors import BoardingFinderError
from boardingfinder.infrastructure.data_service import DataService
from boardingfinder.interfaces.api.dependencies import (
    get_data_service,
    require_admin,
    require_tenant,
)
from boardingfinder.interfaces.api.routes_helpers import to_http_exception
from boardingfinder.interfaces.api.schemas import ReviewCreate, ReviewModeration, ReviewRead

router = APIRouter(prefix="/reviews", tags=["reviews"])


@router.post("/", response_model=ReviewRead, status_code=status.HTTP_201_CREATED)
async def create_review(
    payload: ReviewCreate,
    context: SessionContext = Depends(require_tenant),
    data: DataService = Depends(get_data_service),
):
    try:
        return await submit_review(
            context,
            data,
            property_id=payload.property_id,
            rating=payload.rating,
            comment=payload.comment,
        )
    except BoardingFinderError as exc:
        raise to_http_exception(exc) from exc


@router.get("/pending", response_model=list[ReviewRead])
async def read_pending_reviews(
    context: SessionContext = Depends(require_admin),
    data: DataService = Depends(get_data_service),
):
    try:
        return await list_pending_reviews(context, data)
    except BoardingFinderError as exc:
        raise to_http_exception(exc) from exc


@router.patch("/{review_id}/moderation", response_model=ReviewRead)
async def moderate(
    review_id: str,
    payload: ReviewModeration,
    context: SessionContext = Depends(require_admin),
    data: DataService = Depends(get_data_service),
):
    try:
        return await moderate_review(context, data, review_id, approved=payload.approved)
    except BoardingFinderError as exc:
        raise to_http_exception(exc) from exc
