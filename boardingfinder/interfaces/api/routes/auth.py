"""Endpoints for sign up, sign in and the current identity."""

from __future__ import annotations

import logging

from fastapi import APIRouter, Depends, HTTPException, status
from fastapi.security import OAuth2PasswordRequestForm

from boardingfinder.application.use_cases.users import (
    AuthenticationStatus,
    authenticate_user,
    issue_access_token,
    register_user,
)
from boardingfinder.domain.entities import SessionContext
from boardingfinder.domain.errors import BoardingFinderError
from boardingfinder.infrastructure.data_service import DataService
from boardingfinder.interfaces.api.dependencies import get_data_service, get_session_context
from boardingfinder.interfaces.api.routes_helpers import to_http_exception
from boardingfinder.interfaces.api.schemas import IdentityRead, SignUpRequest, Token

router = APIRouter(prefix="/auth", tags=["auth"])
logger = logging.getLogger(__name__)


@router.post("/signup", response_model=Token, status_code=status.HTTP_201_CREATED)
async def sign_up(
    payload: SignUpRequest, data: DataService = Depends(get_data_service)
) -> Token:
    """Create an account and return an access token for it."""

    try:
        profile, _ = await register_user(
            data,
            email=payload.email,
            password=payload.password,
            full_name=payload.full_name,
            role=payload.role,
        )
    except BoardingFinderError as exc:
        raise to_http_exception(exc) from exc
    return Token(access_token=issue_access_token(profile))


# The form keeps the field names expected by OAuth2PasswordRequestForm.
@router.post("/token", response_model=Token)
async def login_for_access_token(
    form_data: OAuth2PasswordRequestForm = Depends(),
    data: DataService = Depends(get_data_service),
) -> Token:
    """Authenticate by email and return a JWT."""

    try:
        profile, auth_status = await authenticate_user(
            data, form_data.username, form_data.password
        )
    except BoardingFinderError as exc:
        raise to_http_exception(exc) from exc

    if auth_status is AuthenticationStatus.INVALID_CREDENTIALS:
        logger.info("Rejected sign in for %s", form_data.username)
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Incorrect email or password",
            headers={"WWW-Authenticate": "Bearer"},
        )
    return Token(access_token=issue_access_token(profile))


@router.get("/me", response_model=IdentityRead)
async def read_identity(context: SessionContext = Depends(get_session_context)) -> IdentityRead:
    return IdentityRead(id=context.user_id, email=context.identity.email, role=context.role)
