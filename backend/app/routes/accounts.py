"""
NoteKeeper Backend: Account Route Handlers
===========================================

What:  POST /account, POST /login, GET /get-user.
How:   Parse the body, delegate to AccountService, wrap the result in the
       success envelope. Failures are raised as application exceptions and
       formatted by the global handlers in main.py.

Bodies are optional: a request with no body is checked like one with
every field missing, so it gets "<field> is required" rather than a
generic validation error.
"""

import logging
from typing import Optional
from uuid import UUID

from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from app.database import get_db_session
from app.schemas.account import (
    AccountCreateRequest,
    AccountEnvelope,
    AuthEnvelope,
    LoginRequest,
)
from app.schemas.common import ErrorResponse
from app.security.auth_gate import get_current_account_id
from app.services.account_service import account_service

logger = logging.getLogger(__name__)

router = APIRouter(tags=["Accounts"])


@router.post(
    "/account",
    response_model=AuthEnvelope,
    response_model_exclude_none=True,
    responses={
        400: {"description": "Missing field or email already exists", "model": ErrorResponse},
        500: {"description": "Server error", "model": ErrorResponse},
    },
    summary="Create an account",
)
async def create_account(
    payload: Optional[AccountCreateRequest] = None,
    db: AsyncSession = Depends(get_db_session),
) -> AuthEnvelope:
    if payload is None:
        payload = AccountCreateRequest()
    result = await account_service.create_account(
        db,
        username=payload.username,
        password=payload.password,
        email=payload.email,
    )
    return AuthEnvelope(
        data=result.account,
        access_token=result.access_token,
        message="Account created successfully",
    )


@router.post(
    "/login",
    response_model=AuthEnvelope,
    response_model_exclude_none=True,
    responses={
        400: {"description": "Missing field, unknown email or wrong password", "model": ErrorResponse},
        500: {"description": "Server error", "model": ErrorResponse},
    },
    summary="Log in with email and password",
)
async def login(
    payload: Optional[LoginRequest] = None,
    db: AsyncSession = Depends(get_db_session),
) -> AuthEnvelope:
    if payload is None:
        payload = LoginRequest()
    result = await account_service.login(db, email=payload.email, password=payload.password)
    return AuthEnvelope(
        data=result.account,
        access_token=result.access_token,
        message="Login successful",
    )


@router.get(
    "/get-user",
    response_model=AccountEnvelope,
    responses={
        401: {"description": "Missing or invalid bearer token", "model": ErrorResponse},
        500: {"description": "Server error", "model": ErrorResponse},
    },
    summary="Get the authenticated account",
)
async def get_user(
    account_id: UUID = Depends(get_current_account_id),
    db: AsyncSession = Depends(get_db_session),
) -> AccountEnvelope:
    """Returns the live account record, not a snapshot from the token."""
    account = await account_service.get_account(db, account_id)
    return AccountEnvelope(data=account)
