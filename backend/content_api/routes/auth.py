"""
Site Content API — Admin Session Routes
========================================

What:  Login, current-admin and logout for the admin panel.

    POST /api/admin/auth/login    {username, password} → sets the session cookie
    GET  /api/admin/auth/me       the admin behind the session
    POST /api/admin/auth/logout   clears the session cookie

The session is a signed JWT. It is set as an httpOnly, SameSite=strict
cookie scoped to "/" and is also returned in the login body for clients
that prefer an Authorization: Bearer header.
"""

import logging

from fastapi import APIRouter, Depends, Response
from sqlalchemy.ext.asyncio import AsyncSession

from content_api.auth import Authenticated, create_access_token, require_admin
from content_api.config import settings
from content_api.database import get_db_session
from content_api.schemas.base import ErrorResponse, SuccessResponse
from content_api.schemas.site import CurrentUser, LoginRequest, LoginResponse, MeResponse
from content_api.services.user_service import user_service

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/admin/auth", tags=["Auth"])


def set_session_cookie(response: Response, token: str) -> None:
    response.set_cookie(
        key=settings.auth_cookie_name,
        value=token,
        max_age=settings.jwt_expire_days * 24 * 60 * 60,
        path="/",
        httponly=True,
        secure=settings.cookie_secure or settings.is_production,
        samesite="strict",
    )


def clear_session_cookie(response: Response) -> None:
    response.delete_cookie(
        key=settings.auth_cookie_name,
        path="/",
        httponly=True,
        secure=settings.cookie_secure or settings.is_production,
        samesite="strict",
    )


@router.post(
    "/login",
    response_model=LoginResponse,
    responses={
        400: {"description": "Username or password missing", "model": ErrorResponse},
        401: {"description": "Invalid credentials", "model": ErrorResponse},
    },
    summary="Log in as an admin",
)
async def login(
    credentials: LoginRequest,
    response: Response,
    db: AsyncSession = Depends(get_db_session),
) -> LoginResponse:
    user = await user_service.authenticate_credentials(
        db, credentials.username, credentials.password
    )
    token = create_access_token(user_id=user.id, username=user.username)
    set_session_cookie(response, token)
    return LoginResponse(token=token, user=CurrentUser.model_validate(user))


@router.get(
    "/me",
    response_model=MeResponse,
    responses={
        401: {"description": "No valid admin session", "model": ErrorResponse},
        404: {"description": "Session user no longer exists", "model": ErrorResponse},
    },
    summary="Current admin",
)
async def me(
    admin: Authenticated = Depends(require_admin),
    db: AsyncSession = Depends(get_db_session),
) -> MeResponse:
    user = await user_service.get_user(db, admin.user_id)
    return MeResponse(user=CurrentUser.model_validate(user))


@router.post("/logout", response_model=SuccessResponse, summary="Log out")
async def logout(response: Response) -> SuccessResponse:
    clear_session_cookie(response)
    return SuccessResponse()
