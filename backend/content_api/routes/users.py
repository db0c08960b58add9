"""
Site Content API — Admin Users Route
=====================================

What:  GET /api/users lists admin accounts (authenticated, no password hashes).
       POST /api/users is closed: accounts are created with the
       `content-api-create-admin` command, which hashes the password.
"""

import logging
from typing import List

from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from content_api.auth import Authenticated, require_admin
from content_api.database import get_db_session
from content_api.exceptions import PolicyDenialError
from content_api.schemas.base import ErrorResponse
from content_api.schemas.site import AdminUserRead
from content_api.services.user_service import user_service

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/users", tags=["Users"])

USER_CREATION_DISABLED = (
    "Method not allowed. Use admin user creation script with hashed passwords."
)


@router.get(
    "",
    response_model=List[AdminUserRead],
    responses={401: {"description": "No valid admin session", "model": ErrorResponse}},
    summary="List admin users",
)
async def list_users(
    admin: Authenticated = Depends(require_admin),
    db: AsyncSession = Depends(get_db_session),
):
    return await user_service.list_users(db)


@router.post(
    "",
    status_code=405,
    responses={405: {"description": "Always refused", "model": ErrorResponse}},
    summary="Create an admin user (disabled)",
)
async def create_user():
    # No body, auth or database dependency: the answer never depends on them.
    raise PolicyDenialError(message=USER_CREATION_DISABLED, status_code=405)
