"""
Site Content API — Admin User Service
======================================

What:  Credential checks, current-admin lookup, the user listing, and the
       out-of-band account provisioning used by the create-admin command.
Who:   routes/auth.py, routes/users.py and content_api.create_admin.

Password hashes never leave this module: callers get AdminUser rows and the
response schemas have no password field.
"""

import logging
from typing import List, Optional

from sqlalchemy import asc, or_, select
from sqlalchemy.ext.asyncio import AsyncSession

from content_api.auth import hash_password, verify_password
from content_api.exceptions import (
    AuthenticationError,
    DatabaseError,
    NotFoundError,
    ValidationError,
)
from content_api.models import AdminUser

logger = logging.getLogger(__name__)


class UserService:
    async def _find(self, db: AsyncSession, *criteria) -> Optional[AdminUser]:
        try:
            result = await db.execute(select(AdminUser).where(*criteria))
            return result.scalar_one_or_none()
        except Exception as e:
            logger.error("Failed to look up admin user: %s", e, exc_info=True)
            raise DatabaseError(message="Failed to fetch user") from e

    async def authenticate_credentials(
        self, db: AsyncSession, username: Optional[str], password: Optional[str]
    ) -> AdminUser:
        """
        Return the admin whose username and password match.

        Raises:
            ValidationError:      either field empty (400)
            AuthenticationError:  unknown user or wrong password (401); the
                                  two cases are indistinguishable to the caller
        """
        username = (username or "").strip()
        if not username or not password:
            raise ValidationError(message="Username and password are required")

        user = await self._find(db, AdminUser.username == username)
        if user is None or not verify_password(password, user.password):
            logger.warning("Failed login attempt for username %r", username)
            raise AuthenticationError(message="Invalid credentials")

        logger.info("Admin %s logged in", user.username)
        return user

    async def get_user(self, db: AsyncSession, user_id: int) -> AdminUser:
        user = await self._find(db, AdminUser.id == user_id)
        if user is None:
            raise NotFoundError(resource="User", resource_id=str(user_id))
        return user

    async def list_users(self, db: AsyncSession) -> List[AdminUser]:
        try:
            result = await db.execute(select(AdminUser).order_by(asc(AdminUser.id)))
            return list(result.scalars().all())
        except Exception as e:
            logger.error("Failed to fetch users: %s", e, exc_info=True)
            raise DatabaseError(message="Failed to fetch users") from e

    async def create_admin(
        self, db: AsyncSession, username: str, password: str, email: str
    ) -> AdminUser:
        """Provision an account with a hashed password. Not reachable over HTTP."""
        if not username or not password or not email:
            raise ValidationError(message="Username, password and email are required")

        existing = await self._find(
            db, or_(AdminUser.username == username, AdminUser.email == email)
        )
        if existing is not None:
            raise ValidationError(message="An admin with that username or email already exists")

        user = AdminUser(username=username, password=hash_password(password), email=email)
        try:
            db.add(user)
            await db.flush()
        except Exception as e:
            logger.error("Failed to create admin user: %s", e, exc_info=True)
            raise DatabaseError(message="Failed to create user") from e

        logger.info("Created admin user %s (id=%s)", user.username, user.id)
        return user


user_service = UserService()
