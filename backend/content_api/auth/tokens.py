"""
Site Content API — Admin Session Tokens
========================================

What:  Signing/verification of the admin session JWT and password hashing.
How:   python-jose HS256 tokens carrying {"userId", "username"}; passlib
       PBKDF2-SHA256 for stored passwords.

The token is delivered both in the login response body and in the httpOnly
`admin_token` cookie. Lifetime defaults to seven days.
"""

from datetime import datetime, timedelta, timezone
from typing import Any, Dict, Optional

from jose import JWTError, jwt
from passlib.context import CryptContext

from content_api.config import settings

pwd_context = CryptContext(
    schemes=["pbkdf2_sha256"],
    deprecated="auto",
)


def hash_password(password: str) -> str:
    return pwd_context.hash(password)


def verify_password(plain_password: str, hashed_password: str) -> bool:
    """
    Check a password against its stored hash.

    Unrecognised or malformed hashes count as a mismatch.
    """
    try:
        return pwd_context.verify(plain_password, hashed_password)
    except (ValueError, TypeError):
        return False


def create_access_token(
    user_id: int,
    username: str,
    expires_delta: Optional[timedelta] = None,
) -> str:
    now = datetime.now(timezone.utc)
    expire = now + (expires_delta or timedelta(days=settings.jwt_expire_days))
    claims = {
        "userId": user_id,
        "username": username,
        "iat": now,
        "exp": expire,
    }
    return jwt.encode(claims, settings.jwt_secret, algorithm=settings.jwt_algorithm)


def verify_token(token: str) -> Optional[Dict[str, Any]]:
    """
    Decode and validate a session token.

    Returns the claims, or None if the signature, expiry or payload shape is
    invalid.
    """
    try:
        payload = jwt.decode(
            token,
            settings.jwt_secret,
            algorithms=[settings.jwt_algorithm],
        )
    except JWTError:
        return None

    if not isinstance(payload.get("userId"), int) or not payload.get("username"):
        return None
    return payload
