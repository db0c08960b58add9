"""
Site Content API — Auth Guard
==============================

What:  Gatekeeper for every admin-only endpoint.
How:   `authenticate(request)` inspects the request and returns one of two
       capability values:

           Authenticated(user_id, username)   the caller holds a valid session
           Rejected(reason)                   no token, or token invalid/expired

       The FastAPI dependency `require_admin` turns Rejected into an
       AuthenticationError (401). Because it is declared before the database
       session dependency, a rejected request never touches the database.

Token lookup order: `Authorization: Bearer <token>` header, then the
`admin_token` cookie.

Example:
    @router.put("/ticker/{item_id}")
    async def update_ticker(
        item_id: int,
        admin: Authenticated = Depends(require_admin),
        db: AsyncSession = Depends(get_db_session),
    ): ...
"""

import logging
from dataclasses import dataclass
from typing import Optional, Union

from fastapi import Request

from content_api.auth.tokens import verify_token
from content_api.config import settings
from content_api.exceptions import AuthenticationError

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Authenticated:
    user_id: int
    username: str


@dataclass(frozen=True)
class Rejected:
    reason: str


AuthResult = Union[Authenticated, Rejected]


def get_token_from_request(request: Request) -> Optional[str]:
    auth_header = request.headers.get("authorization")
    if auth_header and auth_header.startswith("Bearer "):
        token = auth_header[len("Bearer "):].strip()
        if token:
            return token
    return request.cookies.get(settings.auth_cookie_name) or None


def authenticate(request: Request) -> AuthResult:
    token = get_token_from_request(request)
    if not token:
        return Rejected("Authentication required")

    payload = verify_token(token)
    if payload is None:
        return Rejected("Invalid or expired token")

    return Authenticated(user_id=payload["userId"], username=payload["username"])


async def require_admin(request: Request) -> Authenticated:
    """FastAPI dependency: the authenticated admin, or a 401."""
    result = authenticate(request)
    if isinstance(result, Rejected):
        logger.info("Rejected admin request to %s: %s", request.url.path, result.reason)
        raise AuthenticationError(result.reason)
    return result
