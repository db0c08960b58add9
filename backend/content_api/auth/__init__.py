# Auth package init
from content_api.auth.guard import (
    Authenticated,
    AuthResult,
    Rejected,
    authenticate,
    get_token_from_request,
    require_admin,
)
from content_api.auth.tokens import (
    create_access_token,
    hash_password,
    verify_password,
    verify_token,
)

__all__ = [
    "AuthResult",
    "Authenticated",
    "Rejected",
    "authenticate",
    "create_access_token",
    "get_token_from_request",
    "hash_password",
    "require_admin",
    "verify_password",
    "verify_token",
]
