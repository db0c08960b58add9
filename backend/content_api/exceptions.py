"""
Site Content API — Custom Exception Hierarchy
==============================================

What:  Application-specific exceptions for the failure classes an endpoint
       can hit.
How:   Each exception class carries a user-facing message and an optional
       context dict. Global exception handlers (registered in main.py) map
       them to HTTP status codes and a JSON body of the form
       {"error": <message>, "code": <code>, "request_id": <id>}.
Who:   Raised by the auth guard, services and routes; caught by global handlers.

Exception Hierarchy:
    ContentAPIError (base)
    ├── AuthenticationError      → 401 Unauthorized (session cookie missing/invalid)
    ├── ValidationError          → 400 Bad Request (client can fix)
    ├── NotFoundError            → 404 Not Found
    ├── PolicyDenialError        → fixed status (405 / 403) regardless of input
    ├── DatabaseError            → 500 Internal Server Error
    └── RateLimitExceededError   → 429 Too Many Requests

Nothing in this service retries: every one of these is terminal for the
request that raised it.
"""

from typing import Any, Dict, Optional


class ContentAPIError(Exception):
    """
    Base exception for all application errors.

    Attributes:
        message:  User-facing error description (safe to return in API response)
        context:  Additional debug info (logged but NOT returned to client)
    """

    status_code: int = 500
    code: str = "INTERNAL_ERROR"

    def __init__(
        self,
        message: str = "An unexpected error occurred",
        context: Optional[Dict[str, Any]] = None,
    ):
        self.message = message
        self.context = context or {}
        super().__init__(self.message)


class AuthenticationError(ContentAPIError):
    """
    Raised when an admin-only endpoint is called without a valid session.

    Surfaced by the auth guard before any database access.
    HTTP:    401 Unauthorized
    """

    status_code = 401
    code = "UNAUTHORIZED"

    def __init__(
        self,
        message: str = "Authentication required",
        context: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(message=message, context=context)


class ValidationError(ContentAPIError):
    """
    Raised when client input fails a business-rule check.

    When:    Missing required contact fields, missing blob URL, empty login.
    HTTP:    400 Bad Request

    Schema-level problems (wrong JSON types, non-numeric path ids) are
    FastAPI's own 422 responses and never reach this class.
    """

    status_code = 400
    code = "VALIDATION_ERROR"

    def __init__(
        self,
        message: str = "Validation failed",
        field: Optional[str] = None,
        context: Optional[Dict[str, Any]] = None,
    ):
        ctx = context or {}
        if field:
            ctx["field"] = field
        super().__init__(message=message, context=ctx)
        self.field = field


class NotFoundError(ContentAPIError):
    """
    Raised when a requested resource does not exist.

    HTTP:    404 Not Found
    """

    status_code = 404
    code = "NOT_FOUND"

    def __init__(
        self,
        resource: str = "Resource",
        resource_id: Optional[str] = None,
        context: Optional[Dict[str, Any]] = None,
    ):
        message = f"{resource} not found"
        ctx = context or {}
        ctx["resource"] = resource
        if resource_id:
            ctx["resource_id"] = resource_id
        super().__init__(message=message, context=ctx)


class PolicyDenialError(ContentAPIError):
    """
    A route that is closed by policy, independent of the request contents.

    The status code travels with the instance, e.g. 405 for the disabled
    admin-user creation route.
    """

    code = "POLICY_DENIED"

    def __init__(
        self,
        message: str = "This operation is not allowed",
        status_code: int = 405,
        context: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(message=message, context=context)
        self.status_code = status_code


class DatabaseError(ContentAPIError):
    """
    Raised when a database operation fails.

    HTTP:    500 Internal Server Error

    The message returned to the client is resource-specific but generic
    ("Failed to fetch projects"). Details are logged server-side only.
    """

    status_code = 500
    code = "INTERNAL_ERROR"

    def __init__(
        self,
        message: str = "A database error occurred. Please try again later.",
        context: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(message=message, context=context)


class RateLimitExceededError(ContentAPIError):
    """
    Raised when a client exceeds a per-IP request rate limit.

    HTTP:    429 Too Many Requests (with Retry-After header)
    """

    status_code = 429
    code = "RATE_LIMITED"

    def __init__(
        self,
        retry_after: int = 60,
        message: str = "Too many submissions. Please try again in a minute.",
        context: Optional[Dict[str, Any]] = None,
    ):
        ctx = context or {}
        ctx["retry_after"] = retry_after
        super().__init__(message=message, context=ctx)
        self.retry_after = retry_after
