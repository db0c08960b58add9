"""
Site Content API — FastAPI Application Factory
===============================================

What:  Builds the FastAPI application: logging, middleware, exception
       handlers and routers.
Who:   uvicorn (`uvicorn content_api.main:app`) and the test suite.

Lifecycle:
    Startup:
    1. Configure logging
    2. Validate production settings (refuses to start with the placeholder JWT secret)
    3. Copy the project-specific blob token into BLOB_READ_WRITE_TOKEN if needed
    4. Create missing tables when AUTO_CREATE_TABLES is on

    Shutdown:
    1. Dispose the database engine

Error bodies:
    Every handled failure answers with
        {"error": <message>, "code": <code>, "request_id": <id>}
    Application errors carry their own status code; anything unexpected is
    logged with its traceback and answered with a generic 500.
"""

import logging
import sys
from contextlib import asynccontextmanager
from typing import Any, AsyncGenerator, Dict, Optional

from fastapi import FastAPI, Request
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from content_api import __version__
from content_api.blob_token import ensure_canonical_env
from content_api.config import settings
from content_api.database import create_tables, dispose_engine
from content_api.exceptions import ContentAPIError, RateLimitExceededError
from content_api.middleware.logging import RequestLoggingMiddleware
from content_api.middleware.request_id import RequestIDMiddleware, request_id_var
from content_api.routes import auth, contact, health, images, resources, storage, users

logger = logging.getLogger(__name__)


# ══════════════════════════════════════════════════════════════════════════
# Logging Configuration
# ══════════════════════════════════════════════════════════════════════════

def setup_logging() -> None:
    """
    Configure the root logger once for the whole process.

    Format: 2025-01-15T12:00:00 [INFO] content_api.services.crud: Created ticker item 4
    """
    logging.basicConfig(
        level=getattr(logging, settings.log_level, logging.INFO),
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%Y-%m-%dT%H:%M:%S",
        handlers=[logging.StreamHandler(sys.stdout)],
        force=True,
    )

    # content_api.access replaces uvicorn's own access log
    logging.getLogger("uvicorn.access").setLevel(logging.WARNING)
    logging.getLogger("sqlalchemy.engine").setLevel(logging.WARNING)
    logging.getLogger("passlib").setLevel(logging.ERROR)


# ══════════════════════════════════════════════════════════════════════════
# Application Lifespan
# ══════════════════════════════════════════════════════════════════════════

@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    setup_logging()
    logger.info("Site Content API %s starting (environment=%s)", __version__, settings.environment)

    try:
        settings.validate_required_for_production()
    except ValueError as e:
        logger.error("Configuration error: %s", e)
        raise

    ensure_canonical_env()

    if settings.auto_create_tables:
        await create_tables()
        logger.info("Database tables ensured")

    logger.info("Server ready at http://%s:%d", settings.backend_host, settings.backend_port)

    yield

    logger.info("Site Content API shutting down...")
    await dispose_engine()
    logger.info("Shutdown complete.")


# ══════════════════════════════════════════════════════════════════════════
# Exception Handlers
# ══════════════════════════════════════════════════════════════════════════

def error_response(
    status_code: int,
    message: str,
    code: Optional[str] = None,
    headers: Optional[Dict[str, str]] = None,
    **extra: Any,
) -> JSONResponse:
    content = {"error": message, "code": code, "request_id": request_id_var.get(""), **extra}
    return JSONResponse(status_code=status_code, content=content, headers=headers)


def register_exception_handlers(app: FastAPI) -> None:
    """
    Map exceptions to the shared error body.

        ContentAPIError (and subclasses)  → exc.status_code
        RequestValidationError            → 422 (malformed JSON, wrong types, non-numeric ids)
        Starlette HTTPException           → its own status (unknown path, wrong method)
        Exception                         → 500, details logged only
    """

    @app.exception_handler(ContentAPIError)
    async def handle_app_error(request: Request, exc: ContentAPIError):
        rid = request_id_var.get("")
        if exc.status_code >= 500:
            logger.error("[%s] %s: %s | Context: %s", rid, type(exc).__name__, exc.message, exc.context)
        else:
            logger.info("[%s] %s: %s", rid, type(exc).__name__, exc.message)

        headers = None
        if isinstance(exc, RateLimitExceededError):
            headers = {"Retry-After": str(exc.retry_after)}
        return error_response(exc.status_code, exc.message, exc.code, headers=headers)

    @app.exception_handler(RequestValidationError)
    async def handle_request_validation(request: Request, exc: RequestValidationError):
        return error_response(
            422,
            "Invalid request",
            "REQUEST_INVALID",
            details=jsonable_encoder(exc.errors()),
        )

    @app.exception_handler(StarletteHTTPException)
    async def handle_http_exception(request: Request, exc: StarletteHTTPException):
        return error_response(exc.status_code, str(exc.detail), headers=getattr(exc, "headers", None))

    @app.exception_handler(Exception)
    async def handle_unexpected_error(request: Request, exc: Exception):
        rid = request_id_var.get("")
        logger.error("[%s] Unexpected error: %s", rid, exc, exc_info=True)
        return error_response(500, "Internal server error", "INTERNAL_ERROR")


# ══════════════════════════════════════════════════════════════════════════
# Application Factory
# ══════════════════════════════════════════════════════════════════════════

def create_app() -> FastAPI:
    app = FastAPI(
        title="Site Content API",
        description=(
            "Content, contact form and admin session API for the company website "
            "and its admin panel."
        ),
        version=__version__,
        docs_url="/docs",
        redoc_url="/redoc",
        openapi_url="/openapi.json",
        lifespan=lifespan,
    )

    # Middleware runs in reverse order of addition: RequestID → Logging → CORS
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins_list,
        allow_credentials=True,  # the admin session is a cookie
        allow_methods=["*"],
        allow_headers=["*"],
        expose_headers=["X-Request-ID", "Retry-After"],
    )
    app.add_middleware(RequestLoggingMiddleware)
    app.add_middleware(RequestIDMiddleware)

    register_exception_handlers(app)

    for router in resources.routers:
        app.include_router(router)
    app.include_router(contact.router)
    app.include_router(auth.router)
    app.include_router(users.router)
    app.include_router(images.router)
    app.include_router(storage.router)
    app.include_router(health.router)

    return app


app = create_app()
