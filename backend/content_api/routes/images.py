"""
Site Content API — Image Routes
================================

What:
    GET  /api/images/{id}          public: the image itself
    GET  /api/admin/images/{id}    admin: metadata only
    POST /api/admin/images         admin: register a file already in blob storage

Serving:
    external (url set)   307 redirect to the blob URL
    inline (base64)      decoded bytes, Content-Type from the row, cached
                         for a year as immutable since rows are never edited
    anything else        404 {"error": "Image not found"}
"""

import logging

from fastapi import APIRouter, Depends, status
from fastapi.responses import RedirectResponse, Response
from sqlalchemy.ext.asyncio import AsyncSession

from content_api.auth import Authenticated, require_admin
from content_api.database import get_db_session
from content_api.schemas.base import ErrorResponse
from content_api.schemas.site import BlobImageCreate, BlobImageCreated, ImageMetadata
from content_api.services.image_service import image_service

logger = logging.getLogger(__name__)

router = APIRouter(tags=["Images"])

IMMUTABLE_CACHE = "public, max-age=31536000, immutable"


@router.get(
    "/api/images/{image_id}",
    response_class=Response,
    responses={
        200: {"description": "Image bytes"},
        307: {"description": "Redirect to blob storage"},
        404: {"description": "Image not found", "model": ErrorResponse},
    },
    summary="Serve an image",
)
async def serve_image(
    image_id: int,
    db: AsyncSession = Depends(get_db_session),
) -> Response:
    payload = await image_service.load_payload(db, image_id)

    if payload.redirect_url:
        return RedirectResponse(
            url=payload.redirect_url,
            status_code=status.HTTP_307_TEMPORARY_REDIRECT,
        )

    return Response(
        content=payload.content,
        media_type=payload.mime_type,
        headers={"Cache-Control": IMMUTABLE_CACHE},
    )


@router.get(
    "/api/admin/images/{image_id}",
    response_model=ImageMetadata,
    responses={
        401: {"description": "No valid admin session", "model": ErrorResponse},
        404: {"description": "Image not found", "model": ErrorResponse},
    },
    summary="Image metadata",
)
async def get_image_metadata(
    image_id: int,
    admin: Authenticated = Depends(require_admin),
    db: AsyncSession = Depends(get_db_session),
) -> ImageMetadata:
    image = await image_service.get_image(db, image_id)
    return ImageMetadata.model_validate(image)


@router.post(
    "/api/admin/images",
    response_model=BlobImageCreated,
    responses={
        400: {"description": "URL missing", "model": ErrorResponse},
        401: {"description": "No valid admin session", "model": ErrorResponse},
    },
    summary="Register a blob-hosted image",
)
async def register_blob_image(
    payload: BlobImageCreate,
    admin: Authenticated = Depends(require_admin),
    db: AsyncSession = Depends(get_db_session),
) -> BlobImageCreated:
    image = await image_service.register_blob(db, payload)
    return BlobImageCreated(id=image.id, url=image.url)
