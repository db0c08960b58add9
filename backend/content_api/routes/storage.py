"""
Site Content API — Blob Storage Availability Route
===================================================

What:  GET /api/admin/blob-available tells the admin panel whether uploads
       can go to blob storage, and whether videos must be sent in one request.
"""

from fastapi import APIRouter, Depends

from content_api.auth import Authenticated, require_admin
from content_api.blob_token import blob_status
from content_api.schemas.base import ErrorResponse
from content_api.schemas.site import BlobAvailability

router = APIRouter(prefix="/api/admin", tags=["Storage"])


@router.get(
    "/blob-available",
    response_model=BlobAvailability,
    responses={401: {"description": "No valid admin session", "model": ErrorResponse}},
    summary="Blob storage availability",
)
async def blob_available(
    admin: Authenticated = Depends(require_admin),
) -> BlobAvailability:
    return BlobAvailability.model_validate(blob_status())
