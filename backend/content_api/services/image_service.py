"""
Site Content API — Image Service
=================================

What:  Looks up stored images and registers blob-hosted ones.
How:   An image is either inline (base64 in `data`) or external (`url`).
       `load_payload` tells the route which of the two it is dealing with:
       a redirect target, or decoded bytes with their MIME type.

Chunked uploads whose bytes live in a separate chunk table are reported as
not found: this service only serves what the images row itself holds.
"""

import base64
import binascii
import logging
from dataclasses import dataclass
from typing import Optional

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from content_api.exceptions import DatabaseError, NotFoundError, ValidationError
from content_api.models import Image
from content_api.schemas.site import BlobImageCreate

logger = logging.getLogger(__name__)

DEFAULT_FILENAME = "uploaded-file"
DEFAULT_MIME_TYPE = "application/octet-stream"


@dataclass(frozen=True)
class ImagePayload:
    mime_type: str
    redirect_url: Optional[str] = None
    content: bytes = b""


class ImageService:
    async def get_image(self, db: AsyncSession, image_id: int) -> Image:
        try:
            result = await db.execute(select(Image).where(Image.id == image_id))
            image = result.scalar_one_or_none()
        except Exception as e:
            logger.error("Failed to fetch image %s: %s", image_id, e, exc_info=True)
            raise DatabaseError(message="Failed to fetch image") from e

        if image is None:
            raise NotFoundError(resource="Image", resource_id=str(image_id))
        return image

    async def load_payload(self, db: AsyncSession, image_id: int) -> ImagePayload:
        image = await self.get_image(db, image_id)

        if image.is_external:
            return ImagePayload(mime_type=image.mime_type, redirect_url=image.url)

        if not image.data:
            # chunked upload with nothing inline, or an empty row
            logger.info("Image %s has no inline data (chunked=%s)", image_id, image.is_chunked)
            raise NotFoundError(resource="Image", resource_id=str(image_id))

        try:
            content = base64.b64decode(image.data, validate=False)
        except (binascii.Error, ValueError) as e:
            logger.error("Image %s holds undecodable data: %s", image_id, e)
            raise NotFoundError(resource="Image", resource_id=str(image_id)) from e

        return ImagePayload(mime_type=image.mime_type, content=content)

    async def register_blob(self, db: AsyncSession, payload: BlobImageCreate) -> Image:
        if not payload.url:
            raise ValidationError(message="URL is required", field="url")

        image = Image(
            filename=payload.filename or DEFAULT_FILENAME,
            mime_type=payload.mime_type or DEFAULT_MIME_TYPE,
            size=payload.size or 0,
            data="",
            url=payload.url,
            is_chunked=False,
            chunk_count=0,
        )
        try:
            db.add(image)
            await db.flush()
        except Exception as e:
            logger.error("Failed to save blob image record: %s", e, exc_info=True)
            raise DatabaseError(message="Failed to save image record") from e

        logger.info("Registered blob image %s -> %s", image.id, image.url)
        return image


image_service = ImageService()
