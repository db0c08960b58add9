"""
Site Content API — Blob Storage Token Resolution
=================================================

What:  Finds the optional blob storage credential and reports whether blob
       uploads are available to the admin panel.
How:   Two environment names are checked in order:

           BLOB_READ_WRITE_TOKEN        canonical, read by blob client libraries
           settings.blob_token_fallback_env
                                        project-specific name (default
                                        SITE_BLOB_READ_WRITE_TOKEN)

       `ensure_canonical_env()` copies the fallback into the canonical slot
       when the canonical one is unset, for third-party code that only knows
       the canonical name. It runs once from the application lifespan and
       is idempotent: an already-set canonical value is never overwritten.

The functions take an optional mapping so tests can pass a plain dict
instead of patching os.environ.
"""

import logging
import os
from typing import Dict, MutableMapping, Optional

from content_api.config import settings

logger = logging.getLogger(__name__)

CANONICAL_TOKEN_ENV = "BLOB_READ_WRITE_TOKEN"


def _environ(environ: Optional[MutableMapping[str, str]]) -> MutableMapping[str, str]:
    return os.environ if environ is None else environ


def resolve_storage_token(
    environ: Optional[MutableMapping[str, str]] = None,
    fallback_env: Optional[str] = None,
) -> Optional[str]:
    """
    Return the blob token from the canonical name, else the fallback name.

    Empty strings count as unset. Returns None when neither is defined.
    """
    env = _environ(environ)
    fallback = fallback_env or settings.blob_token_fallback_env
    for name in (CANONICAL_TOKEN_ENV, fallback):
        value = env.get(name)
        if value:
            return value
    return None


def ensure_canonical_env(
    environ: Optional[MutableMapping[str, str]] = None,
    fallback_env: Optional[str] = None,
) -> bool:
    """
    Backfill the canonical token name from the fallback name.

    Returns True only when a value was written. Calling it again after a
    successful backfill is a no-op because the canonical slot is now set.
    """
    env = _environ(environ)
    if env.get(CANONICAL_TOKEN_ENV):
        return False

    fallback = fallback_env or settings.blob_token_fallback_env
    value = env.get(fallback)
    if not value:
        return False

    env[CANONICAL_TOKEN_ENV] = value
    logger.info("Backfilled %s from %s", CANONICAL_TOKEN_ENV, fallback)
    return True


def blob_status(environ: Optional[MutableMapping[str, str]] = None) -> Dict[str, bool]:
    """
    Payload for GET /api/admin/blob-available.

    singleVideoUploadOnly is set when either SINGLE_VIDEO_UPLOAD or
    DISABLE_CHUNKED_VIDEO_UPLOAD is enabled; the client must then send a
    video in a single request.
    """
    return {
        "available": resolve_storage_token(environ) is not None,
        "singleVideoUploadOnly": bool(
            settings.single_video_upload or settings.disable_chunked_video_upload
        ),
    }
