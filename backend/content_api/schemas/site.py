"""
Site Content API — Contact, User, Auth and Image Schemas
=========================================================

What:  API contracts for the endpoints that are not plain display-ordered
       CRUD: the public contact form, the admin inbox, admin users, login,
       and image records.
"""

from datetime import datetime
from typing import Any, Literal, Optional

from pydantic import Field, field_validator

from content_api.schemas.base import CamelModel, SuccessResponse


# ── Contact form ──────────────────────────────────────────────────────────

class ContactSubmission(CamelModel):
    """
    Body of POST /api/contact.

    The four required fields default to "" so that an absent field and an
    empty one produce the same 400 response from the service. The demo slot
    is only checked when wantsDemo is true.
    """
    name: Optional[str] = ""
    email: Optional[str] = ""
    contact_no: Optional[str] = ""
    message: Optional[str] = ""
    project_id: Optional[int] = None
    project_title: Optional[str] = None
    wants_demo: Optional[bool] = False
    demo_month: Optional[str] = None
    demo_day: Optional[str] = None
    demo_year: Optional[str] = None
    demo_time: Optional[str] = None

    @field_validator("demo_month", "demo_day", "demo_year", "demo_time", mode="before")
    @classmethod
    def numbers_as_text(cls, v: Any) -> Any:
        # date pickers may send 3 or 2025 rather than "3" or "2025"
        if isinstance(v, int) and not isinstance(v, bool):
            return str(v)
        return v


class ContactSubmitted(SuccessResponse):
    message: str = "Message sent successfully!"


class ContactMessageRead(CamelModel):
    id: int
    name: str
    email: str
    contact_no: str
    message: str
    project_id: Optional[int] = None
    project_title: Optional[str] = None
    wants_demo: bool = False
    demo_month: Optional[str] = None
    demo_day: Optional[str] = None
    demo_year: Optional[str] = None
    demo_time: Optional[str] = None
    status: str
    admin_notes: Optional[str] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None


class ContactMessageUpdate(CamelModel):
    status: Optional[Literal["new", "read", "replied", "archived"]] = None
    admin_notes: Optional[str] = None


# ── Admin users ───────────────────────────────────────────────────────────

class AdminUserRead(CamelModel):
    """Admin account as exposed over HTTP. There is no password field."""
    id: int
    username: str
    email: str
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None


class LoginRequest(CamelModel):
    username: Optional[str] = ""
    password: Optional[str] = ""


class CurrentUser(CamelModel):
    id: int
    username: str
    email: str


class LoginResponse(SuccessResponse):
    token: str
    user: CurrentUser


class MeResponse(CamelModel):
    user: CurrentUser


# ── Images ────────────────────────────────────────────────────────────────

class ImageMetadata(CamelModel):
    id: int
    url: Optional[str] = None
    filename: str
    mime_type: str
    size: int


class BlobImageCreate(CamelModel):
    """Registers a file that already lives in blob storage."""
    url: Optional[str] = None
    filename: Optional[str] = None
    mime_type: Optional[str] = None
    size: Optional[int] = Field(default=None, ge=0)


class BlobImageCreated(CamelModel):
    id: int
    url: str


class BlobAvailability(CamelModel):
    available: bool
    single_video_upload_only: bool
