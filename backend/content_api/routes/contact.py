"""
Site Content API — Contact Form and Inbox Routes
=================================================

What:
    POST   /api/contact                          public form, rate limited per IP;
                                                 forwards a notification email
    GET    /api/admin/contact-messages           inbox, newest first
    PUT    /api/admin/contact-messages/{id}      change status / adminNotes
    DELETE /api/admin/contact-messages/{id}      remove a message
"""

import logging
from typing import List

from fastapi import APIRouter, BackgroundTasks, Depends, status
from sqlalchemy.ext.asyncio import AsyncSession

from content_api.auth import Authenticated, require_admin
from content_api.database import get_db_session
from content_api.middleware.rate_limit import limit_contact_submissions
from content_api.schemas.base import ErrorResponse, SuccessResponse
from content_api.schemas.site import (
    ContactMessageRead,
    ContactMessageUpdate,
    ContactSubmission,
    ContactSubmitted,
)
from content_api.services.contact_service import contact_service
from content_api.services.mail_service import ContactNotification, mail_service

logger = logging.getLogger(__name__)

router = APIRouter(tags=["Contact"])

INBOX = "/api/admin/contact-messages"


@router.post(
    "/api/contact",
    response_model=ContactSubmitted,
    status_code=status.HTTP_201_CREATED,
    responses={
        400: {"description": "A required field or demo slot field is empty", "model": ErrorResponse},
        429: {"description": "Too many submissions from this IP", "model": ErrorResponse},
        500: {"description": "Message could not be stored", "model": ErrorResponse},
    },
    summary="Submit the contact form",
)
async def submit_contact(
    submission: ContactSubmission,
    background_tasks: BackgroundTasks,
    _: None = Depends(limit_contact_submissions),
    db: AsyncSession = Depends(get_db_session),
) -> ContactSubmitted:
    record = await contact_service.submit(db, submission)
    # Runs after the response; the row is committed by then
    background_tasks.add_task(
        mail_service.forward_contact_message, ContactNotification.from_message(record)
    )
    return ContactSubmitted()


@router.get(INBOX, response_model=List[ContactMessageRead], summary="List contact messages")
async def list_contact_messages(
    admin: Authenticated = Depends(require_admin),
    db: AsyncSession = Depends(get_db_session),
):
    return await contact_service.list_messages(db)


@router.put(f"{INBOX}/{{message_id}}", response_model=SuccessResponse, summary="Update a contact message")
async def update_contact_message(
    message_id: int,
    changes: ContactMessageUpdate,
    admin: Authenticated = Depends(require_admin),
    db: AsyncSession = Depends(get_db_session),
) -> SuccessResponse:
    await contact_service.update_message(db, message_id, changes)
    return SuccessResponse()


@router.delete(f"{INBOX}/{{message_id}}", response_model=SuccessResponse, summary="Delete a contact message")
async def delete_contact_message(
    message_id: int,
    admin: Authenticated = Depends(require_admin),
    db: AsyncSession = Depends(get_db_session),
) -> SuccessResponse:
    await contact_service.delete_message(db, message_id)
    return SuccessResponse()
