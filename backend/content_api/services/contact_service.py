"""
Site Content API — Contact Message Service
===========================================

What:  Accepts public contact form submissions and backs the admin inbox.
How:   Submission trims the four required fields and rejects the request
       when any is empty. A demo request also needs all four demo slot
       fields. The message is stored with status 'new'. The inbox
       lists newest first and lets an admin change status and notes only.
Who:   Called by routes/contact.py.
"""

import logging
from typing import List

from sqlalchemy import delete, desc, select, update
from sqlalchemy.ext.asyncio import AsyncSession

from content_api.exceptions import DatabaseError, ValidationError
from content_api.models import ContactMessage
from content_api.schemas.site import ContactMessageUpdate, ContactSubmission

logger = logging.getLogger(__name__)

REQUIRED_FIELDS = ("name", "email", "contact_no", "message")
DEMO_FIELDS = ("demo_month", "demo_day", "demo_year", "demo_time")


class ContactService:
    """
    Stateless; every call receives its own session.

    A submission either passes every check and becomes exactly one row, or
    fails before the INSERT and writes nothing.
    """

    async def submit(self, db: AsyncSession, submission: ContactSubmission) -> ContactMessage:
        values = {field: (getattr(submission, field) or "").strip() for field in REQUIRED_FIELDS}
        missing = [field for field, value in values.items() if not value]
        if missing:
            # Same message whichever field is missing
            raise ValidationError(
                message="All fields are required",
                context={"missing": missing},
            )

        wants_demo = bool(submission.wants_demo)
        demo = {field: None for field in DEMO_FIELDS}
        if wants_demo:
            demo = {field: (getattr(submission, field) or "").strip() for field in DEMO_FIELDS}
            missing = [field for field, value in demo.items() if not value]
            if missing:
                raise ValidationError(
                    message="All demo date and time fields are required when requesting a demo",
                    context={"missing": missing},
                )

        record = ContactMessage(
            **values,
            **demo,
            wants_demo=wants_demo,
            project_id=submission.project_id,
            project_title=submission.project_title,
            status="new",
        )
        try:
            db.add(record)
            await db.flush()
        except Exception as e:
            logger.error("Failed to save contact message: %s", e, exc_info=True)
            raise DatabaseError(
                message="Failed to send message",
                context={"error_type": type(e).__name__},
            ) from e

        logger.info(
            "Stored contact message %s (project=%s, demo=%s)",
            record.id, record.project_id, wants_demo,
        )
        return record

    async def list_messages(self, db: AsyncSession) -> List[ContactMessage]:
        query = select(ContactMessage).order_by(
            desc(ContactMessage.created_at), desc(ContactMessage.id)
        )
        try:
            result = await db.execute(query)
            return list(result.scalars().all())
        except Exception as e:
            logger.error("Failed to fetch contact messages: %s", e, exc_info=True)
            raise DatabaseError(message="Failed to fetch contact messages") from e

    async def update_message(
        self, db: AsyncSession, message_id: int, changes: ContactMessageUpdate
    ) -> None:
        values = changes.model_dump(exclude_unset=True)
        # status is NOT NULL; an explicit null means "leave it"
        if values.get("status") is None:
            values.pop("status", None)
        if not values:
            raise ValidationError(message="No updatable fields provided")

        try:
            await db.execute(
                update(ContactMessage)
                .where(ContactMessage.id == message_id)
                .values(**values)
            )
        except Exception as e:
            logger.error("Failed to update contact message %s: %s", message_id, e, exc_info=True)
            raise DatabaseError(message="Failed to update contact message") from e

        logger.info("Updated contact message %s fields=%s", message_id, sorted(values))

    async def delete_message(self, db: AsyncSession, message_id: int) -> None:
        try:
            await db.execute(delete(ContactMessage).where(ContactMessage.id == message_id))
        except Exception as e:
            logger.error("Failed to delete contact message %s: %s", message_id, e, exc_info=True)
            raise DatabaseError(message="Failed to delete contact message") from e

        logger.info("Deleted contact message %s", message_id)


contact_service = ContactService()
