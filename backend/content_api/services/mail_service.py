"""
Site Content API — Contact Notification Mail
=============================================

What:  Forwards each stored contact form submission to the company inbox.
How:   Builds a multipart EmailMessage (plain text plus an HTML part rendered
       from templates/contact_notification.html with autoescaping) and sends
       it over SMTP in a worker thread.
Who:   Scheduled as a background task by routes/contact.py after the message
       row has been stored.

Delivery is best effort. Missing mail configuration or an SMTP failure is
logged and never changes the response the visitor already received.

Settings used:
    CONTACT_FORWARD_EMAIL   recipient; falls back to EMAIL_USER
    EMAIL_USER              SMTP login and default sender address
    EMAIL_APP_PASSWORD      SMTP password (APP_PASSWORD also accepted)
    EMAIL_FROM              display name or full "Name <addr>" sender
    SMTP_HOST / SMTP_PORT   server; SMTP_SECURE picks implicit TLS or STARTTLS
"""

import logging
import smtplib
from dataclasses import dataclass
from email.message import EmailMessage
from typing import Optional

from jinja2 import Environment, PackageLoader, select_autoescape
from starlette.concurrency import run_in_threadpool

from content_api.config import settings
from content_api.models import ContactMessage

logger = logging.getLogger(__name__)

_jinja_env = Environment(
    loader=PackageLoader("content_api", "templates"),
    autoescape=select_autoescape(["html", "xml"]),
)


@dataclass(frozen=True)
class ContactNotification:
    """Snapshot of a stored message, detached from the database session."""

    message_id: int
    name: str
    email: str
    contact_no: str
    message: str
    project_title: Optional[str] = None
    wants_demo: bool = False
    demo_month: Optional[str] = None
    demo_day: Optional[str] = None
    demo_year: Optional[str] = None
    demo_time: Optional[str] = None

    @classmethod
    def from_message(cls, record: ContactMessage) -> "ContactNotification":
        return cls(
            message_id=record.id,
            name=record.name,
            email=record.email,
            contact_no=record.contact_no,
            message=record.message,
            project_title=record.project_title,
            wants_demo=record.wants_demo,
            demo_month=record.demo_month,
            demo_day=record.demo_day,
            demo_year=record.demo_year,
            demo_time=record.demo_time,
        )

    @property
    def demo_slot(self) -> Optional[str]:
        """Preferred demo date as "M/D/YYYY at TIME", or None."""
        if not self.wants_demo:
            return None
        return f"{self.demo_month}/{self.demo_day}/{self.demo_year} at {self.demo_time}"


class MailService:
    """Stateless; reads the SMTP settings on every send."""

    @property
    def recipient(self) -> Optional[str]:
        return settings.contact_forward_email or settings.email_user

    def is_configured(self) -> bool:
        return bool(self.recipient and settings.email_user and settings.email_app_password)

    def sender(self) -> str:
        user = settings.email_user
        from_env = (settings.email_from or "").strip()
        if not from_env:
            return f"{settings.company_name} Contact <{user}>"
        if "@" in from_env and "<" in from_env:
            return from_env
        return f"{from_env} <{user}>"

    def build_contact_message(self, notification: ContactNotification) -> EmailMessage:
        subject = f"New contact message from {notification.name}"

        lines = [
            f"From: {notification.name}",
            f"Email: {notification.email}",
            f"Contact No.: {notification.contact_no}",
        ]
        if notification.project_title:
            lines.append(f"Project: {notification.project_title}")
        if notification.demo_slot:
            lines.append("Demo Request: Yes")
            lines.append(f"Preferred Date: {notification.demo_slot}")
        lines += ["", notification.message]

        html_body = _jinja_env.get_template("contact_notification.html").render(
            brand=settings.company_name,
            name=notification.name,
            email=notification.email,
            contact_no=notification.contact_no,
            project_title=notification.project_title,
            demo_slot=notification.demo_slot,
            message=notification.message,
        )

        msg = EmailMessage()
        msg["From"] = self.sender()
        msg["To"] = self.recipient
        msg["Reply-To"] = notification.email
        msg["Subject"] = subject
        msg.set_content("\n".join(lines))
        msg.add_alternative(html_body, subtype="html")
        return msg

    def _deliver(self, msg: EmailMessage) -> None:
        if settings.smtp_secure:
            with smtplib.SMTP_SSL(
                settings.smtp_host, settings.smtp_port, timeout=settings.smtp_timeout
            ) as server:
                server.login(settings.email_user, settings.email_app_password)
                server.send_message(msg)
            return

        with smtplib.SMTP(settings.smtp_host, settings.smtp_port, timeout=settings.smtp_timeout) as server:
            server.starttls()
            server.login(settings.email_user, settings.email_app_password)
            server.send_message(msg)

    async def forward_contact_message(self, notification: ContactNotification) -> bool:
        """
        Email the submission to the configured recipient.

        Returns True when the SMTP server accepted the message. Never raises.
        """
        if not self.is_configured():
            logger.warning(
                "Contact message %s not forwarded: set EMAIL_USER and "
                "EMAIL_APP_PASSWORD (or APP_PASSWORD) to enable mail",
                notification.message_id,
            )
            return False

        try:
            msg = self.build_contact_message(notification)
            await run_in_threadpool(self._deliver, msg)
        except Exception as e:
            logger.error(
                "Failed to forward contact message %s: %s",
                notification.message_id, e, exc_info=True,
            )
            return False

        logger.info("Forwarded contact message %s to %s", notification.message_id, self.recipient)
        return True


mail_service = MailService()
