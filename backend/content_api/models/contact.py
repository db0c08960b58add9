"""
Site Content API — Contact Message Model
=========================================

What:  ORM model for the `contact_messages` inbox table.
Who:   Written by the public contact form; read, annotated and deleted by
       admins through the inbox endpoints.

Status values: new → read → replied → archived. The public form always
inserts 'new'; only admins move a message forward.

project_id / project_title are soft references to the project an inquiry
was sent from. No foreign key is enforced.

The demo_* columns hold the preferred demo slot as the visitor entered it.
They are set only when wants_demo is true and are NULL otherwise.
"""

from typing import Optional

from sqlalchemy import Boolean, Integer, String, Text, false, text
from sqlalchemy.orm import Mapped, mapped_column

from content_api.database import Base
from content_api.models.content import TimestampMixin

MESSAGE_STATUSES = ("new", "read", "replied", "archived")


class ContactMessage(TimestampMixin, Base):
    __tablename__ = "contact_messages"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    name: Mapped[str] = mapped_column(String(255), nullable=False)
    email: Mapped[str] = mapped_column(String(255), nullable=False)
    contact_no: Mapped[str] = mapped_column(String(50), nullable=False)
    message: Mapped[str] = mapped_column(Text, nullable=False)
    project_id: Mapped[Optional[int]] = mapped_column(Integer, nullable=True)
    project_title: Mapped[Optional[str]] = mapped_column(String(255), nullable=True)
    wants_demo: Mapped[bool] = mapped_column(
        Boolean, nullable=False, default=False, server_default=false()
    )
    demo_month: Mapped[Optional[str]] = mapped_column(String(20), nullable=True)
    demo_day: Mapped[Optional[str]] = mapped_column(String(20), nullable=True)
    demo_year: Mapped[Optional[str]] = mapped_column(String(20), nullable=True)
    demo_time: Mapped[Optional[str]] = mapped_column(String(50), nullable=True)
    status: Mapped[str] = mapped_column(
        String(50),
        nullable=False,
        default="new",
        server_default=text("'new'"),
    )
    admin_notes: Mapped[Optional[str]] = mapped_column(Text, nullable=True)

    def __repr__(self) -> str:
        return f"<ContactMessage(id={self.id}, status='{self.status}')>"
