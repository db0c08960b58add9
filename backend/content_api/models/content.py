"""
Site Content API — Display-Ordered Content Models
==================================================

What:  ORM models for the flat, independently ordered content records shown
       on the public site: projects, services, service-list items,
       statistics, team members, ticker items and shop categories.
How:   Each model mixes in `DisplayOrderMixin` and `TimestampMixin`, so the
       generic resource service can sort by `display_order` and fall back to
       `id` for ties.

Ordering contract:
    display_order has no uniqueness constraint. Two records may share a
    value; listings then fall back to insertion order (ascending id).
    Concurrent writers are last-writer-wins.
"""

from datetime import datetime, timezone
from typing import Optional

from sqlalchemy import DateTime, Integer, String, Text, text
from sqlalchemy.orm import Mapped, mapped_column

from content_api.database import Base


def utcnow() -> datetime:
    return datetime.now(timezone.utc)


class TimestampMixin:
    created_at: Mapped[Optional[datetime]] = mapped_column(
        DateTime(timezone=True),
        default=utcnow,
        server_default=text("CURRENT_TIMESTAMP"),
    )
    updated_at: Mapped[Optional[datetime]] = mapped_column(
        DateTime(timezone=True),
        default=utcnow,
        onupdate=utcnow,
        server_default=text("CURRENT_TIMESTAMP"),
    )


class DisplayOrderMixin:
    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    display_order: Mapped[int] = mapped_column(
        Integer,
        nullable=False,
        default=0,
        server_default=text("0"),
        comment="Sort position in public listings (ascending)",
    )


class Project(DisplayOrderMixin, TimestampMixin, Base):
    __tablename__ = "projects"

    title: Mapped[str] = mapped_column(String(255), nullable=False, default="")
    year: Mapped[str] = mapped_column(String(4), nullable=False, default="")
    subtitle: Mapped[str] = mapped_column(String(255), nullable=False, default="")
    description: Mapped[str] = mapped_column(Text, nullable=False, default="")
    # desktop, mobile, tools
    category: Mapped[str] = mapped_column(String(50), nullable=False, default="")
    thumbnail: Mapped[Optional[str]] = mapped_column(String(255), nullable=True)
    screenshot1: Mapped[Optional[str]] = mapped_column(String(255), nullable=True)
    screenshot2: Mapped[Optional[str]] = mapped_column(String(255), nullable=True)
    screenshot3: Mapped[Optional[str]] = mapped_column(String(255), nullable=True)
    screenshot4: Mapped[Optional[str]] = mapped_column(String(255), nullable=True)

    def __repr__(self) -> str:
        return f"<Project(id={self.id}, title='{self.title}', order={self.display_order})>"


class Service(DisplayOrderMixin, TimestampMixin, Base):
    __tablename__ = "services"

    title: Mapped[str] = mapped_column(String(255), nullable=False, default="")
    description: Mapped[str] = mapped_column(Text, nullable=False, default="")
    icon: Mapped[str] = mapped_column(String(255), nullable=False, default="")


class ServiceListItem(DisplayOrderMixin, TimestampMixin, Base):
    """An entry in the 'what we offer' list under the services section."""

    __tablename__ = "services_list"

    name: Mapped[str] = mapped_column(String(255), nullable=False, default="")
    description: Mapped[str] = mapped_column(Text, nullable=False, default="")
    image: Mapped[Optional[str]] = mapped_column(String(255), nullable=True)


class Statistic(DisplayOrderMixin, TimestampMixin, Base):
    __tablename__ = "statistics"

    label: Mapped[str] = mapped_column(String(100), nullable=False, default="")
    value: Mapped[str] = mapped_column(String(50), nullable=False, default="")


class TeamMember(DisplayOrderMixin, TimestampMixin, Base):
    """
    A person on the team page.

    `name` and `position` hold short rich text. They are stored already
    passed through the restrictive sanitization policy.
    """

    __tablename__ = "team_members"

    name: Mapped[str] = mapped_column(String(255), nullable=False, default="")
    position: Mapped[str] = mapped_column(String(255), nullable=False, default="")
    image: Mapped[Optional[str]] = mapped_column(String(255), nullable=True)


class TickerItem(DisplayOrderMixin, TimestampMixin, Base):
    __tablename__ = "ticker_items"

    text: Mapped[str] = mapped_column(String(255), nullable=False, default="")


class ShopCategory(DisplayOrderMixin, TimestampMixin, Base):
    __tablename__ = "shop_categories"

    name: Mapped[str] = mapped_column(String(255), nullable=False)
    # Display text, may differ from name
    text: Mapped[str] = mapped_column(String(255), nullable=False)
    # Image id or URL
    image: Mapped[str] = mapped_column(String(255), nullable=False, default="")
