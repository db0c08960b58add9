"""
Site Content API — Admin User Model
====================================

What:  ORM model for `admin_users`, the accounts allowed into the admin panel.

The `password` column holds a passlib hash. It is never part of any
response schema. Accounts are provisioned out-of-band (see the
create-admin script); the HTTP creation route is closed by policy.
"""

from sqlalchemy import Integer, String
from sqlalchemy.orm import Mapped, mapped_column

from content_api.database import Base
from content_api.models.content import TimestampMixin


class AdminUser(TimestampMixin, Base):
    __tablename__ = "admin_users"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    username: Mapped[str] = mapped_column(String(100), nullable=False, unique=True)
    password: Mapped[str] = mapped_column(String(255), nullable=False)
    email: Mapped[str] = mapped_column(String(255), nullable=False, unique=True)

    def __repr__(self) -> str:
        return f"<AdminUser(id={self.id}, username='{self.username}')>"
