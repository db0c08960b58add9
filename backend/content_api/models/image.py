"""
Site Content API — Image Model
===============================

What:  ORM model for the `images` table.

Two storage modes:
    inline:  `data` holds the base64-encoded bytes, `url` is NULL
    blob:    `data` is empty, `url` points at the blob-hosted file

`is_chunked` / `chunk_count` describe inline uploads that were split across
several rows of a chunk table. Reassembling those is outside this service,
so a chunked record with no inline data cannot be served here.
"""

from datetime import datetime
from typing import Optional

from sqlalchemy import Boolean, DateTime, Integer, String, Text, false, text
from sqlalchemy.orm import Mapped, mapped_column

from content_api.database import Base
from content_api.models.content import utcnow


class Image(Base):
    __tablename__ = "images"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    filename: Mapped[str] = mapped_column(String(255), nullable=False)
    mime_type: Mapped[str] = mapped_column(String(100), nullable=False)
    size: Mapped[int] = mapped_column(Integer, nullable=False, default=0)
    data: Mapped[str] = mapped_column(Text, nullable=False, default="")
    url: Mapped[Optional[str]] = mapped_column(String(1024), nullable=True)
    is_chunked: Mapped[bool] = mapped_column(
        Boolean, nullable=False, default=False, server_default=false()
    )
    chunk_count: Mapped[int] = mapped_column(
        Integer, nullable=False, default=0, server_default=text("0")
    )
    created_at: Mapped[Optional[datetime]] = mapped_column(
        DateTime(timezone=True),
        default=utcnow,
        server_default=text("CURRENT_TIMESTAMP"),
    )

    @property
    def is_external(self) -> bool:
        return bool(self.url)

    def __repr__(self) -> str:
        return f"<Image(id={self.id}, filename='{self.filename}', external={self.is_external})>"
