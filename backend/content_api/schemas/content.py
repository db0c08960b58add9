"""
Site Content API — Content Resource Schemas
============================================

What:  Request and response models for the display-ordered resources.

Each resource has three models:
    <Name>Read    what list endpoints return
    <Name>Create  POST body; missing optional fields take the defaults below
    <Name>Update  PUT body; every field optional. The field list IS the
                  allowlist of columns an admin may change; anything else in
                  the body is dropped.
"""

from datetime import datetime
from typing import Optional

from content_api.schemas.base import CamelModel


class OrderedRead(CamelModel):
    id: int
    display_order: int
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None


# ── Projects ──────────────────────────────────────────────────────────────

class ProjectRead(OrderedRead):
    title: str
    year: str
    subtitle: str
    description: str
    category: str
    thumbnail: Optional[str] = None
    screenshot1: Optional[str] = None
    screenshot2: Optional[str] = None
    screenshot3: Optional[str] = None
    screenshot4: Optional[str] = None


class ProjectCreate(CamelModel):
    title: str
    year: str = ""
    subtitle: str = ""
    description: str = ""
    category: str = ""
    thumbnail: Optional[str] = None
    screenshot1: Optional[str] = None
    screenshot2: Optional[str] = None
    screenshot3: Optional[str] = None
    screenshot4: Optional[str] = None
    display_order: int = 0


class ProjectUpdate(CamelModel):
    title: Optional[str] = None
    year: Optional[str] = None
    subtitle: Optional[str] = None
    description: Optional[str] = None
    category: Optional[str] = None
    thumbnail: Optional[str] = None
    screenshot1: Optional[str] = None
    screenshot2: Optional[str] = None
    screenshot3: Optional[str] = None
    screenshot4: Optional[str] = None
    display_order: Optional[int] = None


# ── Services ──────────────────────────────────────────────────────────────

class ServiceRead(OrderedRead):
    title: str
    description: str
    icon: str


class ServiceCreate(CamelModel):
    title: str
    description: str = ""
    icon: str = ""
    display_order: int = 0


class ServiceUpdate(CamelModel):
    title: Optional[str] = None
    description: Optional[str] = None
    icon: Optional[str] = None
    display_order: Optional[int] = None


class ServiceListItemRead(OrderedRead):
    name: str
    description: str
    image: Optional[str] = None


class ServiceListItemCreate(CamelModel):
    name: str
    description: str = ""
    image: Optional[str] = None
    display_order: int = 0


class ServiceListItemUpdate(CamelModel):
    name: Optional[str] = None
    description: Optional[str] = None
    image: Optional[str] = None
    display_order: Optional[int] = None


# ── Statistics ────────────────────────────────────────────────────────────

class StatisticRead(OrderedRead):
    label: str
    value: str


class StatisticCreate(CamelModel):
    label: str
    value: str
    display_order: int = 0


class StatisticUpdate(CamelModel):
    label: Optional[str] = None
    value: Optional[str] = None
    display_order: Optional[int] = None


# ── Team ──────────────────────────────────────────────────────────────────

class TeamMemberRead(OrderedRead):
    name: str
    position: str
    image: Optional[str] = None


class TeamMemberCreate(CamelModel):
    name: str
    position: str = ""
    image: Optional[str] = None
    display_order: int = 0


class TeamMemberUpdate(CamelModel):
    name: Optional[str] = None
    position: Optional[str] = None
    image: Optional[str] = None
    display_order: Optional[int] = None


# ── Ticker ────────────────────────────────────────────────────────────────

class TickerItemRead(OrderedRead):
    text: str


class TickerItemCreate(CamelModel):
    text: str
    display_order: int = 0


class TickerItemUpdate(CamelModel):
    text: Optional[str] = None
    display_order: Optional[int] = None


# ── Shop categories ───────────────────────────────────────────────────────
# Create falls back field by field on *falsy* input, so an empty name
# becomes "New Category" (see SHOP_CATEGORY_DEFAULTS in services.resources).

class ShopCategoryRead(OrderedRead):
    name: str
    text: str
    image: str


class ShopCategoryCreate(CamelModel):
    name: Optional[str] = None
    text: Optional[str] = None
    image: Optional[str] = None
    display_order: Optional[int] = None


class ShopCategoryUpdate(CamelModel):
    name: Optional[str] = None
    text: Optional[str] = None
    image: Optional[str] = None
    display_order: Optional[int] = None
