# Models package init
"""
Site Content API — ORM Models
==============================

Importing this package registers every table on `Base.metadata`.
"""

from content_api.models.contact import MESSAGE_STATUSES, ContactMessage
from content_api.models.content import (
    Project,
    Service,
    ServiceListItem,
    ShopCategory,
    Statistic,
    TeamMember,
    TickerItem,
)
from content_api.models.image import Image
from content_api.models.user import AdminUser

__all__ = [
    "AdminUser",
    "ContactMessage",
    "Image",
    "MESSAGE_STATUSES",
    "Project",
    "Service",
    "ServiceListItem",
    "ShopCategory",
    "Statistic",
    "TeamMember",
    "TickerItem",
]
