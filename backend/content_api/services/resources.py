"""
Site Content API — Resource Registry
=====================================

What:  One configured ResourceService per display-ordered content type.
Who:   Mounted by routes/resources.py; imported directly by tests.
"""

from typing import Any, Dict

from content_api.models import (
    Project,
    Service,
    ServiceListItem,
    ShopCategory,
    Statistic,
    TeamMember,
    TickerItem,
)
from content_api.schemas.content import (
    ProjectCreate,
    ProjectUpdate,
    ServiceCreate,
    ServiceListItemCreate,
    ServiceListItemUpdate,
    ServiceUpdate,
    ShopCategoryCreate,
    ShopCategoryUpdate,
    StatisticCreate,
    StatisticUpdate,
    TeamMemberCreate,
    TeamMemberUpdate,
    TickerItemCreate,
    TickerItemUpdate,
)
from content_api.security import sanitize_restrictive
from content_api.services.crud import ResourceService

SHOP_CATEGORY_DEFAULTS = {
    "name": "New Category",
    "text": "NEW CATEGORY",
    "image": "",
    "display_order": 0,
}

TEAM_SANITIZED_FIELDS = ("name", "position")


def sanitize_team_fields(values: Dict[str, Any]) -> Dict[str, Any]:
    """Run name/position through the restrictive HTML policy, leave the rest."""
    cleaned = dict(values)
    for field in TEAM_SANITIZED_FIELDS:
        if field in cleaned:
            cleaned[field] = sanitize_restrictive(cleaned[field])
    return cleaned


project_service = ResourceService(
    model=Project,
    label="project",
    plural_label="projects",
    create_schema=ProjectCreate,
    update_schema=ProjectUpdate,
)

service_service = ResourceService(
    model=Service,
    label="service",
    plural_label="services",
    create_schema=ServiceCreate,
    update_schema=ServiceUpdate,
)

service_list_service = ResourceService(
    model=ServiceListItem,
    label="service list item",
    plural_label="services list",
    create_schema=ServiceListItemCreate,
    update_schema=ServiceListItemUpdate,
)

statistic_service = ResourceService(
    model=Statistic,
    label="statistic",
    plural_label="statistics",
    create_schema=StatisticCreate,
    update_schema=StatisticUpdate,
)

team_service = ResourceService(
    model=TeamMember,
    label="team member",
    plural_label="team members",
    create_schema=TeamMemberCreate,
    update_schema=TeamMemberUpdate,
    transform=sanitize_team_fields,
)

ticker_service = ResourceService(
    model=TickerItem,
    label="ticker item",
    plural_label="ticker items",
    create_schema=TickerItemCreate,
    update_schema=TickerItemUpdate,
)

shop_category_service = ResourceService(
    model=ShopCategory,
    label="shop category",
    plural_label="shop categories",
    create_schema=ShopCategoryCreate,
    update_schema=ShopCategoryUpdate,
    defaults=SHOP_CATEGORY_DEFAULTS,
)
