"""
Site Content API — Display-Ordered Resource Routes
===================================================

What:  HTTP surface for the content types the public site renders in order:
       projects, services, services list, statistics, team, ticker and shop
       categories.
How:   `build_resource_router()` wraps one ResourceService in up to four
       routes. Listing is public; create, update and delete require an admin
       session through the `require_admin` dependency.

    GET    /api/admin/<path>        list, ordered by displayOrder      200
    POST   /api/admin/<path>        create                             201 {success, id}
    PUT    /api/admin/<path>/{id}   partial update (allowlisted)       200 {success}
    DELETE /api/admin/<path>/{id}   delete by id                       200 {success}

Updating or deleting an id that does not exist still answers {success: true};
the statement simply matches no rows.
"""

import logging
from typing import Iterable, List, Type

from fastapi import APIRouter, Depends, status
from pydantic import BaseModel
from sqlalchemy.ext.asyncio import AsyncSession

from content_api.auth import Authenticated, require_admin
from content_api.database import get_db_session
from content_api.schemas.base import CreatedResponse, ErrorResponse, SuccessResponse
from content_api.schemas.content import (
    ProjectRead,
    ServiceListItemRead,
    ServiceRead,
    ShopCategoryRead,
    StatisticRead,
    TeamMemberRead,
    TickerItemRead,
)
from content_api.services.crud import ResourceService
from content_api.services.resources import (
    project_service,
    service_list_service,
    service_service,
    shop_category_service,
    statistic_service,
    team_service,
    ticker_service,
)

logger = logging.getLogger(__name__)

ALL_OPERATIONS = ("list", "create", "update", "delete")

ADMIN_ERRORS = {
    401: {"description": "No valid admin session", "model": ErrorResponse},
    500: {"description": "Database failure", "model": ErrorResponse},
}


def build_resource_router(
    service: ResourceService,
    path: str,
    read_schema: Type[BaseModel],
    operations: Iterable[str] = ALL_OPERATIONS,
    tag: str = "Content",
) -> APIRouter:
    """
    Build the routes for one resource.

    Args:
        service:      configured ResourceService
        path:         URL segment below /api/admin, e.g. "ticker"
        read_schema:  response model for list items
        operations:   subset of ALL_OPERATIONS to expose
    """
    operations = set(operations)
    unknown = operations - set(ALL_OPERATIONS)
    if unknown:
        raise ValueError(f"Unknown resource operations: {sorted(unknown)}")

    router = APIRouter(prefix=f"/api/admin/{path}", tags=[tag])
    slug = path.replace("/", "_").replace("-", "_")
    create_schema = service.create_schema
    update_schema = service.update_schema

    if "list" in operations:
        @router.get(
            "",
            response_model=List[read_schema],
            summary=f"List {service.plural_label}",
            operation_id=f"list_{slug}",
        )
        async def list_records(db: AsyncSession = Depends(get_db_session)):
            return await service.list(db)

    if "create" in operations:
        @router.post(
            "",
            response_model=CreatedResponse,
            status_code=status.HTTP_201_CREATED,
            responses=ADMIN_ERRORS,
            summary=f"Create a {service.label}",
            operation_id=f"create_{slug}",
        )
        async def create_record(
            payload: create_schema,
            admin: Authenticated = Depends(require_admin),
            db: AsyncSession = Depends(get_db_session),
        ) -> CreatedResponse:
            record_id = await service.create(db, payload)
            return CreatedResponse(id=record_id)

    if "update" in operations:
        @router.put(
            "/{record_id}",
            response_model=SuccessResponse,
            responses=ADMIN_ERRORS,
            summary=f"Update a {service.label}",
            operation_id=f"update_{slug}",
        )
        async def update_record(
            record_id: int,
            payload: update_schema,
            admin: Authenticated = Depends(require_admin),
            db: AsyncSession = Depends(get_db_session),
        ) -> SuccessResponse:
            await service.update(db, record_id, payload)
            return SuccessResponse()

    if "delete" in operations:
        @router.delete(
            "/{record_id}",
            response_model=SuccessResponse,
            responses=ADMIN_ERRORS,
            summary=f"Delete a {service.label}",
            operation_id=f"delete_{slug}",
        )
        async def delete_record(
            record_id: int,
            admin: Authenticated = Depends(require_admin),
            db: AsyncSession = Depends(get_db_session),
        ) -> SuccessResponse:
            await service.delete(db, record_id)
            return SuccessResponse()

    return router


routers = [
    build_resource_router(project_service, "projects", ProjectRead),
    build_resource_router(service_service, "services", ServiceRead),
    build_resource_router(service_list_service, "services-list", ServiceListItemRead),
    build_resource_router(statistic_service, "statistics", StatisticRead),
    build_resource_router(team_service, "team", TeamMemberRead),
    build_resource_router(ticker_service, "ticker", TickerItemRead),
    build_resource_router(
        shop_category_service,
        "shop/categories",
        ShopCategoryRead,
        operations=("list", "create", "delete"),
        tag="Shop",
    ),
]
