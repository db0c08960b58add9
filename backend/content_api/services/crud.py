"""
Site Content API — Generic Resource Service
============================================

What:  One implementation of list / create / update / delete shared by every
       display-ordered content type.
How:   A `ResourceService` is parameterized by the ORM model, the column to
       order by, create-time defaults, the Pydantic models that define the
       create body and the updatable-field allowlist, and an optional field
       transform (used for sanitizing team member text).
Who:   Instantiated once per resource in services/resources.py; wrapped in
       HTTP routes by routes/resources.build_resource_router().

Operation contract:
    list()            ordered by order_column ascending, ties by id
    create(payload)   exactly one INSERT; returns the new id
    update(id, body)  exactly one UPDATE restricted to the update schema's
                      fields that the client actually sent
    delete(id)        exactly one DELETE by primary key, no cascade

Error handling:
    Any failure inside a database call is logged with its traceback and
    re-raised as DatabaseError carrying "Failed to <verb> <label>". Nothing
    is retried; each operation is a single statement, so there is no
    partial state to clean up.
"""

import logging
from typing import Any, Callable, Dict, List, Mapping, Optional, Sequence, Type

from pydantic import BaseModel
from sqlalchemy import asc, delete, select, update
from sqlalchemy.ext.asyncio import AsyncSession

from content_api.database import Base
from content_api.exceptions import DatabaseError, ValidationError

logger = logging.getLogger(__name__)

FieldTransform = Callable[[Dict[str, Any]], Dict[str, Any]]


class ResourceService:
    """
    CRUD operations for one table.

    Args:
        model:          SQLAlchemy model class
        label:          singular name used in error messages ("ticker item")
        plural_label:   plural name used in list errors ("ticker items")
        create_schema:  Pydantic model for POST bodies
        update_schema:  Pydantic model for PUT bodies; its fields are the
                        only columns update() will ever write
        order_column:   column name to sort by (default "display_order")
        defaults:       values substituted on create when the client sent a
                        falsy value (None, "", 0)
        transform:      applied to the field dict on create and update
    """

    def __init__(
        self,
        model: Type[Base],
        label: str,
        plural_label: str,
        create_schema: Type[BaseModel],
        update_schema: Type[BaseModel],
        order_column: str = "display_order",
        defaults: Optional[Mapping[str, Any]] = None,
        transform: Optional[FieldTransform] = None,
    ):
        self.model = model
        self.label = label
        self.plural_label = plural_label
        self.create_schema = create_schema
        self.update_schema = update_schema
        self.order_column = order_column
        self.defaults = dict(defaults or {})
        self.transform = transform

    @property
    def updatable_fields(self) -> Sequence[str]:
        return tuple(self.update_schema.model_fields)

    def _prepare(self, values: Dict[str, Any]) -> Dict[str, Any]:
        if self.transform is not None:
            values = self.transform(values)
        return values

    def _failure(self, verb: str, noun: str, exc: Exception, **context: Any) -> DatabaseError:
        logger.error("Failed to %s %s: %s", verb, noun, exc, exc_info=True)
        return DatabaseError(
            message=f"Failed to {verb} {noun}",
            context={"error_type": type(exc).__name__, **context},
        )

    async def list(self, db: AsyncSession) -> List[Any]:
        order_col = getattr(self.model, self.order_column)
        query = select(self.model).order_by(asc(order_col), asc(self.model.id))
        try:
            result = await db.execute(query)
            return list(result.scalars().all())
        except Exception as e:
            raise self._failure("fetch", self.plural_label, e) from e

    async def create(self, db: AsyncSession, payload: BaseModel) -> int:
        values = payload.model_dump()
        for field, default in self.defaults.items():
            if not values.get(field):
                values[field] = default
        values = self._prepare(values)

        record = self.model(**values)
        try:
            db.add(record)
            await db.flush()  # assigns the autoincrement id
        except Exception as e:
            raise self._failure("create", self.label, e) from e

        logger.info("Created %s %s", self.label, record.id)
        return record.id

    async def update(self, db: AsyncSession, record_id: int, payload: BaseModel) -> None:
        # exclude_unset keeps this a partial update: only fields the client sent
        values = payload.model_dump(exclude_unset=True)
        columns = self.model.__table__.columns
        # null for a NOT NULL column means "leave it"
        values = {
            k: v for k, v in values.items()
            if k in self.updatable_fields and (v is not None or columns[k].nullable)
        }
        if not values:
            raise ValidationError(message="No updatable fields provided")
        values = self._prepare(values)

        statement = (
            update(self.model)
            .where(self.model.id == record_id)
            .values(**values)
        )
        try:
            await db.execute(statement)
        except Exception as e:
            raise self._failure("update", self.label, e, record_id=record_id) from e

        logger.info("Updated %s %s fields=%s", self.label, record_id, sorted(values))

    async def delete(self, db: AsyncSession, record_id: int) -> None:
        try:
            await db.execute(delete(self.model).where(self.model.id == record_id))
        except Exception as e:
            raise self._failure("delete", self.label, e, record_id=record_id) from e

        logger.info("Deleted %s %s", self.label, record_id)
