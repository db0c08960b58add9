"""
Site Content API — Database Session Management
===============================================

What:  Async SQLAlchemy engine, session factory, and FastAPI dependency.
How:   Creates an async engine with connection pooling, provides a session
       dependency that auto-commits on success and auto-rolls-back on error.
Who:   Used by route handlers via FastAPI's dependency injection system.
When:  Engine is created at module import; sessions are created per-request.

Connection Pooling:
    The pool is the only resource shared between requests. Its sizing and
    queueing of waiters are left to SQLAlchemy and the driver; handlers hold
    no other shared state. SQLite URLs (used by the test suite) get the
    dialect's default pool, since QueuePool arguments are rejected there.
"""

from typing import Any, AsyncGenerator, Dict

from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)
from sqlalchemy.orm import DeclarativeBase

from content_api.config import settings


def _engine_options() -> Dict[str, Any]:
    """Keyword arguments for create_async_engine based on the configured backend."""
    options: Dict[str, Any] = {
        # Echo SQL in DEBUG mode only
        "echo": settings.log_level == "DEBUG",
    }
    if not settings.is_sqlite:
        options.update(
            pool_size=settings.db_pool_size,
            max_overflow=settings.db_max_overflow,
            pool_pre_ping=settings.db_pool_pre_ping,
            pool_recycle=3600,
        )
    return options


# ── Engine & Session Factory ──────────────────────────────────────────────
engine: AsyncEngine = create_async_engine(settings.effective_database_url, **_engine_options())

# expire_on_commit=False: attributes stay readable after commit for serialization
async_session_factory = async_sessionmaker(
    engine,
    class_=AsyncSession,
    expire_on_commit=False,
)


class Base(DeclarativeBase):
    """
    Base class for all SQLAlchemy ORM models.

    All models share this metadata; `create_tables()` uses it at startup.
    """
    pass


# ── Session Dependency ────────────────────────────────────────────────────
async def get_db_session() -> AsyncGenerator[AsyncSession, None]:
    """
    FastAPI dependency that provides a database session per request.

    How it works:
        1. Creates a new session from the factory
        2. Yields it to the route handler
        3. On success: commits the transaction
        4. On error: rolls back and re-raises
        5. Always: closes the session (returns connection to pool)

    Example usage in a route:
        @router.get("/projects")
        async def list_projects(db: AsyncSession = Depends(get_db_session)):
            ...
    """
    async with async_session_factory() as session:
        try:
            yield session
            await session.commit()
        except Exception:
            await session.rollback()
            raise
        finally:
            await session.close()


# ── Lifecycle Helpers ─────────────────────────────────────────────────────
async def create_tables(bind: AsyncEngine = engine) -> None:
    """
    Create any missing tables for the registered models.

    When:  Called during startup when settings.auto_create_tables is on,
           and by the test suite against its in-memory engine.
    """
    # Import registers every model on Base.metadata
    from content_api import models  # noqa: F401

    async with bind.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)


async def dispose_engine() -> None:
    """
    Gracefully closes all connections in the pool.

    When:  Called during application shutdown (lifespan handler).
    """
    await engine.dispose()
