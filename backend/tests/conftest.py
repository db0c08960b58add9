"""
Site Content API — Test Configuration (conftest.py)
====================================================

What:  Shared fixtures: an in-memory SQLite database, the HTTP client, and
       an authenticated admin.

Fixture Hierarchy (all function-scoped, so every test gets a fresh DB):
    db_engine ── session_factory ──┬── test_client   httpx AsyncClient on the app
                                   └── admin_user    a stored AdminUser
                                          └── auth_headers / auth_cookies
    mock_db_session                                  AsyncMock for failure paths
    mail_settings                                    SMTP settings for a fake account
"""

import os

# Must be set before anything imports content_api.config
os.environ["DATABASE_URL"] = "sqlite+aiosqlite:///:memory:"
os.environ["ENVIRONMENT"] = "test"
os.environ["JWT_SECRET"] = "test-secret-not-for-production"
os.environ["AUTO_CREATE_TABLES"] = "false"
os.environ["LOG_LEVEL"] = "WARNING"
os.environ["EMAIL_USER"] = ""
os.environ["EMAIL_APP_PASSWORD"] = ""

from unittest.mock import AsyncMock, MagicMock

import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import async_sessionmaker, create_async_engine
from sqlalchemy.pool import StaticPool

from content_api.auth import create_access_token, hash_password
from content_api.config import settings
from content_api.database import create_tables, get_db_session
from content_api.middleware.rate_limit import contact_limiter
from content_api.models import AdminUser

ADMIN_PASSWORD = "correct-horse-battery"


@pytest_asyncio.fixture
async def db_engine():
    """One shared in-memory connection, so every session sees the same tables."""
    engine = create_async_engine(
        "sqlite+aiosqlite://",
        poolclass=StaticPool,
        connect_args={"check_same_thread": False},
    )
    await create_tables(bind=engine)
    yield engine
    await engine.dispose()


@pytest_asyncio.fixture
async def session_factory(db_engine):
    return async_sessionmaker(db_engine, expire_on_commit=False)


@pytest_asyncio.fixture
async def test_client(session_factory):
    """
    httpx AsyncClient talking to the app through ASGITransport.

    get_db_session is overridden to use the test engine. The contact form
    limiter is reset so each test starts with a full allowance.
    """
    from content_api.main import app

    async def override_get_db_session():
        async with session_factory() as session:
            try:
                yield session
                await session.commit()
            except Exception:
                await session.rollback()
                raise

    app.dependency_overrides[get_db_session] = override_get_db_session
    contact_limiter.reset()

    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as client:
        yield client

    app.dependency_overrides.clear()
    contact_limiter.reset()


@pytest_asyncio.fixture
async def admin_user(session_factory) -> AdminUser:
    async with session_factory() as session:
        user = AdminUser(
            username="admin",
            password=hash_password(ADMIN_PASSWORD),
            email="admin@example.com",
        )
        session.add(user)
        await session.commit()
        return user


@pytest.fixture
def admin_password() -> str:
    return ADMIN_PASSWORD


@pytest.fixture
def admin_token(admin_user) -> str:
    return create_access_token(user_id=admin_user.id, username=admin_user.username)


@pytest.fixture
def auth_headers(admin_token):
    return {"Authorization": f"Bearer {admin_token}"}


@pytest.fixture
def auth_cookies(admin_token):
    return {settings.auth_cookie_name: admin_token}


@pytest.fixture
def mock_db_session():
    """AsyncSession stand-in for exercising database failure paths."""
    session = AsyncMock()
    session.execute = AsyncMock()
    session.flush = AsyncMock()
    session.commit = AsyncMock()
    session.rollback = AsyncMock()
    session.close = AsyncMock()
    session.add = MagicMock()
    return session


@pytest.fixture
def mail_settings(monkeypatch):
    """SMTP configuration pointing at a fake Gmail account."""
    monkeypatch.setattr(settings, "email_user", "site@example.com")
    monkeypatch.setattr(settings, "email_app_password", "app-password")
    monkeypatch.setattr(settings, "contact_forward_email", "sales@example.com")
    monkeypatch.setattr(settings, "email_from", None)
    monkeypatch.setattr(settings, "smtp_secure", True)
    return settings
