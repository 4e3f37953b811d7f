"""Pytest configuration and fixtures for tenantscope.

Settings are re-read per test (get_settings cache cleared) so tests can
override env with monkeypatch. Repository and database-backed API tests
run against in-memory SQLite (aiosqlite); no external database is needed.
"""

import pytest
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine

from tenantscope.core.config import Settings, get_settings
from tenantscope.core.tenant_context import set_request_context, set_tenant_id
from tenantscope.infrastructure.persistence.database import Base
from tests import models  # noqa: F401  (registers test tables on Base.metadata)


@pytest.fixture(autouse=True)
def _reset_tenancy_state(monkeypatch: pytest.MonkeyPatch):
    """Fresh settings and empty tenant/request context for every test."""
    for name in (
        "PLATFORM_ENABLED",
        "TENANCY_PACKAGE_ENABLED",
        "STANDALONE_TENANT_ID",
        "CENTRAL_DOMAINS",
        "DATABASE_URL",
        "SECRET_KEY",
    ):
        monkeypatch.delenv(name, raising=False)
    get_settings.cache_clear()
    set_tenant_id(None)
    set_request_context(None)
    yield
    set_tenant_id(None)
    set_request_context(None)
    get_settings.cache_clear()


@pytest.fixture
def make_settings():
    """Build Settings with keyword overrides (no env, no .env file)."""

    def _make(**overrides) -> Settings:
        return Settings(_env_file=None, **overrides)

    return _make


@pytest.fixture
async def client() -> AsyncClient:
    """Async HTTP client against a freshly built FastAPI app (ASGI)."""
    from tenantscope.main import create_app

    transport = ASGITransport(app=create_app())
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac


@pytest.fixture
async def sqlite_session() -> AsyncSession:
    """In-memory SQLite session with all tables created. Rolled back after test."""
    engine = create_async_engine("sqlite+aiosqlite:///:memory:")
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    session_factory = async_sessionmaker(engine, expire_on_commit=False)
    async with session_factory() as session:
        yield session
        await session.rollback()
    await engine.dispose()
