"""
Shared test fixtures and configuration for entire test suite.

Provides: In-memory database sessions, settings, application and HTTP
client fixtures, caller identity headers
Dependencies: pytest, sqlalchemy, fastapi, httpx
System role: Test infrastructure and fixture management
"""

import pytest
from fastapi.testclient import TestClient

from footwatch.api.main import create_app
from footwatch.boundary.identity import CallerIdentity, Role
from footwatch.configs import Settings
from footwatch.configs.database import DatabaseSettings
from footwatch.configs.device import DeviceSettings
from footwatch.configs.prediction import PredictionSettings

DEVICE_SECRET = "test-device-secret"
MODEL_URL = "http://model.test"


@pytest.fixture
async def test_async_db():
    """
    Create in-memory SQLite async database for testing.

    Yields:
        AsyncSession: Test database session with cleanup
    """
    from sqlalchemy.ext.asyncio import AsyncSession, create_async_engine, async_sessionmaker
    from sqlalchemy.pool import StaticPool
    from footwatch.boundary.db.base import Base
    from footwatch.boundary.db import models  # noqa: F401

    # Use SQLite in-memory database for tests
    engine = create_async_engine(
        "sqlite+aiosqlite:///:memory:",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )

    # Create all tables
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    # Create session factory
    async_session = async_sessionmaker(
        engine,
        class_=AsyncSession,
        autoflush=False,
        expire_on_commit=False,
    )

    # Create session for test
    async with async_session() as session:
        yield session
        await session.rollback()

    # Cleanup
    await engine.dispose()


def build_settings(model_url: str | None = None, device_secret: str | None = DEVICE_SECRET) -> Settings:
    """Settings pointing at a fresh in-memory database."""
    return Settings(
        database=DatabaseSettings(
            url_override="sqlite+aiosqlite:///:memory:",
            create_tables_on_startup=True,
        ),
        device=DeviceSettings(ingest_secret=device_secret),
        prediction=PredictionSettings(url=model_url, timeout_seconds=0.5),
    )


@pytest.fixture
def settings() -> Settings:
    """Settings with no model configured (fallback path)."""
    return build_settings()


@pytest.fixture
def app(settings: Settings):
    """Application wired to an in-memory database."""
    return create_app(settings)


@pytest.fixture
def client(app):
    """TestClient running the application lifespan."""
    with TestClient(app) as test_client:
        yield test_client


@pytest.fixture
def patient() -> CallerIdentity:
    return CallerIdentity(user_id="alice", role=Role.PATIENT)


@pytest.fixture
def other_patient() -> CallerIdentity:
    return CallerIdentity(user_id="bob", role=Role.PATIENT)


@pytest.fixture
def admin() -> CallerIdentity:
    return CallerIdentity(user_id="root", role=Role.ADMIN)


@pytest.fixture
def make_settings():
    """Factory for settings with a model URL and/or device secret."""
    return build_settings


@pytest.fixture
def alice_headers() -> dict[str, str]:
    """Identity headers for patient alice, as set by the auth proxy."""
    return {"X-User-Id": "alice", "X-User-Role": "patient"}


@pytest.fixture
def bob_headers() -> dict[str, str]:
    """Identity headers for patient bob."""
    return {"X-User-Id": "bob", "X-User-Role": "patient"}


@pytest.fixture
def admin_headers() -> dict[str, str]:
    """Identity headers for an administrator."""
    return {"X-User-Id": "root", "X-User-Role": "admin"}


@pytest.fixture
def device_headers() -> dict[str, str]:
    """Device bearer-secret header."""
    return {"Authorization": f"Bearer {DEVICE_SECRET}"}
