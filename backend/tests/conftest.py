"""
Back Office Backend — Test Configuration (conftest.py)
========================================================

What:  Shared pytest fixtures for the entire test suite.
How:   pytest auto-discovers conftest.py and makes fixtures available to all tests.

Fixture Hierarchy:
    Function-scoped (created fresh for each test):
    ├── mock_db_session: AsyncMock session for service unit tests
    ├── db_engine:       in-memory SQLite engine with every table created
    ├── db_session:      session on db_engine for seeding and assertions
    ├── app:             the FastAPI app with get_db_session pointed at db_engine
    ├── client:          HTTPX AsyncClient talking to `app` in-process
    └── auth_headers:    Authorization header carrying a freshly signed token
"""

import os

# Override settings BEFORE any backoffice import; `settings` is built at import time
os.environ["DATABASE_URL"] = "sqlite+aiosqlite:///:memory:"
os.environ["JWT_SECRET_KEY"] = "test-secret-not-for-production"
os.environ["LOG_LEVEL"] = "WARNING"

from datetime import datetime, timezone  # noqa: E402
from unittest.mock import AsyncMock, MagicMock  # noqa: E402

import pytest  # noqa: E402
import pytest_asyncio  # noqa: E402
from httpx import ASGITransport, AsyncClient  # noqa: E402
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine  # noqa: E402
from sqlalchemy.pool import StaticPool  # noqa: E402

import backoffice.models  # noqa: E402,F401
from backoffice.database import Base, get_db_session  # noqa: E402
from backoffice.security import create_access_token  # noqa: E402


# ══════════════════════════════════════════════════════════════════════════
# Mocked Session (service unit tests)
# ══════════════════════════════════════════════════════════════════════════

@pytest.fixture
def mock_db_session():
    """
    A mock AsyncSession.

    Usage:
        result = MagicMock()
        result.scalars.return_value.all.return_value = [row]
        mock_db_session.execute.return_value = result
    """
    session = AsyncMock()
    session.execute = AsyncMock()
    session.flush = AsyncMock()
    session.refresh = AsyncMock()
    session.commit = AsyncMock()
    session.rollback = AsyncMock()
    session.close = AsyncMock()
    session.add = MagicMock()  # add() is synchronous on AsyncSession
    return session


# ══════════════════════════════════════════════════════════════════════════
# Real Database (in-memory SQLite)
# ══════════════════════════════════════════════════════════════════════════

@pytest_asyncio.fixture
async def db_engine():
    """
    In-memory SQLite shared by every session of one test.

    StaticPool keeps a single connection, so the schema created here is
    the one every later session sees.
    """
    engine = create_async_engine(
        "sqlite+aiosqlite://",
        poolclass=StaticPool,
        connect_args={"check_same_thread": False},
    )
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    yield engine
    await engine.dispose()


@pytest_asyncio.fixture
async def session_factory(db_engine):
    return async_sessionmaker(db_engine, class_=AsyncSession, expire_on_commit=False)


@pytest_asyncio.fixture
async def db_session(session_factory):
    async with session_factory() as session:
        yield session


@pytest_asyncio.fixture
async def seed(session_factory):
    """
    Insert rows in their own committed transaction and return them.

    Usage:
        [unit] = await seed(UnitMeasure(name="Kilogramo", symbol="kg"))
    """
    async def _seed(*rows):
        async with session_factory() as session:
            session.add_all(rows)
            await session.commit()
        return list(rows)

    return _seed


@pytest_asyncio.fixture
async def app(session_factory):
    """The application, with each request getting a session on the test database."""
    from backoffice.main import app as fastapi_app

    async def override_get_db_session():
        async with session_factory() as session:
            try:
                yield session
                await session.commit()
            except Exception:
                await session.rollback()
                raise

    fastapi_app.dependency_overrides[get_db_session] = override_get_db_session
    yield fastapi_app
    fastapi_app.dependency_overrides.clear()


@pytest_asyncio.fixture
async def client(app):
    """
    HTTPX AsyncClient routed straight into the ASGI app.

    Usage:
        async def test_health(client):
            response = await client.get("/health")
            assert response.status_code == 200
    """
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac


@pytest.fixture
def auth_headers():
    token = create_access_token(
        {
            "sub": "17",
            "email": "admin@example.com",
            "roles": [{"id": 1, "name": "admin"}],
            "systemRole": "super_admin",
        }
    )
    return {"Authorization": f"Bearer {token}"}


# ══════════════════════════════════════════════════════════════════════════
# Sample Data
# ══════════════════════════════════════════════════════════════════════════

@pytest.fixture
def sample_plan_data():
    return {
        "paymentTypeId": 1,
        "expressedInUf": False,
        "bankEntityId": None,
        "installmentsCount": 12,
        "startDate": datetime(2025, 1, 5, tzinfo=timezone.utc).isoformat(),
    }
