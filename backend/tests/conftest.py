# backend/tests/conftest.py
import os

# Keep the app off the production database before anything imports settings
os.environ.setdefault("DATABASE_URL", "sqlite+aiosqlite://")
os.environ.setdefault("SEED_ON_STARTUP", "false")

import pytest
import pytest_asyncio
from httpx import AsyncClient, ASGITransport
from sqlalchemy.ext.asyncio import create_async_engine
from sqlalchemy.pool import StaticPool

from evcharge.core.database import create_session_factory, get_session, init_db
from evcharge.main import app


@pytest_asyncio.fixture
async def engine():
    """Fresh in-memory database per test."""
    engine = create_async_engine(
        "sqlite+aiosqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    await init_db(engine)
    yield engine
    await engine.dispose()


@pytest_asyncio.fixture
async def session(engine):
    factory = create_session_factory(engine)
    async with factory() as session:
        yield session


@pytest_asyncio.fixture
async def client(engine):
    """HTTP client against the app, wired to the test database."""
    factory = create_session_factory(engine)

    async def override_get_session():
        async with factory() as session:
            yield session

    app.dependency_overrides[get_session] = override_get_session
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as client:
        yield client
    app.dependency_overrides.clear()


@pytest_asyncio.fixture
async def auth_headers(client):
    """Headers for a freshly registered user."""
    response = await client.post(
        "/api/auth/register",
        json={"username": "driver", "email": "driver@example.com", "password": "secret123"},
    )
    assert response.status_code == 201
    return {"Authorization": f"Bearer {response.json()['token']}"}


@pytest.fixture
def station_payload():
    return {
        "name": "Depot A",
        "latitude": 12.9,
        "longitude": 77.6,
        "status": "Active",
        "powerOutput": 50,
        "connectorType": "CCS",
    }
