"""
Orphanage API — Test Configuration (conftest.py)
=================================================

What:  Shared pytest fixtures for the entire test suite.
How:   pytest auto-discovers conftest.py and makes fixtures available to all tests.

Fixture Hierarchy (all function-scoped, fresh for each test):
    ├── store: Real in-memory Store with both tables created
    ├── mock_store: AsyncMock standing in for Store (service unit tests)
    ├── app: FastAPI app owning `store`
    ├── test_client: HTTPX AsyncClient routed into `app`
    └── employee_payload / child_payload: Valid request bodies
"""

import os

# Override settings for testing BEFORE any orphanage imports
os.environ["DATABASE_URL"] = "sqlite+aiosqlite:///:memory:"
os.environ["LOG_LEVEL"] = "WARNING"
os.environ.pop("PORT", None)

from typing import AsyncGenerator  # noqa: E402
from unittest.mock import AsyncMock  # noqa: E402

import pytest  # noqa: E402
import pytest_asyncio  # noqa: E402
from httpx import ASGITransport, AsyncClient  # noqa: E402

from orphanage.database import Store  # noqa: E402
from orphanage.main import create_app  # noqa: E402


@pytest_asyncio.fixture
async def store() -> AsyncGenerator[Store, None]:
    """
    Provides a started in-memory store.

    Each test gets its own engine, so ids start at 1 and tables are empty.
    """
    s = Store("sqlite+aiosqlite:///:memory:")
    await s.start()
    yield s
    await s.close()


@pytest.fixture
def mock_store():
    """
    Provides a mock Store whose operations are AsyncMocks.

    Usage:
        mock_store.get_by_id.return_value = None
        with pytest.raises(NotFoundError):
            await employee_service.get(mock_store, "1")
    """
    s = AsyncMock(spec=Store)
    s.list_all = AsyncMock(return_value=[])
    s.get_by_id = AsyncMock(return_value=None)
    s.insert = AsyncMock(return_value=1)
    s.update = AsyncMock(return_value=0)
    s.delete = AsyncMock(return_value=0)
    return s


@pytest.fixture
def app(store):
    """
    FastAPI app owning the test store.

    ASGITransport does not run the lifespan, so the `store` fixture starts
    and closes the store instead.
    """
    return create_app(store=store)


@pytest_asyncio.fixture
async def test_client(app) -> AsyncGenerator[AsyncClient, None]:
    """
    Provides an async HTTP test client for endpoint testing.

    Usage:
        async def test_list(test_client):
            response = await test_client.get("/employees")
            assert response.status_code == 200
    """
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as client:
        yield client


@pytest.fixture
def employee_payload():
    return {"name": "Ana", "role": "Cook", "salary": 1500}


@pytest.fixture
def child_payload():
    return {"name": "Lucas", "age": 7, "history": "Arrived in 2023, enjoys drawing."}
