"""
Library Catalog — Test Configuration (conftest.py)
====================================================

What:  Shared pytest fixtures for the entire test suite.
How:   pytest auto-discovers conftest.py and makes fixtures available to all tests.

Fixture Hierarchy (all function-scoped):
    ├── mock_db_session: Mock AsyncSession for service unit tests
    ├── test_settings: Settings pointing at a temporary SQLite file
    ├── database: Database for test_settings, schema created and seeded
    ├── test_app: FastAPI app built by create_app(test_settings), already seeded
    ├── test_client: HTTPX AsyncClient talking to test_app over ASGI
    └── book_payload: A valid POST /books body
"""

import os
import tempfile
from unittest.mock import AsyncMock, MagicMock

import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient

# Keep test runs away from ./library.db, set BEFORE any app imports
os.environ["DATABASE_URL"] = (
    "sqlite+aiosqlite:///" + os.path.join(tempfile.mkdtemp(prefix="library_catalog_test_"), "unused.db")
)
os.environ["LOG_LEVEL"] = "WARNING"

from library_catalog.config import Settings  # noqa: E402
from library_catalog.database import Database  # noqa: E402
from library_catalog.main import create_app  # noqa: E402
from library_catalog.services.seed_service import seed_service  # noqa: E402


@pytest.fixture
def mock_db_session():
    """
    Provides a mock async database session.

    Usage:
        mock_db_session.execute.return_value.mappings.return_value.first.return_value = row
        result = await book_service.get_book(mock_db_session, 1)
    """
    session = AsyncMock()
    session.execute = AsyncMock()
    session.flush = AsyncMock()
    session.commit = AsyncMock()
    session.rollback = AsyncMock()
    session.close = AsyncMock()
    session.add = MagicMock()
    return session


@pytest.fixture
def test_settings(tmp_path):
    """Settings bound to a fresh SQLite file under pytest's tmp_path."""
    return Settings(
        database_url=f"sqlite+aiosqlite:///{tmp_path / 'catalog.db'}",
        log_level="WARNING",
        cors_origins="http://localhost:3000",
        max_page_size=50,
    )


@pytest_asyncio.fixture
async def database(test_settings):
    """A seeded Database, disposed after the test."""
    db = Database(test_settings)
    await seed_service.initialize(db)
    yield db
    await db.dispose()


@pytest_asyncio.fixture
async def test_app(test_settings):
    """
    FastAPI app with its own seeded database.

    ASGITransport does not run the lifespan, so the seed runs here.
    """
    app = create_app(test_settings)
    await seed_service.initialize(app.state.database)
    yield app
    await app.state.database.dispose()


@pytest_asyncio.fixture
async def test_client(test_app):
    """
    Provides an async HTTP test client for endpoint testing.

    Usage:
        async def test_health(test_client):
            response = await test_client.get("/health")
            assert response.status_code == 200
    """
    transport = ASGITransport(app=test_app)
    async with AsyncClient(transport=transport, base_url="http://test") as client:
        yield client


@pytest.fixture
def book_payload():
    """A complete body for POST/PUT /books referencing seeded rows (George Orwell, Dystopian)."""
    return {
        "title": "Animal Farm",
        "authorid": 2,
        "genreid": 2,
        "pages": 112,
        "publishedDate": "1945-08-17",
    }
