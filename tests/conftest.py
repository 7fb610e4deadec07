"""Shared test fixtures and utilities for all tests."""
from contextlib import asynccontextmanager

import pytest
import pytest_asyncio
from dependency_injector import providers
from fastapi import FastAPI
from httpx import ASGITransport, AsyncClient

from src.app.config import Settings, PaginationSettings
from src.app.containers import Container
from src.client import ToyStoreClient
from src.shared.database.database import Database, DatabaseSettings

# Register every table on Base.metadata before create_all
import src.app.infrastructure.entities  # noqa: F401


@pytest.fixture(scope="function")
def async_db_url(tmp_path):
    """A fresh single-file SQLite database per test."""
    return f"sqlite+aiosqlite:///{tmp_path / 'toystore-test.db'}"


@pytest_asyncio.fixture(scope="function")
async def db(async_db_url):
    """
    Create database instance with test database.
    Function-scoped for test isolation.
    """
    db_settings = DatabaseSettings(db_url=async_db_url)
    db = Database(db_settings)
    yield db
    await db.dispose()


@pytest_asyncio.fixture(scope="function")
async def clean_database(db):
    """Drop and recreate all tables before each test."""
    await db.drop_all()
    await db.create_all()
    yield db


@pytest.fixture(scope="function")
def test_settings(async_db_url):
    """Settings pointing at the test database, with a small page-size cap."""
    return Settings(
        database_url=async_db_url,
        seed_sample_data=False,
        pagination=PaginationSettings(default_page=1, default_limit=10, max_limit=50),
    )


@pytest.fixture(scope="function")
def test_container(test_settings, clean_database):
    """
    Create a test container with database override for proper test isolation.
    Function-scoped to ensure each test gets a fresh container.

    Overrides the container's database singleton with the test database.
    """
    container = Container()

    container.config.override(providers.Object(test_settings))
    container.database.override(providers.Object(clean_database))

    container.wire(modules=[
        "src.app.api.v1.clients",
        "src.app.api.v1.stats",
    ])
    yield container
    container.database.reset_override()
    container.config.reset_override()
    container.unwire()


@pytest_asyncio.fixture(scope="function")
async def test_app(test_container):
    """
    Create test application with container.
    Function-scoped for test isolation.
    """
    from src.app.main import create_app

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        # Database tables are already created by clean_database fixture
        yield

    yield create_app(test_container, lifespan=lifespan)


@pytest_asyncio.fixture
async def toystore_client(test_app):
    """
    Create a Toy Store client for testing.
    test_app already depends on clean_database for test isolation.
    """
    transport = ASGITransport(app=test_app)
    http_client = AsyncClient(transport=transport, base_url="http://test")
    client = ToyStoreClient(base_url="http://test", client=http_client)

    async with client:
        yield client

    await http_client.aclose()


# =========================================================================
# Common repository fixtures (available to all test directories)
# =========================================================================

@pytest.fixture
def client_repository(test_container):
    """Get client repository from container."""
    return test_container.client_repository()


@pytest.fixture
def sale_repository(test_container):
    """Get sale repository from container."""
    return test_container.sale_repository()


@pytest.fixture
def stats_repository(test_container):
    """Get stats repository from container."""
    return test_container.stats_repository()


# =========================================================================
# Common service fixtures (available to all test directories)
# =========================================================================

@pytest.fixture
def client_service(test_container):
    """Get client service from container."""
    return test_container.client_service()


@pytest.fixture
def stats_service(test_container):
    """Get stats service from container."""
    return test_container.stats_service()
