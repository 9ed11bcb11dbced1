"""Shared test fixtures and utilities for all tests."""
from contextlib import asynccontextmanager

import pytest
import pytest_asyncio
from dependency_injector import providers
from fastapi import FastAPI
from httpx import ASGITransport, AsyncClient

from src.app.containers import Container
from src.client import CrmClient
from src.shared.database.database import Database, DatabaseSettings


@pytest.fixture
def async_db_url(tmp_path):
    """
    Database URL of a throwaway SQLite file.
    Function-scoped so every test starts from an empty database.
    """
    return f"sqlite+aiosqlite:///{tmp_path / 'test.db'}"


@pytest_asyncio.fixture(scope="function")
async def db(async_db_url):
    """
    Create database instance with test database.
    Function-scoped for test isolation.
    """
    db_settings = DatabaseSettings(db_url=async_db_url)
    db = Database(db_settings)
    yield db
    await db.close()


@pytest_asyncio.fixture(scope="function")
async def clean_database(db):
    """
    Create the schema in the empty test database.
    """
    await db.init_schema()
    yield db


@pytest.fixture(scope="function")
def test_container(clean_database):
    """
    Create a test container with database override for proper test isolation.
    Function-scoped to ensure each test gets a fresh container.

    Overrides the container's database singleton with the test database.
    """
    container = Container()

    # Override the database singleton with the test database instance
    container.database.override(providers.Object(clean_database))

    container.wire(modules=[
        "src.app.api.v1.clients",
    ])
    yield container
    container.database.reset_override()
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
async def http_client(test_app):
    """Raw httpx client bound to the test application."""
    transport = ASGITransport(app=test_app)
    async with AsyncClient(transport=transport, base_url="http://test") as client:
        yield client


@pytest_asyncio.fixture
async def crm_client(http_client):
    """
    Create a CRM client for testing.
    test_app already depends on clean_database for test isolation.
    """
    client = CrmClient(base_url="http://test", client=http_client)

    async with client:
        yield client


# =========================================================================
# Common repository and service fixtures (available to all test directories)
# =========================================================================

@pytest_asyncio.fixture
def client_repository(test_container):
    """Get client repository from container."""
    return test_container.client_repository()


@pytest_asyncio.fixture
def client_service(test_container):
    """Get client service from container."""
    return test_container.client_service()
