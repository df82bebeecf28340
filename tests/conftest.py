"""Shared test fixtures and utilities for all tests."""
import asyncio
import os

import pytest
import pytest_asyncio
from dependency_injector import providers
from httpx import ASGITransport, AsyncClient
from testcontainers.postgres import PostgresContainer

from src.app.containers import Container
from src.app.core.services.demonym import DemonymResolver
from src.client import MapleClient
from src.shared.database.database import Database, Base, DatabaseSettings
from src.shared.database.unit_of_work import UnitOfWork


class StubDemonymResolver(DemonymResolver):
    """
    In-memory stand-in for the RestCountries resolver.

    Set `available = False` to simulate the external API being down.
    """

    def __init__(self, demonyms: dict[str, str] | None = None):
        self.demonyms = demonyms if demonyms is not None else {
            "US": "American",
            "CA": "Canadian",
            "ES": "Spanish",
            "MX": "Mexican",
        }
        self.available = True
        self.calls: list[str | None] = []

    async def resolve(self, country_code: str | None) -> str | None:
        self.calls.append(country_code)
        if not self.available or not country_code:
            return None
        return self.demonyms.get(country_code)


@pytest.fixture(scope="session")
def postgres_container():
    """
    Start a PostgreSQL container when USE_POSTGRES_CONTAINER is set.
    Session-scoped for reuse; yields None when tests run on SQLite.
    """
    if not os.environ.get("USE_POSTGRES_CONTAINER"):
        yield None
        return
    with PostgresContainer("postgres:16-alpine") as postgres:
        yield postgres


@pytest.fixture
def async_db_url(postgres_container, tmp_path):
    """
    Async database URL for the current test.

    Uses the PostgreSQL container if one is running, otherwise a fresh SQLite file.
    """
    if postgres_container is not None:
        connection_url = postgres_container.get_connection_url()
        return connection_url.replace("postgresql+psycopg2://", "postgresql+asyncpg://")
    return f"sqlite+aiosqlite:///{tmp_path / 'maple_test.db'}"


async def wait_till_db_ready(db: Database, max_attempts: int = 20):
    """
    Wait for database to be ready.

    Args:
        db: Database instance to test
        max_attempts: Maximum number of connection attempts

    Raises:
        Exception: If database is not ready after max_attempts
    """
    for attempt in range(max_attempts):
        try:
            async with db._engine.begin():
                return
        except Exception:
            await asyncio.sleep(0.2)
    raise Exception(f"Database not ready after {max_attempts} attempts")


@pytest_asyncio.fixture(scope="function")
async def db(async_db_url):
    """
    Create database instance with test database.
    Function-scoped for test isolation.
    """
    db = Database(DatabaseSettings(db_url=async_db_url))
    await wait_till_db_ready(db)
    yield db
    await db.dispose()


@pytest_asyncio.fixture(scope="function")
async def clean_database(db):
    """
    Clean the database before each test.
    Drops and recreates all tables.
    """
    async with db._engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)
        await conn.run_sync(Base.metadata.create_all)
    yield db


@pytest.fixture
def demonym_resolver():
    """Stub demonym resolver shared by the container and the test."""
    return StubDemonymResolver()


@pytest.fixture(scope="function")
def test_container(clean_database, demonym_resolver):
    """
    Create a test container with database and resolver overrides.
    Function-scoped to ensure each test gets a fresh container.
    """
    container = Container()

    container.database.override(providers.Object(clean_database))
    container.demonym_resolver.override(providers.Object(demonym_resolver))

    container.wire(modules=[
        "src.app.api.v1.clients",
    ])
    yield container
    container.demonym_resolver.reset_override()
    container.database.reset_override()
    container.unwire()


@pytest_asyncio.fixture(scope="function")
async def test_app(test_container):
    """
    Create test application with container.
    Function-scoped for test isolation.
    """
    from fastapi import FastAPI
    from contextlib import asynccontextmanager
    from src.app.api.errors import register_exception_handlers
    from src.app.api.v1 import clients

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        # Database tables are already created by clean_database fixture
        yield

    config = test_container.config()
    app = FastAPI(
        title=config.app_name,
        version=config.app_version,
        lifespan=lifespan
    )
    app.state.container = test_container

    register_exception_handlers(app)
    app.include_router(clients.router)

    yield app


@pytest_asyncio.fixture
async def http_client(test_app):
    """Raw httpx client bound to the in-process app."""
    transport = ASGITransport(app=test_app)
    async with AsyncClient(transport=transport, base_url="http://test") as client:
        yield client


@pytest_asyncio.fixture
async def maple_client(http_client):
    """
    Create a Maple client for testing.
    test_app already depends on clean_database for test isolation.
    """
    client = MapleClient(base_url="http://test", client=http_client)

    async with client:
        yield client


@pytest_asyncio.fixture(scope="function")
async def unit_of_work(clean_database, test_container):
    """
    Fixture for a UnitOfWork instance with a clean database.
    Uses the container's entity_mapper singleton.
    """
    entity_mapper = test_container.entity_mapper()
    yield UnitOfWork(clean_database, entity_mapper)


# =========================================================================
# Repository and service fixtures from container
# =========================================================================

@pytest.fixture
def client_repository(test_container):
    """Get client repository from container."""
    return test_container.client_repository()


@pytest.fixture
def client_service(test_container):
    """Get client service from container."""
    return test_container.client_service()
