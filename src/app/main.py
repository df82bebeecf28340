import logging
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager
from typing import Callable

from fastapi import FastAPI

from src.app.api.errors import register_exception_handlers
from src.app.api.v1 import clients
from src.app.config import get_settings
from src.app.containers import Container
from src.app.logging import configure_logging

# Configure logging at module load time
configure_logging(get_settings().log_level)

logger = logging.getLogger(__name__)

# Type alias for lifespan context manager
LifespanType = Callable[[FastAPI], AsyncIterator[None]]


@asynccontextmanager
async def default_lifespan(app: FastAPI):
    """Default application lifespan manager - creates database tables on startup."""
    container: Container = app.state.container
    logger.info("Starting Maple Clients API...")

    db = container.database()
    await db.create_tables()
    logger.info("Database initialized successfully")

    rest_countries = container.config().rest_countries
    logger.info(
        "Demonym enrichment via %s (timeout %.1fs)",
        rest_countries.base_url,
        rest_countries.timeout_seconds,
    )

    yield

    logger.info("Shutting down Maple Clients API...")
    await db.dispose()


def create_app(container: Container, lifespan: LifespanType | None = None) -> FastAPI:
    """
    Create and configure FastAPI application.

    Args:
        container: DI container providing services and the database.
        lifespan: Optional lifespan context manager. If not provided, uses default_lifespan.

    Returns:
        Configured FastAPI application.
    """
    container.wire(modules=[
        "src.app.api.v1.clients",
    ])

    config = container.config()

    app = FastAPI(
        title=config.app_name,
        version=config.app_version,
        lifespan=lifespan or default_lifespan,
    )

    # Attach container to app state for access in lifespan and routes
    app.state.container = container

    register_exception_handlers(app)

    # Include routers
    app.include_router(clients.router)

    @app.get("/")
    async def root():
        return {"message": "Welcome to Maple Clients API"}

    @app.get("/health")
    async def health():
        return {"status": "healthy"}

    return app


container = Container()
app = create_app(container=container)
