import logging
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager
from typing import Callable, Optional

from fastapi import FastAPI

from src.app.api.error_handlers import register_error_handlers
from src.app.api.middleware import register_middleware
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
    """Default application lifespan manager - creates the clients table and owns the database handle."""
    container: Container = app.state.container
    logger.info("Starting CRM Clients API...")

    db = container.database()
    await db.init_schema()

    yield

    logger.info("Shutting down CRM Clients API...")
    await db.close()


def create_app(container: Container, lifespan: Optional[LifespanType] = None) -> FastAPI:
    """
    Create and configure FastAPI application.

    Args:
        container: DI container providing settings, database and services.
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
        redirect_slashes=False,
        # Everything outside the API prefix answers 404, docs included
        docs_url=f"{config.api.prefix}/docs",
        redoc_url=None,
        openapi_url=f"{config.api.prefix}/openapi.json",
    )

    # Attach container to app state for access in lifespan and routes
    app.state.container = container

    register_error_handlers(app)
    register_middleware(app, api=config.api, cors=config.cors)

    app.include_router(clients.router, prefix=config.api.prefix)

    return app


container = Container()
app = create_app(container=container)
