import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI

from src.app.api.v1 import clients, stats
from src.app.config import get_settings
from src.app.containers import Container
from src.app.infrastructure.seed import seed_sample_data
from src.app.logging import configure_logging

# Importing the entities registers their tables on Base.metadata
import src.app.infrastructure.entities  # noqa: F401

# Configure logging at module load time
configure_logging(get_settings().log_level)

logger = logging.getLogger(__name__)


@asynccontextmanager
async def default_lifespan(app: FastAPI):
    """Default application lifespan manager - creates the schema on startup and closes the database on shutdown."""
    container: Container = app.state.container
    config = container.config()
    logger.info("Starting %s...", config.app_name)

    db = container.database()
    await db.create_all()

    if config.seed_sample_data:
        await seed_sample_data(container.client_repository(), container.sale_repository())

    yield

    logger.info("Shutting down %s...", config.app_name)
    await db.dispose()


def create_app(container: Container, lifespan=default_lifespan) -> FastAPI:
    """
    Create and configure FastAPI application.

    Args:
        container: DI container providing settings, database and services.
        lifespan: Lifespan context manager. Defaults to default_lifespan.

    Returns:
        Configured FastAPI application.
    """
    container.wire(modules=[
        "src.app.api.v1.clients",
        "src.app.api.v1.stats",
    ])

    config = container.config()

    app = FastAPI(
        title=config.app_name,
        version=config.app_version,
        lifespan=lifespan,
    )

    # Attach container to app state for access in lifespan and routes
    app.state.container = container

    # Include routers
    app.include_router(clients.router, prefix="/api/v1")
    app.include_router(stats.router, prefix="/api/v1")

    @app.get("/")
    async def root():
        return {"message": f"Welcome to {config.app_name}"}

    @app.get("/health")
    async def health():
        return {"status": "healthy"}

    return app


container = Container()
app = create_app(container=container)
