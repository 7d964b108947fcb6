"""
FastAPI application factory and configuration.

This module creates the FastAPI application instance,
configures logging, routes, and lifespan events.
"""

import logging
from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from psycopg_pool import ConnectionPool

from src.adapters.repository.postgres import run_migrations
from src.api.v1 import router as v1_router
from src.config.settings import Settings, get_settings

logger = logging.getLogger(__name__)

# OpenAPI tags for documentation grouping
tags_metadata = [
    {
        "name": "v1",
        "description": "Attendee Registration API v1 - Register conference attendees",
    },
]


def configure_logging(settings: Settings) -> None:
    """Configure root logging once from settings."""
    logging.basicConfig(
        level=settings.log_level.upper(),
        format="%(asctime)s %(levelname)s %(name)s - %(message)s",
    )


def requires_database(settings: Settings) -> bool:
    """True when any configured adapter is backed by PostgreSQL."""
    return settings.attendee_store == "postgres" or settings.event_publisher == "postgres"


def create_pool(settings: Settings) -> ConnectionPool:
    """
    Create the connection pool with explicit sizing and timeouts.

    statement_timeout bounds every blocking write and notify.
    """
    return ConnectionPool(
        conninfo=settings.database_url,
        min_size=settings.pool_min_size,
        max_size=settings.pool_max_size,
        timeout=settings.pool_timeout_seconds,
        kwargs={"options": f"-c statement_timeout={settings.statement_timeout_ms}"},
        open=True,
    )


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """
    FastAPI lifespan context manager.

    Manages application startup and shutdown:
    - Configures logging
    - Creates database connection pool on startup (PostgreSQL adapters only)
    - Runs migrations on startup
    - Closes connection pool on shutdown
    """
    settings = get_settings()
    configure_logging(settings)

    logger.info("Starting application...")

    pool = None
    if requires_database(settings):
        logger.info("Connecting to database...")
        pool = create_pool(settings)

        logger.info("Running database migrations...")
        run_migrations(pool)
    else:
        logger.info("Running without database (store=%s)", settings.attendee_store)

    # Store pool in app state for dependency injection
    app.state.pool = pool

    logger.info("Application startup complete")

    yield

    logger.info("Shutting down application...")
    if pool is not None:
        pool.close()
        logger.info("Database connection pool closed")


app = FastAPI(
    title="attendee-registration",
    description="Attendee Registration API - Aggregate-centric conference registration",
    version="0.1.0",
    openapi_tags=tags_metadata,
    lifespan=lifespan,
)

# Include v1 API routes
app.include_router(v1_router, prefix="/v1")


@app.get("/health")
async def health_check(request: Request) -> dict[str, str]:
    """
    Health check endpoint with database validation.

    Returns 200 OK if application and database are healthy.
    Raises exception if database connection fails.
    """
    pool = getattr(request.app.state, "pool", None)
    if pool is not None:
        with pool.connection() as conn:
            conn.execute("SELECT 1")

    return {"status": "healthy"}
