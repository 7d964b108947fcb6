"""
Shared test fixtures and configuration.

This module provides:
- Automatic skipping of database-backed tests when PostgreSQL is unreachable
- Migration-applied connection pool for integration and adversarial tests
"""

from collections.abc import Generator

import psycopg
import pytest
from psycopg_pool import ConnectionPool

from src.adapters.repository.postgres import run_migrations
from src.config.settings import get_settings

DATABASE_MARKERS = ("integration", "adversarial")


def _database_available() -> bool:
    try:
        with psycopg.connect(get_settings().database_url, connect_timeout=2):
            return True
    except psycopg.Error:
        return False


def pytest_collection_modifyitems(config: pytest.Config, items: list[pytest.Item]) -> None:
    """Skip database-marked tests when no database is reachable."""
    db_items = [
        item for item in items if any(item.get_closest_marker(m) for m in DATABASE_MARKERS)
    ]
    if not db_items or _database_available():
        return

    skip_db = pytest.mark.skip(reason="PostgreSQL not reachable at DATABASE_URL")
    for item in db_items:
        item.add_marker(skip_db)


@pytest.fixture(scope="module")
def pool() -> Generator[ConnectionPool, None, None]:
    """Create connection pool with the schema migrated."""
    settings = get_settings()
    pool = ConnectionPool(
        conninfo=settings.database_url,
        min_size=1,
        max_size=10,
        open=True,
    )
    run_migrations(pool)
    yield pool
    pool.close()


@pytest.fixture
def clean_database(pool: ConnectionPool) -> Generator[None, None, None]:
    """Clean attendees table before each test."""
    with pool.connection() as conn:
        conn.execute("DELETE FROM attendees")
        conn.commit()
    yield
