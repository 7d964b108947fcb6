"""
PostgreSQL repository adapter - Implements AttendeeRepository protocol.

This module provides the PostgreSQL implementation of the domain's
repository port using psycopg3 with raw SQL.

Record Translation
------------------
The ``attendees`` table row carries a storage-assigned ``id`` (BIGSERIAL)
next to the email. The id never leaves this module: ``save`` takes an
Attendee aggregate and ``get_by_email`` rebuilds one from the email column.

Transactions
------------
Each ``save`` is a single INSERT wrapped in ``conn.transaction()``, so the
write commits as a unit or rolls back entirely. The UNIQUE constraint on
``email`` is the final arbiter for concurrent registrations of the same
address: the loser sees ``UniqueViolation``, surfaced as DuplicateAttendee.
"""

import logging
from pathlib import Path

import psycopg
from psycopg import errors
from psycopg_pool import ConnectionPool

from src.domain.attendee import Attendee
from src.domain.exceptions import DuplicateAttendee, PersistenceError

logger = logging.getLogger(__name__)


class PostgresAttendeeRepository:
    """
    Implements AttendeeRepository protocol via psycopg3.

    Uses structural subtyping - no explicit inheritance from Protocol.
    All SQL uses parameterized queries.
    """

    def __init__(self, pool: ConnectionPool) -> None:
        """
        Initialize repository with connection pool.

        Args:
            pool: psycopg3 ConnectionPool for database connections
        """
        self._pool = pool

    def save(self, attendee: Attendee) -> None:
        """
        Insert the attendee record in a single-write transaction.

        Args:
            attendee: Validated Attendee aggregate

        Raises:
            DuplicateAttendee: If the email already exists
            PersistenceError: On any other database failure
        """
        sql = """
            INSERT INTO attendees (email, registered_at)
            VALUES (%s, NOW())
        """

        try:
            with self._pool.connection() as conn:
                with conn.transaction(), conn.cursor() as cursor:
                    cursor.execute(sql, (attendee.email,))
        except errors.UniqueViolation as e:
            logger.warning("Duplicate registration rejected: %s", attendee.email)
            raise DuplicateAttendee(attendee.email) from e
        except psycopg.Error as e:
            logger.error("Failed to persist attendee %s: %s", attendee.email, e)
            raise PersistenceError(f"Failed to persist attendee: {attendee.email}") from e

    def get_by_email(self, email: str) -> Attendee | None:
        """
        Load an attendee by normalized email.

        Args:
            email: Normalized email address

        Returns:
            Attendee rebuilt from the stored record, or None if absent

        Raises:
            PersistenceError: On database failure
        """
        sql = "SELECT email FROM attendees WHERE email = %s"

        try:
            with self._pool.connection() as conn, conn.cursor() as cursor:
                cursor.execute(sql, (email,))
                row = cursor.fetchone()
        except psycopg.Error as e:
            logger.error("Failed to load attendee %s: %s", email, e)
            raise PersistenceError(f"Failed to load attendee: {email}") from e

        if row is None:
            return None
        return Attendee(row[0])


def run_migrations(pool: ConnectionPool) -> None:
    """
    Execute all SQL migration files from the migrations directory.

    Migrations are executed in sorted order (alphabetically by filename).
    Each migration should be idempotent (use IF NOT EXISTS, etc.).

    Args:
        pool: psycopg3 ConnectionPool instance
    """
    # Structure: src/adapters/repository/postgres.py -> migrations/
    migrations_dir = Path(__file__).parent.parent.parent.parent / "migrations"

    if not migrations_dir.exists():
        logger.warning(f"Migrations directory not found: {migrations_dir}")
        return

    sql_files = sorted(migrations_dir.glob("*.sql"))

    if not sql_files:
        logger.info("No migration files found")
        return

    logger.info(f"Running {len(sql_files)} migration(s)")

    for sql_file in sql_files:
        logger.info(f"Executing migration: {sql_file.name}")
        try:
            sql_content = sql_file.read_text()

            with pool.connection() as conn:
                conn.execute(sql_content)

            logger.info(f"Migration complete: {sql_file.name}")
        except Exception as e:
            logger.error(f"Migration failed: {sql_file.name} - {e}")
            raise RuntimeError(f"Database migration failed: {sql_file.name}") from e
