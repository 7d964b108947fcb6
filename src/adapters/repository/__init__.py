"""Repository adapters - Database implementations."""

from .memory import InMemoryAttendeeRepository
from .postgres import PostgresAttendeeRepository, run_migrations

__all__ = ["InMemoryAttendeeRepository", "PostgresAttendeeRepository", "run_migrations"]
