"""
FastAPI dependencies - Dependency injection factories.

This module provides Depends() factories for injecting
domain services and infrastructure adapters into routes.
Adapter selection is driven by settings (ATTENDEE_STORE, EVENT_PUBLISHER).
"""

from fastapi import Request
from psycopg_pool import ConnectionPool

from src.adapters.messaging.console import ConsoleEventPublisher
from src.adapters.messaging.postgres_notify import PostgresNotifyEventPublisher
from src.adapters.repository.memory import InMemoryAttendeeRepository
from src.adapters.repository.postgres import PostgresAttendeeRepository
from src.config.settings import get_settings
from src.domain.ports import AttendeeRepository, EventPublisher
from src.domain.registration import RegistrationService

# Module-level singleton - must outlive requests to keep registrations
_memory_repository = InMemoryAttendeeRepository()


def get_pool(request: Request) -> ConnectionPool:
    """
    Get connection pool from app state.

    The pool is created during app lifespan startup and stored in app.state.
    """
    return request.app.state.pool


def get_repository(request: Request) -> AttendeeRepository:
    """Create the configured attendee repository."""
    if get_settings().attendee_store == "memory":
        return _memory_repository
    return PostgresAttendeeRepository(get_pool(request))


def get_event_publisher(request: Request) -> EventPublisher:
    """Create the configured registration event publisher."""
    settings = get_settings()
    if settings.event_publisher == "postgres":
        return PostgresNotifyEventPublisher(get_pool(request), channel=settings.event_channel)
    return ConsoleEventPublisher(channel=settings.event_channel)


def get_registration_service(request: Request) -> RegistrationService:
    """
    Create registration service with injected dependencies.

    Wires together the repository and event publisher for the domain service.
    """
    repository = get_repository(request)
    event_publisher = get_event_publisher(request)
    return RegistrationService(repository=repository, event_publisher=event_publisher)
