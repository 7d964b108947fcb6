"""
Domain layer - Pure business logic with zero framework imports.

This package contains the attendee registration bounded context: the
Attendee aggregate, its RegisteredEvent, the registration domain service,
and the port interfaces that infrastructure adapters implement.
"""

from .attendee import Attendee, RegisteredEvent, RegistrationOutcome
from .exceptions import (
    AttendeeNotFound,
    DuplicateAttendee,
    PersistenceError,
    PublishError,
    RegistrationError,
    ValidationError,
)
from .ports import AttendeeRepository, EventPublisher
from .registration import AttendeeSummary, RegisterAttendeeCommand, RegistrationService

__all__ = [
    "Attendee",
    "AttendeeNotFound",
    "AttendeeRepository",
    "AttendeeSummary",
    "DuplicateAttendee",
    "EventPublisher",
    "PersistenceError",
    "PublishError",
    "RegisterAttendeeCommand",
    "RegisteredEvent",
    "RegistrationError",
    "RegistrationOutcome",
    "RegistrationService",
    "ValidationError",
]
