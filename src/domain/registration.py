"""
Registration domain service - Attendee registration workflow.

This module orchestrates the registration of a conference attendee.
The Attendee aggregate decides validity; this service only sequences
the side effects around it.

Workflow (fixed, sequential)
============================

1. Attendee.register(email)     -> RegistrationOutcome{attendee, event}
2. repository.save(attendee)    -> single-write transaction
3. event_publisher.publish(event)
4. AttendeeSummary(email)       -> returned to the caller

Persistence always happens before publication: a consumer reacting to
the event may immediately look the attendee up, and must find it.

Publish Failure Policy
======================

If publication fails after the attendee is committed, the attendee stays
registered and PublishError propagates to the caller after being logged.
There is no compensating delete, retry, or outbox.
"""

import logging
from dataclasses import dataclass

from .attendee import Attendee, validate_email
from .exceptions import AttendeeNotFound, PublishError
from .ports import AttendeeRepository, EventPublisher

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class RegisterAttendeeCommand:
    """Request to register an attendee. May be rejected."""

    email: str


@dataclass(frozen=True)
class AttendeeSummary:
    """Read view of a registered attendee returned to callers."""

    email: str


@dataclass
class RegistrationService:
    """
    Domain service for attendee registration.

    Wires the Attendee aggregate to the persistence and notification ports.
    """

    repository: AttendeeRepository
    event_publisher: EventPublisher

    def register_attendee(self, command: RegisterAttendeeCommand) -> AttendeeSummary:
        """
        Register a new attendee.

        Args:
            command: Registration command carrying the raw email

        Returns:
            Summary of the registered attendee (normalized email)

        Raises:
            ValidationError: If the email is rejected (no gateway called)
            PersistenceError: If the write fails, including DuplicateAttendee
                (event not published)
            PublishError: If the event could not be published (attendee
                remains persisted)
        """
        outcome = Attendee.register(command.email)
        attendee = outcome.attendee

        self.repository.save(attendee)
        logger.info("Attendee persisted: %s", attendee.email)

        try:
            self.event_publisher.publish(outcome.event)
        except PublishError:
            logger.error(
                "Attendee %s registered but %s event was not published",
                attendee.email,
                outcome.event.event_type,
            )
            raise

        return AttendeeSummary(email=attendee.email)

    def get_attendee(self, email: str) -> AttendeeSummary:
        """
        Look up a registered attendee by email.

        Raises:
            ValidationError: If the email is malformed
            AttendeeNotFound: If no attendee is registered under the email
            PersistenceError: On storage failure
        """
        normalized_email = validate_email(email)
        attendee = self.repository.get_by_email(normalized_email)
        if attendee is None:
            raise AttendeeNotFound(normalized_email)
        return AttendeeSummary(email=attendee.email)
