"""
Port interfaces - Protocol definitions for infrastructure abstraction.

This module defines the interfaces (ports) that the domain requires
from infrastructure. Adapters implement these protocols.
"""

from typing import Protocol

from .attendee import Attendee, RegisteredEvent


class AttendeeRepository(Protocol):
    """Port interface for attendee persistence."""

    def save(self, attendee: Attendee) -> None:
        """
        Persist a newly registered attendee in a single transaction.

        The storage record gets its own technical identity; the attendee's
        email is stored under a uniqueness constraint.

        Args:
            attendee: Validated Attendee aggregate

        Raises:
            DuplicateAttendee: If the email is already stored
            PersistenceError: On any other storage failure (nothing written)
        """
        ...

    def get_by_email(self, email: str) -> Attendee | None:
        """
        Load an attendee by normalized email.

        Args:
            email: Normalized email address

        Returns:
            The Attendee, or None if no record exists

        Raises:
            PersistenceError: On storage failure
        """
        ...


class EventPublisher(Protocol):
    """Port interface for registration event delivery."""

    def publish(self, event: RegisteredEvent) -> None:
        """
        Publish a registration event to the attendee registration channel.

        Args:
            event: Event produced by Attendee.register

        Raises:
            PublishError: If the event could not be handed to the channel
        """
        ...
