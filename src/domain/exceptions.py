"""
Domain exceptions - Semantic error types for attendee registration.

This module defines domain-specific exceptions that communicate
business rule violations without leaking infrastructure details.
Adapters translate driver errors into these types.
"""


class RegistrationError(Exception):
    """Base class for registration domain errors."""

    pass


class ValidationError(RegistrationError):
    """Email failed the aggregate's format rules. Nothing was mutated."""

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class PersistenceError(RegistrationError):
    """Storage write or read failed. The transaction was rolled back."""

    pass


class DuplicateAttendee(PersistenceError):
    """Email is already registered (storage uniqueness constraint)."""

    def __init__(self, email: str) -> None:
        super().__init__(email)
        self.email = email


class AttendeeNotFound(RegistrationError):
    """No attendee is registered under the given email."""

    pass


class PublishError(RegistrationError):
    """Event publication failed after the attendee was already persisted."""

    pass
