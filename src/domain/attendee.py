"""
Attendee aggregate - Registration consistency boundary.

The Attendee aggregate is the sole authority on whether a registration is
valid. ``Attendee.register`` validates the email, builds the aggregate and
the ``RegisteredEvent`` describing what happened, and returns both paired
in a ``RegistrationOutcome``. It performs no I/O: persisting the attendee
and publishing the event are the domain service's job.

Email Rules
===========

- Non-empty after trimming whitespace
- Exactly one ``@`` with a non-empty local part
- Domain part contains at least one ``.`` and does not start or end with one

These rules are intentionally minimal; the storage layer's UNIQUE
constraint on email backs up the aggregate for duplicate detection.
"""

from dataclasses import dataclass
from typing import ClassVar

from .exceptions import ValidationError

BLANK_EMAIL_MESSAGE = "Email must not be blank"
INVALID_EMAIL_MESSAGE = "Email must be a valid email address"


def normalize_email(email: str) -> str:
    """
    Normalize email address for consistent storage and lookup.

    Applies: strip whitespace + lowercase
    """
    return email.strip().lower()


def validate_email(email: str) -> str:
    """
    Normalize and validate an email address.

    Args:
        email: Raw email string from the caller

    Returns:
        Normalized email address

    Raises:
        ValidationError: If the email is blank or malformed
    """
    if not isinstance(email, str):
        raise ValidationError(INVALID_EMAIL_MESSAGE)

    normalized = normalize_email(email)
    if not normalized:
        raise ValidationError(BLANK_EMAIL_MESSAGE)

    if normalized.count("@") != 1:
        raise ValidationError(INVALID_EMAIL_MESSAGE)

    local_part, domain_part = normalized.split("@")
    if not local_part or "." not in domain_part:
        raise ValidationError(INVALID_EMAIL_MESSAGE)
    if domain_part.startswith(".") or domain_part.endswith("."):
        raise ValidationError(INVALID_EMAIL_MESSAGE)

    return normalized


@dataclass(frozen=True)
class RegisteredEvent:
    """Fact record: an attendee has been registered."""

    event_type: ClassVar[str] = "attendee.registered"

    email: str

    def to_payload(self) -> dict[str, str]:
        """Wire body published on the registration channel."""
        return {"email": self.email}


@dataclass(frozen=True)
class Attendee:
    """
    Aggregate root for a conference attendee.

    Identity and equality are defined solely by the normalized email.
    Construction refuses anything that is not a valid, already-normalized
    email, so an Attendee in an invalid state cannot exist. Use
    ``Attendee.register`` to create one from raw input.
    """

    email: str

    def __post_init__(self) -> None:
        if validate_email(self.email) != self.email:
            raise ValidationError(INVALID_EMAIL_MESSAGE)

    @classmethod
    def register(cls, email: str) -> "RegistrationOutcome":
        """
        Register an attendee from a raw email address.

        Args:
            email: Raw email string (will be normalized)

        Returns:
            RegistrationOutcome pairing the new attendee and its event

        Raises:
            ValidationError: If the email fails the format rules
        """
        normalized_email = validate_email(email)
        attendee = cls(normalized_email)
        event = RegisteredEvent(email=attendee.email)
        return RegistrationOutcome(attendee=attendee, event=event)


@dataclass(frozen=True)
class RegistrationOutcome:
    """
    Result of ``Attendee.register``: the new aggregate and its event.

    Both members are mandatory and must describe the same email.
    Lives only for the duration of one registration call.
    """

    attendee: Attendee
    event: RegisteredEvent

    def __post_init__(self) -> None:
        if self.attendee is None or self.event is None:
            raise ValueError("RegistrationOutcome requires both an attendee and an event")
        if not isinstance(self.attendee, Attendee):
            raise TypeError(f"Expected Attendee, got {type(self.attendee).__name__}")
        if not isinstance(self.event, RegisteredEvent):
            raise TypeError(f"Expected RegisteredEvent, got {type(self.event).__name__}")
        if self.attendee.email != self.event.email:
            raise ValueError("Attendee and event must carry the same email")
