"""
Unit tests for domain ports and exceptions.

Tests verify:
- Port interfaces are properly defined
- Exceptions are properly structured
- Domain purity (zero framework imports)
"""

from pathlib import Path

import pytest

from src.domain.attendee import Attendee, RegisteredEvent
from src.domain.exceptions import (
    AttendeeNotFound,
    DuplicateAttendee,
    PersistenceError,
    PublishError,
    RegistrationError,
    ValidationError,
)
from src.domain.ports import AttendeeRepository, EventPublisher

DOMAIN_DIR = Path(__file__).resolve().parents[2] / "src" / "domain"


class TestAttendeeRepositoryProtocol:
    """Tests for AttendeeRepository protocol."""

    def test_repository_has_save_method(self) -> None:
        """AttendeeRepository defines save method."""
        assert hasattr(AttendeeRepository, "save")

    def test_repository_has_get_by_email_method(self) -> None:
        """AttendeeRepository defines get_by_email method."""
        assert hasattr(AttendeeRepository, "get_by_email")

    def test_structural_implementation(self) -> None:
        """A plain class with matching methods satisfies the port."""

        class MockRepo:
            def __init__(self) -> None:
                self.saved: list[Attendee] = []

            def save(self, attendee: Attendee) -> None:
                self.saved.append(attendee)

            def get_by_email(self, email: str) -> Attendee | None:
                return next((a for a in self.saved if a.email == email), None)

        def accepts_repository(r: AttendeeRepository) -> AttendeeRepository:
            return r

        repo = accepts_repository(MockRepo())
        repo.save(Attendee("alice@example.com"))
        assert repo.get_by_email("alice@example.com") == Attendee("alice@example.com")
        assert repo.get_by_email("bob@example.com") is None


class TestEventPublisherProtocol:
    """Tests for EventPublisher protocol."""

    def test_publisher_has_publish_method(self) -> None:
        """EventPublisher defines publish method."""
        assert hasattr(EventPublisher, "publish")

    def test_publish_accepts_registered_event(self) -> None:
        """publish method signature accepts a RegisteredEvent."""

        class MockPublisher:
            def __init__(self) -> None:
                self.published: list[RegisteredEvent] = []

            def publish(self, event: RegisteredEvent) -> None:
                self.published.append(event)

        publisher = MockPublisher()
        publisher.publish(RegisteredEvent(email="alice@example.com"))
        assert publisher.published == [RegisteredEvent(email="alice@example.com")]


class TestDomainExceptions:
    """Tests for domain exceptions."""

    def test_registration_error_is_exception(self) -> None:
        """RegistrationError inherits from Exception."""
        assert issubclass(RegistrationError, Exception)

    @pytest.mark.parametrize(
        "exc_type",
        [ValidationError, PersistenceError, DuplicateAttendee, AttendeeNotFound, PublishError],
    )
    def test_inherits_registration_error(self, exc_type: type[Exception]) -> None:
        """Every domain error inherits from RegistrationError."""
        assert issubclass(exc_type, RegistrationError)

    def test_duplicate_is_persistence_error(self) -> None:
        """DuplicateAttendee is a PersistenceError."""
        assert issubclass(DuplicateAttendee, PersistenceError)

    def test_publish_error_is_not_persistence_error(self) -> None:
        """PublishError is distinct from storage failures."""
        assert not issubclass(PublishError, PersistenceError)

    def test_validation_error_carries_message(self) -> None:
        """ValidationError exposes its human-readable message."""
        error = ValidationError("Email must be a valid email address")
        assert error.message == "Email must be a valid email address"
        assert str(error) == "Email must be a valid email address"

    def test_duplicate_attendee_carries_email(self) -> None:
        """DuplicateAttendee exposes the conflicting email."""
        error = DuplicateAttendee("alice@example.com")
        assert error.email == "alice@example.com"
        assert "alice@example.com" in str(error)


class TestDomainPurity:
    """Tests for domain purity - zero framework imports."""

    @pytest.mark.parametrize("module", ["fastapi", "pydantic", "psycopg", "psycopg_pool"])
    def test_no_framework_imports_in_domain(self, module: str) -> None:
        """Domain layer imports no infrastructure framework."""
        offending = []
        for source_file in DOMAIN_DIR.glob("*.py"):
            for line in source_file.read_text().splitlines():
                stripped = line.strip()
                if stripped.startswith((f"import {module}", f"from {module}")):
                    offending.append(f"{source_file.name}: {stripped}")
        assert not offending, f"{module} import found: {offending}"

    def test_domain_dir_exists(self) -> None:
        """Purity check scans the real domain package."""
        assert (DOMAIN_DIR / "attendee.py").exists()
