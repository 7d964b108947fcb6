"""
In-memory repository adapter - Implements AttendeeRepository protocol.

Process-local storage for development runs (ATTENDEE_STORE=memory) and
tests. Mirrors the PostgreSQL adapter's semantics: records get a
technical id, email is unique, duplicates raise DuplicateAttendee.
"""

import threading
from dataclasses import dataclass
from datetime import datetime, timezone

from src.domain.attendee import Attendee
from src.domain.exceptions import DuplicateAttendee


@dataclass(frozen=True)
class AttendeeRecord:
    """Stored representation of an attendee."""

    id: int
    email: str
    registered_at: datetime


class InMemoryAttendeeRepository:
    """
    Implements AttendeeRepository protocol with a dict keyed by email.

    Uses structural subtyping - no explicit inheritance from Protocol.
    A lock makes check-and-insert atomic across threads.
    """

    def __init__(self) -> None:
        self._records: dict[str, AttendeeRecord] = {}
        self._next_id = 1
        self._lock = threading.Lock()

    def save(self, attendee: Attendee) -> None:
        with self._lock:
            if attendee.email in self._records:
                raise DuplicateAttendee(attendee.email)
            self._records[attendee.email] = AttendeeRecord(
                id=self._next_id,
                email=attendee.email,
                registered_at=datetime.now(timezone.utc),
            )
            self._next_id += 1

    def get_by_email(self, email: str) -> Attendee | None:
        with self._lock:
            record = self._records.get(email)
        if record is None:
            return None
        return Attendee(record.email)

    def records(self) -> list[AttendeeRecord]:
        """Snapshot of stored records in insertion order."""
        with self._lock:
            return list(self._records.values())
