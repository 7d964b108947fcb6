"""
PostgreSQL NOTIFY publisher adapter - Implements EventPublisher protocol.

Publishes registration events on a single LISTEN/NOTIFY channel using
``pg_notify``. Consumers run ``LISTEN <channel>`` and receive the JSON
payload ``{"email": ...}``.

Delivery guarantees beyond "handed to the server" belong to PostgreSQL:
notifications are delivered at commit, to sessions listening at that time.
The call runs on its own connection, after the attendee's write
transaction has already committed.
"""

import json
import logging

import psycopg
from psycopg_pool import ConnectionPool

from src.domain.attendee import RegisteredEvent
from src.domain.exceptions import PublishError

logger = logging.getLogger(__name__)


class PostgresNotifyEventPublisher:
    """
    Implements EventPublisher protocol via pg_notify.

    Uses structural subtyping - no explicit inheritance from Protocol.
    """

    def __init__(self, pool: ConnectionPool, channel: str = "attendee_registered") -> None:
        """
        Initialize publisher with connection pool and channel name.

        Args:
            pool: psycopg3 ConnectionPool for database connections
            channel: LISTEN/NOTIFY channel dedicated to registration events
        """
        self._pool = pool
        self._channel = channel

    def publish(self, event: RegisteredEvent) -> None:
        """
        Send the event payload on the registration channel.

        Args:
            event: Registration event produced by the Attendee aggregate

        Raises:
            PublishError: If the notification could not be sent
        """
        payload = json.dumps(event.to_payload())

        try:
            with self._pool.connection() as conn:
                conn.execute("SELECT pg_notify(%s, %s)", (self._channel, payload))
        except psycopg.Error as e:
            raise PublishError(
                f"Failed to publish {event.event_type} on channel {self._channel}"
            ) from e

        logger.info("Published %s on channel %s", event.event_type, self._channel)
