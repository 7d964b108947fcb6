"""
Console event publisher adapter - Implements EventPublisher protocol.

This module provides a console-based implementation of the domain's
event publisher port, logging registration events for demo purposes.
"""

import json
import logging

from src.domain.attendee import RegisteredEvent

logger = logging.getLogger(__name__)


class ConsoleEventPublisher:
    """
    Implements EventPublisher protocol via console logging.

    Uses structural subtyping - no explicit inheritance from Protocol.
    For demo/development purposes - prints events to stdout.
    """

    def __init__(self, channel: str = "attendee_registered") -> None:
        self._channel = channel

    def publish(self, event: RegisteredEvent) -> None:
        """
        Log the event (simulates delivery on the registration channel).

        In production, this would be replaced with a message broker adapter.
        The event is logged at INFO level to be visible in docker-compose logs.

        Args:
            event: Registration event produced by the Attendee aggregate
        """
        logger.info(
            "[EVENT] %s channel=%s payload=%s",
            event.event_type,
            self._channel,
            json.dumps(event.to_payload()),
        )
