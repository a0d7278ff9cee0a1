"""
Event publisher backed by the in-process event bus.
"""
import logging

from shared.domain import DomainEvent
from shared.infrastructure.events import EventBus
from ...domain.services.event_publisher import EventPublisher

logger = logging.getLogger(__name__)


class EventBusPublisher(EventPublisher):
    """Publishes domain events to an ``EventBus``."""

    def __init__(self, bus: EventBus):
        self.bus = bus

    def publish(self, topic: str, event: DomainEvent) -> None:
        delivered = self.bus.publish(topic, event)
        logger.debug(f"Published {event.event_type} on {topic} to {delivered} handler(s)")
