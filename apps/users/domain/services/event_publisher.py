"""
Event publisher interface.
"""
from abc import ABC, abstractmethod

from shared.domain import DomainEvent


class EventPublisher(ABC):
    """Fire-and-forget publication of domain events."""

    @abstractmethod
    def publish(self, topic: str, event: DomainEvent) -> None:
        """Publish an event on a topic. Must not raise on subscriber failure."""
        pass
