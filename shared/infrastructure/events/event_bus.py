"""
In-process event bus.

Handlers are registered against a topic name at process start and called in
subscription order. A failing handler is logged and never reaches the
publisher or the other handlers.
"""
import logging
import threading
from collections import defaultdict
from typing import Any, Callable, Dict, List

logger = logging.getLogger(__name__)

EventHandler = Callable[[Any], None]


class EventBus:
    """Topic based publish/subscribe within a single process."""

    def __init__(self):
        self._handlers: Dict[str, List[EventHandler]] = defaultdict(list)
        self._lock = threading.Lock()

    def subscribe(self, topic: str, handler: EventHandler) -> None:
        """Register a handler for a topic. Registering twice is a no-op."""
        with self._lock:
            if handler not in self._handlers[topic]:
                self._handlers[topic].append(handler)

    def unsubscribe(self, topic: str, handler: EventHandler) -> None:
        """Remove a handler from a topic if present."""
        with self._lock:
            if handler in self._handlers.get(topic, []):
                self._handlers[topic].remove(handler)

    def handlers_for(self, topic: str) -> List[EventHandler]:
        """Get a snapshot of the handlers subscribed to a topic."""
        with self._lock:
            return list(self._handlers.get(topic, []))

    def publish(self, topic: str, event: Any) -> int:
        """
        Deliver an event to every handler of the topic.

        Returns the number of handlers that completed without raising.
        """
        delivered = 0
        for handler in self.handlers_for(topic):
            try:
                handler(event)
                delivered += 1
            except Exception:
                logger.exception(
                    "Event handler %s failed on topic=%s event=%s",
                    getattr(handler, '__qualname__', repr(handler)),
                    topic,
                    type(event).__name__,
                )
        return delivered

    def clear(self) -> None:
        """Drop all subscriptions."""
        with self._lock:
            self._handlers.clear()


# Process-wide bus, wired by the composition root only.
event_bus = EventBus()
