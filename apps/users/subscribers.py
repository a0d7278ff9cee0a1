"""
Event subscriptions of the users module.
"""
import logging

from shared.infrastructure.events import EventBus
from .domain.events.user_created import USER_CREATED, UserCreatedEvent

logger = logging.getLogger(__name__)


def enqueue_user_created(event: UserCreatedEvent) -> None:
    """Hand the event to a background worker."""
    from .tasks import handle_user_created

    handle_user_created.delay(event.to_payload())
    logger.debug(f"Queued {USER_CREATED} handling for user {event.user_id}")


def register_subscribers(bus: EventBus) -> None:
    """Subscribe the users module handlers. Called once at process start."""
    bus.subscribe(USER_CREATED, enqueue_user_created)
