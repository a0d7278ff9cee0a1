"""
Users module Celery tasks.
"""
import logging

from celery import shared_task

from .application.event_handlers import PasswordAssignment
from .domain.events.user_created import UserCreatedEvent

logger = logging.getLogger(__name__)


@shared_task(name='users.handle_user_created', ignore_result=True)
def handle_user_created(payload: dict) -> dict:
    """
    Run the deferred password flow for a freshly created user.

    Args:
        payload: ``UserCreatedEvent.to_payload()`` output

    Returns:
        Result dict (success, user_id, outcome, password_assigned).
        ``success`` is False only when the run failed; a skipped run
        still succeeds with ``outcome`` set to ``"skipped"``.
    """
    from .dependencies import build_deferred_password_handler

    try:
        event = UserCreatedEvent.from_payload(payload)
    except (KeyError, TypeError, ValueError) as e:
        logger.error(f"Malformed user.created payload: {e}")
        return {'success': False, 'error': 'Malformed payload'}

    handler = build_deferred_password_handler()
    outcome = handler.handle(event)
    return {
        'success': outcome is not PasswordAssignment.FAILED,
        'user_id': event.user_id,
        'outcome': outcome.value,
        'password_assigned': outcome is PasswordAssignment.ASSIGNED,
    }
