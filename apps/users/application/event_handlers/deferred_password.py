"""
Deferred password handler.

Completes registrations that arrived without a password: a secure password
is generated, hashed and stored on the user. Runs detached from the request
that created the user.
"""
import logging
from dataclasses import dataclass
from enum import Enum

from ...domain.events.user_created import UserCreatedEvent
from ...domain.repositories.user_repository import UserRepository
from ...domain.services import PasswordService

logger = logging.getLogger(__name__)


class PasswordAssignment(str, Enum):
    """Outcome of one deferred password run."""

    ASSIGNED = "assigned"
    # Nothing to do: password supplied, user gone, or already set
    SKIPPED = "skipped"
    FAILED = "failed"


@dataclass
class DeferredPasswordHandler:
    """Handles ``user.created`` events for users without a password."""

    user_repository: UserRepository
    password_service: PasswordService

    def handle(self, event: UserCreatedEvent) -> PasswordAssignment:
        """
        Assign a generated password to the user named by the event.

        Failures are logged and reported as ``PasswordAssignment.FAILED``;
        they are never raised to the publisher and not retried.
        """
        if event.has_password:
            return PasswordAssignment.SKIPPED

        try:
            return self._assign_generated_password(event.user_id)
        except Exception:
            logger.exception(f"Deferred password generation failed for user {event.user_id}")
            return PasswordAssignment.FAILED

    def _assign_generated_password(self, user_id: str) -> PasswordAssignment:
        logger.info(f"Generating password for user {user_id}")
        hashed_password = self.password_service.hash_password(
            self.password_service.generate_secure_password()
        )

        # The user may have been removed since the event was emitted
        user = self.user_repository.find_by_id(user_id)
        if user is None:
            logger.warning(f"User {user_id} no longer exists, skipping password generation")
            return PasswordAssignment.SKIPPED
        if user.has_password():
            # Redelivered event; the transition happens at most once
            logger.info(f"User {user_id} already has a password, skipping")
            return PasswordAssignment.SKIPPED

        self.user_repository.update(user.with_password(hashed_password))
        logger.info(f"Generated password stored for user {user_id}")
        return PasswordAssignment.ASSIGNED
