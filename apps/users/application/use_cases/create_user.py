"""
Create user use case.
"""
import logging
from dataclasses import dataclass
from typing import Optional

from shared.application import UseCase, UseCaseResult
from ...domain.entities.user import User
from ...domain.events.user_created import USER_CREATED, UserCreatedEvent
from ...domain.exceptions import InvalidPasswordError, UserAlreadyExistsError
from ...domain.repositories.user_repository import UserRepository
from ...domain.services import (
    PASSWORD_POLICY_MESSAGE,
    EventPublisher,
    IdGenerator,
    PasswordService,
)
from ..dtos.user_dto import CreateUserDTO, CreateUserResponseDTO

logger = logging.getLogger(__name__)


@dataclass
class CreateUserUseCase(UseCase[CreateUserDTO, CreateUserResponseDTO]):
    """Use case for registering a new user."""

    user_repository: UserRepository
    password_service: PasswordService
    id_generator: IdGenerator
    event_publisher: EventPublisher

    def execute(self, input_dto: CreateUserDTO) -> UseCaseResult[CreateUserResponseDTO]:
        # Check if email already exists
        if self.user_repository.find_by_email(input_dto.email) is not None:
            logger.info("Registration rejected: email already registered")
            return UseCaseResult.fail(
                UserAlreadyExistsError(field="email", value=input_dto.email)
            )

        user_id = self.id_generator.generate()

        has_provided_password = bool(input_dto.password)
        hashed_password: Optional[str] = None
        if has_provided_password:
            if not self.password_service.validate_strength(input_dto.password):
                return UseCaseResult.fail(InvalidPasswordError(PASSWORD_POLICY_MESSAGE))
            hashed_password = self.password_service.hash_password(input_dto.password)

        user = User.create(
            id=user_id,
            username=input_dto.username,
            email=input_dto.email,
            password=hashed_password,
        )

        # The store's echo is authoritative from here on
        saved_user = self.user_repository.save(user)
        logger.info(f"User {saved_user.id} created (password provided: {has_provided_password})")

        self._publish_created(saved_user, has_provided_password)

        return UseCaseResult.ok(CreateUserResponseDTO.from_entity(saved_user))

    def _publish_created(self, user: User, has_provided_password: bool) -> None:
        event = UserCreatedEvent(
            user_id=user.id,
            username=user.username,
            email=user.email,
            has_password=has_provided_password,
        )
        try:
            self.event_publisher.publish(USER_CREATED, event)
        except Exception:
            # The user is stored; a broken publisher must not fail the registration
            logger.exception(f"Failed to publish {USER_CREATED} for user {user.id}")
