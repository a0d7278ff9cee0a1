"""
Composition root of the users module.

Use cases and handlers receive every collaborator through their
constructor; these factories decide which implementations they get.
"""
from typing import Optional

from shared.infrastructure.events import EventBus, event_bus
from .application.event_handlers import DeferredPasswordHandler
from .application.use_cases import CreateUserUseCase
from .infrastructure.repositories import DjangoUserRepository
from .infrastructure.services import BcryptPasswordService, EventBusPublisher, UuidGenerator


def build_create_user_use_case(bus: Optional[EventBus] = None) -> CreateUserUseCase:
    return CreateUserUseCase(
        user_repository=DjangoUserRepository(),
        password_service=BcryptPasswordService(),
        id_generator=UuidGenerator(),
        event_publisher=EventBusPublisher(bus or event_bus),
    )


def build_deferred_password_handler() -> DeferredPasswordHandler:
    return DeferredPasswordHandler(
        user_repository=DjangoUserRepository(),
        password_service=BcryptPasswordService(),
    )
