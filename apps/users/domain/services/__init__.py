# Domain services
from .event_publisher import EventPublisher
from .id_generator import IdGenerator
from .password_service import (
    DEFAULT_GENERATED_LENGTH,
    MIN_PASSWORD_LENGTH,
    PASSWORD_POLICY_MESSAGE,
    SPECIAL_CHARACTERS,
    PasswordService,
)

__all__ = [
    'EventPublisher',
    'IdGenerator',
    'PasswordService',
    'DEFAULT_GENERATED_LENGTH',
    'MIN_PASSWORD_LENGTH',
    'PASSWORD_POLICY_MESSAGE',
    'SPECIAL_CHARACTERS',
]
