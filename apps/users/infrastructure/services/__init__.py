# Infrastructure services
from .event_publisher import EventBusPublisher
from .hashers import BCRYPT_ROUNDS, UserPasswordHasher
from .password_service import BcryptPasswordService
from .uuid_generator import UuidGenerator

__all__ = [
    'BCRYPT_ROUNDS',
    'BcryptPasswordService',
    'EventBusPublisher',
    'UserPasswordHasher',
    'UuidGenerator',
]
