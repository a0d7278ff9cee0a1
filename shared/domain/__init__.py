# Shared domain module
from .domain_event import DomainEvent
from .exceptions import (
    ConflictError,
    DomainException,
    EntityNotFoundError,
    ValidationError,
)

__all__ = [
    'DomainEvent',
    'DomainException',
    'ConflictError',
    'EntityNotFoundError',
    'ValidationError',
]
