# Domain events
from .user_created import USER_CREATED, UserCreatedEvent

__all__ = ['USER_CREATED', 'UserCreatedEvent']
