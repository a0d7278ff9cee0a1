"""
User created domain event.
"""
from dataclasses import dataclass
from datetime import datetime
from typing import Any, Dict
from uuid import UUID

from shared.domain import DomainEvent

USER_CREATED = 'user.created'


@dataclass(frozen=True)
class UserCreatedEvent(DomainEvent):
    """Event raised when a new user is registered."""
    user_id: str
    username: str
    email: str
    # Whether the registration request supplied a password.
    has_password: bool

    def to_payload(self) -> Dict[str, Any]:
        """JSON-safe representation for crossing process boundaries."""
        return {
            'event_id': str(self.event_id),
            'occurred_at': self.occurred_at.isoformat(),
            'user_id': self.user_id,
            'username': self.username,
            'email': self.email,
            'has_password': self.has_password,
        }

    @classmethod
    def from_payload(cls, payload: Dict[str, Any]) -> 'UserCreatedEvent':
        """Rebuild the event from ``to_payload`` output."""
        return cls(
            event_id=UUID(payload['event_id']),
            occurred_at=datetime.fromisoformat(payload['occurred_at']),
            user_id=payload['user_id'],
            username=payload['username'],
            email=payload['email'],
            has_password=bool(payload['has_password']),
        )
