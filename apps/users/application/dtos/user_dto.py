"""
User DTOs.
"""
from dataclasses import dataclass
from typing import Optional

from ...domain.entities.user import User


@dataclass
class CreateUserDTO:
    """DTO for creating a user."""
    username: str
    email: str
    password: Optional[str] = None


@dataclass
class CreateUserResponseDTO:
    """DTO for the created user. Never carries the password."""
    id: str
    username: str
    email: str

    @classmethod
    def from_entity(cls, user: User) -> 'CreateUserResponseDTO':
        """Create DTO from entity."""
        return cls(id=user.id, username=user.username, email=user.email)
