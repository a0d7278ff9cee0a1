"""
User repository interface.
"""
from abc import ABC, abstractmethod
from typing import Optional

from ..entities.user import User


class UserRepository(ABC):
    """Abstract repository for the User entity."""

    @abstractmethod
    def save(self, user: User) -> User:
        """Persist a new user and return the stored record."""
        pass

    @abstractmethod
    def find_by_id(self, user_id: str) -> Optional[User]:
        """Find a user by ID."""
        pass

    @abstractmethod
    def find_by_email(self, email: str) -> Optional[User]:
        """Find a user by email."""
        pass

    @abstractmethod
    def update(self, user: User) -> User:
        """Overwrite an existing user. Raises UserNotFoundError if it is gone."""
        pass
