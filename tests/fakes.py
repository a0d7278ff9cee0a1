"""
In-memory collaborators for unit tests.
"""
from typing import Dict, List, Optional, Tuple

from apps.users.domain.entities import User
from apps.users.domain.exceptions import UserNotFoundError
from apps.users.domain.repositories import UserRepository
from apps.users.domain.services import EventPublisher, IdGenerator
from apps.users.infrastructure.services import UserPasswordHasher


class FastPasswordHasher(UserPasswordHasher):
    """Minimum bcrypt cost, for tests that hash many times."""
    rounds = 4


class InMemoryUserRepository(UserRepository):
    """Dict backed user store that records writes."""

    def __init__(self, users: Optional[List[User]] = None):
        self.users: Dict[str, User] = {user.id: user for user in users or []}
        self.saved: List[User] = []
        self.updated: List[User] = []

    def save(self, user: User) -> User:
        self.users[user.id] = user
        self.saved.append(user)
        return user

    def find_by_id(self, user_id: str) -> Optional[User]:
        return self.users.get(user_id)

    def find_by_email(self, email: str) -> Optional[User]:
        return next((user for user in self.users.values() if user.email == email), None)

    def update(self, user: User) -> User:
        if user.id not in self.users:
            raise UserNotFoundError(user.id)
        self.users[user.id] = user
        self.updated.append(user)
        return user


class RecordingPublisher(EventPublisher):
    """Keeps every published (topic, event) pair."""

    def __init__(self):
        self.published: List[Tuple[str, object]] = []

    def publish(self, topic, event) -> None:
        self.published.append((topic, event))


class SequenceIdGenerator(IdGenerator):
    """Predictable ids: user-1, user-2, ..."""

    def __init__(self, prefix: str = 'user'):
        self.prefix = prefix
        self.count = 0

    def generate(self) -> str:
        self.count += 1
        return f"{self.prefix}-{self.count}"
