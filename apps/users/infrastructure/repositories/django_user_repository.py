"""
Django ORM implementation of UserRepository.
"""
from typing import Optional

from ...domain.entities.user import User
from ...domain.exceptions import UserNotFoundError
from ...domain.repositories.user_repository import UserRepository
from ..models.user_model import UserModel


class DjangoUserRepository(UserRepository):
    """Django ORM based user repository implementation."""

    def save(self, user: User) -> User:
        """Save a user entity."""
        model = UserModel.objects.create(
            id=user.id,
            username=user.username,
            email=user.email,
            password=user.password,
        )
        return self._to_entity(model)

    def find_by_id(self, user_id: str) -> Optional[User]:
        """Find a user by ID."""
        try:
            model = UserModel.objects.get(id=user_id)
            return self._to_entity(model)
        except UserModel.DoesNotExist:
            return None

    def find_by_email(self, email: str) -> Optional[User]:
        """Find a user by email."""
        # Not unique at the storage level, so take the oldest match
        model = UserModel.objects.filter(email=email).order_by('created_at').first()
        return self._to_entity(model) if model else None

    def update(self, user: User) -> User:
        """Overwrite the stored fields of an existing user."""
        try:
            model = UserModel.objects.get(id=user.id)
        except UserModel.DoesNotExist:
            raise UserNotFoundError(user.id)
        model.username = user.username
        model.email = user.email
        model.password = user.password
        model.save(update_fields=['username', 'email', 'password', 'updated_at'])
        return self._to_entity(model)

    def _to_entity(self, model: UserModel) -> User:
        """Convert Django model to domain entity."""
        return User(
            id=model.id,
            username=model.username,
            email=model.email,
            password=model.password or None,
        )
