"""
User domain exceptions.
"""
from shared.domain.exceptions import ConflictError, EntityNotFoundError, ValidationError


class UserAlreadyExistsError(ConflictError):
    """Raised when attempting to create a user that already exists."""

    def __init__(self, field: str, value: str):
        super().__init__(
            message=f"User with {field} '{value}' already exists",
            code="USER_ALREADY_EXISTS"
        )
        self.field = field
        self.value = value


class InvalidPasswordError(ValidationError):
    """Raised when a supplied password does not satisfy the password policy."""

    def __init__(self, reason: str):
        super().__init__(message=f"Invalid password: {reason}", field="password")
        self.code = "INVALID_PASSWORD"
        self.reason = reason


class UserNotFoundError(EntityNotFoundError):
    """Raised when a user is not found."""

    def __init__(self, user_id: str):
        super().__init__(entity_name="User", entity_id=user_id)
        self.code = "USER_NOT_FOUND"
        self.user_id = user_id
