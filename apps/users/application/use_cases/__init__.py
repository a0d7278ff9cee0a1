# Use cases
from .create_user import CreateUserUseCase

__all__ = ['CreateUserUseCase']
