# DTOs
from .user_dto import CreateUserDTO, CreateUserResponseDTO

__all__ = ['CreateUserDTO', 'CreateUserResponseDTO']
