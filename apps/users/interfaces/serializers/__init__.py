# Serializers
from .user_serializer import UserSerializer, UserCreateSerializer

__all__ = ['UserSerializer', 'UserCreateSerializer']
