"""
User serializers.
"""
from django.core.validators import RegexValidator
from rest_framework import serializers

USERNAME_VALIDATOR = RegexValidator(
    regex=r'^[a-zA-Z0-9_]+$',
    message='Username can only contain letters, numbers, and underscores',
)


class UserSerializer(serializers.Serializer):
    """Serializer for user output."""
    id = serializers.CharField(read_only=True)
    username = serializers.CharField(read_only=True)
    email = serializers.EmailField(read_only=True)


class UserCreateSerializer(serializers.Serializer):
    """Serializer for user creation."""
    username = serializers.CharField(
        min_length=3,
        max_length=30,
        validators=[USERNAME_VALIDATOR],
    )
    email = serializers.EmailField(error_messages={'invalid': 'Invalid email format'})
    password = serializers.CharField(
        min_length=8,
        required=False,
        allow_null=True,
        write_only=True,
        trim_whitespace=False,
        error_messages={'min_length': 'Password must be at least 8 characters long'},
    )
