"""
Password service interface.
"""
from abc import ABC, abstractmethod

SPECIAL_CHARACTERS = '!@#$%^&*()_+-=[]{}|;:,.<>?'
MIN_PASSWORD_LENGTH = 8
DEFAULT_GENERATED_LENGTH = 12

PASSWORD_POLICY_MESSAGE = (
    f"Password must be at least {MIN_PASSWORD_LENGTH} characters long and contain "
    "uppercase, lowercase, number, and special character"
)


class PasswordService(ABC):
    """Secret material lifecycle: policy, hashing and generation."""

    @abstractmethod
    def validate_strength(self, password: str) -> bool:
        """Check a plaintext password against the password policy."""
        pass

    @abstractmethod
    def hash_password(self, password: str) -> str:
        """Derive a salted one-way hash from a plaintext password."""
        pass

    @abstractmethod
    def compare_password(self, password: str, hashed_password: str) -> bool:
        """Verify a plaintext password against a stored hash."""
        pass

    @abstractmethod
    def generate_secure_password(self, length: int = DEFAULT_GENERATED_LENGTH) -> str:
        """Generate a random password that satisfies the policy."""
        pass
