"""
bcrypt backed password service.
"""
import re
import secrets
import string

from django.contrib.auth.hashers import check_password, make_password

from ...domain.services.password_service import (
    DEFAULT_GENERATED_LENGTH,
    MIN_PASSWORD_LENGTH,
    SPECIAL_CHARACTERS,
    PasswordService,
)
from .hashers import UserPasswordHasher

LOWERCASE = string.ascii_lowercase
UPPERCASE = string.ascii_uppercase
DIGITS = string.digits
ALL_CHARACTERS = LOWERCASE + UPPERCASE + DIGITS + SPECIAL_CHARACTERS

_SPECIAL_PATTERN = re.compile(f"[{re.escape(SPECIAL_CHARACTERS)}]")


class BcryptPasswordService(PasswordService):
    """Password policy, hashing and generation."""

    def __init__(self, hasher: UserPasswordHasher = None):
        self.hasher = hasher or UserPasswordHasher()

    def validate_strength(self, password: str) -> bool:
        return (
            len(password) >= MIN_PASSWORD_LENGTH
            and re.search(r'[a-z]', password) is not None
            and re.search(r'[A-Z]', password) is not None
            and re.search(r'[0-9]', password) is not None
            and _SPECIAL_PATTERN.search(password) is not None
        )

    def hash_password(self, password: str) -> str:
        # Fresh salt on every call
        return make_password(password, hasher=self.hasher)

    def compare_password(self, password: str, hashed_password: str) -> bool:
        if not hashed_password:
            return False
        return check_password(password, hashed_password)

    def generate_secure_password(self, length: int = DEFAULT_GENERATED_LENGTH) -> str:
        if length < MIN_PASSWORD_LENGTH:
            raise ValueError(
                f"Password length must be at least {MIN_PASSWORD_LENGTH} characters"
            )

        # One of each required class, the rest from the full alphabet
        characters = [
            secrets.choice(UPPERCASE),
            secrets.choice(LOWERCASE),
            secrets.choice(DIGITS),
            secrets.choice(SPECIAL_CHARACTERS),
        ]
        characters.extend(secrets.choice(ALL_CHARACTERS) for _ in range(length - 4))

        # Fisher-Yates with CSPRNG indices
        for i in range(len(characters) - 1, 0, -1):
            j = secrets.randbelow(i + 1)
            characters[i], characters[j] = characters[j], characters[i]

        return ''.join(characters)
