"""
User entity.
"""
from dataclasses import dataclass, replace
from typing import Optional


@dataclass(frozen=True)
class User:
    """
    Registered user.

    Immutable: state changes produce a new ``User`` instead of mutating
    the receiver. ``password`` holds the hashed credential, never plaintext.
    """
    id: str
    username: str
    email: str
    password: Optional[str] = None

    @classmethod
    def create(
        cls,
        id: str,
        username: str,
        email: str,
        password: Optional[str] = None,
    ) -> 'User':
        """Factory method to create a new user."""
        return cls(id=id, username=username, email=email, password=password)

    def with_password(self, hashed_password: str) -> 'User':
        """Return a copy of this user carrying the given hashed password."""
        return replace(self, password=hashed_password)

    def has_password(self) -> bool:
        """True when a non-empty hashed password is set."""
        return bool(self.password)

    def __repr__(self) -> str:
        return (
            f"User(id={self.id!r}, username={self.username!r}, "
            f"email={self.email!r}, has_password={self.has_password()})"
        )
