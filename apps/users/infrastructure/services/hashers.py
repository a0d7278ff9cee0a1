"""
Password hasher used for user credentials.
"""
from django.contrib.auth.hashers import BCryptSHA256PasswordHasher

BCRYPT_ROUNDS = 12


class UserPasswordHasher(BCryptSHA256PasswordHasher):
    """bcrypt (SHA-256 prehashed) with the work factor pinned."""
    rounds = BCRYPT_ROUNDS
