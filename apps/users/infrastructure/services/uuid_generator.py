"""
UUID based identifier generator.
"""
from uuid import uuid4

from ...domain.services.id_generator import IdGenerator


class UuidGenerator(IdGenerator):
    """Random (version 4) UUIDs rendered as text."""

    def generate(self) -> str:
        return str(uuid4())
