"""
Identifier generator interface.
"""
from abc import ABC, abstractmethod


class IdGenerator(ABC):
    """Produces globally unique opaque identifiers."""

    @abstractmethod
    def generate(self) -> str:
        pass
