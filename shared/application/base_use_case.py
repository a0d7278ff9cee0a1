"""
Base use case classes.
"""
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Generic, TypeVar, Optional

from shared.domain.exceptions import DomainException

InputDTO = TypeVar('InputDTO')
OutputDTO = TypeVar('OutputDTO')


@dataclass
class UseCaseResult(Generic[OutputDTO]):
    """
    Result wrapper for use cases.

    Expected business-rule violations travel in ``error``; anything else a
    use case hits (database down, broken collaborator) is raised as usual.
    """
    success: bool
    data: Optional[OutputDTO] = None
    error: Optional[DomainException] = None

    @classmethod
    def ok(cls, data: OutputDTO) -> 'UseCaseResult[OutputDTO]':
        """Create a successful result."""
        return cls(success=True, data=data)

    @classmethod
    def fail(cls, error: DomainException) -> 'UseCaseResult[OutputDTO]':
        """Create a failed result."""
        return cls(success=False, error=error)

    @property
    def error_code(self) -> Optional[str]:
        """Code of the domain error, if any."""
        return self.error.code if self.error else None

    def unwrap(self) -> OutputDTO:
        """Return the data or raise the carried domain error."""
        if not self.success:
            raise self.error
        return self.data


class UseCase(ABC, Generic[InputDTO, OutputDTO]):
    """Base use case class."""

    @abstractmethod
    def execute(self, input_dto: InputDTO) -> UseCaseResult[OutputDTO]:
        """Execute the use case."""
        pass
