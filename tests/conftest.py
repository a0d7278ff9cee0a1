"""
Pytest configuration and fixtures.
"""
import pytest

from apps.users.infrastructure.services import BcryptPasswordService
from shared.infrastructure.events import EventBus
from tests.fakes import (
    FastPasswordHasher,
    InMemoryUserRepository,
    RecordingPublisher,
    SequenceIdGenerator,
)


@pytest.fixture
def api_client():
    """Create an API client for testing."""
    from rest_framework.test import APIClient
    return APIClient()


@pytest.fixture
def password_service():
    """Password service with the production work factor."""
    return BcryptPasswordService()


@pytest.fixture
def fast_password_service():
    """Password service with a cheap work factor."""
    return BcryptPasswordService(hasher=FastPasswordHasher())


@pytest.fixture
def user_repository():
    return InMemoryUserRepository()


@pytest.fixture
def publisher():
    return RecordingPublisher()


@pytest.fixture
def id_generator():
    return SequenceIdGenerator()


@pytest.fixture
def event_bus():
    """A private bus, isolated from the process-wide one."""
    return EventBus()
