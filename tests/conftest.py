# tests/conftest.py
import pytest
from unittest.mock import AsyncMock, MagicMock
from fastapi.testclient import TestClient

from hexagonal_users.adapters.api.main import create_app
from hexagonal_users.adapters.persistence.in_memory_repo import InMemoryUserRepository
from hexagonal_users.core.ports.user_repository import IUserRepository
from hexagonal_users.core.use_cases.user_service import IUserService, UserService
from hexagonal_users.shared.container import Container


@pytest.fixture(scope="function")
def mock_repo():
    """Returns a mock User Repository."""
    repo = MagicMock(spec=IUserRepository)
    # Async methods must be mocked with AsyncMock
    repo.save = AsyncMock(return_value=None)
    repo.get = AsyncMock()
    repo.health_check = AsyncMock(return_value=True)
    return repo


@pytest.fixture(scope="function")
def mock_user_service():
    """Returns a mock User Service, for driving the HTTP adapter in isolation."""
    service = MagicMock(spec=IUserService)
    service.create_user = AsyncMock(return_value=None)
    service.get_user = AsyncMock()
    return service


@pytest.fixture
def repo():
    """A real, empty in-memory repository."""
    return InMemoryUserRepository()


@pytest.fixture
def user_service(mock_repo):
    return UserService(repository=mock_repo)


@pytest.fixture(scope="function")
def container():
    """
    A fresh Dependency Injection Container with the production wiring.
    Tests override providers on it as needed.
    """
    container = Container()
    yield container
    # Clean up overrides and wiring after test
    container.reset_override()
    container.unwire()


@pytest.fixture
def client(container):
    """
    TestClient over the real stack: router -> UserService -> InMemoryUserRepository.
    """
    app = create_app(container)
    with TestClient(app) as c:
        yield c


@pytest.fixture
def mocked_client(container, mock_user_service):
    """
    TestClient whose service is replaced by a mock.
    Server exceptions are rendered as responses instead of re-raised.
    """
    container.user_service.override(mock_user_service)
    app = create_app(container)
    with TestClient(app, raise_server_exceptions=False) as c:
        yield c
