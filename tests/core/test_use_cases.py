# tests/core/test_use_cases.py
import pytest

from hexagonal_users.core.domain.exceptions import (
    InvalidInputError,
    NotFoundError,
    UnexpectedError,
)
from hexagonal_users.core.domain.models import User
from hexagonal_users.core.use_cases.user_service import UserService


@pytest.mark.asyncio
class TestCreateUser:

    async def test_create_success(self, user_service, mock_repo):
        """
        Scenario: A valid id and name are provided.
        Expected: The validated User is handed to the repository.
        """
        # Act
        result = await user_service.create_user("u1", "Ann")

        # Assert
        assert result is None
        mock_repo.save.assert_awaited_once_with(User(id="u1", name="Ann"))

    async def test_create_invalid_name(self, user_service, mock_repo):
        """
        Scenario: The name is whitespace only.
        Expected: InvalidInputError propagates and nothing is saved.
        """
        with pytest.raises(InvalidInputError) as excinfo:
            await user_service.create_user("u2", "   ")

        assert excinfo.value.message == "name is empty"
        mock_repo.save.assert_not_awaited()

    async def test_create_propagates_backend_failure(self, user_service, mock_repo):
        """
        Scenario: The repository fails with an unclassified error.
        Expected: The very same UnexpectedError reaches the caller.
        """
        failure = UnexpectedError(ConnectionError("backend down"))
        mock_repo.save.side_effect = failure

        with pytest.raises(UnexpectedError) as excinfo:
            await user_service.create_user("u1", "Ann")

        assert excinfo.value is failure


@pytest.mark.asyncio
class TestGetUser:

    async def test_get_success(self, user_service, mock_repo):
        mock_repo.get.return_value = User(id="u1", name="Ann")

        user = await user_service.get_user("u1")

        assert user == User(id="u1", name="Ann")
        mock_repo.get.assert_awaited_once_with("u1")

    async def test_get_not_found(self, user_service, mock_repo):
        mock_repo.get.side_effect = NotFoundError()

        with pytest.raises(NotFoundError):
            await user_service.get_user("missing")

    async def test_get_propagates_backend_failure(self, user_service, mock_repo):
        """
        Scenario: The repository lookup fails with an unclassified error.
        Expected: The very same UnexpectedError reaches the caller.
        """
        failure = UnexpectedError(ConnectionError("backend down"))
        mock_repo.get.side_effect = failure

        with pytest.raises(UnexpectedError) as excinfo:
            await user_service.get_user("u1")

        assert excinfo.value is failure


@pytest.mark.asyncio
class TestServiceWithInMemoryRepository:

    async def test_round_trip_preserves_exact_name(self, repo):
        service = UserService(repository=repo)

        await service.create_user("u1", "  Ann ")
        user = await service.get_user("u1")

        assert user == User(id="u1", name="  Ann ")

    async def test_rejected_create_leaves_no_record(self, repo):
        service = UserService(repository=repo)

        with pytest.raises(InvalidInputError):
            await service.create_user("u2", "")

        with pytest.raises(NotFoundError):
            await service.get_user("u2")
        assert len(repo) == 0

    async def test_container_wires_service_to_shared_repository(self, container):
        service = container.user_service()
        repo = container.user_repository()

        await service.create_user("u1", "Ann")

        assert service is container.user_service()
        assert (await repo.get("u1")).name == "Ann"
