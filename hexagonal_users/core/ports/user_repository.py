# hexagonal_users/core/ports/user_repository.py
from typing import Protocol

from hexagonal_users.core.domain.models import User


class IUserRepository(Protocol):
    """
    Port for storing and retrieving Users.
    Implementations could be InMemoryUserRepository or a durable backend.
    """

    async def save(self, user: User) -> None:
        """
        Upserts a user keyed by `user.id`, overwriting any previous record.

        The user has already been validated by `User.create`; no checks are
        repeated here.

        Raises:
            UnexpectedError: if the backend itself fails.
        """
        ...

    async def get(self, user_id: str) -> User:
        """
        Retrieves the current record for `user_id`.

        Raises:
            NotFoundError: if no record exists.
            UnexpectedError: if the backend itself fails.
        """
        ...

    async def health_check(self) -> bool:
        """Returns True if the underlying storage is accessible."""
        ...
