# hexagonal_users/adapters/persistence/in_memory_repo.py
from typing import Dict

import structlog

from hexagonal_users.adapters.persistence.rwlock import AsyncRWLock
from hexagonal_users.core.domain.exceptions import NotFoundError
from hexagonal_users.core.domain.models import User
from hexagonal_users.core.ports.user_repository import IUserRepository

logger = structlog.get_logger()


class InMemoryUserRepository(IUserRepository):
    """
    Concrete implementation of the User Repository backed by a process-local dict.

    Records live only as long as the process. The mapping is private to
    this class and only touched under `_lock`.
    """

    def __init__(self) -> None:
        self._users: Dict[str, User] = {}
        self._lock = AsyncRWLock()

    def __len__(self) -> int:
        return len(self._users)

    # --- Interface Implementation ---

    async def save(self, user: User) -> None:
        """Upserts the user under its id (last write wins)."""
        async with self._lock.write():
            self._users[user.id] = user

        logger.debug("user_saved", id=user.id)

    async def get(self, user_id: str) -> User:
        async with self._lock.read():
            user = self._users.get(user_id)
            if user is None:
                raise NotFoundError()
            # Hand out a copy so callers never share the stored instance
            return user.model_copy()

    async def health_check(self) -> bool:
        return True
