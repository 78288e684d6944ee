# hexagonal_users/shared/container.py
from dependency_injector import containers, providers

from hexagonal_users.adapters.persistence.in_memory_repo import InMemoryUserRepository
from hexagonal_users.core.use_cases.user_service import UserService


class Container(containers.DeclarativeContainer):
    """
    Dependency Injection Container.

    The composition root: the only place concrete implementations are
    chosen. Tests override `user_repository` or `user_service` to swap
    either side of the service seam.
    """

    # Persistence (Singleton: every request shares the one mapping)
    user_repository = providers.Singleton(
        InMemoryUserRepository
    )

    # Use Cases (Singleton: stateless, bound to the shared repository)
    user_service = providers.Singleton(
        UserService,
        repository=user_repository
    )
