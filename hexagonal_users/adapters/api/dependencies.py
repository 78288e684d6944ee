# hexagonal_users/adapters/api/dependencies.py
from dependency_injector.wiring import Provide, inject
from fastapi import Depends

from hexagonal_users.core.ports.user_repository import IUserRepository
from hexagonal_users.core.use_cases.user_service import IUserService
from hexagonal_users.shared.container import Container


@inject
def get_user_service(
    service: IUserService = Depends(Provide[Container.user_service]),
) -> IUserService:
    """Dependency to inject the UserService (container-managed)."""
    return service


@inject
def get_user_repository(
    repo: IUserRepository = Depends(Provide[Container.user_repository]),
) -> IUserRepository:
    """Dependency to inject the storage adapter, for readiness checks only."""
    return repo
