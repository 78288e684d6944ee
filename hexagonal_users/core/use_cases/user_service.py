# hexagonal_users/core/use_cases/user_service.py
from typing import Protocol

import structlog

from hexagonal_users.core.domain.exceptions import DomainError
from hexagonal_users.core.domain.models import User
from hexagonal_users.core.ports.user_repository import IUserRepository
from hexagonal_users.shared.telemetry import get_tracer

logger = structlog.get_logger()
tracer = get_tracer(__name__)


class IUserService(Protocol):
    """Capability consumed by the HTTP adapter."""

    async def create_user(self, user_id: str, name: str) -> None:
        ...

    async def get_user(self, user_id: str) -> User:
        ...


class UserService:
    """
    Use Case: creates and looks up users.

    Responsibilities:
    1. Builds the User through the validating domain constructor.
    2. Delegates storage to the repository Port.
    3. Traces and logs each call.

    Domain errors are re-raised unchanged; translating them is the job of
    the transport adapter.
    """

    def __init__(self, repository: IUserRepository):
        # We inject the interface (Port), not the concrete implementation
        self.repository = repository

    async def create_user(self, user_id: str, name: str) -> None:
        with tracer.start_as_current_span("use_case.create_user") as span:
            span.set_attribute("app.user_id", user_id)

            try:
                user = User.create(user_id, name)
                await self.repository.save(user)
            except DomainError as e:
                span.record_exception(e)
                logger.info("user_create_rejected", id=user_id, kind=e.kind.value, error=e.message)
                raise

            logger.info("user_created", id=user_id)

    async def get_user(self, user_id: str) -> User:
        with tracer.start_as_current_span("use_case.get_user") as span:
            span.set_attribute("app.user_id", user_id)

            try:
                return await self.repository.get(user_id)
            except DomainError as e:
                span.record_exception(e)
                logger.info("user_lookup_failed", id=user_id, kind=e.kind.value)
                raise
