# hexagonal_users/adapters/api/main.py
from contextlib import asynccontextmanager
from typing import Optional

import structlog
from fastapi import FastAPI

from hexagonal_users import __version__
from hexagonal_users.adapters.api.errors import register_exception_handlers
from hexagonal_users.adapters.api.routers import health, users
from hexagonal_users.shared.config import settings
from hexagonal_users.shared.container import Container
from hexagonal_users.shared.telemetry import instrument_fastapi

logger = structlog.get_logger()

# Modules that resolve providers through `Provide[...]`
WIRED_MODULES = [
    "hexagonal_users.adapters.api.dependencies",
]


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Manages the application lifecycle.
    The in-memory store needs no connection, so startup and shutdown only log.
    """
    logger.info("app_startup", env=settings.APP_ENV.value)
    yield
    logger.info("app_shutdown")


def create_app(container: Optional[Container] = None) -> FastAPI:
    """
    Factory function to create the FastAPI application.

    A pre-built (possibly overridden) container may be passed in; otherwise a
    fresh one is created, which gives the app its own empty user store.
    """
    if container is None:
        container = Container()

    # We must explicitly tell the container which modules use the @inject decorator.
    container.wire(modules=WIRED_MODULES)

    app = FastAPI(
        title=settings.APP_NAME,
        version=__version__,
        description="User registry (Hexagonal Architecture)",
        lifespan=lifespan,
        docs_url="/docs" if settings.docs_enabled else None,
        redoc_url=None,
    )
    app.container = container

    instrument_fastapi(app)
    register_exception_handlers(app)

    app.include_router(health.router)
    app.include_router(users.router)

    return app
