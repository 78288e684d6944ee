# hexagonal_users/adapters/api/errors.py
from typing import Dict, Optional, Tuple

import structlog
from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse

from hexagonal_users.adapters.api.schemas import ErrorResponse
from hexagonal_users.core.domain.exceptions import DomainError, ErrorKind

logger = structlog.get_logger()

INTERNAL_ERROR = "internal error"

# Status code and client-facing message per error kind.
# A message of None means the exception's own message is shown.
ERROR_RESPONSES: Dict[ErrorKind, Tuple[int, Optional[str]]] = {
    ErrorKind.NOT_FOUND: (status.HTTP_404_NOT_FOUND, "not found"),
    ErrorKind.VALIDATION: (status.HTTP_400_BAD_REQUEST, None),
    ErrorKind.OTHER: (status.HTTP_500_INTERNAL_SERVER_ERROR, INTERNAL_ERROR),
}


def to_http_error(exc: DomainError) -> JSONResponse:
    """
    Translates a domain error into its HTTP response.

    This is the only place a DomainError becomes a status code. A kind with
    no entry in ERROR_RESPONSES raises KeyError instead of quietly turning
    into a 500.
    """
    status_code, message = ERROR_RESPONSES[exc.kind]
    body = ErrorResponse(error=message if message is not None else exc.message)
    return JSONResponse(status_code=status_code, content=body.model_dump())


def register_exception_handlers(app: FastAPI) -> None:

    @app.exception_handler(DomainError)
    async def domain_exception_handler(request: Request, exc: DomainError):
        if exc.kind == ErrorKind.OTHER:
            # The cause goes to the logs, never to the client
            logger.error(
                "request_failed",
                path=request.url.path,
                error=exc.message,
                exc_info=exc,
            )
        return to_http_error(exc)

    @app.exception_handler(Exception)
    async def global_exception_handler(request: Request, exc: Exception):
        """
        Catches unhandled exceptions so stack traces never reach the client.
        """
        logger.error("unhandled_exception", path=request.url.path, exc_info=exc)
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content=ErrorResponse(error=INTERNAL_ERROR).model_dump(),
        )
