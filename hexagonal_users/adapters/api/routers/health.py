# hexagonal_users/adapters/api/routers/health.py
from typing import Dict

import structlog
from fastapi import APIRouter, Depends, Response, status
from fastapi.responses import PlainTextResponse

from hexagonal_users.adapters.api.dependencies import get_user_repository
from hexagonal_users.core.ports.user_repository import IUserRepository

logger = structlog.get_logger()

router = APIRouter(prefix="/health", tags=["System"])


@router.get("", response_class=PlainTextResponse)
async def liveness_probe() -> str:
    """
    Liveness Probe.
    Returns the literal text `ok` while the process is serving.
    """
    return "ok"


@router.get("/ready", status_code=status.HTTP_200_OK)
async def readiness_probe(
    response: Response,
    repo: IUserRepository = Depends(get_user_repository),
) -> Dict[str, str]:
    """
    Readiness Probe.
    Checks the storage backend; returns 503 Service Unavailable when it is down.
    """
    health_status = {"storage": "down"}

    try:
        if await repo.health_check():
            health_status["storage"] = "up"
    except Exception as e:
        logger.error("health_check_failed", component="storage", error=str(e))

    if health_status["storage"] != "up":
        response.status_code = status.HTTP_503_SERVICE_UNAVAILABLE
        logger.warning("readiness_probe_failed", status=health_status)

    return health_status
