"""Health check endpoint with database and session cache connectivity."""

import time
from typing import Annotated

from fastapi import APIRouter, Depends, Response, status
from sqlalchemy.orm import Session

from app.api.deps import get_session_cache
from app.core.config import settings
from app.core.database import check_db_connected, get_db
from app.core.session_cache import SessionCache
from app.schemas.health import HealthResponse, ServiceStatuses

router = APIRouter()

API_VERSION = "1.0.0"
_STARTED_AT = time.monotonic()


@router.get("/", response_model=HealthResponse)
def get_health(
    response: Response,
    db: Annotated[Session, Depends(get_db)],
    cache: Annotated[SessionCache, Depends(get_session_cache)],
) -> HealthResponse:
    """
    Return service health with database and Redis connectivity.
    Responds 503 when either dependency is down; used by load balancers and monitoring.
    """
    db_status = "connected" if check_db_connected(db) else "disconnected"
    redis_status = "connected" if cache.ping() else "disconnected"
    healthy = db_status == "connected" and redis_status == "connected"
    if not healthy:
        response.status_code = status.HTTP_503_SERVICE_UNAVAILABLE

    return HealthResponse(
        status="healthy" if healthy else "unhealthy",
        environment=settings.APP_ENV,
        version=API_VERSION,
        uptime_seconds=round(time.monotonic() - _STARTED_AT, 3),
        services=ServiceStatuses(database=db_status, redis=redis_status),
    )
