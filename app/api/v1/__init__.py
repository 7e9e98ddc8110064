"""API v1 routes. Everything except health counts against the per-client rate limit."""

from fastapi import APIRouter, Depends

from app.api.deps import enforce_rate_limit
from app.api.v1 import auth, deployments, health, metrics, pipelines, users

limited = [Depends(enforce_rate_limit)]

router = APIRouter()
router.include_router(health.router, prefix="/health", tags=["health"])
router.include_router(auth.router, prefix="/auth", tags=["auth"], dependencies=limited)
router.include_router(users.router, prefix="/users", tags=["users"], dependencies=limited)
router.include_router(
    pipelines.router, prefix="/pipelines", tags=["pipelines"], dependencies=limited
)
router.include_router(
    deployments.router, prefix="/deployments", tags=["deployments"], dependencies=limited
)
router.include_router(metrics.router, prefix="/metrics", tags=["metrics"], dependencies=limited)
