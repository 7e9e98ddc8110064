"""Metrics endpoints (placeholders). User activity metrics are admin only."""

from fastapi import APIRouter, Depends

from app.api.deps import require_admin, require_auth
from app.schemas.resources import PlaceholderResponse

router = APIRouter(dependencies=[Depends(require_auth)])


@router.get("/system", response_model=PlaceholderResponse)
def get_system_metrics() -> PlaceholderResponse:
    return PlaceholderResponse(message="Get system metrics")


@router.get("/pipelines", response_model=PlaceholderResponse)
def get_pipeline_metrics() -> PlaceholderResponse:
    return PlaceholderResponse(message="Get pipeline metrics")


@router.get("/deployments", response_model=PlaceholderResponse)
def get_deployment_metrics() -> PlaceholderResponse:
    return PlaceholderResponse(message="Get deployment metrics")


@router.get("/users", response_model=PlaceholderResponse, dependencies=[Depends(require_admin)])
def get_user_activity_metrics() -> PlaceholderResponse:
    return PlaceholderResponse(message="Get user activity metrics")


@router.get("/performance", response_model=PlaceholderResponse)
def get_performance_metrics() -> PlaceholderResponse:
    return PlaceholderResponse(message="Get performance metrics")


@router.get("/errors", response_model=PlaceholderResponse)
def get_error_metrics() -> PlaceholderResponse:
    return PlaceholderResponse(message="Get error metrics")
