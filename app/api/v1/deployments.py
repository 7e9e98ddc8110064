"""Deployment endpoints. Placeholders: no deployment automation runs behind them."""

from fastapi import APIRouter, Depends

from app.api.deps import require_auth
from app.schemas.resources import PlaceholderResponse

router = APIRouter(dependencies=[Depends(require_auth)])


@router.get("", response_model=PlaceholderResponse)
def list_deployments() -> PlaceholderResponse:
    return PlaceholderResponse(message="Get all deployments")


@router.get("/{deployment_id}", response_model=PlaceholderResponse)
def get_deployment(deployment_id: str) -> PlaceholderResponse:
    return PlaceholderResponse(message=f"Get deployment {deployment_id}")


@router.post("", response_model=PlaceholderResponse)
def create_deployment() -> PlaceholderResponse:
    return PlaceholderResponse(message="Create new deployment")


@router.put("/{deployment_id}", response_model=PlaceholderResponse)
def update_deployment(deployment_id: str) -> PlaceholderResponse:
    return PlaceholderResponse(message=f"Update deployment {deployment_id}")


@router.delete("/{deployment_id}", response_model=PlaceholderResponse)
def delete_deployment(deployment_id: str) -> PlaceholderResponse:
    return PlaceholderResponse(message=f"Delete deployment {deployment_id}")


@router.post("/{deployment_id}/rollback", response_model=PlaceholderResponse)
def rollback_deployment(deployment_id: str) -> PlaceholderResponse:
    return PlaceholderResponse(message=f"Rollback deployment {deployment_id}")


@router.get("/{deployment_id}/logs", response_model=PlaceholderResponse)
def get_deployment_logs(deployment_id: str) -> PlaceholderResponse:
    return PlaceholderResponse(message=f"Get logs for deployment {deployment_id}")
