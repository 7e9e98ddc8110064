"""Pipeline endpoints. Placeholders: there is no pipeline execution engine behind them."""

from fastapi import APIRouter, Depends

from app.api.deps import require_auth
from app.schemas.resources import PlaceholderResponse

router = APIRouter(dependencies=[Depends(require_auth)])


@router.get("", response_model=PlaceholderResponse)
def list_pipelines() -> PlaceholderResponse:
    return PlaceholderResponse(message="Get all pipelines")


@router.get("/{pipeline_id}", response_model=PlaceholderResponse)
def get_pipeline(pipeline_id: str) -> PlaceholderResponse:
    return PlaceholderResponse(message=f"Get pipeline {pipeline_id}")


@router.post("", response_model=PlaceholderResponse)
def create_pipeline() -> PlaceholderResponse:
    return PlaceholderResponse(message="Create new pipeline")


@router.put("/{pipeline_id}", response_model=PlaceholderResponse)
def update_pipeline(pipeline_id: str) -> PlaceholderResponse:
    return PlaceholderResponse(message=f"Update pipeline {pipeline_id}")


@router.delete("/{pipeline_id}", response_model=PlaceholderResponse)
def delete_pipeline(pipeline_id: str) -> PlaceholderResponse:
    return PlaceholderResponse(message=f"Delete pipeline {pipeline_id}")


@router.post("/{pipeline_id}/trigger", response_model=PlaceholderResponse)
def trigger_pipeline(pipeline_id: str) -> PlaceholderResponse:
    return PlaceholderResponse(message=f"Trigger pipeline {pipeline_id}")


@router.get("/{pipeline_id}/runs", response_model=PlaceholderResponse)
def get_pipeline_runs(pipeline_id: str) -> PlaceholderResponse:
    return PlaceholderResponse(message=f"Get runs for pipeline {pipeline_id}")
